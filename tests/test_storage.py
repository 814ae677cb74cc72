import json
import math

import pytest

from sauna_core.collection import PartCollection
from sauna_core.config import STORAGE_KEY, Settings
from sauna_core.editor import SaunaEditor
from sauna_core.layout import generate
from sauna_core.storage import (
    JsonFileStore,
    MemoryStore,
    deserialize,
    load_parts,
    save_parts,
    serialize,
)


def _geometry(parts):
    return [(p.kind, p.position, p.rotation, p.material_color) for p in parts]


class TestSnapshotFormat:
    def test_record_shape(self):
        parts = PartCollection()
        part = parts.place('wall', (1.0, 0.0, 2.0), math.pi / 2)
        parts.recolor(part.id, "#5c4033")
        records = json.loads(serialize(parts))
        assert records == [{
            "id": part.id,
            "type": "wall",
            "position": [1.0, 1.5, 2.0],
            "rotation": [0.0, math.pi / 2, 0.0],
            "materialColor": "#5c4033",
        }]

    def test_default_color_omitted(self):
        parts = PartCollection()
        parts.place('bench', (0, 0, 0))
        assert "materialColor" not in json.loads(serialize(parts))[0]

    def test_round_trip_generated_layout(self):
        parts = PartCollection()
        parts.replace_all(generate(2, 2))
        restored = deserialize(serialize(parts))
        assert _geometry(restored) == _geometry(parts)
        assert [p.id for p in restored] == [p.id for p in parts]


class TestMalformedSnapshots:
    @pytest.mark.parametrize("raw", [
        None,
        "",
        "not json",
        "{\"type\": \"wall\"}",
        "[{\"type\": \"sofa\", \"id\": \"a\", \"position\": [0, 0, 0]}]",
        "[{\"type\": \"wall\", \"id\": \"a\", \"position\": [0, 0]}]",
        "[{\"type\": \"wall\", \"id\": \"a\", \"position\": [0, 1.5, 0], \"rotation\": [1, 0, 0]}]",
        "[{\"type\": \"wall\", \"position\": [0, 1.5, 0]}]",
        "[42]",
    ])
    def test_falls_back_to_empty(self, raw):
        assert deserialize(raw) == []

    def test_duplicate_ids_rejected(self):
        record = {"id": "a", "type": "wall", "position": [0, 1.5, 0], "rotation": [0, 0, 0]}
        assert deserialize(json.dumps([record, record])) == []

    def test_empty_list(self):
        assert deserialize("[]") == []


class TestStores:
    def test_memory_store_round_trip(self):
        store = MemoryStore()
        parts = PartCollection()
        parts.place('door', (1, 0, 0))
        save_parts(store, parts)
        assert STORAGE_KEY in store.data
        assert _geometry(load_parts(store)) == _geometry(parts)

    def test_missing_key_is_empty(self):
        assert load_parts(MemoryStore()) == []

    def test_json_file_store(self, tmp_path):
        path = tmp_path / "nested" / "store.json"
        store = JsonFileStore(str(path))
        parts = PartCollection()
        parts.place('window', (0, 0, -1))
        save_parts(store, parts)

        reopened = JsonFileStore(str(path))
        assert _geometry(load_parts(reopened)) == _geometry(parts)

    def test_json_file_store_keeps_other_keys(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"theme": "dark"}))
        store = JsonFileStore(str(path))
        save_parts(store, [])
        data = json.loads(path.read_text())
        assert data["theme"] == "dark"
        assert data[STORAGE_KEY] == "[]"

    def test_corrupt_file_is_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{{{")
        assert load_parts(JsonFileStore(str(path))) == []

    def test_undecodable_file_is_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_bytes(b'{"sauna_builder_parts_v1": "\xff\xfe"}')
        assert load_parts(JsonFileStore(str(path))) == []

    def test_editor_starts_empty_on_undecodable_file(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_bytes(b"\xff\xfe")
        editor = SaunaEditor(settings=Settings(storage_path=str(path)))
        assert len(editor.parts) == 0
