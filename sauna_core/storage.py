"""
Snapshot persistence for the part collection.

The whole collection is stored as one JSON list under a versioned key.
Anything unreadable on load counts as an empty collection.
"""

import json
import logging
import os
from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError

from .config import STORAGE_KEY
from .schema import PlacedPart

logger = logging.getLogger(__name__)


class MemoryStore:
    """Key-value store held in a dict (tests, ephemeral sessions)."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str):
        self.data[key] = value


class JsonFileStore:
    """Key-value store backed by a single JSON object on disk."""

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers both bad JSON and bytes that are not UTF-8
            logger.warning("Store %s unreadable (%s); starting empty", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str):
        data = self._read_all()
        data[key] = value
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)


def serialize(parts: Iterable[PlacedPart]) -> str:
    return json.dumps([p.to_record() for p in parts])


def deserialize(raw: Optional[str]) -> List[PlacedPart]:
    if not raw:
        return []
    try:
        records = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Discarding malformed snapshot: %s", e)
        return []
    if not isinstance(records, list):
        logger.warning("Discarding snapshot: expected a list, got %s", type(records).__name__)
        return []
    try:
        parts = [PlacedPart.model_validate(r) for r in records]
    except (ValidationError, ValueError, TypeError) as e:
        logger.warning("Discarding snapshot with invalid part record: %s", e)
        return []

    ids = [p.id for p in parts]
    if len(set(ids)) != len(ids):
        logger.warning("Discarding snapshot with duplicate part ids")
        return []
    return parts


def save_parts(store, parts: Iterable[PlacedPart], key: str = STORAGE_KEY):
    store.set(key, serialize(parts))


def load_parts(store, key: str = STORAGE_KEY) -> List[PlacedPart]:
    return deserialize(store.get(key))
