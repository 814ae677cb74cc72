import json
import os

from sauna_core.main import main


def _run_dir(out):
    runs = os.listdir(out)
    assert len(runs) == 1
    return os.path.join(out, runs[0])


def test_cli_writes_outputs(tmp_path, capsys):
    out = tmp_path / "outputs"
    assert main(["2", "3", "--out", str(out)]) == 0

    run = _run_dir(str(out))
    for name in ("layout.json", "layout.obj", "layout.mtl", "bom.csv"):
        assert os.path.exists(os.path.join(run, name))
    assert not os.path.exists(os.path.join(run, "layout.glb"))

    with open(os.path.join(run, "layout.json")) as f:
        records = json.load(f)
    assert len(records) == 3 * 2 + 2 * 3 + 1

    printed = capsys.readouterr().out
    assert "Room: 2x3 modules (4m x 6m)" in printed
    assert "Parts: bench=2, door=1, heater=1, wall=9" in printed
    assert "Overlap: wall" in printed and "/ bench #" in printed


def test_cli_glb(tmp_path):
    out = tmp_path / "outputs"
    assert main(["1", "1", "--out", str(out), "--glb"]) == 0
    assert os.path.exists(os.path.join(_run_dir(str(out)), "layout.glb"))


def test_cli_rejects_zero(tmp_path, capsys):
    assert main(["0", "2", "--out", str(tmp_path)]) == 2
    assert "Invalid room size" in capsys.readouterr().out
    assert os.listdir(tmp_path) == []


def test_cli_config(tmp_path):
    cfg = tmp_path / "settings.yaml"
    cfg.write_text("module_size: 1.0\n")
    out = tmp_path / "outputs"
    assert main(["2", "2", "--out", str(out), "--config", str(cfg)]) == 0
    with open(os.path.join(_run_dir(str(out)), "layout.json")) as f:
        records = json.load(f)
    assert records[0]["position"] == [0.5, 1.5, -2.0]
