from __future__ import annotations

import json
from pathlib import Path

import pytest

from brick_chunks import cli


@pytest.fixture()
def save_path(tmp_path: Path) -> Path:
    path = tmp_path / "save.json"
    path.write_text(
        json.dumps(
            {
                "brick_assets": ["PB_DefaultBrick", "PB_DefaultWedge"],
                "bricks": [
                    {"asset_name_index": 0, "position": [10, 10, 6]},
                    {"asset_name_index": 0, "position": [500, 20, 6]},
                    {"asset_name_index": 1, "position": [600, 100, 6]},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


def test_analyze_prints_plain_report(save_path: Path, capsys):
    assert cli.main(["analyze", str(save_path)]) == 0
    out = capsys.readouterr().out
    assert "3 bricks in 2 chunks, 4 colliders total." in out
    assert "<" not in out


def test_analyze_json(save_path: Path, capsys):
    assert cli.main(["analyze", str(save_path), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["total_bricks"] == 3
    assert payload["chunks"][1] == {"chunk": [1, 0], "bricks": 1, "colliders": 2, "components": 0, "severity": "safe"}


def test_in_prints_chunk(capsys):
    assert cli.main(["in", "1024", "-1"]) == 0
    assert capsys.readouterr().out.strip() == "(2, -1)"


def test_count(save_path: Path, capsys):
    assert cli.main(["count", str(save_path), "5", "5"]) == 0
    assert "bricks=2 colliders=2" in capsys.readouterr().out


def test_plan_writes_file(save_path: Path, tmp_path: Path):
    out = tmp_path / "markers.json"
    assert cli.main(["plan", str(save_path), "--out", str(out)]) == 0
    plans = json.loads(out.read_text(encoding="utf-8"))["plans"]
    assert [plan["chunk"] for plan in plans] == [[0, 0], [1, 0]]
    assert all(len(plan["markers"]) == 8 for plan in plans)


def test_missing_save_returns_2(tmp_path: Path, capsys):
    assert cli.main(["analyze", str(tmp_path / "missing.json")]) == 2
    assert "Missing save file" in capsys.readouterr().err


def test_invalid_save_returns_1(tmp_path: Path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("[]", encoding="utf-8")
    assert cli.main(["analyze", str(path)]) == 1
    assert "ERROR" in capsys.readouterr().err


def test_undecodable_save_returns_1(tmp_path: Path, capsys):
    path = tmp_path / "bad.json"
    path.write_bytes(b'{"bricks": [], "x": "\xff\xfe"}')
    assert cli.main(["analyze", str(path)]) == 1
    assert "ERROR: Failed to read save file" in capsys.readouterr().err
