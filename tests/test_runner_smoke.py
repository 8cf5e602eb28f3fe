"""
Smoke test: run a scene end to end through the runner and the CLI entrypoint.
Deterministic, synthetic geometry only.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tipplace.core.io import scene_from_dict
from tipplace.core.runner import main, run_scene

SCENE = {
    "viewport": {"width": 1000, "height": 800},
    "scroll": {"x": 0, "y": 200},
    "elements": {
        "panel": {"top": 100, "left": 600, "width": 380, "height": 500},
        "anchor": {"top": 320, "left": 900, "width": 60, "height": 24},
        "tip": {"width": 160, "height": 48},
    },
    "tooltip": "tip",
    "origin": "anchor",
    "place": "right,left",
    "boundary": "panel",
}


def _write_scene(tmp_path: Path, data: dict) -> Path:
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_run_scene_writes_reports(tmp_path: Path) -> None:
    scene = scene_from_dict(SCENE, source="inline")
    result, paths = run_scene(scene, "smoke", tmp_path, render=False)
    # right overflows the panel; left fits
    assert result.place == "left"
    assert set(paths) == {"placement", "run_metadata"}
    data = json.loads(paths["placement"].read_text(encoding="utf-8"))
    assert data["result"]["offset"]["left"] == "728px"
    assert data["result"]["offset"]["top"] == "508px"
    assert data["request"]["boundary"] == "panel"
    assert data["metrics"]["fallback_used"] is True


def test_run_scene_renders_debug_png(tmp_path: Path) -> None:
    scene = scene_from_dict(SCENE, source="inline")
    _, paths = run_scene(scene, "render", tmp_path, render=True)
    assert paths["debug"].exists()
    assert paths["debug"].stat().st_size > 0


def test_cli_main(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_scene(tmp_path, SCENE)
    main(["--scene", "scene.json", "--repo-root", str(tmp_path), "--run-name", "cli", "--no-render"])
    out = capsys.readouterr().out
    assert "Place used: left" in out
    assert (tmp_path / "reports" / "cli" / "placement.json").exists()


def test_cli_place_override(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_scene(tmp_path, SCENE)
    main([
        "--scene", "scene.json", "--repo-root", str(tmp_path),
        "--place", "bottom", "--no-render", "--run-name", "override",
    ])
    assert "Place used: bottom" in capsys.readouterr().out


def test_cli_invalid_direction_exits(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_scene(tmp_path, SCENE)
    with pytest.raises(SystemExit) as exc:
        main(["--scene", "scene.json", "--repo-root", str(tmp_path), "--place", "diagonal", "--no-render"])
    assert exc.value.code == 2
    assert "Unknown direction" in capsys.readouterr().err
