"""
Sweep: grid over the viewport, tallies per direction, written reports.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

import pytest

from tipplace.core.io import scene_from_dict
from tipplace.core.sweep import run_sweep, run_sweep_rows, summarize, sweep_grid

SCENE = {
    "viewport": {"width": 400, "height": 300},
    "elements": {
        "anchor": {"top": 0, "left": 0, "width": 80, "height": 20},
        "tip": {"width": 60, "height": 30},
    },
    "tooltip": "tip",
    "origin": "anchor",
    "place": "top",
}


def test_sweep_grid_keeps_anchor_inside() -> None:
    tops, lefts = sweep_grid(scene_from_dict(SCENE), steps=5)
    assert tops[0] == 0.0 and tops[-1] == 280.0
    assert lefts[0] == 0.0 and lefts[-1] == 320.0
    assert len(tops) == 5 and len(lefts) == 5


def test_sweep_rows_and_summary() -> None:
    scene = scene_from_dict(SCENE)
    rows = run_sweep_rows(scene, steps=3)
    assert len(rows) == 9
    # anchor on the top row cannot host the tooltip above it
    assert all(r["place"] == "bottom" for r in rows if r["row"] == 0)
    summary = summarize(rows)
    assert summary["n_cells"] == 9
    assert sum(summary["by_place"].values()) == 9
    assert summary["by_place"]["bottom"] == 3
    assert summary["fallback_rate"] == pytest.approx(1 / 3)
    assert summary["exhausted_rate"] == 0.0


def test_sweep_leaves_scene_untouched() -> None:
    scene = scene_from_dict(SCENE)
    run_sweep_rows(scene, steps=2)
    assert scene.provider.bounding_box("anchor")["top"] == 0


def test_run_sweep_writes_files(tmp_path: Path) -> None:
    report_dir = run_sweep(scene_from_dict(SCENE, source="inline"), "sw", tmp_path, steps=2)
    with open(report_dir / "sweep.csv", newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 4
    summary = json.loads((report_dir / "sweep_summary.json").read_text(encoding="utf-8"))
    assert summary["n_cells"] == 4
    assert summary["scene"] == "inline"


def test_summarize_empty() -> None:
    summary = summarize([])
    assert summary["n_cells"] == 0
    assert summary["fallback_rate"] == 0.0
