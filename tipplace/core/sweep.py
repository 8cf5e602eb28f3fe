# tipplace/core/sweep.py
"""
Sweep: move the anchor across a grid over the viewport, run adjust in every cell,
and tally which direction wins and how often the fallback is needed.
Output: reports/<run_name>/sweep.csv and sweep_summary.json.
"""

from __future__ import annotations

import argparse
import copy
import csv
import json
import logging
from pathlib import Path
from typing import Any

import numpy as np

from tipplace.core.adjust import adjust
from tipplace.core.config import DEFAULT_SCENE_PATH, DIRECTIONS, LOG_LEVEL, SWEEP_STEPS
from tipplace.core.io import Scene, load_scene
from tipplace.core.reporting import ensure_report_dir, placement_metrics

logger = logging.getLogger(__name__)

SWEEP_FIELDS = [
    "row", "col", "anchor_top", "anchor_left", "place",
    "fallback_used", "exhausted", "visible_ratio",
]


def sweep_grid(scene: Scene, steps: int = SWEEP_STEPS) -> tuple[np.ndarray, np.ndarray]:
    """Anchor top and left positions (viewport-relative) keeping the anchor inside the viewport."""
    provider = scene.provider
    box = provider.bounding_box(scene.origin)
    vp = provider.viewport_size()
    max_top = max(0.0, vp.height - float(box["height"]))
    max_left = max(0.0, vp.width - float(box["width"]))
    n = max(1, int(steps))
    return np.linspace(0.0, max_top, n), np.linspace(0.0, max_left, n)


def run_sweep_rows(scene: Scene, steps: int = SWEEP_STEPS) -> list[dict[str, Any]]:
    """One row per grid cell. The scene's provider is not modified."""
    provider = copy.deepcopy(scene.provider)
    tops, lefts = sweep_grid(scene, steps)
    rows: list[dict[str, Any]] = []
    for i, top in enumerate(tops):
        for j, left in enumerate(lefts):
            provider.move(scene.origin, float(top), float(left))
            result = adjust(scene.place, scene.tooltip, scene.origin, provider, scene.options)
            m = placement_metrics(result, provider, boundary=scene.options.boundary)
            rows.append({
                "row": i,
                "col": j,
                "anchor_top": float(top),
                "anchor_left": float(left),
                "place": result.place,
                "fallback_used": m["fallback_used"],
                "exhausted": m["exhausted"],
                "visible_ratio": m["visible_ratio"],
            })
    return rows


def summarize(rows: list[dict[str, Any]]) -> dict[str, Any]:
    """Counts per chosen direction, fallback and exhausted rates, mean visible ratio."""
    n = len(rows)
    places = np.array([r["place"] for r in rows], dtype=object)
    fallback = np.array([bool(r["fallback_used"]) for r in rows], dtype=bool)
    exhausted = np.array([bool(r["exhausted"]) for r in rows], dtype=bool)
    ratios = np.array([float(r["visible_ratio"]) for r in rows], dtype=float)
    return {
        "n_cells": n,
        "by_place": {d: int(np.sum(places == d)) for d in DIRECTIONS},
        "fallback_rate": float(fallback.mean()) if n else 0.0,
        "exhausted_rate": float(exhausted.mean()) if n else 0.0,
        "mean_visible_ratio": float(ratios.mean()) if n else 0.0,
    }


def run_sweep(
    scene: Scene,
    run_name: str,
    repo_root: Path,
    steps: int = SWEEP_STEPS,
    output_dir: str | None = None,
) -> Path:
    """Run the sweep and write sweep.csv and sweep_summary.json. Returns the report dir."""
    report_dir = ensure_report_dir(repo_root, run_name, output_dir=output_dir)
    rows = run_sweep_rows(scene, steps)
    with open(report_dir / "sweep.csv", "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=SWEEP_FIELDS)
        w.writeheader()
        w.writerows(rows)
    summary = summarize(rows)
    summary["scene"] = scene.source
    summary["place"] = scene.place if isinstance(scene.place, str) else list(scene.place)
    summary["steps"] = steps
    (report_dir / "sweep_summary.json").write_text(json.dumps(summary, indent=2), encoding="utf-8")
    logger.info(
        "Sweep %s: %d cells, fallback rate %.2f, exhausted rate %.2f.",
        run_name, summary["n_cells"], summary["fallback_rate"], summary["exhausted_rate"],
    )
    return report_dir


def main() -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    p = argparse.ArgumentParser(description="Sweep an anchor across the viewport and tally placements.")
    p.add_argument("--scene", default=DEFAULT_SCENE_PATH, help="Scene JSON path (repo-relative)")
    p.add_argument("--run-name", default="sweep", dest="run_name", help="Reports subdir name")
    p.add_argument("--steps", type=int, default=SWEEP_STEPS, help="Grid steps per axis")
    p.add_argument("--output-dir", default=None, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", default=None, dest="repo_root")
    args = p.parse_args()
    root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()
    scene = load_scene(args.scene, repo_root=root)
    report_dir = run_sweep(scene, args.run_name, root, steps=args.steps, output_dir=args.output_dir)
    print(report_dir)


if __name__ == "__main__":
    main()
