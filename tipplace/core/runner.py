# tipplace/core/runner.py
"""
CLI entrypoint: load a scene, place the tooltip, write placement.json,
run_metadata.json and debug.png under reports/<run_name>/.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from tipplace.core.adjust import adjust
from tipplace.core.config import DEFAULT_SCENE_PATH, GAP_PX, LOG_LEVEL, REPORTS_DIR
from tipplace.core.errors import PlacementError
from tipplace.core.io import Scene, load_scene
from tipplace.core.reporting import (
    ensure_report_dir,
    placement_metrics,
    placement_to_dict,
    write_placement_json,
    write_run_metadata_json,
)
from tipplace.core.types import PlacementResult

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Tooltip placement with automatic fallback.")
    p.add_argument("--scene", type=str, default=DEFAULT_SCENE_PATH, help="Scene JSON path (repo-relative)")
    p.add_argument("--place", type=str, default=None, help="Direction(s), e.g. 'top' or 'top,left'; overrides the scene")
    p.add_argument("--no-auto", action="store_false", dest="auto", default=None, help="Do not split --place on commas")
    p.add_argument("--boundary", type=str, default=None, help="Element id limiting the boundary area; overrides the scene")
    p.add_argument("--gap", type=float, default=None, help=f"Gap (px) between tooltip and anchor (default {GAP_PX:g})")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--no-render", action="store_true", dest="no_render", help="Skip debug.png")
    return p.parse_args(argv)


def apply_overrides(scene: Scene, args: argparse.Namespace) -> Scene:
    """Scene with CLI overrides for place, auto, boundary and gap applied."""
    options = scene.options
    if args.auto is not None:
        options = dataclasses.replace(options, auto=args.auto)
    if args.boundary is not None:
        options = dataclasses.replace(options, boundary=args.boundary)
    if args.gap is not None:
        options = dataclasses.replace(options, gap=args.gap)
    place = args.place if args.place is not None else scene.place
    return dataclasses.replace(scene, place=place, options=options)


def run_scene(
    scene: Scene,
    run_name: str,
    repo_root: Path,
    output_dir: str | None = None,
    render: bool = True,
) -> tuple[PlacementResult, dict[str, Path]]:
    """Place the scene's tooltip and write the report files. Returns (result, paths by name)."""
    opts = scene.options
    result = adjust(scene.place, scene.tooltip, scene.origin, scene.provider, opts)
    metrics = placement_metrics(result, scene.provider, boundary=opts.boundary)
    request = {
        "place": scene.place if isinstance(scene.place, str) else list(scene.place),
        "auto": opts.auto,
        "gap": opts.gap,
        "tooltip": scene.tooltip,
        "origin": scene.origin,
        "boundary": opts.boundary,
    }
    data = placement_to_dict(result, metrics, request=request, names=scene.names)

    report_dir = ensure_report_dir(repo_root, run_name, output_dir=output_dir)
    paths: dict[str, Path] = {}
    paths["placement"] = write_placement_json(report_dir, data)
    paths["run_metadata"] = write_run_metadata_json(
        report_dir, run_name, scene.source, scene.place, opts.auto, opts.gap,
    )
    if render:
        from tipplace.core.render import render_debug
        paths["debug"] = report_dir / "debug.png"
        render_debug(
            result,
            scene.tooltip,
            scene.origin,
            scene.provider,
            paths["debug"],
            boundary=opts.boundary,
            gap=opts.gap,
        )
    if metrics["exhausted"]:
        logger.warning("No direction fits; kept %s overflowing %s.", result.place, metrics["overflow"])
    return result, paths


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    try:
        scene = apply_overrides(load_scene(args.scene, repo_root=repo_root), args)
        result, paths = run_scene(
            scene,
            args.run_name,
            repo_root,
            output_dir=args.output_dir,
            render=not args.no_render,
        )
    except PlacementError as e:
        print(f"{e.user_message} ({e})", file=sys.stderr)
        raise SystemExit(2) from e

    for p in paths.values():
        print(p)
    print("Place used:", result.place)


if __name__ == "__main__":
    main()
