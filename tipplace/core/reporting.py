# tipplace/core/reporting.py
"""
Create reports/<run_name>/ and write placement.json and run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from tipplace.core.config import DIRECTIONS, GAP_PX, REPORTS_DIR
from tipplace.core.geometry import amend, visible_ratio
from tipplace.core.overflow import boundary_area, over_dirs
from tipplace.core.provider import GeometryProvider
from tipplace.core.types import PlacementResult

SCHEMA_VERSION = "1.0"


def placement_metrics(
    result: PlacementResult,
    provider: GeometryProvider,
    boundary: Any = None,
) -> dict[str, Any]:
    """Overflowed edges, visible share of the tooltip, and whether a fallback was taken."""
    overflow = over_dirs(result.offset, provider, boundary=boundary)
    area = boundary_area(provider, boundary)
    tried = list(result.tried)
    return {
        "overflow": overflow,
        "visible_ratio": visible_ratio(amend(result.offset), area),
        "fallback_used": bool(tried) and result.place != tried[0],
        "exhausted": bool(overflow),
        "candidates_tried": tried,
    }


def placement_to_dict(
    result: PlacementResult,
    metrics: dict[str, Any],
    request: dict[str, Any] | None = None,
    names: list[str] | None = None,
) -> dict:
    """Exact structure for placement.json."""
    offset = {k: (float(v) if k in ("width", "height") else v) for k, v in result.offset.items()}
    return {
        "schema_version": SCHEMA_VERSION,
        "names": list(names or []),
        "request": dict(request or {}),
        "result": {
            "place": result.place,
            "offset": offset,
        },
        "metrics": metrics,
    }


def run_metadata_dict(
    run_name: str,
    scene_path: str,
    place: Any,
    auto: bool,
    gap: float,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "scene_path": scene_path,
        "place": place if isinstance(place, str) else list(place),
        "auto": auto,
        "gap": gap,
        "config": {
            "GAP_PX": GAP_PX,
            "DIRECTIONS": list(DIRECTIONS),
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_placement_json(report_dir: Path, data: dict) -> Path:
    """Write placement.json to report_dir. Returns path to file."""
    path = report_dir / "placement.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    scene_path: str,
    place: Any,
    auto: bool,
    gap: float,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, scene_path, place, auto, gap)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
