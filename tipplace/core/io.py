# tipplace/core/io.py
"""
Load a placement scene from JSON: viewport, scroll offsets, element boxes,
and the tooltip/origin pair to place. Builds a StaticGeometryProvider for it.

Scene shape:
    {
      "viewport": {"width": 1000, "height": 800},
      "scroll": {"x": 0, "y": 120},
      "elements": {
        "anchor": {"top": 100, "left": 100, "width": 50, "height": 20},
        "tip": {"width": "160px", "height": "40px"}
      },
      "tooltip": "tip", "origin": "anchor",
      "place": "top,left", "auto": true, "boundary": null, "gap": 12,
      "name": "help"
    }
Element boxes are viewport-relative and may be partial or use 'px' strings.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tipplace.core.config import (
    DEFAULT_PLACE,
    DEFAULT_VIEWPORT_HEIGHT_PX,
    DEFAULT_VIEWPORT_WIDTH_PX,
    GAP_PX,
    RECT_PROPS,
)
from tipplace.core.errors import SceneError
from tipplace.core.geometry import strip
from tipplace.core.provider import StaticGeometryProvider
from tipplace.core.resolve import resolve
from tipplace.core.types import AdjustOptions, DirectionSpec, ScrollOffsets, ViewportSize

logger = logging.getLogger(__name__)


@dataclass
class Scene:
    """A loaded scene: provider plus the placement request it describes."""
    provider: StaticGeometryProvider
    tooltip: str
    origin: str
    place: DirectionSpec
    options: AdjustOptions = field(default_factory=AdjustOptions)
    names: list[str] = field(default_factory=list)
    source: str = ""


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def parse_scroll(data: dict[str, Any] | None) -> ScrollOffsets:
    """ScrollOffsets from {'x', 'y'} shorthand or the full field names."""
    if not data:
        return ScrollOffsets()
    x = float(data.get("x", 0.0))
    y = float(data.get("y", 0.0))
    return ScrollOffsets(
        page_offset_y=float(data.get("page_offset_y", y)),
        page_offset_x=float(data.get("page_offset_x", x)),
        root_scroll_top=float(data.get("root_scroll_top", y)),
        root_client_top=float(data.get("root_client_top", 0.0)),
        root_scroll_left=float(data.get("root_scroll_left", x)),
        root_client_left=float(data.get("root_client_left", 0.0)),
    )


def element_box(spec: dict[str, Any]) -> dict[str, Any]:
    """Partial box for one scene element; keys other than rectangle properties are ignored."""
    return strip({k: v for k, v in spec.items() if k in RECT_PROPS})


def scene_from_dict(data: dict[str, Any], source: str = "<dict>") -> Scene:
    """
    Build a Scene from parsed JSON. Raises SceneError on missing or inconsistent keys.
    Directions are not validated here; adjust does that.
    """
    if not isinstance(data, dict):
        raise SceneError(source, "top level must be an object")
    elements = data.get("elements")
    if not isinstance(elements, dict) or not elements:
        raise SceneError(source, "'elements' must be a non-empty object")
    for key in ("tooltip", "origin"):
        if key not in data:
            raise SceneError(source, f"missing '{key}'")
        if data[key] not in elements:
            raise SceneError(source, f"'{key}' refers to unknown element {data[key]!r}")
    boundary = data.get("boundary")
    if boundary is not None and boundary not in elements:
        raise SceneError(source, f"'boundary' refers to unknown element {boundary!r}")

    vp = data.get("viewport") or {}
    viewport = ViewportSize(
        float(vp.get("width", DEFAULT_VIEWPORT_WIDTH_PX)),
        float(vp.get("height", DEFAULT_VIEWPORT_HEIGHT_PX)),
    )
    provider = StaticGeometryProvider(viewport=viewport, scroll=parse_scroll(data.get("scroll")))
    for element_id, spec in elements.items():
        if not isinstance(spec, dict):
            raise SceneError(source, f"element {element_id!r} must be an object")
        provider.add(element_id, element_box(spec))

    options = AdjustOptions(
        auto=bool(data.get("auto", True)),
        boundary=boundary,
        gap=float(data.get("gap", GAP_PX)),
    )
    scene = Scene(
        provider=provider,
        tooltip=data["tooltip"],
        origin=data["origin"],
        place=data.get("place", DEFAULT_PLACE),
        options=options,
        names=resolve(data),
        source=source,
    )
    logger.info("Loaded scene %s with %d element(s).", source, len(elements))
    return scene


def load_scene(path: str | Path, repo_root: Path | None = None) -> Scene:
    """
    Load a scene JSON file.
    Raises FileNotFoundError if path is missing, SceneError if the content is invalid.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Scene file not found: {resolved}")
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SceneError(str(path), f"invalid JSON: {e}") from e
    return scene_from_dict(data, source=str(path))
