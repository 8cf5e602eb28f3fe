# tipplace/core/overflow.py
"""
Which edges of the boundary area a tooltip offset crosses.
"""

from __future__ import annotations

import math
from typing import Any

from tipplace.core.geometry import amend, intersection
from tipplace.core.provider import GeometryProvider
from tipplace.core.screen import position
from tipplace.core.types import RectLike


def boundary_area(provider: GeometryProvider, boundary: Any = None) -> dict[str, Any]:
    """Viewport area (top=left=0), intersected with boundary's position when given."""
    area = amend(provider.viewport_size().as_rect())
    if boundary is not None:
        area = intersection(area, position(boundary, provider))
    return area


def over_dirs(tip: RectLike, provider: GeometryProvider, boundary: Any = None) -> list[str]:
    """
    Edges crossed by tip, in order top, right, bottom, left. Edges are checked
    independently, so a tooltip taller than the area reports both top and bottom.
    Missing or NaN values never count as crossing.
    """
    data = amend(tip)
    area = boundary_area(provider, boundary)

    def get(rect: dict[str, Any], key: str) -> float:
        return rect.get(key, math.nan)

    dirs: list[str] = []
    if get(data, "top") < get(area, "top"):
        dirs.append("top")
    if get(area, "right") < get(data, "right"):
        dirs.append("right")
    if get(area, "bottom") < get(data, "bottom"):
        dirs.append("bottom")
    if get(data, "left") < get(area, "left"):
        dirs.append("left")
    return dirs
