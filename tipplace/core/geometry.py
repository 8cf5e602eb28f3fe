# tipplace/core/geometry.py
"""
Rectangle helpers: unit stripping, completing partial rectangles, intersection,
pixel formatting, and shapely boxes for area metrics.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Any

from shapely.geometry import Polygon, box

from tipplace.core.config import PX_UNIT, RECT_PROPS
from tipplace.core.types import RectLike

_NUMERIC_PREFIX = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def is_number(value: Any) -> bool:
    """True for real numbers (NaN included), False for bools, strings and None."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def parse_dimension(value: str) -> float:
    """
    Parse the leading numeric portion of a dimension string: '12px' -> 12.0, '1.5em' -> 1.5.
    Returns NaN when there is no leading number.
    """
    m = _NUMERIC_PREFIX.match(value.replace(PX_UNIT, ""))
    if not m:
        return math.nan
    return float(m.group(1))


def px(value: Any) -> str:
    """Format a number as a pixel string: 105.0 -> '105px', 10.5 -> '10.5px', NaN -> 'NaNpx'."""
    if isinstance(value, float):
        if math.isnan(value):
            text = "NaN"
        elif math.isinf(value):
            text = "Infinity" if value > 0 else "-Infinity"
        elif value.is_integer():
            text = str(int(value))
        else:
            text = repr(value)
    elif value is None:
        text = "NaN"
    else:
        text = str(value)
    return f"{text}{PX_UNIT}"


def strip(rect: RectLike) -> dict[str, Any]:
    """Copy of rect with dimension strings on the six rectangle properties converted to floats."""
    data = dict(rect)
    for prop in RECT_PROPS:
        if isinstance(data.get(prop), str):
            data[prop] = parse_dimension(data[prop])
    return data


def amend(rect: RectLike) -> dict[str, Any]:
    """
    Make a full rectangle from minimal data: top/left default to 0,
    right/bottom derived from left+width/top+height when missing.
    width/height are never derived; fields that cannot be derived stay absent.
    """
    data = strip(rect)
    if not is_number(data.get("top")):
        data["top"] = 0
    if not is_number(data.get("left")):
        data["left"] = 0
    if not is_number(data.get("right")) and is_number(data.get("width")):
        data["right"] = data["left"] + data["width"]
    if not is_number(data.get("bottom")) and is_number(data.get("height")):
        data["bottom"] = data["top"] + data["height"]
    return data


def intersection(area1: RectLike, area2: RectLike) -> dict[str, float]:
    """
    Overlap of two areas given by top/left/width/height.
    Not clamped: negative width or height means the areas do not overlap.
    """
    area: dict[str, float] = {}
    area["top"] = max(area1["top"], area2["top"])
    area["right"] = min(area1["left"] + area1["width"], area2["left"] + area2["width"])
    area["bottom"] = min(area1["top"] + area1["height"], area2["top"] + area2["height"])
    area["left"] = max(area1["left"], area2["left"])
    area["height"] = area["bottom"] - area["top"]
    area["width"] = area["right"] - area["left"]
    return area


def rect_to_box(rect: RectLike) -> Polygon:
    """Shapely box for a rectangle (amended first). Empty polygon if any edge is missing or not finite."""
    data = amend(rect)
    edges = [data.get(k) for k in ("left", "top", "right", "bottom")]
    if not all(is_number(v) and math.isfinite(v) for v in edges):
        return Polygon()
    left, top, right, bottom = (float(v) for v in edges)
    if right <= left or bottom <= top:
        return Polygon()
    return box(left, top, right, bottom)


def visible_ratio(tip: RectLike, area: RectLike) -> float:
    """Share of the tooltip's area lying inside area, in [0, 1]. 0.0 for degenerate input."""
    tip_box = rect_to_box(tip)
    area_box = rect_to_box(area)
    if tip_box.is_empty or area_box.is_empty:
        return 0.0
    return float(tip_box.intersection(area_box).area / tip_box.area)
