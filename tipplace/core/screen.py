# tipplace/core/screen.py
"""
Absolute (document-space) position of an element from its viewport-relative box
and the ambient scroll offsets. Everything downstream works in this space.
"""

from __future__ import annotations

import math
from typing import Any

from tipplace.core.provider import GeometryProvider


def window_offsets(provider: GeometryProvider) -> tuple[float, float]:
    """
    Return (win_top, win_left): page scroll minus the root element's client offset.
    The page offset falls back to the root scroll value when it is 0 or missing.
    """
    s = provider.scroll_offsets()
    win_top = (s.page_offset_y or s.root_scroll_top or 0) - (s.root_client_top or 0)
    win_left = (s.page_offset_x or s.root_scroll_left or 0) - (s.root_client_left or 0)
    return win_top, win_left


def position(element: Any, provider: GeometryProvider) -> dict[str, float]:
    """
    Document-space rectangle of element. Box fields the provider does not report
    read as NaN, so malformed geometry degrades to NaN offsets instead of raising.
    """
    pos = provider.bounding_box(element)
    win_top, win_left = window_offsets(provider)
    return {
        "top": pos.get("top", math.nan) + win_top,
        "left": pos.get("left", math.nan) + win_left,
        "right": pos.get("right", math.nan) + win_left,
        "bottom": pos.get("bottom", math.nan) + win_top,
        "width": pos.get("width", math.nan),
        "height": pos.get("height", math.nan),
    }
