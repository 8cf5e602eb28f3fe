# tipplace/core/placement.py
"""
Offset of a tooltip placed on one side of its anchor: centered on the cross axis,
abutting the anchor with a fixed gap on the main axis.
"""

from __future__ import annotations

import logging
from typing import Any

from tipplace.core.config import GAP_PX
from tipplace.core.geometry import px
from tipplace.core.provider import GeometryProvider
from tipplace.core.screen import position

logger = logging.getLogger(__name__)


def placement(
    place: str,
    tooltip: Any,
    origin: Any,
    provider: GeometryProvider,
    gap: float = GAP_PX,
) -> dict[str, Any]:
    """
    Offset for tooltip on the given side of origin.
    Keys: width/height (numbers, the tooltip's size) plus top and left as px strings.
    An unknown place leaves top/left unset.
    """
    tip = position(tooltip, provider)
    pos = position(origin, provider)

    offset: dict[str, Any] = {"width": tip["width"], "height": tip["height"]}

    if place in ("top", "bottom"):
        offset["left"] = px(pos["left"] + pos["width"] * 0.5 - tip["width"] * 0.5)
    elif place in ("left", "right"):
        offset["top"] = px(pos["top"] + pos["height"] * 0.5 - tip["height"] * 0.5)

    if place == "top":
        offset["top"] = px(pos["top"] - tip["height"] - gap)
    elif place == "right":
        offset["left"] = px(pos["right"] + gap)
    elif place == "bottom":
        offset["top"] = px(pos["top"] + pos["height"] + gap)
    elif place == "left":
        offset["left"] = px(pos["left"] - tip["width"] - gap)
    else:
        logger.warning("Unknown placement direction %r; offset has no top/left.", place)

    return offset
