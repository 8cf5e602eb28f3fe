"""Tooltip placement next to an anchor element, with automatic direction fallback."""

from tipplace.core.adjust import adjust
from tipplace.core.directions import opposite
from tipplace.core.errors import EmptyDirectionList, InvalidDirection, PlacementError, UnknownElement
from tipplace.core.provider import GeometryProvider, StaticGeometryProvider
from tipplace.core.resolve import resolve
from tipplace.core.types import AdjustOptions, PlacementResult, ScrollOffsets, ViewportSize

__all__ = (
    "adjust",
    "opposite",
    "resolve",
    "AdjustOptions",
    "PlacementResult",
    "GeometryProvider",
    "StaticGeometryProvider",
    "ScrollOffsets",
    "ViewportSize",
    "PlacementError",
    "InvalidDirection",
    "EmptyDirectionList",
    "UnknownElement",
)
