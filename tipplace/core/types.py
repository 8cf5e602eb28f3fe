# tipplace/core/types.py
"""
Dataclasses and aliases for rectangles, directions, provider outputs and placement results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Sequence, Union

from tipplace.core.config import GAP_PX


Direction = Literal["top", "right", "bottom", "left"]

# A direction or an ordered list of them; a string may hold several, comma-delimited.
DirectionSpec = Union[str, Sequence[str]]

# Partial rectangle: any subset of top/left/right/bottom/width/height,
# values numeric or dimension strings such as "12px".
RectLike = Mapping[str, Any]


@dataclass(frozen=True)
class ScrollOffsets:
    """Page scroll offsets plus the root element's scroll/client offsets."""
    page_offset_y: float = 0.0
    page_offset_x: float = 0.0
    root_scroll_top: float = 0.0
    root_client_top: float = 0.0
    root_scroll_left: float = 0.0
    root_client_left: float = 0.0


@dataclass(frozen=True)
class ViewportSize:
    width: float
    height: float

    def as_rect(self) -> dict[str, float]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class AdjustOptions:
    """
    Options for the adjustment engine.

    auto: split string directions on commas. A single direction always gets its
        opposite as fallback, whatever the value of auto.
    boundary: element whose area (intersected with the viewport) the tooltip must
        stay inside. None means the viewport alone.
    gap: clearance (px) between tooltip and anchor.
    """
    auto: bool = True
    boundary: Any = None
    gap: float = GAP_PX


@dataclass(frozen=True)
class PlacementResult:
    """Chosen direction and its offset. offset is a read-only view: width/height plus top/left px strings."""
    offset: Mapping[str, Any]
    place: str
    tried: tuple[str, ...] = field(default=(), compare=False)
