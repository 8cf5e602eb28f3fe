# tipplace/core/provider.py
"""
Geometry provider: the source of element boxes, scroll offsets and viewport size.
Placement reads it fresh on every call and never caches what it returns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Hashable, Mapping, Protocol, runtime_checkable

from tipplace.core.config import DEFAULT_VIEWPORT_HEIGHT_PX, DEFAULT_VIEWPORT_WIDTH_PX
from tipplace.core.errors import UnknownElement
from tipplace.core.geometry import amend
from tipplace.core.types import RectLike, ScrollOffsets, ViewportSize

logger = logging.getLogger(__name__)


def _default_viewport() -> ViewportSize:
    return ViewportSize(DEFAULT_VIEWPORT_WIDTH_PX, DEFAULT_VIEWPORT_HEIGHT_PX)


@runtime_checkable
class GeometryProvider(Protocol):
    def bounding_box(self, element: Any) -> RectLike:
        """Viewport-relative {top, left, right, bottom, width, height} of element."""
        ...

    def scroll_offsets(self) -> ScrollOffsets:
        ...

    def viewport_size(self) -> ViewportSize:
        ...


@dataclass
class StaticGeometryProvider:
    """
    Synthetic provider backed by a dict of viewport-relative boxes keyed by element id.
    Used for tests, scene files and sweeps.
    """
    boxes: dict[Hashable, dict[str, Any]] = field(default_factory=dict)
    viewport: ViewportSize = field(default_factory=_default_viewport)
    scroll: ScrollOffsets = field(default_factory=ScrollOffsets)

    def bounding_box(self, element: Any) -> RectLike:
        try:
            return self.boxes[element]
        except KeyError:
            raise UnknownElement(element) from None
        except TypeError:
            # unhashable element handles
            raise UnknownElement(element) from None

    def scroll_offsets(self) -> ScrollOffsets:
        return self.scroll

    def viewport_size(self) -> ViewportSize:
        return self.viewport

    def add(self, element: Hashable, rect: RectLike) -> None:
        """Register element with a (possibly partial) box; missing edges are derived with amend."""
        self.boxes[element] = amend(rect)
        logger.debug("Registered element %r: %s", element, self.boxes[element])

    def move(self, element: Hashable, top: float, left: float) -> None:
        """Move element to a new viewport-relative top/left, keeping its size."""
        rect = dict(self.bounding_box(element))
        rect.pop("right", None)
        rect.pop("bottom", None)
        rect["top"] = top
        rect["left"] = left
        self.add(element, rect)

    def scroll_to(self, x: float, y: float) -> None:
        """Set page scroll offsets, keeping the root client offsets."""
        s = self.scroll
        self.scroll = ScrollOffsets(
            page_offset_y=y,
            page_offset_x=x,
            root_scroll_top=y,
            root_client_top=s.root_client_top,
            root_scroll_left=x,
            root_client_left=s.root_client_left,
        )

    @classmethod
    def from_boxes(
        cls,
        boxes: Mapping[Hashable, RectLike],
        viewport: ViewportSize | None = None,
        scroll: ScrollOffsets | None = None,
    ) -> "StaticGeometryProvider":
        provider = cls(
            viewport=viewport if viewport is not None else _default_viewport(),
            scroll=scroll if scroll is not None else ScrollOffsets(),
        )
        for element, rect in boxes.items():
            provider.add(element, rect)
        return provider
