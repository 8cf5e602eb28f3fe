"""
Overflow detector against the viewport and a container boundary.
"""

from __future__ import annotations

from tipplace.core.overflow import boundary_area, over_dirs
from tipplace.core.provider import StaticGeometryProvider
from tipplace.core.types import ViewportSize


def _provider() -> StaticGeometryProvider:
    return StaticGeometryProvider.from_boxes(
        {"panel": {"top": 100, "left": 100, "width": 200, "height": 200}},
        viewport=ViewportSize(1000, 1000),
    )


def _tip(top: float, left: float, width: float = 30, height: float = 10) -> dict:
    return {"top": f"{top}px", "left": f"{left}px", "width": width, "height": height}


def test_inside_viewport_no_overflow() -> None:
    assert over_dirs(_tip(10, 10), _provider()) == []


def test_above_top_edge_only_top() -> None:
    assert over_dirs(_tip(-5, 100), _provider()) == ["top"]


def test_each_edge() -> None:
    p = _provider()
    assert over_dirs(_tip(10, 980), p) == ["right"]
    assert over_dirs(_tip(995, 10), p) == ["bottom"]
    assert over_dirs(_tip(10, -1), p) == ["left"]


def test_edges_reported_in_order_and_independently() -> None:
    tall = _tip(-10, -10, width=1200, height=1200)
    assert over_dirs(tall, _provider()) == ["top", "right", "bottom", "left"]


def test_touching_edge_is_not_overflow() -> None:
    assert over_dirs(_tip(0, 970), _provider()) == []


def test_boundary_element_restricts_area() -> None:
    p = _provider()
    assert over_dirs(_tip(50, 150), p) == []
    assert over_dirs(_tip(50, 150), p, boundary="panel") == ["top"]
    assert over_dirs(_tip(150, 290), p, boundary="panel") == ["right"]


def test_boundary_area_is_clipped_to_viewport() -> None:
    p = _provider()
    p.add("wide", {"top": -50, "left": -50, "width": 2000, "height": 300})
    area = boundary_area(p, "wide")
    assert area["top"] == 0 and area["left"] == 0
    assert area["right"] == 1000 and area["bottom"] == 250


def test_nan_offset_never_overflows() -> None:
    assert over_dirs({"top": "NaNpx", "left": "NaNpx", "width": 10, "height": 10}, _provider()) == []
