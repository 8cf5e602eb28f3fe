"""
Placement calculator: cross-axis centering and main-axis gap for each direction.
Anchor at {top:100, left:100, width:50, height:20}, tooltip 30x10.
"""

from __future__ import annotations

from tipplace.core.placement import placement
from tipplace.core.provider import StaticGeometryProvider
from tipplace.core.types import ScrollOffsets, ViewportSize


def _provider(scroll: ScrollOffsets | None = None) -> StaticGeometryProvider:
    return StaticGeometryProvider.from_boxes(
        {
            "anchor": {"top": 100, "left": 100, "width": 50, "height": 20},
            "tip": {"width": 30, "height": 10},
        },
        viewport=ViewportSize(1000, 1000),
        scroll=scroll,
    )


def test_placement_top() -> None:
    offset = placement("top", "tip", "anchor", _provider())
    assert offset["left"] == "110px"  # 100 + 25 - 15
    assert offset["top"] == "78px"  # 100 - 10 - 12
    assert offset["width"] == 30 and offset["height"] == 10


def test_placement_right() -> None:
    offset = placement("right", "tip", "anchor", _provider())
    assert offset["left"] == "162px"  # 150 + 12
    assert offset["top"] == "105px"  # 100 + 10 - 5


def test_placement_bottom() -> None:
    offset = placement("bottom", "tip", "anchor", _provider())
    assert offset["top"] == "132px"  # 100 + 20 + 12
    assert offset["left"] == "110px"


def test_placement_left() -> None:
    offset = placement("left", "tip", "anchor", _provider())
    assert offset["left"] == "58px"  # 100 - 30 - 12
    assert offset["top"] == "105px"


def test_placement_has_exactly_top_and_left() -> None:
    for direction in ("top", "right", "bottom", "left"):
        offset = placement(direction, "tip", "anchor", _provider())
        assert set(offset) == {"width", "height", "top", "left"}


def test_placement_custom_gap() -> None:
    offset = placement("right", "tip", "anchor", _provider(), gap=0)
    assert offset["left"] == "150px"


def test_placement_fractional_center() -> None:
    provider = _provider()
    provider.add("odd", {"top": 0, "left": 0, "width": 31, "height": 10})
    offset = placement("bottom", "odd", "anchor", provider)
    assert offset["left"] == "109.5px"


def test_placement_document_space_under_scroll() -> None:
    offset = placement("top", "tip", "anchor", _provider(ScrollOffsets(page_offset_y=300)))
    assert offset["top"] == "378px"


def test_placement_unknown_direction_leaves_axes_unset() -> None:
    offset = placement("diagonal", "tip", "anchor", _provider())
    assert offset == {"width": 30, "height": 10}


def test_placement_malformed_tooltip_gives_nan_strings() -> None:
    provider = _provider()
    provider.add("sizeless", {"top": 0, "left": 0})
    offset = placement("top", "sizeless", "anchor", provider)
    assert offset["top"] == "NaNpx"
    assert offset["left"] == "NaNpx"
