"""
Direction utilities: opposite lookup and candidate list normalization.
"""

from __future__ import annotations

import pytest

from tipplace.core.directions import opposite, parse_directions
from tipplace.core.errors import EmptyDirectionList, InvalidDirection, PlacementError


@pytest.mark.parametrize("direction", ["top", "right", "bottom", "left"])
def test_opposite_is_involution(direction: str) -> None:
    assert opposite(opposite(direction)) == direction
    assert opposite(direction) != direction


def test_opposite_pairs() -> None:
    assert opposite("top") == "bottom"
    assert opposite("right") == "left"


def test_opposite_uses_first_of_list() -> None:
    assert opposite(["left", "top"]) == "right"
    assert opposite(("bottom",)) == "top"


@pytest.mark.parametrize("bad", [[], "diagonal", "", None, ["diagonal"], "Top"])
def test_opposite_invalid(bad: object) -> None:
    with pytest.raises(InvalidDirection) as exc:
        opposite(bad)  # type: ignore[arg-type]
    assert exc.value.value == bad
    assert isinstance(exc.value, PlacementError)


def test_parse_string_splits_and_trims() -> None:
    assert parse_directions("top, left ,bottom") == ["top", "left", "bottom"]


def test_parse_single_gets_opposite() -> None:
    assert parse_directions("top") == ["top", "bottom"]
    assert parse_directions(["right"]) == ["right", "left"]


def test_parse_without_auto_keeps_string_whole() -> None:
    assert parse_directions("left", auto=False) == ["left", "right"]
    with pytest.raises(InvalidDirection):
        parse_directions("top,left", auto=False)


def test_parse_list_kept_in_order() -> None:
    assert parse_directions(["bottom", "top", "right"], auto=False) == ["bottom", "top", "right"]


def test_parse_does_not_mutate_input() -> None:
    given = ["top"]
    parse_directions(given)
    assert given == ["top"]


def test_parse_empty_list_fails_fast() -> None:
    with pytest.raises(EmptyDirectionList):
        parse_directions([])
    with pytest.raises(EmptyDirectionList):
        parse_directions((), auto=False)


def test_parse_rejects_unknown_tokens() -> None:
    with pytest.raises(InvalidDirection):
        parse_directions("top,diagonal")
    with pytest.raises(InvalidDirection):
        parse_directions("")
