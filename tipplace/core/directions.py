# tipplace/core/directions.py
"""
Direction helpers: opposite lookup and normalization of a direction argument
('top', 'top,left', ['right']) into the ordered candidate list tried by adjust.
"""

from __future__ import annotations

from typing import Any

from tipplace.core.config import DIRECTION_DELIMITER, DIRECTIONS, OPPOSITES
from tipplace.core.errors import EmptyDirectionList, InvalidDirection
from tipplace.core.types import Direction, DirectionSpec


def is_direction(value: Any) -> bool:
    return isinstance(value, str) and value in OPPOSITES


def opposite(direction: DirectionSpec) -> Direction:
    """
    Opposite of direction: top<->bottom, right<->left.
    A list or tuple uses its first element. Raises InvalidDirection otherwise.
    """
    place = direction
    # Always use the first direction when a sequence is passed
    if isinstance(place, (list, tuple)) and len(place) > 0:
        place = place[0]
    if is_direction(place):
        return OPPOSITES[place]  # type: ignore[return-value]
    raise InvalidDirection(direction)


def split_directions(text: str) -> list[str]:
    """Split 'top, left' into ['top', 'left']. Tokens are trimmed but not validated."""
    return [part.strip() for part in text.split(DIRECTION_DELIMITER)]


def parse_directions(place: DirectionSpec, auto: bool = True) -> list[Direction]:
    """
    Ordered candidate list for place.
    With auto a string is split on commas; without it the string is one token.
    A single candidate gets its opposite appended as fallback.
    Raises EmptyDirectionList for an empty sequence, InvalidDirection for unknown tokens.
    Never mutates place.
    """
    if isinstance(place, str):
        candidates = split_directions(place) if auto else [place]
    else:
        candidates = list(place)
    if not candidates:
        raise EmptyDirectionList()
    for c in candidates:
        if not is_direction(c):
            raise InvalidDirection(c)
    if len(candidates) == 1:
        candidates.append(opposite(candidates))
    return candidates  # type: ignore[return-value]


def all_directions() -> list[Direction]:
    return list(DIRECTIONS)  # type: ignore[arg-type]
