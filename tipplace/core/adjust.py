# tipplace/core/adjust.py
"""
Place a tooltip and fall back through candidate directions until one fits.
Returns the first candidate with no overflow; if none fits, the first candidate tried.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any

from tipplace.core.directions import parse_directions
from tipplace.core.errors import EmptyDirectionList
from tipplace.core.overflow import over_dirs
from tipplace.core.placement import placement
from tipplace.core.provider import GeometryProvider
from tipplace.core.types import AdjustOptions, DirectionSpec, PlacementResult

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = AdjustOptions()


def adjust(
    place: DirectionSpec,
    tooltip: Any,
    origin: Any,
    provider: GeometryProvider,
    options: AdjustOptions | None = None,
) -> PlacementResult:
    """
    Place tooltip next to origin, trying the directions of place in order.
    'top' is tried as ['top', 'bottom']; 'top,left' as given, with no implicit third try.
    Raises InvalidDirection or EmptyDirectionList for a bad place.
    """
    opts = options if options is not None else _DEFAULT_OPTIONS
    candidates = parse_directions(place, auto=opts.auto)

    first: PlacementResult | None = None
    tried: list[str] = []
    for current in candidates:
        props = placement(current, tooltip, origin, provider, gap=opts.gap)
        tried.append(current)
        if first is None:
            first = PlacementResult(offset=MappingProxyType(props), place=current)
        dirs = over_dirs(props, provider, boundary=opts.boundary)
        if not dirs:
            logger.debug("Candidate %s fits (tried %s).", current, tried)
            return PlacementResult(offset=MappingProxyType(props), place=current, tried=tuple(tried))
        logger.debug("Candidate %s overflows %s.", current, dirs)

    if first is None:
        raise EmptyDirectionList()
    logger.debug("No candidate fits among %s; keeping %s.", tried, first.place)
    return PlacementResult(offset=first.offset, place=first.place, tried=tuple(tried))
