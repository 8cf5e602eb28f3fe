# tipplace/core/resolve.py
"""
Resolve target tooltip names from an action or props object.
"""

from __future__ import annotations

from typing import Any, Mapping

from tipplace.core.config import DEFAULT_TOOLTIP_NAME


def _field(obj: Any, key: str) -> Any:
    """obj[key] for mappings, obj.key otherwise; None when absent."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _present(value: Any) -> bool:
    """Falsy scalars (None, "", False, 0, NaN) count as absent; containers always count."""
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)):
        return value == value and value != 0
    return True


def resolve(source: Any) -> list[str]:
    """
    Names of the target tooltips: source.payload.name, else source.name, else ['default'].
    A single name is wrapped in a list.
    """
    payload_name = _field(_field(source, "payload"), "name")
    if _present(payload_name):
        names = payload_name
    elif _present(_field(source, "name")):
        names = _field(source, "name")
    else:
        names = [DEFAULT_TOOLTIP_NAME]

    if isinstance(names, (list, tuple)):
        return list(names)
    return [names]
