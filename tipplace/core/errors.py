# tipplace/core/errors.py
"""
Exceptions raised by placement. All are synchronous; nothing is retried internally.
"""

from __future__ import annotations

from typing import Any

from tipplace.core import error_codes


class PlacementError(Exception):
    """Base class for tooltip placement errors."""
    code: str | None = None

    @property
    def user_message(self) -> str:
        return error_codes.user_message(self.code)


class InvalidDirection(PlacementError, ValueError):
    code = error_codes.INVALID_DIRECTION

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Unknown direction: {value!r}")


class EmptyDirectionList(PlacementError, ValueError):
    code = error_codes.EMPTY_DIRECTION_LIST

    def __init__(self) -> None:
        super().__init__("Direction list is empty; nothing to try.")


class UnknownElement(PlacementError, KeyError):
    code = error_codes.UNKNOWN_ELEMENT

    def __init__(self, element: Any):
        self.element = element
        super().__init__(f"Unknown element: {element!r}")

    def __str__(self) -> str:
        return self.args[0]


class SceneError(PlacementError, ValueError):
    code = error_codes.SCENE_INVALID

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Scene '{path}': {reason}")
