"""
Structured error codes for placement and run failures.
Exceptions in tipplace.core.errors carry one of these keys; map to user-facing messages in callers.
"""

INVALID_DIRECTION = "invalid_direction"
EMPTY_DIRECTION_LIST = "empty_direction_list"
UNKNOWN_ELEMENT = "unknown_element"
SCENE_INVALID = "scene_invalid"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    INVALID_DIRECTION: "Unknown direction. Use top, right, bottom or left.",
    EMPTY_DIRECTION_LIST: "No directions to try. Pass at least one of top, right, bottom, left.",
    UNKNOWN_ELEMENT: "Element not found in the scene. Check tooltip/origin/boundary ids.",
    SCENE_INVALID: "Scene file could not be read. Check the path and JSON structure.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
