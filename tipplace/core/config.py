# tipplace/core/config.py
"""
Central configuration for tooltip placement.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
DEFAULT_SCENE_PATH: str = "scenes/default.json"
REPORTS_DIR: str = "reports"

# ----- Directions -----
DIRECTIONS: tuple[str, ...] = ("top", "right", "bottom", "left")
"""Valid placement directions. Also the order in which overflowed edges are reported."""

OPPOSITES: dict[str, str] = {
    "top": "bottom",
    "bottom": "top",
    "right": "left",
    "left": "right",
}

DEFAULT_PLACE: str = "top"
"""Direction requested when a scene or CLI call gives none."""

DIRECTION_DELIMITER: str = ","
"""Separator for direction lists given as a string, e.g. 'top,left'."""

# ----- Placement -----
GAP_PX: float = 12.0
"""Clearance (px) between tooltip and anchor along the main axis."""

PX_UNIT: str = "px"
"""Unit suffix for offset values assignable as position styles."""

RECT_PROPS: tuple[str, ...] = ("top", "left", "right", "bottom", "width", "height")
"""Rectangle properties recognized by strip/amend."""

# ----- Synthetic viewport -----
DEFAULT_VIEWPORT_WIDTH_PX: float = 1024.0
DEFAULT_VIEWPORT_HEIGHT_PX: float = 768.0
"""Viewport used by StaticGeometryProvider and scenes that do not give one."""

# ----- Name resolution -----
DEFAULT_TOOLTIP_NAME: str = "default"

# ----- Rendering -----
RENDER_WIDTH_PX: int = 800
RENDER_HEIGHT_PX: int = 600

# ----- Sweep evaluation -----
SWEEP_STEPS: int = 25
"""Grid steps per axis when sweeping the anchor across the viewport."""

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Log level for CLI entrypoints. Set env LOG_LEVEL=DEBUG to trace candidates."""
