# tipplace/core/render.py
"""
Matplotlib PNG rendering: debug.png with boundary, anchor, every candidate
tooltip box, and the chosen placement. Coordinates are document space, y down.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Any

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from shapely.geometry import Polygon

from tipplace.core.config import GAP_PX, RENDER_HEIGHT_PX, RENDER_WIDTH_PX
from tipplace.core.directions import all_directions
from tipplace.core.geometry import rect_to_box
from tipplace.core.overflow import boundary_area, over_dirs
from tipplace.core.placement import placement as place_offset
from tipplace.core.provider import GeometryProvider
from tipplace.core.screen import position
from tipplace.core.types import PlacementResult


def set_axes_to_boxes(ax: plt.Axes, boxes: list[Polygon], pad_frac: float = 0.05) -> None:
    """Set xlim/ylim to the union of boxes with margin; equal aspect; y axis pointing down."""
    boxes = [b for b in boxes if not b.is_empty]
    if not boxes:
        return
    bounds = np.array([b.bounds for b in boxes])
    minx, miny = bounds[:, 0].min(), bounds[:, 1].min()
    maxx, maxy = bounds[:, 2].max(), bounds[:, 3].max()
    dx = max(1.0, (maxx - minx) * pad_frac)
    dy = max(1.0, (maxy - miny) * pad_frac)
    ax.set_xlim(minx - dx, maxx + dx)
    ax.set_ylim(maxy + dy, miny - dy)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")


def _outline(ax: plt.Axes, geom: Polygon, **kwargs: Any) -> None:
    if geom is None or geom.is_empty:
        return
    xy = np.array(geom.exterior.coords)
    ax.plot(xy[:, 0], xy[:, 1], **kwargs)


def _fill(ax: plt.Axes, geom: Polygon, **kwargs: Any) -> None:
    if geom is None or geom.is_empty:
        return
    xy = np.array(geom.exterior.coords)
    ax.fill(xy[:, 0], xy[:, 1], **kwargs)


def render_debug(
    result: PlacementResult,
    tooltip: Any,
    origin: Any,
    provider: GeometryProvider,
    output_path: str | Path,
    boundary: Any = None,
    gap: float = GAP_PX,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    scale: int = 1,
) -> None:
    """
    Render debug overlay. Candidates that overflow are drawn dashed red, fitting ones dashed green,
    the chosen offset filled. scale multiplies output resolution (1x, 2x, 4x).
    """
    w, h = width_px * scale, height_px * scale
    fig = plt.figure(figsize=(w / 100.0, h / 100.0), dpi=100, constrained_layout=False)
    # Leave bottom margin so legend does not overlap the image
    ax = fig.add_axes([0.05, 0.08, 0.9, 0.88])
    ax.axis("off")

    area_box = rect_to_box(boundary_area(provider, boundary))
    anchor_box = rect_to_box(position(origin, provider))
    _fill(ax, area_box, facecolor="whitesmoke", edgecolor="gray", linewidth=1, label="boundary")
    _fill(ax, anchor_box, facecolor="lightblue", edgecolor="navy", linewidth=1, label="anchor")

    drawn = [area_box, anchor_box]
    for direction in all_directions():
        offset = place_offset(direction, tooltip, origin, provider, gap=gap)
        cand_box = rect_to_box(offset)
        fits = not over_dirs(offset, provider, boundary=boundary)
        _outline(ax, cand_box, linestyle="--", linewidth=1, color="green" if fits else "red")
        if not cand_box.is_empty:
            c = cand_box.centroid
            ax.text(c.x, c.y, direction, fontsize=7, ha="center", va="center", color="dimgray")
        drawn.append(cand_box)

    chosen = rect_to_box(result.offset)
    _fill(ax, chosen, facecolor="gold", edgecolor="black", linewidth=2, alpha=0.8, label=f"chosen ({result.place})")

    set_axes_to_boxes(ax, drawn, pad_frac=0.05)
    leg = ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.02), ncol=3, fontsize=8)
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=100, facecolor="white", bbox_inches="tight", bbox_extra_artists=[leg])
    plt.close(fig)
