"""
Matplotlib PNG preview of a layout: playing field outline, occupied rects and
word labels in field coordinates. Debug aid only; hosts render the real cloud.
"""

from __future__ import annotations

import warnings
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from wordcloud_layout.core.config import RENDER_HEIGHT_PX, RENDER_WIDTH_PX
from wordcloud_layout.core.geometry import field_rect
from wordcloud_layout.core.types import LayoutResult, Rect


def _new_fig(width_px: int, height_px: int) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(
        figsize=(width_px / 100.0, height_px / 100.0),
        dpi=100,
        constrained_layout=False,
    )
    ax = fig.add_axes([0, 0, 1, 1])  # full-canvas axes
    ax.axis("off")
    return fig, ax


def _draw_rect(ax: plt.Axes, rect: Rect, edgecolor: str, linewidth: float = 0.8) -> None:
    xs = np.array([rect.left, rect.right, rect.right, rect.left, rect.left])
    ys = np.array([rect.top, rect.top, rect.bottom, rect.bottom, rect.top])
    ax.plot(xs, ys, color=edgecolor, linewidth=linewidth)


def render_layout_debug(
    result: LayoutResult,
    output_path: str | Path,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
) -> None:
    """Field in gray, each placed word's rect in red with its name at the final position."""
    fig, ax = _new_fig(width_px, height_px)
    bounds = field_rect(result.field)
    _draw_rect(ax, bounds, edgecolor="gray", linewidth=1.0)
    for p in result.placed:
        _draw_rect(ax, p.rect, edgecolor="red")
        ax.text(
            p.x,
            p.y,
            p.name,
            fontsize=max(1.0, p.font_size * 0.5),
            rotation=-p.rotation_deg,
            ha="center",
            va="center",
            color="navy",
        )
    pad = 0.05 * max(bounds.width, bounds.height)
    ax.set_xlim(bounds.left - pad, bounds.right + pad)
    # Field y grows downward.
    ax.set_ylim(bounds.bottom + pad, bounds.top - pad)
    ax.set_aspect("equal", adjustable="box")
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=100, facecolor="white")
    plt.close(fig)
