"""
Playing field and final scale. Layout math runs in a fixed-height field
proportioned to the viewport; one uniform scale maps the result back.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from wordcloud_layout.core.config import FIELD_BASE_HEIGHT
from wordcloud_layout.core.error_codes import INVALID_VIEWPORT, LayoutConfigError
from wordcloud_layout.core.types import PlayingField, Rect


def _check_viewport(target_width: float, target_height: float) -> None:
    if not (target_width > 0 and target_height > 0):
        raise LayoutConfigError(INVALID_VIEWPORT, f"{target_width} x {target_height}")


def compute_field(target_width: float, target_height: float) -> PlayingField:
    """Field of height FIELD_BASE_HEIGHT with the viewport's aspect ratio."""
    _check_viewport(target_width, target_height)
    ratio = target_width / target_height
    return PlayingField(width=FIELD_BASE_HEIGHT * ratio, height=FIELD_BASE_HEIGHT)


def occupied_bounds(rects: Iterable[Rect]) -> Rect:
    """Tight bounding box over rects. Raises ValueError when rects is empty."""
    arr = np.array([(r.left, r.top, r.right, r.bottom) for r in rects], dtype=float)
    if arr.size == 0:
        raise ValueError("occupied_bounds needs at least one rect")
    left, top = arr[:, 0].min(), arr[:, 1].min()
    right, bottom = arr[:, 2].max(), arr[:, 3].max()
    return Rect(left=float(left), top=float(top), width=float(right - left), height=float(bottom - top))


def compute_scale(target_width: float, target_height: float, occupied: Rect) -> float:
    """
    Largest uniform scale that fits the occupied area, mirrored around the
    origin, inside the viewport. An axis with zero extent does not bind.
    """
    _check_viewport(target_width, target_height)
    width = max(abs(occupied.left), abs(occupied.right)) * 2.0
    height = max(abs(occupied.top), abs(occupied.bottom)) * 2.0
    scales = []
    if width > 0:
        scales.append(target_width / width)
    if height > 0:
        scales.append(target_height / height)
    return min(scales) if scales else 1.0
