"""
Playing field and scale: aspect ratio, occupied bounds, min of axis scales.
"""

from __future__ import annotations

import pytest

from wordcloud_layout.core.error_codes import INVALID_VIEWPORT, LayoutConfigError
from wordcloud_layout.core.field import compute_field, compute_scale, occupied_bounds
from wordcloud_layout.core.types import Rect


def test_compute_field_matches_aspect_ratio() -> None:
    field = compute_field(800, 600)
    assert field.height == 256
    assert field.width == pytest.approx(256 * 800 / 600)


def test_compute_field_square_viewport() -> None:
    field = compute_field(500, 500)
    assert field.width == field.height == 256


@pytest.mark.parametrize("w,h", [(0, 600), (800, 0), (-1, 600)])
def test_compute_field_invalid_viewport(w: float, h: float) -> None:
    with pytest.raises(LayoutConfigError) as exc_info:
        compute_field(w, h)
    assert exc_info.value.error_key == INVALID_VIEWPORT


def test_occupied_bounds_tight_box() -> None:
    rects = [
        Rect(left=-10, top=-5, width=4, height=4),
        Rect(left=3, top=2, width=10, height=8),
    ]
    box = occupied_bounds(rects)
    assert (box.left, box.top, box.right, box.bottom) == (-10, -5, 13, 10)


def test_occupied_bounds_empty() -> None:
    with pytest.raises(ValueError):
        occupied_bounds([])


def test_compute_scale_symmetric_bounds() -> None:
    occupied = Rect(left=-50, top=-20, width=100, height=40)
    assert compute_scale(800, 600, occupied) == min(800 / 100, 600 / 40)


def test_compute_scale_mirrors_largest_extent() -> None:
    # Extents are taken around the origin: width 2*50, height 2*35.
    occupied = Rect(left=-10, top=-5, width=60, height=40)
    assert compute_scale(800, 600, occupied) == min(800 / 100, 600 / 70)


def test_compute_scale_height_binds() -> None:
    occupied = Rect(left=-10, top=-100, width=20, height=200)
    assert compute_scale(800, 600, occupied) == 600 / 200


def test_compute_scale_degenerate_axis() -> None:
    occupied = Rect(left=-10, top=0, width=20, height=0)
    assert compute_scale(800, 600, occupied) == 800 / 20
    assert compute_scale(800, 600, Rect(left=0, top=0, width=0, height=0)) == 1.0
