"""
Geometry helpers: rectangle intersection, translation, rotated bounds,
playing-field containment.
"""

from __future__ import annotations

import math

from shapely.geometry import Polygon

from wordcloud_layout.core.types import PlayingField, Rect


def intersects(r1: Rect, r2: Rect) -> bool:
    """True unless the rectangles are separated along either axis. Touching counts."""
    return not (
        r2.left > r1.right
        or r2.right < r1.left
        or r2.top > r1.bottom
        or r2.bottom < r1.top
    )


def translate_rect(rect: Rect, dx: float, dy: float) -> Rect:
    return Rect(left=rect.left + dx, top=rect.top + dy, width=rect.width, height=rect.height)


def rect_from_center(x: float, y: float, width: float, height: float) -> Rect:
    return Rect(left=x - width / 2.0, top=y - height / 2.0, width=width, height=height)


def oriented_rectangle(
    cx: float, cy: float, width: float, height: float, angle_deg: float
) -> Polygon:
    """
    Rectangle centered at (cx, cy) with given width/height,
    rotated by angle_deg around its center.
    """
    hw = width / 2.0
    hh = height / 2.0
    rad = math.radians(angle_deg)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    corners = [
        (-hw, -hh),
        (hw, -hh),
        (hw, hh),
        (-hw, hh),
    ]
    rotated = [
        (cx + x * cos_a - y * sin_a, cy + x * sin_a + y * cos_a)
        for x, y in corners
    ]
    return Polygon(rotated)


def rotated_bounds(
    cx: float, cy: float, width: float, height: float, angle_deg: float
) -> Rect:
    """Axis-aligned bounding box of a rotated width x height box centered at (cx, cy)."""
    if width <= 0 or height <= 0:
        return rect_from_center(cx, cy, max(0.0, width), max(0.0, height))
    minx, miny, maxx, maxy = oriented_rectangle(cx, cy, width, height, angle_deg).bounds
    return Rect(left=float(minx), top=float(miny), width=float(maxx - minx), height=float(maxy - miny))


def field_rect(field: PlayingField) -> Rect:
    """The playing field as a rect centered on the origin."""
    return rect_from_center(0.0, 0.0, field.width, field.height)


def outside_playing_field(rect: Rect, field: PlayingField) -> bool:
    """True unless rect lies strictly inside the field on all four sides."""
    bounds = field_rect(field)
    return not (
        bounds.left < rect.left
        and bounds.right > rect.right
        and bounds.top < rect.top
        and bounds.bottom > rect.bottom
    )
