"""
Post-hoc checks on a finished layout: every placed rect inside the playing
field, no two placed rects intersecting.
"""

from __future__ import annotations

from wordcloud_layout.core.geometry import intersects, outside_playing_field
from wordcloud_layout.core.types import PlacedWord, PlayingField, Rect


def rect_inside_field(rect: Rect, field: PlayingField) -> bool:
    """True if rect lies strictly inside the playing field."""
    return not outside_playing_field(rect, field)


def find_overlaps(placed: list[PlacedWord]) -> list[tuple[int, int]]:
    """
    Index pairs (i, j), i < j, of placed words whose rects intersect.
    Empty for any layout produced by the engine.
    """
    pairs: list[tuple[int, int]] = []
    for i in range(len(placed)):
        for j in range(i + 1, len(placed)):
            if intersects(placed[i].rect, placed[j].rect):
                pairs.append((i, j))
    return pairs


def validate_layout(placed: list[PlacedWord], field: PlayingField) -> tuple[bool, int]:
    """
    True if all placed rects are inside the field and none overlap.
    Also returns the number of overlapping pairs (overlaps_detected).
    """
    overlaps = len(find_overlaps(placed))
    inside = all(rect_inside_field(p.rect, field) for p in placed)
    return inside and overlaps == 0, overlaps
