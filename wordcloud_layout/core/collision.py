"""
Collision query of a word against already placed words.
Remembers the last word it collided with; consecutive spiral steps tend to
hit the same neighbour, so that one is tested before the full scan.
"""

from __future__ import annotations

from wordcloud_layout.core.geometry import intersects
from wordcloud_layout.core.types import PlacedWord


def collides_with_any(candidate: PlacedWord, placed: list[PlacedWord]) -> bool:
    """
    True if candidate.rect intersects any rect in placed.
    Sets candidate.last_collided_with on a scan hit; clears it once that pair
    no longer intersects.
    """
    cached = candidate.last_collided_with
    if cached is not None:
        if intersects(candidate.rect, cached.rect):
            return True
        candidate.last_collided_with = None
    for other in placed:
        if intersects(candidate.rect, other.rect):
            candidate.last_collided_with = other
            return True
    return False
