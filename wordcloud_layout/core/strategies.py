"""
Placement strategies: decide the initial position and rotation of a word
before collision resolution. A strategy gets the word and a PlacementContext
and returns one PlacementCandidate; it has no side effects.
To implement a custom strategy, look at random_placement.
"""

from __future__ import annotations

import math

import numpy as np

from wordcloud_layout.core.error_codes import (
    INVALID_ORIENTATIONS,
    UNKNOWN_PLACEMENT_STRATEGY,
    LayoutConfigError,
)
from wordcloud_layout.core.types import (
    PlacementCandidate,
    PlacementContext,
    PlacementStrategy,
    Word,
)


def get_random_position(size: float, rng: np.random.Generator) -> int:
    """Random coordinate in [size/4, 3*size/4), rounded half up."""
    return math.floor((size * (float(rng.random()) + 0.5)) / 2.0 + 0.5)


def get_rotation(
    orientations: int,
    from_deg: float,
    to_deg: float,
    rng: np.random.Generator,
) -> float:
    """
    One of `orientations` evenly spaced angles in [from_deg, to_deg], picked uniformly.
    A single orientation is pinned to from_deg.
    """
    if orientations < 1:
        raise LayoutConfigError(INVALID_ORIENTATIONS, f"got {orientations}")
    if orientations == 1:
        return float(from_deg)
    interval = (to_deg - from_deg) / (orientations - 1)
    orientation = int(rng.integers(0, orientations))
    return float(from_deg + orientation * interval)


def random_placement(word: Word, context: PlacementContext) -> PlacementCandidate:
    field = context.field
    r = context.rotation
    return PlacementCandidate(
        x=get_random_position(field.width, context.rng) - field.width / 2.0,
        y=get_random_position(field.height, context.rng) - field.height / 2.0,
        rotation_deg=get_rotation(r.orientations, r.from_deg, r.to_deg, context.rng),
    )


def center_placement(word: Word, context: PlacementContext) -> PlacementCandidate:
    """Start every word at the field center; the spiral spreads them out."""
    r = context.rotation
    return PlacementCandidate(
        x=0.0,
        y=0.0,
        rotation_deg=get_rotation(r.orientations, r.from_deg, r.to_deg, context.rng),
    )


STRATEGIES: dict[str, PlacementStrategy] = {
    "random": random_placement,
    "center": center_placement,
}


def get_strategy(
    name: str,
    registry: dict[str, PlacementStrategy] | None = None,
) -> PlacementStrategy:
    """Look up a placement strategy by name; registry entries extend or override the defaults."""
    strategies = {**STRATEGIES, **(registry or {})}
    try:
        return strategies[name]
    except KeyError:
        raise LayoutConfigError(
            UNKNOWN_PLACEMENT_STRATEGY, f"{name!r}; known: {', '.join(sorted(strategies))}"
        ) from None
