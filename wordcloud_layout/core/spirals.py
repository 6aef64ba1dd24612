"""
Spirals used to move a word after its initial position collided with another
word or the field border. A spiral maps an attempt counter to an offset from
the initial position; the offset grows without bound as attempts increase.
To add a custom spiral, pass it to get_spiral (or the layout engine) under a new name.
"""

from __future__ import annotations

import math

from wordcloud_layout.core.config import ARCHIMEDEAN_STEP, SQUARE_SPIRAL_STEP
from wordcloud_layout.core.error_codes import UNKNOWN_SPIRAL, LayoutConfigError
from wordcloud_layout.core.types import Spiral, SpiralOffset


def archimedean_spiral(attempt: int) -> SpiralOffset:
    """Point on an Archimedean spiral, t = attempt * ARCHIMEDEAN_STEP."""
    t = attempt * ARCHIMEDEAN_STEP
    return SpiralOffset(x=t * math.cos(t), y=t * math.sin(t))


def square_spiral(attempt: int) -> SpiralOffset:
    """
    Walk concentric square rings on a lattice, every fourth lattice index.
    Ring index k (Chebyshev radius / SQUARE_SPIRAL_STEP) never decreases.
    """
    if attempt <= 0:
        return SpiralOffset(x=0.0, y=0.0)
    a = attempt * 4
    k = math.ceil((math.sqrt(a) - 1) / 2)
    side = 2 * k
    m = (2 * k + 1) ** 2
    if a >= m - side:
        x, y = k - (m - a), -k
    else:
        m -= side
        if a >= m - side:
            x, y = -k, -k + (m - a)
        else:
            m -= side
            if a >= m - side:
                x, y = -k + (m - a), k
            else:
                x, y = k, k - (m - a - side)
    return SpiralOffset(x=x * SQUARE_SPIRAL_STEP, y=y * SQUARE_SPIRAL_STEP)


SPIRALS: dict[str, Spiral] = {
    "archimedean": archimedean_spiral,
    "square": square_spiral,
}


def get_spiral(name: str, registry: dict[str, Spiral] | None = None) -> Spiral:
    """Look up a spiral by name; registry entries extend or override the defaults."""
    spirals = {**SPIRALS, **(registry or {})}
    try:
        return spirals[name]
    except KeyError:
        raise LayoutConfigError(UNKNOWN_SPIRAL, f"{name!r}; known: {', '.join(sorted(spirals))}") from None
