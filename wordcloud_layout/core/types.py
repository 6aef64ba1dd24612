"""
Dataclasses for words, rectangles, placement candidates and layout results.
Field coordinates are centered on the origin; y grows downward.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Protocol

from wordcloud_layout.core.config import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_PLACEMENT_STRATEGY,
    DEFAULT_SPIRAL,
    MAX_FONT_SIZE,
    ROTATION_FROM_DEG,
    ROTATION_ORIENTATIONS,
    ROTATION_TO_DEG,
)

if TYPE_CHECKING:
    import numpy as np


@dataclass(frozen=True)
class Word:
    """Input word. Weights are expected to be >= 0."""
    name: str
    weight: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box: left/top corner plus size."""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class PlayingField:
    """Working coordinate space, centered on the origin."""
    width: float
    height: float


@dataclass(frozen=True)
class SpiralOffset:
    x: float
    y: float


@dataclass(frozen=True)
class PlacementCandidate:
    """Initial center position (field units) and rotation for a word."""
    x: float
    y: float
    rotation_deg: float


@dataclass(eq=False)
class PlacedWord:
    """
    A word being placed (while spiraling) or accepted (in LayoutResult.placed).
    last_collided_with caches the most recent placed word it hit; only
    collides_with_any writes it.
    """
    word: Word
    x: float
    y: float
    rotation_deg: float
    rect: Rect
    relative_weight: float
    font_size: float
    font_family: str
    attempts: int = 0
    last_collided_with: PlacedWord | None = field(default=None, repr=False)

    @property
    def name(self) -> str:
        return self.word.name

    @property
    def weight(self) -> float:
        return self.word.weight


@dataclass(frozen=True)
class RotationOptions:
    from_deg: float = ROTATION_FROM_DEG
    to_deg: float = ROTATION_TO_DEG
    orientations: int = ROTATION_ORIENTATIONS


@dataclass(frozen=True)
class LayoutOptions:
    """Recognized layout options; strategy and spiral are registry keys."""
    font_family: str = DEFAULT_FONT_FAMILY
    placement_strategy: str = DEFAULT_PLACEMENT_STRATEGY
    spiral: str = DEFAULT_SPIRAL
    rotation: RotationOptions = field(default_factory=RotationOptions)
    max_font_size: float = MAX_FONT_SIZE


@dataclass
class PlacementContext:
    """What a placement strategy may look at. Strategies must not mutate it."""
    field: PlayingField
    placed: list[PlacedWord]
    rotation: RotationOptions
    words: list[Word]
    rng: np.random.Generator


Spiral = Callable[[int], SpiralOffset]
PlacementStrategy = Callable[[Word, PlacementContext], PlacementCandidate]
ReleaseHook = Callable[[Word], None]


class TextMeasurer(Protocol):
    def __call__(
        self,
        text: str,
        x: float,
        y: float,
        font_size: float,
        font_family: str,
        rotation_deg: float,
    ) -> Rect: ...


@dataclass
class LayoutResult:
    """Output of one layout run. scale is None when nothing was placed."""
    field: PlayingField
    viewport_width: float
    viewport_height: float
    placed: list[PlacedWord]
    discarded: list[Word]
    scale: float | None
    warnings: list[str] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.placed)

    def viewport_position(self, placed_word: PlacedWord) -> tuple[float, float]:
        """Group transform: field origin to viewport center, then uniform scale."""
        s = self.scale if self.scale is not None else 1.0
        return (
            self.viewport_width / 2.0 + placed_word.x * s,
            self.viewport_height / 2.0 + placed_word.y * s,
        )
