# wordcloud_layout/core/layout.py
"""
Word-cloud placement engine.
Places words heaviest first: initial candidate from the placement strategy,
then nudged along the spiral until it neither collides with a placed word nor
leaves the playing field, or the spiral grows past the field bound and the
word is discarded. Finally computes one uniform scale for the whole group.
"""

from __future__ import annotations

import logging

import numpy as np

from wordcloud_layout.core.collision import collides_with_any
from wordcloud_layout.core.config import SEED
from wordcloud_layout.core.error_codes import WORDS_DISCARDED, user_message
from wordcloud_layout.core.field import compute_field, compute_scale, occupied_bounds
from wordcloud_layout.core.geometry import outside_playing_field, translate_rect
from wordcloud_layout.core.spirals import get_spiral
from wordcloud_layout.core.strategies import get_rotation, get_strategy
from wordcloud_layout.core.text_metrics import derive_font_size, pillow_measurer
from wordcloud_layout.core.types import (
    LayoutOptions,
    LayoutResult,
    PlacedWord,
    PlacementContext,
    PlacementStrategy,
    ReleaseHook,
    Spiral,
    SpiralOffset,
    TextMeasurer,
    Word,
)

logger = logging.getLogger(__name__)


def _order_words_by_weight(words: list[Word]) -> list[Word]:
    """Heaviest first; sorted() is stable so ties keep input order."""
    return sorted(words, key=lambda w: -w.weight)


def _relative_weight(weight: float, max_weight: float) -> float:
    if max_weight <= 0:
        return 0.0
    return weight / max_weight


def run_word_cloud_layout(
    words: list[Word],
    target_width: float,
    target_height: float,
    measure: TextMeasurer | None = None,
    release: ReleaseHook | None = None,
    options: LayoutOptions | None = None,
    seed: int | None = SEED,
    strategies: dict[str, PlacementStrategy] | None = None,
    spirals: dict[str, Spiral] | None = None,
) -> LayoutResult:
    """
    Lay out words in a playing field matching the target aspect ratio.
    measure renders a word and returns its occupied rect (default: Pillow metrics);
    release is called for every discarded word.
    Raises LayoutConfigError for a non-positive viewport, unknown strategy or
    spiral name, or fewer than one rotation orientation.
    """
    opts = options or LayoutOptions()
    measure_fn: TextMeasurer = measure or pillow_measurer
    field = compute_field(target_width, target_height)
    placement_strategy = get_strategy(opts.placement_strategy, strategies)
    spiral = get_spiral(opts.spiral, spirals)
    rng = np.random.default_rng(seed)
    # Fail on bad rotation config before any word is measured.
    get_rotation(opts.rotation.orientations, opts.rotation.from_deg, opts.rotation.to_deg, np.random.default_rng(0))

    if not words:
        return LayoutResult(
            field=field,
            viewport_width=target_width,
            viewport_height=target_height,
            placed=[],
            discarded=[],
            scale=None,
        )

    ordered = _order_words_by_weight(words)
    max_weight = max(w.weight for w in ordered)
    # Compared against min(|dx|, |dy|) below, so this is a loose bound.
    max_delta = field.width * field.width + field.height * field.height
    placed: list[PlacedWord] = []
    discarded: list[Word] = []
    context = PlacementContext(
        field=field,
        placed=placed,
        rotation=opts.rotation,
        words=ordered,
        rng=rng,
    )

    for word in ordered:
        relative_weight = _relative_weight(word.weight, max_weight)
        font_size = derive_font_size(relative_weight, opts.max_font_size)
        candidate = placement_strategy(word, context)
        client_rect = measure_fn(
            word.name, candidate.x, candidate.y, font_size, opts.font_family, candidate.rotation_deg
        )
        current = PlacedWord(
            word=word,
            x=candidate.x,
            y=candidate.y,
            rotation_deg=candidate.rotation_deg,
            rect=client_rect,
            relative_weight=relative_weight,
            font_size=font_size,
            font_family=opts.font_family,
        )

        attempt = 0
        delta = SpiralOffset(x=0.0, y=0.0)
        spiral_is_smallish = True
        while (
            collides_with_any(current, placed) or outside_playing_field(current.rect, field)
        ) and spiral_is_smallish:
            delta = spiral(attempt)
            current.rect = translate_rect(client_rect, delta.x, delta.y)
            spiral_is_smallish = min(abs(delta.x), abs(delta.y)) < max_delta
            attempt += 1

        if spiral_is_smallish:
            current.x = candidate.x + delta.x
            current.y = candidate.y + delta.y
            current.attempts = attempt
            placed.append(current)
        else:
            logger.debug("Discarded %r after %d spiral attempts", word.name, attempt)
            current.last_collided_with = None
            if release is not None:
                release(word)
            discarded.append(word)

    scale = None
    if placed:
        scale = compute_scale(target_width, target_height, occupied_bounds(p.rect for p in placed))

    warnings: list[str] = []
    if discarded:
        warnings.append(f"{user_message(WORDS_DISCARDED)} Dropped: {len(discarded)}.")
    logger.info(
        "Word cloud layout: placed %d of %d words, scale=%s",
        len(placed),
        len(ordered),
        f"{scale:.4f}" if scale is not None else "n/a",
    )
    return LayoutResult(
        field=field,
        viewport_width=target_width,
        viewport_height=target_height,
        placed=placed,
        discarded=discarded,
        scale=scale,
        warnings=warnings,
    )
