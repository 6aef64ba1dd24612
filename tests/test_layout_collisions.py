"""
Placement engine: words placed heaviest first, no placed pair overlapping,
every placed word inside the field, spiral retries and discards.
Fake measurers return fixed-size boxes so runs are deterministic and fast.
"""

from __future__ import annotations

import pytest

from wordcloud_layout.core.error_codes import (
    INVALID_ORIENTATIONS,
    INVALID_VIEWPORT,
    UNKNOWN_PLACEMENT_STRATEGY,
    LayoutConfigError,
)
from wordcloud_layout.core.field import compute_scale
from wordcloud_layout.core.geometry import intersects, rect_from_center
from wordcloud_layout.core.layout import run_word_cloud_layout
from wordcloud_layout.core.strategies import random_placement
from wordcloud_layout.core.types import (
    LayoutOptions,
    PlacementCandidate,
    PlacementContext,
    Rect,
    RotationOptions,
    SpiralOffset,
    Word,
)
from wordcloud_layout.core.validate import find_overlaps, validate_layout

CENTER = LayoutOptions(placement_strategy="center")


def box_measurer(
    text: str, x: float, y: float, font_size: float, font_family: str, rotation_deg: float
) -> Rect:
    return rect_from_center(x, y, 10.0, 5.0)


def scaled_measurer(
    text: str, x: float, y: float, font_size: float, font_family: str, rotation_deg: float
) -> Rect:
    return rect_from_center(x, y, 0.6 * font_size * len(text), float(font_size))


def runaway_spiral(attempt: int) -> SpiralOffset:
    """Leaves the field after one step and passes the size bound after two."""
    return SpiralOffset(x=attempt * 1e5, y=attempt * 1e5)


def test_empty_word_list() -> None:
    result = run_word_cloud_layout([], 800, 600, measure=box_measurer)
    assert result.placed == []
    assert result.discarded == []
    assert result.scale is None


def test_single_word_no_spiral_attempts() -> None:
    result = run_word_cloud_layout([Word("solo", 5.0)], 800, 600, measure=box_measurer, seed=1)
    assert len(result.placed) == 1
    placed = result.placed[0]
    assert placed.attempts == 0
    assert placed.relative_weight == 1.0
    assert result.scale == pytest.approx(compute_scale(800, 600, placed.rect))


def test_single_word_at_center_scale_and_viewport_position() -> None:
    result = run_word_cloud_layout([Word("solo", 5.0)], 800, 600, measure=box_measurer, options=CENTER)
    placed = result.placed[0]
    assert (placed.x, placed.y) == (0.0, 0.0)
    # Occupied 10 x 5 around the origin.
    assert result.scale == pytest.approx(min(800 / 10, 600 / 5))
    assert result.viewport_position(placed) == (400.0, 300.0)


def test_forced_collision_moves_second_word_along_spiral() -> None:
    words = [Word("heavy", 10.0), Word("light", 1.0)]
    result = run_word_cloud_layout(words, 800, 600, measure=box_measurer, options=CENTER)
    assert [p.name for p in result.placed] == ["heavy", "light"]
    first, second = result.placed
    assert first.attempts == 0
    assert second.attempts > 0
    assert (second.x, second.y) != (0.0, 0.0)
    assert not intersects(first.rect, second.rect)
    assert second.rect.left + second.rect.width / 2.0 == pytest.approx(second.x)
    assert second.last_collided_with is None


def test_relative_weights_and_processing_order() -> None:
    words = [Word("b", 2.0), Word("d", 8.0), Word("a", 4.0), Word("c", 1.0)]
    result = run_word_cloud_layout(words, 800, 600, measure=box_measurer, seed=3)
    weights = [p.weight for p in result.placed]
    assert weights == sorted(weights, reverse=True)
    assert result.placed[0].relative_weight == 1.0
    for p in result.placed:
        assert 0.0 <= p.relative_weight <= 1.0
        assert p.relative_weight == pytest.approx(p.weight / 8.0)


def test_equal_weights_keep_input_order() -> None:
    words = [Word(n, 3.0) for n in ("one", "two", "three", "four")]
    result = run_word_cloud_layout(words, 800, 600, measure=box_measurer, options=CENTER)
    assert [p.name for p in result.placed] == ["one", "two", "three", "four"]
    assert all(p.relative_weight == 1.0 for p in result.placed)


def test_zero_weights_give_zero_relative_weight() -> None:
    words = [Word("x", 0.0), Word("y", 0.0)]
    result = run_word_cloud_layout(words, 800, 600, measure=box_measurer, options=CENTER)
    assert [p.relative_weight for p in result.placed] == [0.0, 0.0]
    assert [p.font_size for p in result.placed] == [0, 0]


def test_many_words_no_overlap_and_inside_field() -> None:
    words = [Word(f"w{i:02d}", float(20 - i)) for i in range(20)]
    result = run_word_cloud_layout(words, 800, 600, measure=scaled_measurer, seed=42)
    assert len(result.placed) == 20
    assert find_overlaps(result.placed) == []
    ok, overlaps = validate_layout(result.placed, result.field)
    assert ok is True and overlaps == 0


def test_square_spiral_no_overlap() -> None:
    words = [Word(f"w{i:02d}", float(12 - i)) for i in range(12)]
    options = LayoutOptions(spiral="square")
    result = run_word_cloud_layout(words, 600, 600, measure=scaled_measurer, options=options, seed=5)
    assert find_overlaps(result.placed) == []
    assert validate_layout(result.placed, result.field)[0] is True


def test_same_seed_same_layout() -> None:
    words = [Word(f"w{i}", float(i + 1)) for i in range(8)]
    a = run_word_cloud_layout(words, 800, 600, measure=scaled_measurer, seed=9)
    b = run_word_cloud_layout(words, 800, 600, measure=scaled_measurer, seed=9)
    assert [(p.name, p.x, p.y, p.rotation_deg) for p in a.placed] == [
        (p.name, p.x, p.y, p.rotation_deg) for p in b.placed
    ]


def test_single_orientation_rotation_fixed() -> None:
    options = LayoutOptions(rotation=RotationOptions(from_deg=30, to_deg=60, orientations=1))
    words = [Word(f"w{i}", float(i + 1)) for i in range(6)]
    result = run_word_cloud_layout(words, 800, 600, measure=box_measurer, options=options)
    assert {p.rotation_deg for p in result.placed} == {30.0}


def test_word_colliding_until_bound_is_discarded() -> None:
    released: list[str] = []
    words = [Word("first", 10.0), Word("blocked", 1.0)]
    result = run_word_cloud_layout(
        words,
        800,
        600,
        measure=box_measurer,
        release=lambda w: released.append(w.name),
        options=LayoutOptions(placement_strategy="center", spiral="runaway"),
        spirals={"runaway": runaway_spiral},
    )
    assert [p.name for p in result.placed] == ["first"]
    assert [w.name for w in result.discarded] == ["blocked"]
    assert released == ["blocked"]
    assert result.warnings
    # Scale comes from the placed word only.
    assert result.scale == pytest.approx(min(800 / 10, 600 / 5))


def test_word_larger_than_field_is_discarded() -> None:
    def measurer(text: str, x: float, y: float, font_size: float, font_family: str, rotation_deg: float) -> Rect:
        size = 1000.0 if text == "huge" else 10.0
        return rect_from_center(x, y, size, size)

    words = [Word("huge", 10.0), Word("small", 1.0)]
    result = run_word_cloud_layout(
        words,
        800,
        600,
        measure=measurer,
        options=LayoutOptions(spiral="runaway"),
        spirals={"runaway": runaway_spiral},
    )
    assert [p.name for p in result.placed] == ["small"]
    assert [w.name for w in result.discarded] == ["huge"]
    assert result.placed[0].relative_weight == pytest.approx(0.1)


def test_strategy_called_once_per_word() -> None:
    calls: list[str] = []

    def counting(word: Word, context: PlacementContext) -> PlacementCandidate:
        calls.append(word.name)
        return random_placement(word, context)

    words = [Word("a", 3.0), Word("b", 2.0), Word("c", 1.0)]
    run_word_cloud_layout(
        words,
        800,
        600,
        measure=box_measurer,
        options=LayoutOptions(placement_strategy="counting"),
        strategies={"counting": counting},
    )
    assert calls == ["a", "b", "c"]


def test_unknown_strategy_raises() -> None:
    with pytest.raises(LayoutConfigError) as exc_info:
        run_word_cloud_layout(
            [Word("a", 1.0)], 800, 600, measure=box_measurer,
            options=LayoutOptions(placement_strategy="nope"),
        )
    assert exc_info.value.error_key == UNKNOWN_PLACEMENT_STRATEGY


def test_invalid_orientations_raises() -> None:
    options = LayoutOptions(rotation=RotationOptions(orientations=0))
    with pytest.raises(LayoutConfigError) as exc_info:
        run_word_cloud_layout([Word("a", 1.0)], 800, 600, measure=box_measurer, options=options)
    assert exc_info.value.error_key == INVALID_ORIENTATIONS


def test_zero_viewport_raises() -> None:
    with pytest.raises(LayoutConfigError) as exc_info:
        run_word_cloud_layout([Word("a", 1.0)], 0, 600, measure=box_measurer)
    assert exc_info.value.error_key == INVALID_VIEWPORT
