"""
Single entrypoint to verify the layout end-to-end with default inputs:
sample word list, default viewport and options, run_name='smoke'.
Does not run on import.
"""

from __future__ import annotations

from pathlib import Path

from wordcloud_layout.core.config import (
    DEFAULT_WORDS_PATH,
    SEED,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
)
from wordcloud_layout.core.io import load_words
from wordcloud_layout.core.layout import run_word_cloud_layout
from wordcloud_layout.core.render import render_layout_debug
from wordcloud_layout.core.reporting import (
    ensure_report_dir,
    write_layout_json,
    write_run_metadata_json,
)
from wordcloud_layout.core.types import LayoutOptions
from wordcloud_layout.core.validate import validate_layout


def main() -> None:
    """Lay out the sample words and write reports/smoke/."""
    repo_root = Path.cwd().resolve()
    words_path = (repo_root / DEFAULT_WORDS_PATH).resolve()
    if not words_path.exists():
        raise FileNotFoundError(f"Word file not found: {words_path}")

    words = load_words(words_path)
    options = LayoutOptions()
    result = run_word_cloud_layout(words, VIEWPORT_WIDTH, VIEWPORT_HEIGHT, options=options, seed=SEED)
    ok, overlaps = validate_layout(result.placed, result.field)
    if not ok:
        raise ValueError(f"Smoke layout invalid: {overlaps} overlapping pairs or word outside field.")

    report_dir = ensure_report_dir(repo_root, "smoke")
    write_layout_json(report_dir, result, DEFAULT_WORDS_PATH)
    write_run_metadata_json(
        report_dir,
        "smoke",
        DEFAULT_WORDS_PATH,
        VIEWPORT_WIDTH,
        VIEWPORT_HEIGHT,
        options,
        SEED,
    )
    render_layout_debug(result, report_dir / "debug.png")


if __name__ == "__main__":
    main()
