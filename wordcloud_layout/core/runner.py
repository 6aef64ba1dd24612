# wordcloud_layout/core/runner.py
"""
CLI entrypoint: load a word list, run the layout, write layout.json,
run_metadata.json and an optional debug preview. --batch-dir lays out every
word file in a directory instead.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from wordcloud_layout.core.config import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_PLACEMENT_STRATEGY,
    DEFAULT_SPIRAL,
    DEFAULT_WORDS_PATH,
    LOG_LEVEL,
    MAX_FONT_SIZE,
    REPORTS_DIR,
    ROTATION_FROM_DEG,
    ROTATION_ORIENTATIONS,
    ROTATION_TO_DEG,
    SEED,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
)
from wordcloud_layout.core.error_codes import NO_WORDS, LayoutConfigError, user_message
from wordcloud_layout.core.io import load_words
from wordcloud_layout.core.layout import run_word_cloud_layout
from wordcloud_layout.core.reporting import (
    ensure_report_dir,
    write_layout_json,
    write_run_metadata_json,
)
from wordcloud_layout.core.types import LayoutOptions, RotationOptions

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Word-cloud layout: place weighted words without overlap.")
    p.add_argument("--words", type=str, default=DEFAULT_WORDS_PATH, help="Word list (.csv, .json or text), repo-relative")
    p.add_argument("--width", type=float, default=VIEWPORT_WIDTH, help="Target viewport width")
    p.add_argument("--height", type=float, default=VIEWPORT_HEIGHT, help="Target viewport height")
    p.add_argument("--font-family", type=str, default=DEFAULT_FONT_FAMILY, dest="font_family", help="Font family")
    p.add_argument("--max-font-size", type=float, default=MAX_FONT_SIZE, dest="max_font_size", help="Font size of the heaviest word")
    p.add_argument("--strategy", type=str, default=DEFAULT_PLACEMENT_STRATEGY, help="Placement strategy name")
    p.add_argument("--spiral", type=str, default=DEFAULT_SPIRAL, help="Spiral name")
    p.add_argument("--rotation-from", type=float, default=ROTATION_FROM_DEG, dest="rotation_from", help="First rotation (deg)")
    p.add_argument("--rotation-to", type=float, default=ROTATION_TO_DEG, dest="rotation_to", help="Last rotation (deg)")
    p.add_argument("--orientations", type=int, default=ROTATION_ORIENTATIONS, help="Number of rotations")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--seed", type=int, default=SEED, help="Random seed")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--debug-png", action="store_true", dest="debug_png", help="Also write debug.png preview")
    p.add_argument("--batch-dir", type=str, default=None, dest="batch_dir", help="Batch mode: directory of word files")
    p.add_argument("--batch-limit", type=int, default=None, dest="batch_limit", help="Max cases in batch")
    return p.parse_args(argv)


def _options_from_args(args: argparse.Namespace) -> LayoutOptions:
    return LayoutOptions(
        font_family=args.font_family,
        placement_strategy=args.strategy,
        spiral=args.spiral,
        rotation=RotationOptions(
            from_deg=args.rotation_from,
            to_deg=args.rotation_to,
            orientations=args.orientations,
        ),
        max_font_size=args.max_font_size,
    )


def run(args: argparse.Namespace) -> list[Path]:
    """Run one layout (or a batch) from parsed args; return written paths."""
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()
    options = _options_from_args(args)

    if args.batch_dir:
        from wordcloud_layout.core.batch import run_batch
        out = run_batch(
            run_name=args.run_name,
            batch_dir=Path(args.batch_dir),
            viewport_width=args.width,
            viewport_height=args.height,
            options=options,
            limit=args.batch_limit,
            repo_root=repo_root,
            output_dir=args.output_dir,
            seed=args.seed,
            render_debug=args.debug_png,
        )
        return [out / "index.csv"]

    words = load_words(args.words, repo_root=repo_root)
    if not words:
        logger.warning(user_message(NO_WORDS))
    result = run_word_cloud_layout(words, args.width, args.height, options=options, seed=args.seed)
    for w in result.warnings:
        logger.warning(w)

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    paths = [
        write_layout_json(report_dir, result, args.words),
        write_run_metadata_json(report_dir, args.run_name, args.words, args.width, args.height, options, args.seed),
    ]
    if args.debug_png:
        from wordcloud_layout.core.render import render_layout_debug
        debug_path = report_dir / "debug.png"
        render_layout_debug(result, debug_path)
        paths.append(debug_path)
    return paths


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format="%(levelname)s %(name)s: %(message)s")
    try:
        paths = run(args)
    except LayoutConfigError as exc:
        logger.error("%s", exc)
        return 2
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    for p in paths:
        print(p)
    return 0


if __name__ == "__main__":
    sys.exit(main())
