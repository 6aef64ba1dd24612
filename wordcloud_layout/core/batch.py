# wordcloud_layout/core/batch.py
"""
Batch mode: one independent layout per word file in a directory.
Output: reports/batch_<run_name>/index.csv and cases/<case_id>/layout.json.
Cases share no state and may run concurrently; each layout stays sequential.
"""

from __future__ import annotations

import csv
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from wordcloud_layout.core.config import (
    BATCH_MAX_WORKERS,
    REPORTS_DIR,
    SEED,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
)
from wordcloud_layout.core.io import load_words
from wordcloud_layout.core.layout import run_word_cloud_layout
from wordcloud_layout.core.reporting import ensure_report_dir, write_layout_json, write_run_metadata_json
from wordcloud_layout.core.types import LayoutOptions, TextMeasurer

logger = logging.getLogger(__name__)

WORD_FILE_SUFFIXES: tuple[str, ...] = (".csv", ".json", ".txt")

INDEX_FIELDS: list[str] = [
    "case_id",
    "words_source",
    "status",
    "n_words",
    "placed_count",
    "discarded_count",
    "scale",
    "duration_ms",
    "warnings_count",
]


def _run_case(
    case_id: str,
    words_path: Path,
    case_dir: Path,
    run_name: str,
    source: str,
    viewport_width: float,
    viewport_height: float,
    options: LayoutOptions,
    seed: int | None,
    measure: TextMeasurer | None,
    render_debug: bool,
) -> dict:
    t0 = time.perf_counter()
    try:
        words = load_words(words_path)
    except (OSError, ValueError) as exc:
        logger.warning("Case %s: could not load %s: %s", case_id, source, exc)
        return {
            "case_id": case_id, "words_source": source, "status": "error", "n_words": 0,
            "placed_count": 0, "discarded_count": 0, "scale": "",
            "duration_ms": int((time.perf_counter() - t0) * 1000), "warnings_count": 0,
        }
    result = run_word_cloud_layout(
        words, viewport_width, viewport_height, measure=measure, options=options, seed=seed
    )
    duration_ms = int((time.perf_counter() - t0) * 1000)
    case_dir.mkdir(parents=True, exist_ok=True)
    write_layout_json(case_dir, result, source)
    write_run_metadata_json(case_dir, run_name, source, viewport_width, viewport_height, options, seed)
    if render_debug:
        from wordcloud_layout.core.render import render_layout_debug
        render_layout_debug(result, case_dir / "debug.png")
    return {
        "case_id": case_id, "words_source": source, "status": "ok", "n_words": len(words),
        "placed_count": result.success_count, "discarded_count": len(result.discarded),
        "scale": round(result.scale, 6) if result.scale is not None else "",
        "duration_ms": duration_ms, "warnings_count": len(result.warnings),
    }


def run_batch(
    run_name: str,
    batch_dir: Path,
    viewport_width: float = VIEWPORT_WIDTH,
    viewport_height: float = VIEWPORT_HEIGHT,
    options: LayoutOptions | None = None,
    limit: int | None = None,
    repo_root: Path | None = None,
    output_dir: str | None = None,
    seed: int | None = SEED,
    max_workers: int = BATCH_MAX_WORKERS,
    measure: TextMeasurer | None = None,
    render_debug: bool = False,
) -> Path:
    """
    Lay out every word file (.csv, .json, .txt) in batch_dir; each case gets
    its own RNG from the same seed. Returns the report directory containing
    index.csv and cases/<case_id>/. Raises ValueError if batch_dir is not a directory.
    """
    root = repo_root or Path.cwd().resolve()
    if not batch_dir.is_absolute():
        batch_dir = root / batch_dir
    if not batch_dir.is_dir():
        raise ValueError(f"Batch directory not found: {batch_dir}")
    opts = options or LayoutOptions()
    report_dir = ensure_report_dir(root, f"batch_{run_name}", output_dir=output_dir or REPORTS_DIR)
    cases_dir = report_dir / "cases"
    cases_dir.mkdir(parents=True, exist_ok=True)

    files = sorted(p for p in batch_dir.iterdir() if p.suffix.lower() in WORD_FILE_SUFFIXES)
    if limit is not None:
        files = files[:limit]
    jobs = []
    for i, words_path in enumerate(files):
        case_id = f"case_{i:04d}_{words_path.stem}"
        source = str(words_path.relative_to(root)) if root in words_path.parents else str(words_path)
        jobs.append((case_id, words_path, cases_dir / case_id, run_name, source,
                     viewport_width, viewport_height, opts, seed, measure, render_debug))

    # pyplot is not thread-safe.
    workers = 1 if render_debug else max(1, max_workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        rows = list(pool.map(lambda job: _run_case(*job), jobs))

    index_path = report_dir / "index.csv"
    with open(index_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=INDEX_FIELDS)
        w.writeheader()
        w.writerows(rows)
    logger.info("Batch %s: %d cases written to %s", run_name, len(rows), index_path)
    return report_dir
