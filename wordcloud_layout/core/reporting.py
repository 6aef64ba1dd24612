# wordcloud_layout/core/reporting.py
"""
Create reports/<run_name>/ and write layout.json and run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from wordcloud_layout.core.config import (
    ARCHIMEDEAN_STEP,
    FIELD_BASE_HEIGHT,
    REPORTS_DIR,
    SCHEMA_VERSION,
    SEED,
    SQUARE_SPIRAL_STEP,
)
from wordcloud_layout.core.types import LayoutOptions, LayoutResult, Rect
from wordcloud_layout.core.validate import find_overlaps


def _rect_dict(rect: Rect) -> dict:
    return {
        "left": rect.left,
        "top": rect.top,
        "right": rect.right,
        "bottom": rect.bottom,
    }


def layout_to_dict(result: LayoutResult, source: str) -> dict:
    """Exact structure for layout.json."""
    return {
        "schema_version": SCHEMA_VERSION,
        "input": {
            "source": source,
            "viewport": {"width": result.viewport_width, "height": result.viewport_height},
        },
        "field": {"width": result.field.width, "height": result.field.height},
        "transform": {
            "scale": result.scale,
            "translate": {"x": result.viewport_width / 2.0, "y": result.viewport_height / 2.0},
        },
        "words": [
            {
                "name": p.name,
                "weight": p.weight,
                "relative_weight": p.relative_weight,
                "font_size": p.font_size,
                "font_family": p.font_family,
                "x": p.x,
                "y": p.y,
                "rotation_deg": p.rotation_deg,
                "rect": _rect_dict(p.rect),
                "attempts": p.attempts,
            }
            for p in result.placed
        ],
        "discarded": [{"name": w.name, "weight": w.weight} for w in result.discarded],
        "summary": {
            "placed_count": result.success_count,
            "discarded_count": len(result.discarded),
            "overlaps_detected": len(find_overlaps(result.placed)),
        },
        "warnings": list(result.warnings),
    }


def run_metadata_dict(
    run_name: str,
    words_path: str,
    viewport_width: float,
    viewport_height: float,
    options: LayoutOptions,
    seed: int | None,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "words_path": words_path,
        "viewport": {"width": viewport_width, "height": viewport_height},
        "seed": seed,
        "options": {
            "font_family": options.font_family,
            "placement_strategy": options.placement_strategy,
            "spiral": options.spiral,
            "rotation": {
                "from": options.rotation.from_deg,
                "to": options.rotation.to_deg,
                "orientations": options.rotation.orientations,
            },
            "max_font_size": options.max_font_size,
        },
        "config": {
            "FIELD_BASE_HEIGHT": FIELD_BASE_HEIGHT,
            "ARCHIMEDEAN_STEP": ARCHIMEDEAN_STEP,
            "SQUARE_SPIRAL_STEP": SQUARE_SPIRAL_STEP,
            "SEED": SEED,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_layout_json(report_dir: Path, result: LayoutResult, source: str) -> Path:
    """Write layout.json to report_dir. Returns path to file."""
    path = report_dir / "layout.json"
    data = layout_to_dict(result, source)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    words_path: str,
    viewport_width: float,
    viewport_height: float,
    options: LayoutOptions,
    seed: int | None,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, words_path, viewport_width, viewport_height, options, seed)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
