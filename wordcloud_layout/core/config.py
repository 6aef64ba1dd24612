# wordcloud_layout/core/config.py
"""
Central configuration for word-cloud layout.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations

import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"
DEFAULT_WORDS_PATH: str = "data/sample_words.csv"

# ----- Reports -----
SCHEMA_VERSION: str = "1.0"
"""Version of the layout.json structure."""

# ----- Rendering (debug preview) -----
RENDER_WIDTH_PX: int = 800
RENDER_HEIGHT_PX: int = 600

# ----- Batch -----
BATCH_MAX_WORKERS: int = 4
"""Independent layouts run concurrently; each layout itself stays sequential."""

# ----- Playing field -----
FIELD_BASE_HEIGHT: float = 256.0
"""Height of the working coordinate space; width follows the viewport aspect ratio."""

# ----- Viewport -----
VIEWPORT_WIDTH: float = 800.0
VIEWPORT_HEIGHT: float = 600.0

# ----- Typography -----
DEFAULT_FONT_FAMILY: str = "Impact"
MAX_FONT_SIZE: float = 25.0
"""Font size of the heaviest word; others scale linearly with relative weight."""

# ----- Strategies -----
DEFAULT_PLACEMENT_STRATEGY: str = "random"
DEFAULT_SPIRAL: str = "archimedean"

# ----- Rotation -----
ROTATION_FROM_DEG: float = -60.0
ROTATION_TO_DEG: float = 60.0
ROTATION_ORIENTATIONS: int = 5
"""Number of evenly spaced rotations between ROTATION_FROM_DEG and ROTATION_TO_DEG."""

# ----- Spirals -----
ARCHIMEDEAN_STEP: float = 0.1
"""Parameter increment per attempt: t = attempt * ARCHIMEDEAN_STEP."""

SQUARE_SPIRAL_STEP: float = 5.0
"""Lattice spacing (field units) of the square spiral."""

# ----- Input -----
MIN_WORD_LENGTH: int = 2
"""Shorter tokens are dropped when building words from plain text."""

MAX_WORDS: int = 200
"""Max words kept from plain text (heaviest first)."""

# ----- Determinism -----
SEED: int | None = 42
"""Random seed for placement strategies; None for non-deterministic."""

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
