"""
Measure text width/height using Pillow. 1 px at the requested font size = 1 field unit.
Also provides the default TextMeasurer collaborator used by the layout engine.
"""

from __future__ import annotations

import math
import warnings
from functools import lru_cache

from wordcloud_layout.core.geometry import rotated_bounds
from wordcloud_layout.core.types import Rect

_font_warning_emitted: set[str] = set()


def derive_font_size(relative_weight: float, max_font_size: float) -> int:
    """Font size for a word: max_font_size scaled by relative weight, floored."""
    return int(math.floor(max_font_size * relative_weight))


@lru_cache(maxsize=256)
def _load_font(font_family: str, size: int):
    """Load PIL ImageFont; fallback with warning if font not found."""
    from PIL import ImageFont

    candidates = [
        font_family + ".ttf",
        font_family.replace(" ", "") + ".ttf",
        font_family.lower().replace(" ", "") + ".ttf",
        "DejaVuSans.ttf",
        "arial.ttf",
        "Arial.ttf",
    ]
    for name in candidates:
        try:
            return ImageFont.truetype(name, size=size)
        except (OSError, IOError):
            continue
    if font_family not in _font_warning_emitted:
        _font_warning_emitted.add(font_family)
        warnings.warn(f"Font not found: {font_family!r}; using default.", UserWarning)
    return ImageFont.load_default()


def measure_text(text: str, font_family: str, font_size: float) -> tuple[float, float]:
    """
    Return (width, height) of text at font_size. Zero size or empty text gives (0, 0).
    Uses Pillow; fallback font with warning if requested font not found.
    """
    if font_size <= 0 or not text:
        return (0.0, 0.0)
    from PIL import Image, ImageDraw

    font = _load_font(font_family, max(1, int(round(font_size))))
    img = Image.new("RGB", (1, 1))
    draw = ImageDraw.Draw(img)
    bbox = draw.textbbox((0, 0), text, font=font)
    w = float(bbox[2] - bbox[0])
    h = float(bbox[3] - bbox[1])
    # Default bitmap font ignores the requested size; rescale to it.
    size_used = getattr(font, "size", font_size)
    scale = font_size / max(1.0, float(size_used))
    return (w * scale, h * scale)


def pillow_measurer(
    text: str,
    x: float,
    y: float,
    font_size: float,
    font_family: str,
    rotation_deg: float,
) -> Rect:
    """Default TextMeasurer: bounding box of the rotated text centered on (x, y)."""
    w, h = measure_text(text, font_family, font_size)
    return rotated_bounds(x, y, w, h, rotation_deg)
