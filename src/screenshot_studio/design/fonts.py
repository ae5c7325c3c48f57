"""Font lookup for caption rendering."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import ImageFont

from ..models import FontWeight

_logger = logging.getLogger("compositor")

# Candidate font files per weight, tried in order.
# Extra bold reuses the bold face and thickens it with a stroke when drawn.
FONT_FILES: dict[FontWeight, list[str]] = {
    FontWeight.NORMAL: [
        "Inter-Regular.ttf",
        "Roboto-Regular.ttf",
        # Linux
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        # Windows
        "C:/Windows/Fonts/segoeui.ttf",
        "C:/Windows/Fonts/arial.ttf",
        # macOS
        "/System/Library/Fonts/Helvetica.ttc",
        "/Library/Fonts/Arial.ttf",
    ],
    FontWeight.BOLD: [
        "Inter-Bold.ttf",
        "Roboto-Bold.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "C:/Windows/Fonts/segoeuib.ttf",
        "C:/Windows/Fonts/arialbd.ttf",
        "/System/Library/Fonts/Helvetica.ttc",
        "/Library/Fonts/Arial Bold.ttf",
    ],
}
FONT_FILES[FontWeight.EXTRA_BOLD] = FONT_FILES[FontWeight.BOLD]

EXTRA_BOLD_STROKE_RATIO = 0.02
"""Stroke width for extra bold, as a fraction of the font pixel size."""


class FontResolver:
    """Resolve (weight, pixel size) to a Pillow font, with caching.

    Usage:
        fonts = FontResolver(fonts_dir=Path("fonts"))
        font = fonts.get(FontWeight.BOLD, 100.6)
        width = font.getlength("Sale")
    """

    def __init__(self, fonts_dir: Path | None = None):
        """Initialize the resolver.

        Args:
            fonts_dir: Directory searched first for the candidate file names.
        """
        self.fonts_dir = fonts_dir
        self._font_cache: dict[tuple[FontWeight, float], ImageFont.FreeTypeFont] = {}

    def get(self, weight: FontWeight, size: float) -> ImageFont.FreeTypeFont:
        """Get a font, with caching."""
        cache_key = (weight, size)
        if cache_key in self._font_cache:
            return self._font_cache[cache_key]

        font = None
        for candidate in self._candidates(weight):
            try:
                font = ImageFont.truetype(str(candidate), size)
                break
            except OSError:
                continue

        if font is None:
            _logger.debug(f"No {weight.value} font file found, using Pillow default font")
            font = ImageFont.load_default(size=size)

        self._font_cache[cache_key] = font
        return font

    def _candidates(self, weight: FontWeight) -> list[Path]:
        names = FONT_FILES[weight]
        paths: list[Path] = []
        if self.fonts_dir:
            paths.extend(self.fonts_dir / Path(name).name for name in names)
        paths.extend(Path(name) for name in names)
        return paths


def stroke_width_for(weight: FontWeight, size: float) -> int:
    """Stroke width used to draw a weight at a pixel size."""
    if weight is FontWeight.EXTRA_BOLD:
        return max(1, round(size * EXTRA_BOLD_STROKE_RATIO))
    return 0
