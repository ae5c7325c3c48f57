"""Global constants package for Screenshot Studio.

PACKAGE STRUCTURE:
-----------------
- layout.py  : Text/image layout ratios, dimension limits, defaults, file naming
- presets.py : Device size presets and color swatches

USAGE EXAMPLES:
--------------
    from screenshot_studio.constants import TEXT_TOP_PADDING_RATIO
    from screenshot_studio.constants import DEVICE_PRESETS
"""

from .layout import (
    OUTPUT_MIN_DIMENSION,
    OUTPUT_MAX_DIMENSION,
    FONT_SCALE,
    FONT_SIZE_PERCENT_MIN,
    FONT_SIZE_PERCENT_MAX,
    LINE_HEIGHT_MULTIPLIER,
    TEXT_TOP_PADDING_RATIO,
    TEXT_MAX_WIDTH_RATIO,
    IMAGE_GAP_RATIO,
    PLACEHOLDER_TEXT,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_GRADIENT_COLOR,
    DEFAULT_GRADIENT_ANGLE,
    DEFAULT_TEXT_COLOR,
    DEFAULT_FONT_SIZE_PERCENT,
    SLIDE_FILENAME_PATTERN,
    ARCHIVE_FILENAME_PATTERN,
)
from .presets import (
    DEVICE_PRESETS,
    DEFAULT_PRESET,
    BACKGROUND_SWATCHES,
    WORD_SWATCHES,
)

__all__ = [
    # Layout
    "OUTPUT_MIN_DIMENSION",
    "OUTPUT_MAX_DIMENSION",
    "FONT_SCALE",
    "FONT_SIZE_PERCENT_MIN",
    "FONT_SIZE_PERCENT_MAX",
    "LINE_HEIGHT_MULTIPLIER",
    "TEXT_TOP_PADDING_RATIO",
    "TEXT_MAX_WIDTH_RATIO",
    "IMAGE_GAP_RATIO",
    "PLACEHOLDER_TEXT",
    "DEFAULT_BACKGROUND_COLOR",
    "DEFAULT_GRADIENT_COLOR",
    "DEFAULT_GRADIENT_ANGLE",
    "DEFAULT_TEXT_COLOR",
    "DEFAULT_FONT_SIZE_PERCENT",
    "SLIDE_FILENAME_PATTERN",
    "ARCHIVE_FILENAME_PATTERN",
    # Presets
    "DEVICE_PRESETS",
    "DEFAULT_PRESET",
    "BACKGROUND_SWATCHES",
    "WORD_SWATCHES",
]
