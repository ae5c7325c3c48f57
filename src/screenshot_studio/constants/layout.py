"""Layout constants for the slide compositor.

Every measurement is a fraction of the output size, so a small preview and
a full-resolution export lay out identically.

MODIFICATION GUIDE:
------------------
Changing any ratio here changes every exported screenshot. The preview in
the editor uses the same numbers; keep them in sync.
"""

from typing import Final

# =============================================================================
# OUTPUT DIMENSIONS
# =============================================================================

OUTPUT_MIN_DIMENSION: Final[int] = 100
"""Smallest accepted output width or height in pixels."""

OUTPUT_MAX_DIMENSION: Final[int] = 4096
"""Largest accepted output width or height in pixels."""


# =============================================================================
# TEXT BLOCK
# =============================================================================

FONT_SCALE: Final[float] = 0.6
"""Font pixel size = font_size_percent * FONT_SCALE * output_height / 100."""

FONT_SIZE_PERCENT_MIN: Final[float] = 2.0
"""Smallest font size slider value."""

FONT_SIZE_PERCENT_MAX: Final[float] = 10.0
"""Largest font size slider value."""

LINE_HEIGHT_MULTIPLIER: Final[float] = 1.3
"""Line advance as a multiple of the font pixel size."""

TEXT_TOP_PADDING_RATIO: Final[float] = 0.04
"""Distance from the top edge to the first line, as a fraction of height."""

TEXT_MAX_WIDTH_RATIO: Final[float] = 0.85
"""Width budget for one line, as a fraction of output width."""


# =============================================================================
# IMAGE BLOCK
# =============================================================================

IMAGE_GAP_RATIO: Final[float] = 0.02
"""Gap between the last text line and the image, as a fraction of height."""


# =============================================================================
# SLIDE DEFAULTS
# =============================================================================

PLACEHOLDER_TEXT: Final[str] = "Click to edit this text"
"""Caption given to a freshly added slide."""

DEFAULT_BACKGROUND_COLOR: Final[str] = "#F28B82"
DEFAULT_GRADIENT_COLOR: Final[str] = "#FBBC04"
DEFAULT_GRADIENT_ANGLE: Final[float] = 135.0
DEFAULT_TEXT_COLOR: Final[str] = "#FFFFFF"
DEFAULT_FONT_SIZE_PERCENT: Final[float] = 6.0


# =============================================================================
# EXPORT NAMING
# =============================================================================

SLIDE_FILENAME_PATTERN: Final[str] = "screenshot_{number}_{width}x{height}.png"
"""Filename for one exported slide. number is 1-based."""

ARCHIVE_FILENAME_PATTERN: Final[str] = "screenshots_{width}x{height}.zip"
"""Filename for the archive bundling a batch export."""
