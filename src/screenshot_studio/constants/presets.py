"""Store device presets and color palettes.

Sizes follow the App Store Connect and Google Play screenshot
requirements. Landscape variants swap width and height.
"""

from typing import Final

DEVICE_PRESETS: Final[dict[str, tuple[int, int]]] = {
    'iPhone 6.9"': (1320, 2868),
    'iPhone 6.9" Land': (2868, 1320),
    'iPhone 6.7"': (1290, 2796),
    'iPhone 6.7" Land': (2796, 1290),
    'iPhone 6.5"': (1260, 2736),
    'iPhone 6.5" Land': (2736, 1260),
    'iPad 12.9"': (2048, 2732),
    'iPad 11"': (1668, 2388),
    "Android Phone": (1080, 1920),
    "Android Tablet": (1920, 1200),
}
"""Preset name -> (width, height) in pixels."""

DEFAULT_PRESET: Final[str] = 'iPhone 6.7"'

BACKGROUND_SWATCHES: Final[tuple[str, ...]] = (
    "#F28B82", "#FBBC04", "#FFF475", "#CCFF90", "#A7FFEB",
    "#CBF0F8", "#AECBFA", "#D7AEFB", "#E8EAED", "#2D2D2D",
    "#1A73E8", "#34A853", "#EA4335", "#FF6D01", "#46BDC6",
)
"""Quick-pick background colors."""

WORD_SWATCHES: Final[tuple[str, ...]] = (
    "#FFFFFF", "#000000", "#F28B82", "#FBBC04", "#FFF475",
    "#CCFF90", "#A7FFEB", "#AECBFA", "#D7AEFB", "#1A73E8",
    "#34A853", "#EA4335", "#FF6D01", "#46BDC6",
)
"""Quick-pick colors for per-word overrides."""
