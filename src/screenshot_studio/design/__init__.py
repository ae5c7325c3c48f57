"""Design module for slide layout and raster composition."""

from .composer import SlideCompositor, compose_slide
from .fonts import FontResolver
from .geometry import Rect, cover_fit, gradient_endpoints
from .layout import Line, PlacedWord, StyledWord, TextLayout, layout_text, wrap_words

__all__ = [
    "SlideCompositor",
    "compose_slide",
    "FontResolver",
    "Rect",
    "cover_fit",
    "gradient_endpoints",
    "Line",
    "PlacedWord",
    "StyledWord",
    "TextLayout",
    "layout_text",
    "wrap_words",
]
