"""Screenshot Studio - compose store screenshots from a caption and a photo."""

from .design import SlideCompositor, compose_slide
from .editing import SlideDeck, reconcile, set_word_color
from .errors import (
    ImageDecodeError,
    InvalidDimensionError,
    MalformedColorError,
    ProjectFileError,
    ScreenshotStudioError,
    UnknownPresetError,
)
from .models import (
    FontWeight,
    GradientBackground,
    OutputSpec,
    Slide,
    SolidBackground,
    Style,
)
from .services import ExportedImage, archive_filename, export_all, export_single

__version__ = "0.1.0"

__all__ = [
    "SlideCompositor",
    "compose_slide",
    "SlideDeck",
    "reconcile",
    "set_word_color",
    "ImageDecodeError",
    "InvalidDimensionError",
    "MalformedColorError",
    "ProjectFileError",
    "ScreenshotStudioError",
    "UnknownPresetError",
    "FontWeight",
    "GradientBackground",
    "OutputSpec",
    "Slide",
    "SolidBackground",
    "Style",
    "ExportedImage",
    "archive_filename",
    "export_all",
    "export_single",
]
