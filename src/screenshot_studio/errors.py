"""Exceptions raised by Screenshot Studio."""

from __future__ import annotations


class ScreenshotStudioError(Exception):
    """Base exception for Screenshot Studio errors."""

    pass


class InvalidDimensionError(ScreenshotStudioError, ValueError):
    """Output width or height is not an integer in the accepted range."""

    pass


class MalformedColorError(ScreenshotStudioError, ValueError):
    """Color string is not in #RRGGBB form."""

    pass


class ImageDecodeError(ScreenshotStudioError):
    """Slide image could not be decoded."""

    pass


class UnknownPresetError(ScreenshotStudioError, KeyError):
    """No device preset with the requested name."""

    pass


class ProjectFileError(ScreenshotStudioError):
    """Project file is missing, unreadable or invalid."""

    pass
