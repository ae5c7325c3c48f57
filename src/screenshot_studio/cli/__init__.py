"""Command-line interface for Screenshot Studio."""

from .app import app

__all__ = ["app"]
