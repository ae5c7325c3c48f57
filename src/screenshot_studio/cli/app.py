"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from ..config import RenderSettings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

# Create Typer app
app = typer.Typer(
    name="screenshots",
    help="Compose App Store and Google Play screenshots",
    add_completion=False,
)


def setup_logging(log_dir: Path, level: str = "INFO") -> None:
    """Configure logging for the CLI.

    Library loggers write to a log file only, so nothing interferes with
    the Rich console output.
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    file_handler = logging.FileHandler(log_dir / "screenshots.log", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for logger_name in ["compositor", "editing", "export", "config", "cli"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level.upper())
        logger.propagate = False
        logger.handlers = []  # Clear any existing handlers
        logger.addHandler(file_handler)


@app.callback()
def main() -> None:
    """Compose App Store and Google Play screenshots."""
    settings = RenderSettings()
    setup_logging(settings.log_dir, settings.log_level)


def register_commands() -> None:
    """Register all commands."""
    from .commands import export, list_presets

    app.command(name="export")(export)
    app.command(name="presets")(list_presets)


# Register all commands
register_commands()
