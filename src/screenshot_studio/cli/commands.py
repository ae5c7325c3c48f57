"""CLI commands - thin wrappers orchestrating display and export service."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer

from ..config import RenderSettings, load_project
from ..constants import BACKGROUND_SWATCHES, DEVICE_PRESETS, WORD_SWATCHES
from ..design import FontResolver
from ..errors import ScreenshotStudioError
from ..services import archive_filename, export_all, export_single, save_images, write_archive
from .console import console, print_error, print_success
from .display import show_export_config, show_export_results, show_presets_table, show_swatches

_logger = logging.getLogger("cli")


def list_presets() -> None:
    """List the device size presets and color palettes."""
    settings = RenderSettings()
    show_presets_table(console, DEVICE_PRESETS, settings.default_preset)
    show_swatches(console, "Background colors", BACKGROUND_SWATCHES)
    show_swatches(console, "Word colors", WORD_SWATCHES)


def export(
    project_file: Path = typer.Argument(..., help="Project YAML file"),
    out: Path = typer.Option(Path("exports"), "--out", "-o", help="Output directory"),
    as_zip: bool = typer.Option(False, "--zip/--no-zip", help="Bundle PNGs into one archive"),
    only: Optional[int] = typer.Option(None, "--only", "-n", help="Export only slide N (1-based)"),
) -> None:
    """Render the slides of a project to PNG screenshots.

    Writes one screenshot_N_WxH.png per slide into the output directory,
    or a single screenshots_WxH.zip with --zip.
    """
    settings = RenderSettings()
    try:
        project = load_project(project_file, settings)
    except ScreenshotStudioError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if not project.slides:
        console.print("[yellow]Project has no slides, nothing to export.[/yellow]")
        raise typer.Exit(0)

    if only is not None and not 1 <= only <= len(project.slides):
        print_error(f"--only must be between 1 and {len(project.slides)}")
        raise typer.Exit(1)

    show_export_config(console, project, project_file, out)
    fonts = FontResolver(settings.fonts_dir)

    try:
        if only is None:
            images = asyncio.run(export_all(project.slides, project.style, project.output, fonts))
        else:
            image = asyncio.run(
                export_single(project.slides, only - 1, project.style, project.output, fonts)
            )
            images = [image]
    except ScreenshotStudioError as e:
        _logger.error(f"Export of {project_file} failed: {e}", exc_info=True)
        print_error(str(e))
        raise typer.Exit(1)

    archive = None
    if as_zip:
        archive = write_archive(images, out / archive_filename(project.output))
    else:
        save_images(images, out)

    show_export_results(console, images, archive)
    print_success(f"Exported {len(images)} screenshot(s)")
