"""Display functions for CLI commands - pure functions for Rich output."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config import Project
from ..services import ExportedImage


def show_presets_table(console: Console, presets: dict[str, tuple[int, int]], default: str) -> None:
    """Display table of device presets."""
    table = Table(title="Device Presets")
    table.add_column("Preset", style="cyan")
    table.add_column("Size", style="green")

    for name, (width, height) in presets.items():
        label = f"{name} [dim](default)[/dim]" if name == default else name
        table.add_row(label, f"{width}x{height}")

    console.print(table)


def show_export_config(console: Console, project: Project, project_path: Path, out_dir: Path) -> None:
    """Display what is about to be exported."""
    background = project.style.background
    if background.kind == "gradient":
        bg_text = f"{background.color_a} -> {background.color_b} @ {background.angle_degrees:g}deg"
    else:
        bg_text = background.color

    console.print(Panel(
        f"Project: [cyan]{project_path}[/cyan]\n"
        f"Slides: [yellow]{len(project.slides)}[/yellow]\n"
        f"Size: [yellow]{project.output.width}x{project.output.height}[/yellow]\n"
        f"Background: [yellow]{bg_text}[/yellow]\n"
        f"Output: [cyan]{out_dir}[/cyan]",
        title="Export",
    ))


def show_export_results(console: Console, images: Sequence[ExportedImage], archive: Path | None) -> None:
    """Display the exported files."""
    table = Table(title="Exported Screenshots")
    table.add_column("#", style="dim")
    table.add_column("File", style="cyan")
    table.add_column("Size", style="green", justify="right")

    for number, image in enumerate(images, start=1):
        table.add_row(str(number), image.filename, f"{image.size_bytes / 1024:.1f} KB")

    console.print(table)
    if archive is not None:
        console.print(f"[green]Archive written to {archive}[/green]")


def show_swatches(console: Console, title: str, colors: Sequence[str]) -> None:
    """Display a palette as colored blocks with their hex values."""
    console.print(f"\n[bold]{title}[/bold]")
    for color in colors:
        console.print(f"  [on {color}]    [/on {color}] {color}")
