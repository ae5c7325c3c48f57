"""Export service: renders slides to named PNGs and bundles them.

Rendering is strictly sequential. Each slide is encoded to PNG bytes
before the next one starts, so at most one output surface and one source
image are alive at a time.
"""

from __future__ import annotations

import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from ..constants import ARCHIVE_FILENAME_PATTERN, SLIDE_FILENAME_PATTERN
from ..design import FontResolver, SlideCompositor
from ..models import OutputSpec, Slide, Style

_logger = logging.getLogger("export")


@dataclass(frozen=True)
class ExportedImage:
    """One encoded slide ready to be saved."""

    filename: str
    data: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.data)


def slide_filename(number: int, output: OutputSpec) -> str:
    """Filename for the slide at 1-based position number."""
    return SLIDE_FILENAME_PATTERN.format(
        number=number, width=output.width, height=output.height
    )


def archive_filename(output: OutputSpec) -> str:
    """Suggested filename for the archive of a batch export."""
    return ARCHIVE_FILENAME_PATTERN.format(width=output.width, height=output.height)


async def export_all(
    slides: Sequence[Slide],
    style: Style,
    output: OutputSpec,
    fonts: FontResolver | None = None,
) -> list[ExportedImage]:
    """Render every slide in order.

    Filenames follow the position in slides, not the slide ids. A slide
    whose image cannot be decoded is still exported, without its image.

    Args:
        slides: Slides to render, in output order.
        style: Shared style.
        output: Shared output size.
        fonts: Optional font resolver.

    Returns:
        One ExportedImage per slide, in input order.
    """
    compositor = SlideCompositor(style, output, fonts)
    exported = []
    for number, slide in enumerate(slides, start=1):
        data = await compositor.render_png(slide)
        exported.append(ExportedImage(slide_filename(number, output), data))
        _logger.info(f"Rendered slide {number}/{len(slides)} ({len(data)} bytes)")
    return exported


async def export_single(
    slides: Sequence[Slide],
    index: int,
    style: Style,
    output: OutputSpec,
    fonts: FontResolver | None = None,
) -> ExportedImage:
    """Render one slide of a collection.

    Args:
        index: 0-based position of the slide; the filename uses index + 1.
    """
    if not 0 <= index < len(slides):
        raise IndexError(f"No slide at position {index}")
    compositor = SlideCompositor(style, output, fonts)
    data = await compositor.render_png(slides[index])
    _logger.info(f"Rendered slide {index + 1} ({len(data)} bytes)")
    return ExportedImage(slide_filename(index + 1, output), data)


def write_archive(images: Sequence[ExportedImage], path: Path) -> Path:
    """Bundle exported images into a zip archive.

    PNG data is already compressed, so entries are stored as is.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_STORED) as archive:
        for image in images:
            archive.writestr(image.filename, image.data)
    _logger.info(f"Wrote {len(images)} image(s) to {path}")
    return path


def save_images(images: Sequence[ExportedImage], directory: Path) -> list[Path]:
    """Write each exported image into directory."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for image in images:
        path = directory / image.filename
        path.write_bytes(image.data)
        paths.append(path)
    return paths
