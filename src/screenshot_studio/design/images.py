"""Slide image decoding and cover-fit drawing."""

from __future__ import annotations

import asyncio
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ..errors import ImageDecodeError
from ..models import ImageSource
from .geometry import Rect, cover_fit


def _open_image(source: ImageSource) -> Image.Image:
    """Open and fully decode an image, returned as RGBA."""
    try:
        if isinstance(source, (bytes, bytearray)):
            img = Image.open(BytesIO(source))
        else:
            img = Image.open(Path(source))
        with img:
            img.load()
            return img.convert("RGBA")
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as e:
        raise ImageDecodeError(f"Could not decode slide image: {e}") from e


async def decode_image(source: ImageSource) -> Image.Image:
    """Decode a slide image off the event loop.

    Raises:
        ImageDecodeError: If the data is not a readable image.
    """
    return await asyncio.to_thread(_open_image, source)


def draw_cover(surface: Image.Image, image: Image.Image, dest: Rect) -> None:
    """Scale the cover-fit crop of image to exactly fill dest on surface.

    dest must be whole pixels. Transparent parts of the image show the
    background already painted underneath.
    """
    size = (int(dest.width), int(dest.height))
    if size[0] <= 0 or size[1] <= 0:
        return

    crop = cover_fit(image.size, dest)
    scaled = image.resize(size, Image.Resampling.LANCZOS, box=crop.as_box())
    origin = (int(dest.x), int(dest.y))
    if scaled.mode == "RGBA":
        surface.paste(scaled, origin, scaled)
    else:
        surface.paste(scaled, origin)
