"""Background painting: solid fills and angled linear gradients."""

from __future__ import annotations

from PIL import Image

from ..colors import hex_to_rgb
from ..models import GradientBackground, SolidBackground
from .geometry import Rect, gradient_endpoints

# 256-level vertical ramp (value == row) sampled to build gradient masks.
_RAMP = Image.linear_gradient("L")


def gradient_mask(size: tuple[int, int], angle_degrees: float) -> Image.Image:
    """Build an L-mode mask where 0 is the first stop and 255 the second.

    Each output pixel samples the ramp at 255 * t, t being the pixel's
    projection onto the start->end segment from gradient_endpoints. The
    projection is affine in (x, y), so a single affine transform does the
    whole image.
    """
    width, height = size
    (x1, y1), (x2, y2) = gradient_endpoints(Rect(0, 0, width, height), angle_degrees)
    dx, dy = x2 - x1, y2 - y1
    length_sq = dx * dx + dy * dy

    scale = 255 / length_sq
    # Ramp row i holds value i with its center at i + 0.5
    coeffs = (
        0, 0, 128,
        dx * scale, dy * scale, 0.5 - (x1 * dx + y1 * dy) * scale,
    )
    return _RAMP.transform(
        size,
        Image.Transform.AFFINE,
        coeffs,
        resample=Image.Resampling.BILINEAR,
    )


def paint_background(
    surface: Image.Image,
    rect: Rect,
    background: SolidBackground | GradientBackground,
) -> None:
    """Fill rect on surface with the background. Always fully opaque."""
    size = (round(rect.width), round(rect.height))
    origin = (round(rect.x), round(rect.y))
    if size[0] <= 0 or size[1] <= 0:
        return

    if isinstance(background, GradientBackground):
        start = Image.new("RGB", size, hex_to_rgb(background.color_a))
        end = Image.new("RGB", size, hex_to_rgb(background.color_b))
        fill = Image.composite(end, start, gradient_mask(size, background.angle_degrees))
        surface.paste(fill, origin)
    else:
        box = (origin[0], origin[1], origin[0] + size[0], origin[1] + size[1])
        surface.paste(hex_to_rgb(background.color), box)
