"""Geometry primitives: rectangles, gradient endpoints and cover-fit crops."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in pixel space (floats allowed)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def ratio(self) -> float:
        return self.width / self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def as_box(self) -> tuple[float, float, float, float]:
        """Return (left, top, right, bottom) for Pillow."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


def gradient_endpoints(
    rect: Rect,
    angle_degrees: float,
) -> tuple[tuple[float, float], tuple[float, float]]:
    """Compute the start and end points of an angled linear gradient.

    A vector of length max(width, height) is rotated by (angle - 90)
    degrees around the rect center; the gradient runs from center - v
    to center + v. The stop line therefore spans twice the longer side and
    every pixel of the rect projects strictly between the two stops.

    Args:
        rect: Rectangle being filled.
        angle_degrees: CSS-style angle; 0 points up, 90 points right.

    Returns:
        ((x1, y1), (x2, y2)) where the first color sits at (x1, y1).
    """
    cx, cy = rect.center
    length = max(rect.width, rect.height)
    theta = math.radians(angle_degrees - 90)
    vx = math.cos(theta) * length
    vy = math.sin(theta) * length
    return (cx - vx, cy - vy), (cx + vx, cy + vy)


def cover_fit(image_size: tuple[int, int], dest: Rect) -> Rect:
    """Pick the source sub-rectangle that fills dest without distortion.

    The longer axis (relative to dest) is cropped symmetrically; the
    returned rect always has the same aspect ratio as dest.

    Args:
        image_size: (width, height) of the source image.
        dest: Destination rectangle, must be non-empty.

    Returns:
        Source crop in image coordinates.
    """
    img_w, img_h = image_size
    img_ratio = img_w / img_h
    area_ratio = dest.width / dest.height

    if img_ratio > area_ratio:
        # Image relatively wider - crop left/right
        src_h = img_h
        src_w = img_h * area_ratio
        return Rect((img_w - src_w) / 2, 0, src_w, src_h)

    # Image relatively taller - crop top/bottom
    src_w = img_w
    src_h = img_w / area_ratio
    return Rect(0, (img_h - src_h) / 2, src_w, src_h)
