"""Color helpers for #RRGGBB strings."""

from __future__ import annotations

import re

from .errors import MalformedColorError

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def is_valid_color(value: object) -> bool:
    """Check whether value is a #RRGGBB string."""
    return isinstance(value, str) and bool(_HEX_COLOR.match(value))


def normalize_color(value: str) -> str:
    """Validate a #RRGGBB color and return it upper-cased.

    Raises:
        MalformedColorError: If value is not a #RRGGBB string.
    """
    if not is_valid_color(value):
        raise MalformedColorError(f"Invalid color {value!r}, expected #RRGGBB")
    return value.upper()


def same_color(a: str | None, b: str | None) -> bool:
    """Compare two colors ignoring hex digit case."""
    if a is None or b is None:
        return a is b
    return a.upper() == b.upper()


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert hex color to RGB tuple."""
    hex_color = normalize_color(hex_color).lstrip("#")
    return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))
