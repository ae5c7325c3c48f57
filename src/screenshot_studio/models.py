"""Data models for slides, styles and output sizes."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Union
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator, model_validator

from .colors import normalize_color
from .constants import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_FONT_SIZE_PERCENT,
    DEFAULT_GRADIENT_ANGLE,
    DEFAULT_GRADIENT_COLOR,
    DEFAULT_TEXT_COLOR,
    DEVICE_PRESETS,
    FONT_SCALE,
    FONT_SIZE_PERCENT_MAX,
    FONT_SIZE_PERCENT_MIN,
    OUTPUT_MAX_DIMENSION,
    OUTPUT_MIN_DIMENSION,
    PLACEHOLDER_TEXT,
)
from .errors import InvalidDimensionError, UnknownPresetError

# Raw image handed over by the editor: encoded bytes or a file on disk.
ImageSource = Union[Path, bytes]


def split_words(text: str) -> list[str]:
    """Split text into words on runs of whitespace, dropping empty tokens."""
    return text.split()


class FontWeight(str, Enum):
    """Caption font weight."""

    NORMAL = "normal"
    BOLD = "bold"
    EXTRA_BOLD = "extraBold"

    @classmethod
    def _missing_(cls, value: object) -> "FontWeight | None":
        # CSS numeric weight used by the editor's dropdown
        if value in ("800", 800):
            return cls.EXTRA_BOLD
        return None


class SolidBackground(BaseModel):
    """Single-color background."""

    model_config = {"frozen": True}

    kind: Literal["solid"] = "solid"
    color: str = DEFAULT_BACKGROUND_COLOR

    @field_validator("color")
    @classmethod
    def _check_color(cls, v: str) -> str:
        return normalize_color(v)


class GradientBackground(BaseModel):
    """Two-stop linear gradient.

    angle_degrees follows the CSS linear-gradient convention: 0 runs from
    color_a at the bottom to color_b at the top, 90 from left to right.
    """

    model_config = {"frozen": True}

    kind: Literal["gradient"] = "gradient"
    color_a: str = DEFAULT_BACKGROUND_COLOR
    color_b: str = DEFAULT_GRADIENT_COLOR
    angle_degrees: float = Field(default=DEFAULT_GRADIENT_ANGLE, allow_inf_nan=False)

    @field_validator("color_a", "color_b")
    @classmethod
    def _check_color(cls, v: str) -> str:
        return normalize_color(v)


Background = Annotated[
    Union[SolidBackground, GradientBackground],
    Field(discriminator="kind"),
]


class Style(BaseModel):
    """Text and background style shared by every slide in an export."""

    model_config = {"frozen": True}

    background: Background = Field(default_factory=SolidBackground)
    text_color: str = DEFAULT_TEXT_COLOR
    font_size_percent: float = Field(
        default=DEFAULT_FONT_SIZE_PERCENT,
        ge=FONT_SIZE_PERCENT_MIN,
        le=FONT_SIZE_PERCENT_MAX,
    )
    font_weight: FontWeight = FontWeight.BOLD

    @field_validator("text_color")
    @classmethod
    def _check_color(cls, v: str) -> str:
        return normalize_color(v)

    def font_px(self, output_height: int) -> float:
        """Font pixel size for a given output height."""
        return self.font_size_percent * FONT_SCALE * output_height / 100


class OutputSpec(BaseModel):
    """Exact pixel size of the exported raster."""

    model_config = {"frozen": True}

    width: int = Field(ge=OUTPUT_MIN_DIMENSION, le=OUTPUT_MAX_DIMENSION, strict=True)
    height: int = Field(ge=OUTPUT_MIN_DIMENSION, le=OUTPUT_MAX_DIMENSION, strict=True)

    @classmethod
    def from_size(cls, width: object, height: object) -> "OutputSpec":
        """Build an OutputSpec, rejecting bad dimensions up front.

        Raises:
            InvalidDimensionError: If either side is not an integer in
                [OUTPUT_MIN_DIMENSION, OUTPUT_MAX_DIMENSION].
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDimensionError(f"Output {name} must be an integer, got {value!r}")
            if not OUTPUT_MIN_DIMENSION <= value <= OUTPUT_MAX_DIMENSION:
                raise InvalidDimensionError(
                    f"Output {name} {value} outside "
                    f"[{OUTPUT_MIN_DIMENSION}, {OUTPUT_MAX_DIMENSION}]"
                )
        return cls(width=width, height=height)

    @classmethod
    def from_preset(cls, name: str) -> "OutputSpec":
        """Build an OutputSpec from a device preset name."""
        try:
            width, height = DEVICE_PRESETS[name]
        except KeyError:
            raise UnknownPresetError(f"Unknown device preset: {name!r}") from None
        return cls.from_size(width, height)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


class Slide(BaseModel):
    """One screenshot: caption, per-word color overrides and an optional image.

    word_colors maps 0-based word positions in text to #RRGGBB colors. Keys
    must point at existing words; edit text through the reconciler so stale
    positions get pruned.
    """

    model_config = {"frozen": True}

    id: str | int = Field(default_factory=lambda: uuid4().hex)
    text: str = PLACEHOLDER_TEXT
    word_colors: dict[int, str] = Field(default_factory=dict)
    image: ImageSource | None = None

    @field_validator("word_colors")
    @classmethod
    def _check_colors(cls, v: dict[int, str]) -> dict[int, str]:
        return {index: normalize_color(color) for index, color in v.items()}

    @model_validator(mode="after")
    def _check_positions(self) -> "Slide":
        count = len(self.words)
        stale = [index for index in self.word_colors if not 0 <= index < count]
        if stale:
            raise ValueError(
                f"word_colors positions {sorted(stale)} do not exist in a "
                f"{count}-word caption"
            )
        return self

    @property
    def words(self) -> list[str]:
        """Caption words in order."""
        return split_words(self.text)

    @property
    def has_image(self) -> bool:
        return self.image is not None
