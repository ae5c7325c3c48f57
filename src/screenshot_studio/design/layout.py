"""Greedy word-wrap layout for the caption block.

The layout is pure arithmetic over a measure function, so it can be
exercised without fonts and reproduces the same line breaks at any output
size as long as widths scale with the font.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping, Sequence

from ..constants import (
    LINE_HEIGHT_MULTIPLIER,
    TEXT_MAX_WIDTH_RATIO,
    TEXT_TOP_PADDING_RATIO,
)
from ..models import OutputSpec, split_words

Measure = Callable[[str], float]


@dataclass(frozen=True)
class StyledWord:
    """A caption word with its resolved color."""

    text: str
    index: int
    color: str


@dataclass(frozen=True)
class PlacedWord:
    """A word positioned on the output surface."""

    word: str
    original_index: int
    color: str
    x: float
    y: float
    width: float


@dataclass
class Line:
    """One wrapped and centered line of words."""

    words: list[PlacedWord]
    x: float
    y: float
    width: float


@dataclass
class TextLayout:
    """Result of laying out a caption."""

    lines: list[Line] = field(default_factory=list)
    top: float = 0.0
    bottom: float = 0.0
    font_px: float = 0.0
    line_height: float = 0.0

    @property
    def height(self) -> float:
        """Vertical space consumed by the text block."""
        return self.bottom - self.top

    @property
    def words(self) -> list[PlacedWord]:
        return [word for line in self.lines for word in line.words]


def wrap_words(
    words: Sequence[StyledWord],
    max_width: float,
    measure: Measure,
    space_width: float,
) -> list[list[StyledWord]]:
    """Greedily pack words into lines no wider than max_width.

    A word is never split: one that is wider than max_width on its own
    gets a line to itself.
    """
    lines: list[list[StyledWord]] = []
    current: list[StyledWord] = []
    current_width = 0.0

    for word in words:
        word_width = measure(word.text)
        if current and current_width + space_width + word_width > max_width:
            lines.append(current)
            current = [word]
            current_width = word_width
        else:
            if current:
                current_width += space_width
            current.append(word)
            current_width += word_width

    if current:
        lines.append(current)

    return lines


def resolve_colors(
    text: str,
    word_colors: Mapping[int, str],
    default_color: str,
) -> list[StyledWord]:
    """Tag each caption word with its override color or the default."""
    return [
        StyledWord(text=word, index=i, color=word_colors.get(i, default_color))
        for i, word in enumerate(split_words(text))
    ]


def layout_text(
    text: str,
    word_colors: Mapping[int, str],
    default_color: str,
    output: OutputSpec,
    measure: Measure,
    space_width: float,
    font_px: float,
) -> TextLayout:
    """Wrap, center and stack the caption at the top of the output.

    Args:
        text: Caption text.
        word_colors: Word position -> color overrides.
        default_color: Color for words without an override.
        output: Output size; drives padding, width budget and centering.
        measure: Pixel width of a word in the caption font.
        space_width: Pixel width of one space in the caption font.
        font_px: Caption font size in pixels.

    Returns:
        TextLayout with positioned words and the y where the block ends.
    """
    top = output.height * TEXT_TOP_PADDING_RATIO
    line_height = font_px * LINE_HEIGHT_MULTIPLIER
    max_width = output.width * TEXT_MAX_WIDTH_RATIO

    styled = resolve_colors(text, word_colors, default_color)
    widths = {word.text: measure(word.text) for word in styled}
    wrapped = wrap_words(styled, max_width, widths.__getitem__, space_width)

    layout = TextLayout(top=top, bottom=top, font_px=font_px, line_height=line_height)
    y = top
    for line_words in wrapped:
        line_width = sum(widths[w.text] for w in line_words)
        line_width += space_width * (len(line_words) - 1)

        start_x = (output.width - line_width) / 2
        x = start_x
        placed = []
        for word in line_words:
            width = widths[word.text]
            placed.append(PlacedWord(word.text, word.index, word.color, x, y, width))
            x += width + space_width

        layout.lines.append(Line(words=placed, x=start_x, y=y, width=line_width))
        y += line_height

    layout.bottom = y
    return layout
