"""Editing session state: the slide collection and the shared style."""

from __future__ import annotations

import logging
from typing import Any

from ..models import ImageSource, Slide, Style
from .reconciler import reconcile, set_word_color

_logger = logging.getLogger("editing")


class SlideDeck:
    """Ordered slides being edited, plus the active slide and shared style.

    Slides are immutable; every edit swaps in a new Slide so a render in
    progress keeps the inputs it started with.

    Usage:
        deck = SlideDeck()
        deck.update_text(0, "Big Sale Today")
        deck.set_word_color(0, 1, "#000000")
        deck.add_slide()
    """

    def __init__(
        self,
        slides: list[Slide] | None = None,
        style: Style | None = None,
    ):
        self.slides: list[Slide] = list(slides) if slides else [Slide()]
        self.style = style or Style()
        self.active_index = 0

    def __len__(self) -> int:
        return len(self.slides)

    @property
    def active(self) -> Slide:
        return self.slides[self.active_index]

    def add_slide(self, text: str | None = None) -> Slide:
        """Append a placeholder slide and make it active."""
        slide = Slide() if text is None else Slide(text=text)
        self.slides.append(slide)
        self.active_index = len(self.slides) - 1
        return slide

    def remove_slide(self, index: int) -> bool:
        """Remove a slide. The last remaining slide is never removed.

        Returns:
            True if a slide was removed.
        """
        if len(self.slides) <= 1:
            return False

        del self.slides[index]
        if self.active_index >= len(self.slides):
            self.active_index = len(self.slides) - 1
        elif self.active_index > index:
            self.active_index -= 1
        return True

    def select(self, index: int) -> Slide:
        """Make a slide active."""
        if not 0 <= index < len(self.slides):
            raise IndexError(f"No slide at position {index}")
        self.active_index = index
        return self.slides[index]

    def update_text(self, index: int, text: str) -> Slide:
        """Replace a caption, keeping word colors that still apply."""
        slide = self.slides[index]
        word_colors = reconcile(slide.text, slide.word_colors, text)
        dropped = len(slide.word_colors) - len(word_colors)
        if dropped:
            _logger.debug(f"Slide {slide.id}: dropped {dropped} word color(s) after edit")
        return self._replace(index, text=text, word_colors=word_colors)

    def set_word_color(self, index: int, word_index: int, color: str | None) -> Slide:
        """Set or reset the color of one word on a slide."""
        slide = self.slides[index]
        if not 0 <= word_index < len(slide.words):
            raise IndexError(f"Slide {slide.id} has no word at position {word_index}")
        word_colors = set_word_color(
            slide.word_colors, word_index, color, self.style.text_color
        )
        return self._replace(index, word_colors=word_colors)

    def set_image(self, index: int, image: ImageSource) -> Slide:
        return self._replace(index, image=image)

    def clear_image(self, index: int) -> Slide:
        return self._replace(index, image=None)

    def restyle(self, **changes: Any) -> Style:
        """Replace the shared style with some fields changed."""
        self.style = Style.model_validate({**self.style.model_dump(), **changes})
        return self.style

    def _replace(self, index: int, **changes: Any) -> Slide:
        slide = self.slides[index].model_copy(update=changes)
        self.slides[index] = slide
        return slide
