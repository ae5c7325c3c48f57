"""Per-word color overrides kept stable across caption edits.

Overrides are keyed by word position. After an edit an override survives
only if the same word still sits at the same position; inserting or
removing a word earlier in the caption shifts later positions and drops
their overrides. Realigning them would change what users see, so the
positional rule is kept as is.
"""

from __future__ import annotations

from typing import Mapping

from ..colors import normalize_color, same_color
from ..models import split_words


def reconcile(
    old_text: str,
    old_word_colors: Mapping[int, str],
    new_text: str,
) -> dict[int, str]:
    """Carry word colors over a caption edit.

    Args:
        old_text: Caption before the edit.
        old_word_colors: Overrides valid for old_text.
        new_text: Caption after the edit.

    Returns:
        Overrides whose position still holds the identical word.
    """
    old_words = split_words(old_text)
    new_words = split_words(new_text)
    return {
        index: color
        for index, color in old_word_colors.items()
        if 0 <= index < len(new_words)
        and index < len(old_words)
        and old_words[index] == new_words[index]
    }


def set_word_color(
    word_colors: Mapping[int, str],
    index: int,
    color: str | None,
    default_color: str,
) -> dict[int, str]:
    """Set or clear the override for one word.

    None and a color equal to default_color both clear the override, so a
    word can never be pinned to the current default color.

    Returns:
        A new override mapping; word_colors is not modified.
    """
    updated = dict(word_colors)
    if color is None or same_color(color, default_color):
        updated.pop(index, None)
    else:
        updated[index] = normalize_color(color)
    return updated
