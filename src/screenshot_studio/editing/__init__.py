"""Editing session state and word-color reconciliation."""

from .deck import SlideDeck
from .reconciler import reconcile, set_word_color

__all__ = ["SlideDeck", "reconcile", "set_word_color"]
