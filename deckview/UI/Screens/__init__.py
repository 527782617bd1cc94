"""Screens."""

from .deck_screen import DeckScreen

__all__ = [
    "DeckScreen",
]
