"""
Deck documents.
"""

from .loader import load_deck, parse_deck, split_slides
from .models import DeckDocument, SlideSource

__all__ = [
    'load_deck',
    'parse_deck',
    'split_slides',
    'DeckDocument',
    'SlideSource',
]
