"""deckview: keyboard, mouse and deep-link navigation for Markdown slide decks in the terminal."""

__version__ = "0.1.0"
