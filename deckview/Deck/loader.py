# deckview/Deck/loader.py
# Description: Read a Markdown deck file and split it into slides
#
# Imports
import re
from pathlib import Path
from typing import List, Optional, Union
#
# Third-Party Imports
from loguru import logger
#
# Local Imports
from ..errors import DeckLoadError
from .models import DeckDocument, SlideSource
#
#######################################################################################################################
#
# Functions:

SLIDE_SEPARATOR_RE = re.compile(r"^\s*---\s*$", re.MULTILINE)
HEADING_RE = re.compile(r"^\s{0,3}#{1,6}\s+(.+?)\s*#*\s*$", re.MULTILINE)


def _first_heading(markdown_text: str) -> Optional[str]:
    match = HEADING_RE.search(markdown_text)
    return match.group(1).strip() if match else None


def split_slides(markdown_text: str) -> List[SlideSource]:
    """
    Split Markdown into slides on lines containing only ``---``.

    Blank chunks are dropped, so leading/trailing separators do not create
    empty slides.
    """
    chunks = [chunk.strip("\n") for chunk in SLIDE_SEPARATOR_RE.split(markdown_text)]
    slides = []
    for chunk in chunks:
        if not chunk.strip():
            continue
        slides.append(SlideSource(index=len(slides), body=chunk, title=_first_heading(chunk)))
    return slides


def parse_deck(markdown_text: str, title: Optional[str] = None, source_path: Optional[str] = None) -> DeckDocument:
    """Build a deck document from Markdown text."""
    slides = split_slides(markdown_text)
    deck_title = title or (slides[0].title if slides and slides[0].title else "Untitled deck")
    return DeckDocument(title=deck_title, source_path=source_path, slides=slides)


def load_deck(path: Union[str, Path]) -> DeckDocument:
    """
    Load a deck from a Markdown file.

    Raises:
        DeckLoadError: The file is missing, unreadable or not UTF-8
    """
    deck_path = Path(path).expanduser()
    logger.info(f"Loading deck from: {deck_path}")
    try:
        markdown_text = deck_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DeckLoadError(deck_path, "file not found")
    except UnicodeDecodeError as e:
        raise DeckLoadError(deck_path, f"not valid UTF-8 ({e.reason})")
    except OSError as e:
        raise DeckLoadError(deck_path, str(e))

    deck = parse_deck(markdown_text, source_path=str(deck_path))
    if not deck.slides:
        logger.warning(f"Deck {deck_path} contains no slides")
    else:
        logger.info(f"Loaded {deck.total} slides from {deck_path.name}")
    return deck

#
# End of loader.py
#######################################################################################################################
