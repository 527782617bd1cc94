"""
Deep-link fragment handling.

A deck position is written as ``#slide-<N>``. The fragment is read once at
startup and rewritten after every transition without adding history.
"""

import re
from typing import Callable, List, Optional

from loguru import logger

from ..Constants import SLIDE_FRAGMENT_PREFIX

_FRAGMENT_RE = re.compile(r"^#?slide-([+-]?\d+)$")


def parse_slide_fragment(fragment: Optional[str]) -> Optional[int]:
    """
    Extract the slide index from a ``#slide-<N>`` fragment.

    Returns:
        The integer N, or None when the fragment is empty or malformed.
        Range checks are left to the caller, which knows the deck size.
    """
    if not fragment:
        return None
    match = _FRAGMENT_RE.match(fragment.strip())
    if not match:
        logger.debug(f"Ignoring unrecognised location fragment: {fragment!r}")
        return None
    return int(match.group(1))


def format_slide_fragment(index: int) -> str:
    """Build the fragment for a slide index."""
    return f"{SLIDE_FRAGMENT_PREFIX}{index}"


class Location:
    """
    The viewer's address bar.

    There is only ever one entry: ``replace()`` swaps the fragment in place,
    so stepping through slides never builds up a back/forward history.
    """

    def __init__(self, fragment: Optional[str] = None):
        self._fragment = fragment
        self._listeners: List[Callable[[str], None]] = []

    @property
    def fragment(self) -> Optional[str]:
        return self._fragment

    def replace(self, fragment: str) -> None:
        """Replace the current fragment without adding a history entry."""
        self._fragment = fragment
        self._notify(fragment)

    def add_listener(self, listener: Callable[[str], None]) -> None:
        """Call ``listener(fragment)`` whenever the fragment changes."""
        self._listeners.append(listener)

    def _notify(self, fragment: str) -> None:
        for listener in self._listeners:
            listener(fragment)
