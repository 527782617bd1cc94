"""
Navigation intents.

Input adapters translate raw events into one of these intents; the
controller only ever sees intents, never toolkit events.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..Constants import (
    EXIT_FULLSCREEN_KEY,
    FIRST_KEY,
    FULLSCREEN_KEYS,
    LAST_KEY,
    NEXT_KEYS,
    PREV_KEYS,
)
from .gestures import SwipeIntent


@dataclass(frozen=True)
class Next:
    """Advance one slide."""


@dataclass(frozen=True)
class Prev:
    """Go back one slide."""


@dataclass(frozen=True)
class GoTo:
    """Jump to a slide by index, or counting back from the last slide."""
    index: int
    from_end: bool = False

    def resolve(self, total: int) -> int:
        """Absolute slide index for a deck of ``total`` slides."""
        if self.from_end:
            return total - 1 - self.index
        return self.index


@dataclass(frozen=True)
class ToggleFullscreen:
    """Enter or leave full-screen."""


@dataclass(frozen=True)
class ExitFullscreen:
    """Leave full-screen if it is active."""


Intent = Union[Next, Prev, GoTo, ToggleFullscreen, ExitFullscreen]

FIRST_SLIDE = GoTo(0)
LAST_SLIDE = GoTo(0, from_end=True)

_KEY_INTENTS = {
    **{key: Next() for key in NEXT_KEYS},
    **{key: Prev() for key in PREV_KEYS},
    FIRST_KEY: FIRST_SLIDE,
    LAST_KEY: LAST_SLIDE,
    **{key: ToggleFullscreen() for key in FULLSCREEN_KEYS},
    EXIT_FULLSCREEN_KEY: ExitFullscreen(),
}


def intent_for_key(key: str) -> Optional[Intent]:
    """
    Map a key name to an intent.
    
    Modifier combinations arrive as names such as ``ctrl+f`` and therefore
    never match the plain ``f`` binding.
    """
    return _KEY_INTENTS.get(key)


def intent_for_swipe(swipe: SwipeIntent) -> Optional[Intent]:
    """Map a classified swipe to an intent, or None for no swipe."""
    if swipe is SwipeIntent.NEXT:
        return Next()
    if swipe is SwipeIntent.PREV:
        return Prev()
    return None
