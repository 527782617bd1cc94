"""Deck viewer widgets."""

from .gesture_surface import GestureSurface
from .progress_dots import ProgressDot, ProgressDots
from .slide_counter import SlideCounter
from .slide_view import SlideView

__all__ = [
    "GestureSurface",
    "ProgressDot",
    "ProgressDots",
    "SlideCounter",
    "SlideView",
]
