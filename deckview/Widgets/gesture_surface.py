# deckview/Widgets/gesture_surface.py
# Container that turns mouse drags into swipe gestures
#
# Imports
from typing import Optional, TYPE_CHECKING
#
# Third-Party Imports
from textual import events
from textual.containers import Container

if TYPE_CHECKING:
    from ..navigation.input_adapters import GestureAdapter


class GestureSurface(Container):
    """
    Holds the slides and reports drags to a gesture adapter.

    Events are observed, never consumed, so scrolling and clicks inside the
    slides keep working.
    """

    def __init__(self, *children, **kwargs):
        super().__init__(*children, **kwargs)
        self.gesture_adapter: Optional["GestureAdapter"] = None

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if self.gesture_adapter is None:
            return
        self.capture_mouse()
        self.gesture_adapter.begin(event.screen_x, event.screen_y)

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self.gesture_adapter is None:
            return
        self.release_mouse()
        self.gesture_adapter.finish(event.screen_x, event.screen_y)
