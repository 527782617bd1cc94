"""
Input adapters.

Each adapter turns one kind of raw input into an intent and hands it to the
controller. None of them keep navigation state; the gesture adapter keeps
only the start point of the gesture in progress.
"""

from typing import Optional, TYPE_CHECKING

from loguru import logger

from ..Constants import DEFAULT_SWIPE_MIN_DISTANCE, NEXT_BUTTON_ID, PREV_BUTTON_ID
from .gestures import GestureSample, SwipeIntent, classify_swipe
from .intents import ExitFullscreen, GoTo, Next, Prev, intent_for_key, intent_for_swipe

if TYPE_CHECKING:
    from .navigation_manager import NavigationController


class KeyboardAdapter:
    """Keyboard shortcuts."""

    def __init__(self, controller: "NavigationController"):
        self.controller = controller

    def handle_key(self, key: str) -> bool:
        """
        Dispatch a key press.

        Returns:
            True if the key is a navigation key and its default behaviour
            should be suppressed. Escape only counts while full-screen is on.
        """
        intent = intent_for_key(key)
        if intent is None:
            return False
        if isinstance(intent, ExitFullscreen) and not self.controller.is_fullscreen:
            return False
        self.controller.dispatch(intent)
        return True


class GestureAdapter:
    """Pointer drags and touch swipes over the slide container."""

    def __init__(self, controller: "NavigationController", min_distance: float = DEFAULT_SWIPE_MIN_DISTANCE):
        self.controller = controller
        self.min_distance = min_distance
        self._start: Optional[tuple] = None

    def begin(self, x: float, y: float) -> None:
        self._start = (x, y)

    def finish(self, x: float, y: float) -> SwipeIntent:
        """Complete the gesture, dispatching next/prev for a swipe."""
        if self._start is None:
            return SwipeIntent.NONE
        start_x, start_y = self._start
        self._start = None

        swipe = classify_swipe(GestureSample(start_x, start_y, x, y), self.min_distance)
        intent = intent_for_swipe(swipe)
        if intent is not None:
            logger.debug(f"Swipe {swipe.value} from ({start_x}, {start_y}) to ({x}, {y})")
            self.controller.dispatch(intent)
        return swipe


class ProgressDotsAdapter:
    """Clicks on progress dots."""

    def __init__(self, controller: "NavigationController"):
        self.controller = controller

    def select(self, index: int) -> bool:
        return self.controller.dispatch(GoTo(index))


class ButtonAdapter:
    """Previous/next buttons."""

    def __init__(self, controller: "NavigationController"):
        self.controller = controller

    def pressed(self, button_id: Optional[str]) -> bool:
        if button_id == PREV_BUTTON_ID:
            return self.controller.dispatch(Prev())
        if button_id == NEXT_BUTTON_ID:
            return self.controller.dispatch(Next())
        return False


class InputAdapters:
    """The full set of adapters for one controller, attached to the view once."""

    def __init__(self, controller: "NavigationController", swipe_min_distance: float = DEFAULT_SWIPE_MIN_DISTANCE):
        self.keyboard = KeyboardAdapter(controller)
        self.gestures = GestureAdapter(controller, swipe_min_distance)
        self.dots = ProgressDotsAdapter(controller)
        self.buttons = ButtonAdapter(controller)
