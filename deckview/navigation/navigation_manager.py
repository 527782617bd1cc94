"""
Navigation controller for a slide deck.
"""

from typing import FrozenSet, Optional, Dict

from loguru import logger

from ..Constants import (
    DEFAULT_ACTIVATION_DELAY,
    DEFAULT_SETTLE_DELAY,
    DEFAULT_SWIPE_MIN_DISTANCE,
)
from ..errors import FullscreenUnavailableError
from ..state.navigation_state import NavigationState
from .activation import ActivationHook, ActivationHookRegistry, ActivationTracker
from .input_adapters import InputAdapters
from .intents import ExitFullscreen, GoTo, Intent, Next, Prev, ToggleFullscreen
from .location import Location, format_slide_fragment, parse_slide_fragment
from .ports import DeckView, FullscreenPort
from .scheduler import Scheduler, TaskHandle
from .slide_registry import SlideRegistry


class NavigationController:
    """
    Drives linear navigation through one deck.

    Owns the slide registry, the activation tracker and the transition lock.
    Every navigation request funnels into ``go_to_slide``; while a transition
    is settling, requests are dropped rather than queued.
    """

    def __init__(
        self,
        view: DeckView,
        scheduler: Scheduler,
        location: Optional[Location] = None,
        hooks: Optional[ActivationHookRegistry] = None,
        fullscreen: Optional[FullscreenPort] = None,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
        activation_delay: float = DEFAULT_ACTIVATION_DELAY,
        swipe_min_distance: float = DEFAULT_SWIPE_MIN_DISTANCE,
    ):
        self.view = view
        self.scheduler = scheduler
        self.location = location or Location()
        self.hooks = hooks or ActivationHookRegistry()
        self.fullscreen = fullscreen
        self.settle_delay = settle_delay
        self.activation_delay = activation_delay
        self.swipe_min_distance = swipe_min_distance

        self.state = NavigationState()
        self.registry = SlideRegistry()
        self.activations = ActivationTracker()
        self.inputs: Optional[InputAdapters] = None
        self._pending_activations: Dict[int, TaskHandle] = {}
        self._initialized = False

    # --- Read-only surface ---

    @property
    def current_index(self) -> int:
        return self.state.active_index

    @property
    def total_slides(self) -> int:
        return self.registry.total

    @property
    def is_transitioning(self) -> bool:
        return self.state.transitioning

    @property
    def is_inert(self) -> bool:
        """True when there is nothing to navigate."""
        return self.registry.is_empty

    @property
    def activated_slides(self) -> FrozenSet[int]:
        return self.activations.snapshot()

    @property
    def is_fullscreen(self) -> bool:
        return self.fullscreen is not None and self.fullscreen.is_active

    # --- Setup ---

    def init(self) -> bool:
        """
        Discover the slides, wire the inputs and show the first slide.

        The starting slide comes from the location fragment when it names a
        slide in range, otherwise slide 0. Calling this again is a no-op.

        Returns:
            True if the deck has slides, False if the controller is inert
        """
        if self._initialized:
            return not self.is_inert
        self._initialized = True

        self.registry = SlideRegistry(self.view.slide_handles())
        if self.registry.is_empty:
            logger.warning("No slides found")
            return False

        initial = parse_slide_fragment(self.location.fragment)
        if initial is None or not self.registry.is_valid_index(initial):
            initial = 0
        self.state.active_index = initial

        self.inputs = InputAdapters(self, self.swipe_min_distance)
        self.view.attach_inputs(self.inputs)
        self.view.render_progress_dots(self.registry.total, initial)

        self.go_to_slide(initial)

        logger.info(f"Slideshow initialized with {self.registry.total} slides")
        return True

    def register_activation_hook(self, index: int, hook: ActivationHook) -> None:
        """
        Register the hook run the first time a slide becomes visible.

        Args:
            index: Slide index
            hook: Nullary callable
        """
        self.hooks.register(index, hook)

    # --- Navigation ---

    def go_to_slide(self, index: int) -> bool:
        """
        Transition to a slide.

        Args:
            index: Target slide index

        Returns:
            True if the transition started, False if the request was ignored
            (out of range, inert deck, or a transition still settling)
        """
        if not self.registry.is_valid_index(index):
            logger.debug(f"Ignoring navigation to slide {index} (deck has {self.registry.total})")
            return False

        if not self.state.acquire_lock():
            logger.debug(f"Ignoring navigation to slide {index}: transition in progress")
            return False

        slide = self.registry.activate(index)
        slide.reset_scroll()

        self.state.active_index = index

        self.location.replace(format_slide_fragment(index))

        if index not in self.activations and index not in self._pending_activations:
            self._pending_activations[index] = self.scheduler.call_later(
                self.activation_delay, self._activate_slide, index, name=f"activate-slide-{index}"
            )

        self._refresh_widgets()

        self.scheduler.call_later(self.settle_delay, self._release_lock, name="release-transition-lock")

        logger.debug(f"Navigated to slide {index}")
        return True

    def next(self) -> bool:
        """Advance one slide unless already on the last one."""
        if self.state.active_index < self.registry.last_index:
            return self.go_to_slide(self.state.active_index + 1)
        return False

    def prev(self) -> bool:
        """Go back one slide unless already on the first one."""
        if self.state.active_index > 0:
            return self.go_to_slide(self.state.active_index - 1)
        return False

    def dispatch(self, intent: Intent) -> bool:
        """
        Apply an intent produced by an input adapter.

        Returns:
            Result of the navigation call, or whether the full-screen
            intent applied
        """
        if isinstance(intent, Next):
            return self.next()
        if isinstance(intent, Prev):
            return self.prev()
        if isinstance(intent, GoTo):
            return self.go_to_slide(intent.resolve(self.registry.total))
        if isinstance(intent, ToggleFullscreen):
            return self.toggle_fullscreen()
        if isinstance(intent, ExitFullscreen):
            return self.exit_fullscreen()
        raise TypeError(f"Unknown navigation intent: {intent!r}")

    # --- Full-screen ---

    def toggle_fullscreen(self) -> bool:
        """Enter full-screen, or leave it if already active."""
        if self.fullscreen is None:
            logger.debug("Full-screen toggle requested but no full-screen support is attached")
            return False
        try:
            if self.fullscreen.is_active:
                self.fullscreen.exit()
            else:
                self.fullscreen.request()
        except FullscreenUnavailableError as e:
            logger.warning(f"Fullscreen not available: {e}")
            return False
        return True

    def exit_fullscreen(self) -> bool:
        """Leave full-screen if it is active."""
        if not self.is_fullscreen:
            return False
        try:
            self.fullscreen.exit()
        except FullscreenUnavailableError as e:
            logger.warning(f"Could not leave full-screen: {e}")
            return False
        return True

    # --- Deferred work ---

    def _activate_slide(self, index: int) -> None:
        self._pending_activations.pop(index, None)
        if index in self.activations:
            return
        hook = self.hooks.resolve(index)
        if hook is None:
            logger.debug(f"No activation hook for slide {index}")
        else:
            try:
                hook()
                logger.debug(f"Ran activation hook for slide {index}")
            except Exception:
                logger.exception(f"Activation hook for slide {index} failed")
        self.activations.mark(index)

    def _release_lock(self) -> None:
        self.state.release_lock()
        logger.debug(f"Transition settled: {self.state.to_dict()}")

    def _refresh_widgets(self) -> None:
        index = self.state.active_index
        total = self.registry.total
        self.view.update_progress_dots(index)
        self.view.update_counter(index + 1, total)
        self.view.update_nav_buttons(prev_disabled=index == 0, next_disabled=index == total - 1)
