# deckview/UI/Screens/deck_screen.py
# Description: The presentation screen; hosts the slides and routes input to the navigation controller
#
# Imports
from typing import List, Optional
#
# Third-Party Imports
from loguru import logger
from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static
#
# Local Imports
from ...Constants import (
    NAV_BAR_ID,
    NEXT_BUTTON_ID,
    PREV_BUTTON_ID,
    PROGRESS_DOTS_ID,
    SLIDESHOW_CONTAINER_ID,
    SLIDE_COUNTER_ID,
)
from ...Deck.models import DeckDocument
from ...config import DeckSettings
from ...navigation.activation import ActivationHookRegistry
from ...navigation.input_adapters import InputAdapters
from ...navigation.location import Location
from ...navigation.navigation_manager import NavigationController
from ...navigation.scheduler import TimerScheduler
from ...Widgets.gesture_surface import GestureSurface
from ...Widgets.progress_dots import ProgressDots
from ...Widgets.slide_counter import SlideCounter
from ...Widgets.slide_view import SlideView
from ..fullscreen import ChromeFullscreen
#
#######################################################################################################################
#
# Classes:

class DeckScreen(Screen):
    """
    Presentation screen.

    Implements the controller's DeckView port: slides are ``SlideView``
    widgets, the optional navigation bar holds the buttons, progress dots
    and counter. Widgets switched off in the settings are simply not
    composed, and every update skips what is missing.
    """

    def __init__(
        self,
        deck: DeckDocument,
        settings: Optional[DeckSettings] = None,
        location: Optional[Location] = None,
        hooks: Optional[ActivationHookRegistry] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.deck = deck
        self.deck_settings = settings or DeckSettings()
        self.location = location or Location()
        self.hooks = hooks or ActivationHookRegistry()
        self.inputs: Optional[InputAdapters] = None
        self.controller: Optional[NavigationController] = None

    def compose(self) -> ComposeResult:
        display = self.deck_settings.display
        yield Header()
        with GestureSurface(id=SLIDESHOW_CONTAINER_ID):
            if self.deck.slides:
                for slide in self.deck.slides:
                    yield SlideView(slide, id=f"slide-{slide.index}")
            else:
                yield Static("No slides found", classes="empty-deck")
        with Horizontal(id=NAV_BAR_ID):
            if display.show_nav_buttons:
                yield self._nav_button("◀ Prev", PREV_BUTTON_ID)
            if display.show_progress_dots:
                yield ProgressDots(id=PROGRESS_DOTS_ID)
            if display.show_counter:
                yield SlideCounter(id=SLIDE_COUNTER_ID)
            if display.show_nav_buttons:
                yield self._nav_button("Next ▶", NEXT_BUTTON_ID)
        yield Footer()

    @staticmethod
    def _nav_button(label: str, button_id: str) -> Button:
        button = Button(label, id=button_id, classes="nav-button")
        # Keys belong to the deck, not to a focused button
        button.can_focus = False
        return button

    def on_mount(self) -> None:
        """Create the controller once the slides exist."""
        self.controller = NavigationController(
            view=self,
            scheduler=TimerScheduler(self),
            location=self.location,
            hooks=self.hooks,
            fullscreen=ChromeFullscreen(self, enabled=self.deck_settings.display.fullscreen_enabled),
            settle_delay=self.deck_settings.navigation.settle_delay,
            activation_delay=self.deck_settings.navigation.activation_delay,
            swipe_min_distance=self.deck_settings.gestures.drag_min_distance,
        )
        self.controller.init()

    # --- DeckView port ---

    def slide_handles(self) -> List[SlideView]:
        return list(self.query(SlideView))

    def attach_inputs(self, adapters: InputAdapters) -> None:
        self.inputs = adapters
        self.query_one(GestureSurface).gesture_adapter = adapters.gestures
        logger.debug("Input adapters attached to deck screen")

    def render_progress_dots(self, count: int, active_index: int) -> None:
        for dots in self.query(ProgressDots):
            dots.render_dots(count, active_index)

    def update_progress_dots(self, active_index: int) -> None:
        for dots in self.query(ProgressDots):
            dots.set_active(active_index)

    def update_counter(self, current: int, total: int) -> None:
        for counter in self.query(SlideCounter):
            counter.set_position(current, total)

    def update_nav_buttons(self, prev_disabled: bool, next_disabled: bool) -> None:
        for button in self.query(Button):
            if button.id == PREV_BUTTON_ID:
                button.disabled = prev_disabled
            elif button.id == NEXT_BUTTON_ID:
                button.disabled = next_disabled

    # --- Input routing ---

    def on_key(self, event: events.Key) -> None:
        if self.inputs is None:
            return
        if self.inputs.keyboard.handle_key(event.key):
            event.prevent_default()
            event.stop()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if self.inputs is None:
            return
        event.stop()
        self.inputs.buttons.pressed(event.button.id)

    def on_progress_dots_dot_selected(self, event: ProgressDots.DotSelected) -> None:
        if self.inputs is None:
            return
        event.stop()
        self.inputs.dots.select(event.index)

#
# End of deck_screen.py
#######################################################################################################################
