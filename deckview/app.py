"""Deck viewer application."""

from typing import Optional

from loguru import logger
from textual.app import App
from textual.binding import Binding

from .Deck.models import DeckDocument
from .UI.Screens.deck_screen import DeckScreen
from .config import DeckSettings
from .navigation.activation import ActivationHookRegistry
from .navigation.location import Location
from .navigation.navigation_manager import NavigationController


class DeckViewApp(App):
    """Terminal slideshow.

    The app only wires things together; navigation lives in the
    ``NavigationController`` owned by the ``DeckScreen``.
    """

    CSS_PATH = "css/deckview.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+q", "quit", "Quit", show=False, priority=True),
    ]

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
        self.deck_screen: Optional[DeckScreen] = None

    @property
    def controller(self) -> Optional[NavigationController]:
        return self.deck_screen.controller if self.deck_screen else None

    def on_mount(self) -> None:
        self.title = self.deck.title
        self.location.add_listener(self._on_location_changed)
        self.deck_screen = DeckScreen(
            self.deck,
            settings=self.deck_settings,
            location=self.location,
            hooks=self.hooks,
        )
        self.push_screen(self.deck_screen)
        logger.info(f"Showing deck '{self.deck.title}' ({self.deck.total} slides)")

    def _on_location_changed(self, fragment: str) -> None:
        self.sub_title = fragment
