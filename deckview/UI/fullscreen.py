# deckview/UI/fullscreen.py
# Description: Full-screen mode for a terminal screen (hides the viewer chrome)
#
# Imports
from textual.screen import Screen
from loguru import logger
#
# Local Imports
from ..Constants import FULLSCREEN_CLASS
from ..errors import FullscreenUnavailableError


class ChromeFullscreen:
    """
    Full-screen for a terminal UI: the header, footer and navigation bar are
    hidden through a class on the screen so the slide gets every cell.
    """

    def __init__(self, screen: Screen, enabled: bool = True):
        self.screen = screen
        self.enabled = enabled

    @property
    def is_active(self) -> bool:
        return self.screen.has_class(FULLSCREEN_CLASS)

    def request(self) -> None:
        if not self.enabled:
            raise FullscreenUnavailableError("full-screen is disabled in the configuration")
        self.screen.add_class(FULLSCREEN_CLASS)
        logger.debug("Entered full-screen")

    def exit(self) -> None:
        self.screen.remove_class(FULLSCREEN_CLASS)
        logger.debug("Left full-screen")
