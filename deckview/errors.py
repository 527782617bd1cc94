# deckview/errors.py
# Description: Exception types raised by the deck viewer
#
#######################################################################################################################
#
# Classes:

class DeckViewError(Exception):
    """Base class for deckview errors."""


class DeckLoadError(DeckViewError):
    """Raised when a deck file cannot be read."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load deck {path}: {reason}")


class FullscreenUnavailableError(DeckViewError):
    """Raised by a full-screen port when the platform refuses the request."""


class ConfigError(DeckViewError):
    """Raised when configuration values fail validation."""

#
# End of errors.py
#######################################################################################################################
