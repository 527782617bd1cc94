"""
Interfaces between the navigation core and whatever draws the deck.

The controller only talks to these protocols; the Textual screen in
``deckview.UI.Screens.deck_screen`` is one implementation, the recording
fakes in the test suite are another.
"""

from typing import Protocol, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .input_adapters import InputAdapters


class SlideHandle(Protocol):
    """One presentation unit. Its contents are never inspected."""

    def set_active(self, active: bool) -> None:
        ...

    def reset_scroll(self) -> None:
        ...


class DeckView(Protocol):
    """
    The document hosting the deck.

    Every method except ``slide_handles`` refers to an optional element; an
    implementation without that element does nothing.
    """

    def slide_handles(self) -> Sequence[SlideHandle]:
        ...

    def attach_inputs(self, adapters: "InputAdapters") -> None:
        ...

    def render_progress_dots(self, count: int, active_index: int) -> None:
        ...

    def update_progress_dots(self, active_index: int) -> None:
        ...

    def update_counter(self, current: int, total: int) -> None:
        ...

    def update_nav_buttons(self, prev_disabled: bool, next_disabled: bool) -> None:
        ...


class FullscreenPort(Protocol):
    """Platform full-screen control. ``request`` may raise FullscreenUnavailableError."""

    @property
    def is_active(self) -> bool:
        ...

    def request(self) -> None:
        ...

    def exit(self) -> None:
        ...
