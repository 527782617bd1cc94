# deckview/Widgets/slide_view.py
# A single slide: scrollable Markdown that can be marked active
#
# Imports
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Markdown
#
# Local Imports
from ..Constants import ACTIVE_CLASS, SLIDE_CLASS
from ..Deck.models import SlideSource


class SlideView(VerticalScroll):
    """One slide of the deck. Only the active slide is displayed."""

    DEFAULT_CLASSES = SLIDE_CLASS
    can_focus = False

    def __init__(self, source: SlideSource, **kwargs):
        super().__init__(**kwargs)
        self.source = source

    @property
    def index(self) -> int:
        return self.source.index

    def compose(self) -> ComposeResult:
        yield Markdown(self.source.body, classes="slide-content")

    def set_active(self, active: bool) -> None:
        self.set_class(active, ACTIVE_CLASS)

    def reset_scroll(self) -> None:
        self.scroll_home(animate=False)
