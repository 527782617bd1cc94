# deckview/Widgets/progress_dots.py
# Clickable row of dots, one per slide
#
# Imports
from typing import List
#
# Third-Party Imports
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Static
#
# Local Imports
from ..Constants import ACTIVE_CLASS, PROGRESS_DOT_CLASS

DOT_GLYPH = "●"


class ProgressDot(Static):
    """A single progress indicator."""

    def __init__(self, index: int, active: bool = False, **kwargs):
        classes = f"{PROGRESS_DOT_CLASS} dot-{index}"
        if active:
            classes += f" {ACTIVE_CLASS}"
        super().__init__(DOT_GLYPH, classes=classes, **kwargs)
        self.index = index

    def on_click(self, event) -> None:
        event.stop()
        self.post_message(ProgressDots.DotSelected(self.index))


class ProgressDots(Horizontal):
    """
    One dot per slide; the dot of the active slide carries the active class.
    """

    class DotSelected(Message):
        """Posted when a dot is clicked."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    @property
    def dots(self) -> List[ProgressDot]:
        return list(self.query(ProgressDot))

    def render_dots(self, count: int, active_index: int) -> None:
        """Replace all dots with ``count`` new ones."""
        self.remove_children()
        self.mount_all(ProgressDot(i, active=i == active_index) for i in range(count))

    def set_active(self, active_index: int) -> None:
        for dot in self.dots:
            dot.set_class(dot.index == active_index, ACTIVE_CLASS)
