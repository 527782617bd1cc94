# deckview/Widgets/slide_counter.py
#
# Imports
from textual.reactive import reactive
from textual.widgets import Static


class SlideCounter(Static):
    """Shows "current / total"."""

    current: reactive[int] = reactive(0)
    total: reactive[int] = reactive(0)

    def watch_current(self, value: int) -> None:
        self._refresh_text()

    def watch_total(self, value: int) -> None:
        self._refresh_text()

    def set_position(self, current: int, total: int) -> None:
        self.current = current
        self.total = total

    def _refresh_text(self) -> None:
        self.update(f"[b]{self.current}[/b] / {self.total}")
