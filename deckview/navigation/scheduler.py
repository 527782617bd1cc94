"""
Deferred callbacks for the navigation controller.

The controller never sleeps; it asks a scheduler to run a callback later
and gets back a handle naming the task. ``TimerScheduler`` runs tasks on
Textual's event loop, ``ManualScheduler`` runs them on a virtual clock that
only moves when told to.
"""

from dataclasses import dataclass, field
from functools import partial
from itertools import count
from time import monotonic
from typing import Any, Callable, List, Optional, Protocol, TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from textual.message_pump import MessagePump
    from textual.timer import Timer


@dataclass
class TaskHandle:
    """Identifies one scheduled callback."""
    task_id: int
    name: str
    due: float
    fired: bool = False
    cancelled: bool = False
    _timer: Optional["Timer"] = field(default=None, repr=False, compare=False)

    @property
    def pending(self) -> bool:
        return not (self.fired or self.cancelled)

    def cancel(self) -> None:
        """Stop the callback from running if it has not run yet."""
        if not self.pending:
            return
        self.cancelled = True
        if self._timer is not None:
            self._timer.stop()
        logger.debug(f"Cancelled scheduled task {self.name}#{self.task_id}")


class Scheduler(Protocol):
    """Anything that can run a callback after a delay on the UI thread."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any, name: str = "task") -> TaskHandle:
        ...


class ManualScheduler:
    """
    Scheduler driven by a virtual clock.

    Tasks run only from ``advance()`` or ``run_all()``, in due-time order,
    ties broken by scheduling order. Callbacks may schedule further tasks.
    """

    def __init__(self):
        self.now: float = 0.0
        self._ids = count(1)
        self._queue: List[tuple] = []

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any, name: str = "task") -> TaskHandle:
        handle = TaskHandle(task_id=next(self._ids), name=name, due=self.now + max(delay, 0.0))
        self._queue.append((handle, partial(callback, *args)))
        return handle

    @property
    def pending(self) -> List[TaskHandle]:
        """Handles that have not fired or been cancelled yet, soonest first."""
        return [handle for handle, _ in self._ordered() if handle.pending]

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and run every task that falls due.

        Returns:
            Number of callbacks that ran
        """
        return self._run_until(self.now + seconds)

    def run_all(self) -> int:
        """Run tasks until nothing is pending, moving the clock as needed."""
        ran = 0
        while self.pending:
            ran += self._run_until(self.pending[0].due)
        return ran

    def _run_until(self, target: float) -> int:
        ran = 0
        while True:
            due = [entry for entry in self._ordered() if entry[0].pending and entry[0].due <= target]
            if not due:
                break
            handle, callback = due[0]
            self.now = max(self.now, handle.due)
            self._fire(handle, callback)
            ran += 1
        self.now = max(self.now, target)
        return ran

    def _ordered(self) -> List[tuple]:
        return sorted(self._queue, key=lambda entry: (entry[0].due, entry[0].task_id))

    def _fire(self, handle: TaskHandle, callback: Callable[[], Any]) -> None:
        self._queue = [entry for entry in self._queue if entry[0] is not handle]
        handle.fired = True
        callback()


class TimerScheduler:
    """Scheduler backed by Textual timers on a widget, screen or app."""

    def __init__(self, node: "MessagePump"):
        self.node = node
        self._ids = count(1)

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any, name: str = "task") -> TaskHandle:
        handle = TaskHandle(task_id=next(self._ids), name=name, due=monotonic() + delay)

        def _run() -> None:
            if not handle.pending:
                return
            handle.fired = True
            callback(*args)

        handle._timer = self.node.set_timer(delay, _run, name=f"{name}#{handle.task_id}")
        return handle
