"""Tests for the manual (virtual clock) scheduler."""

from unittest.mock import MagicMock

from deckview.navigation.scheduler import ManualScheduler


def test_runs_nothing_until_advanced():
    scheduler = ManualScheduler()
    callback = MagicMock()

    handle = scheduler.call_later(0.5, callback, 1, name="job")

    callback.assert_not_called()
    assert handle.pending
    assert handle.name == "job"
    assert handle.due == 0.5


def test_advance_runs_due_tasks_in_order():
    scheduler = ManualScheduler()
    calls = []
    scheduler.call_later(0.5, calls.append, "late")
    scheduler.call_later(0.1, calls.append, "early")
    scheduler.call_later(0.1, calls.append, "early-second")

    assert scheduler.advance(0.2) == 2
    assert calls == ["early", "early-second"]
    assert scheduler.now == 0.2

    assert scheduler.advance(1.0) == 1
    assert calls == ["early", "early-second", "late"]


def test_cancelled_task_does_not_run():
    scheduler = ManualScheduler()
    callback = MagicMock()
    handle = scheduler.call_later(0.1, callback)

    handle.cancel()
    scheduler.run_all()

    callback.assert_not_called()
    assert handle.cancelled
    assert not handle.pending


def test_callbacks_may_schedule_more_work():
    scheduler = ManualScheduler()
    calls = []

    def first():
        calls.append("first")
        scheduler.call_later(0.2, calls.append, "second")

    scheduler.call_later(0.1, first)

    assert scheduler.run_all() == 2
    assert calls == ["first", "second"]
    assert abs(scheduler.now - 0.3) < 1e-9


def test_fired_handle_is_not_pending():
    scheduler = ManualScheduler()
    handle = scheduler.call_later(0, MagicMock())

    scheduler.advance(0)

    assert handle.fired
    assert scheduler.pending == []
