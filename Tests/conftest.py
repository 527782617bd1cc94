"""
Root conftest.py for shared test fixtures and configuration.
This file provides the headless doubles used across the test suite.
"""

import sys
from pathlib import Path
from typing import List, Optional

import pytest
from loguru import logger

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from deckview.errors import FullscreenUnavailableError
from deckview.navigation.activation import ActivationHookRegistry
from deckview.navigation.location import Location
from deckview.navigation.navigation_manager import NavigationController
from deckview.navigation.scheduler import ManualScheduler

SETTLE_DELAY = 0.5
ACTIVATION_DELAY = 0.1


# ========== Headless doubles ==========

class FakeSlide:
    """Slide handle that records what the controller did to it."""

    def __init__(self, index: int, active: bool = False):
        self.index = index
        self.active = active
        self.scroll_resets = 0

    def set_active(self, active: bool) -> None:
        self.active = active

    def reset_scroll(self) -> None:
        self.scroll_resets += 1


class RecordingDeckView:
    """DeckView with every optional element present, recording all updates."""

    def __init__(self, slide_count: int = 5, has_widgets: bool = True):
        self.slides: List[FakeSlide] = [FakeSlide(i) for i in range(slide_count)]
        self.has_widgets = has_widgets
        self.attached = []
        self.dots: List[bool] = []
        self.counter: Optional[tuple] = None
        self.buttons: Optional[dict] = None

    def slide_handles(self):
        return self.slides

    def attach_inputs(self, adapters) -> None:
        self.attached.append(adapters)

    def render_progress_dots(self, count: int, active_index: int) -> None:
        if self.has_widgets:
            self.dots = [i == active_index for i in range(count)]

    def update_progress_dots(self, active_index: int) -> None:
        if self.has_widgets:
            self.dots = [i == active_index for i in range(len(self.dots))]

    def update_counter(self, current: int, total: int) -> None:
        if self.has_widgets:
            self.counter = (current, total)

    def update_nav_buttons(self, prev_disabled: bool, next_disabled: bool) -> None:
        if self.has_widgets:
            self.buttons = {"prev_disabled": prev_disabled, "next_disabled": next_disabled}

    @property
    def active_slides(self) -> List[int]:
        return [slide.index for slide in self.slides if slide.active]


class FakeFullscreen:
    """Full-screen port; ``available=False`` mimics a platform refusal."""

    def __init__(self, available: bool = True):
        self.available = available
        self.is_active = False
        self.requests = 0

    def request(self) -> None:
        self.requests += 1
        if not self.available:
            raise FullscreenUnavailableError("not allowed")
        self.is_active = True

    def exit(self) -> None:
        self.is_active = False


# ========== Fixtures ==========

@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def deck_view():
    return RecordingDeckView(slide_count=5)


@pytest.fixture
def fullscreen():
    return FakeFullscreen()


@pytest.fixture
def make_controller(scheduler):
    """Factory building a controller around the shared manual scheduler."""
    def _make(view=None, fragment=None, hooks=None, fullscreen=None,
              settle_delay=SETTLE_DELAY, activation_delay=ACTIVATION_DELAY, init=True):
        controller = NavigationController(
            view=view if view is not None else RecordingDeckView(),
            scheduler=scheduler,
            location=Location(fragment),
            hooks=hooks if hooks is not None else ActivationHookRegistry(),
            fullscreen=fullscreen,
            settle_delay=settle_delay,
            activation_delay=activation_delay,
        )
        if init:
            controller.init()
        return controller
    return _make


@pytest.fixture
def settled(scheduler):
    """Let all pending deferred work (activations, lock release) run."""
    def _settle():
        scheduler.run_all()
    return _settle


@pytest.fixture
def log_messages():
    """Capture loguru output for assertions."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
