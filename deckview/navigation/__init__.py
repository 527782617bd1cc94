"""
Slide navigation core.
"""

from .activation import ActivationHookRegistry, ActivationTracker, resolve_by_convention
from .gestures import GestureSample, SwipeIntent, classify_swipe
from .input_adapters import InputAdapters
from .intents import ExitFullscreen, GoTo, Next, Prev, ToggleFullscreen, intent_for_key
from .location import Location, format_slide_fragment, parse_slide_fragment
from .navigation_manager import NavigationController
from .scheduler import ManualScheduler, TaskHandle, TimerScheduler
from .slide_registry import SlideRegistry

__all__ = [
    'ActivationHookRegistry',
    'ActivationTracker',
    'resolve_by_convention',
    'GestureSample',
    'SwipeIntent',
    'classify_swipe',
    'InputAdapters',
    'ExitFullscreen',
    'GoTo',
    'Next',
    'Prev',
    'ToggleFullscreen',
    'intent_for_key',
    'Location',
    'format_slide_fragment',
    'parse_slide_fragment',
    'NavigationController',
    'ManualScheduler',
    'TaskHandle',
    'TimerScheduler',
    'SlideRegistry',
]
