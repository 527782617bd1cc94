"""
Swipe detection for pointer and touch gestures.

Everything here is pure: a gesture sample goes in, a navigation intent
comes out. No state is kept between gestures.
"""

from dataclasses import dataclass
from enum import Enum

from ..Constants import DEFAULT_SWIPE_MIN_DISTANCE


class SwipeIntent(str, Enum):
    """Navigation direction derived from a swipe."""
    NEXT = "next"
    PREV = "prev"
    NONE = "none"


@dataclass(frozen=True)
class GestureSample:
    """Start and end coordinates of one touch or drag interaction."""
    start_x: float
    start_y: float
    end_x: float
    end_y: float


def classify_swipe(sample: GestureSample, min_distance: float = DEFAULT_SWIPE_MIN_DISTANCE) -> SwipeIntent:
    """
    Classify a gesture sample as a horizontal swipe.
    
    A swipe counts only when horizontal movement dominates vertical movement
    and exceeds ``min_distance``. Moving the finger leftward advances.
    
    Args:
        sample: The gesture to classify
        min_distance: Minimum horizontal travel, exclusive
        
    Returns:
        SwipeIntent.NEXT, SwipeIntent.PREV or SwipeIntent.NONE
    """
    dx = sample.start_x - sample.end_x
    dy = sample.start_y - sample.end_y
    
    if abs(dx) > abs(dy) and abs(dx) > min_distance:
        if dx > 0:
            return SwipeIntent.NEXT
        return SwipeIntent.PREV
    return SwipeIntent.NONE
