"""Tests for swipe classification."""

import pytest
from hypothesis import given, strategies as st

from deckview.navigation.gestures import GestureSample, SwipeIntent, classify_swipe

coordinates = st.floats(min_value=-5000, max_value=5000, allow_nan=False, allow_infinity=False)


@pytest.mark.unit
@pytest.mark.parametrize(
    "sample, expected",
    [
        (GestureSample(200, 100, 100, 110), SwipeIntent.NEXT),
        (GestureSample(100, 100, 200, 90), SwipeIntent.PREV),
        (GestureSample(100, 100, 130, 100), SwipeIntent.NONE),
        (GestureSample(100, 100, 40, 200), SwipeIntent.NONE),
        (GestureSample(200, 0, 100, 0), SwipeIntent.NEXT),
        (GestureSample(100, 0, 200, 0), SwipeIntent.PREV),
        (GestureSample(100, 0, 120, 0), SwipeIntent.NONE),
        (GestureSample(100, 0, 150, 60), SwipeIntent.NONE),
    ],
    ids=[
        "left-swipe", "right-swipe", "too-short", "mostly-vertical",
        "flat-left", "flat-right", "flat-20px", "vertical-dominates-at-threshold",
    ],
)
def test_classify_swipe_cases(sample, expected):
    assert classify_swipe(sample) is expected


@pytest.mark.unit
def test_threshold_is_exclusive():
    assert classify_swipe(GestureSample(150, 0, 100, 0)) is SwipeIntent.NONE
    assert classify_swipe(GestureSample(151, 0, 100, 0)) is SwipeIntent.NEXT


@pytest.mark.unit
def test_diagonal_tie_is_not_a_swipe():
    assert classify_swipe(GestureSample(200, 200, 100, 100)) is SwipeIntent.NONE


@pytest.mark.unit
def test_custom_min_distance():
    sample = GestureSample(10, 0, 2, 0)

    assert classify_swipe(sample, min_distance=6) is SwipeIntent.NEXT
    assert classify_swipe(sample) is SwipeIntent.NONE


class TestClassifySwipeProperties:

    @given(x=coordinates, y=coordinates)
    def test_no_movement_is_never_a_swipe(self, x, y):
        assert classify_swipe(GestureSample(x, y, x, y)) is SwipeIntent.NONE

    @given(sx=coordinates, sy=coordinates, ex=coordinates, ey=coordinates)
    def test_reversed_gesture_gives_opposite_intent(self, sx, sy, ex, ey):
        forward = classify_swipe(GestureSample(sx, sy, ex, ey))
        backward = classify_swipe(GestureSample(ex, ey, sx, sy))

        opposite = {
            SwipeIntent.NEXT: SwipeIntent.PREV,
            SwipeIntent.PREV: SwipeIntent.NEXT,
            SwipeIntent.NONE: SwipeIntent.NONE,
        }
        assert backward is opposite[forward]

    @given(sx=coordinates, sy=coordinates, ex=coordinates, ey=coordinates)
    def test_swipe_requires_dominant_horizontal_travel(self, sx, sy, ex, ey):
        result = classify_swipe(GestureSample(sx, sy, ex, ey))
        if result is not SwipeIntent.NONE:
            assert abs(sx - ex) > abs(sy - ey)
            assert abs(sx - ex) > 50
