"""
Tests for the input translation.
"""

from unittest import TestCase, main

from slide2048.addons.types import Direction
from slide2048.controls.inputs import SwipeTracker, direction_from_key


class TestKeys(TestCase):
    def test_arrow_keys(self):
        self.assertEqual(direction_from_key('left'), Direction.LEFT)
        self.assertEqual(direction_from_key('ArrowDown'), Direction.DOWN)

    def test_other_keys(self):
        for key in ('a', 'escape', '', None):
            self.assertIsNone(direction_from_key(key))


class TestSwipeTracker(TestCase):
    """Test swipe gestures with the default 50 units threshold."""

    def setUp(self):
        self.tracker = SwipeTracker()

    def swipe(self, start: tuple[float, float], end: tuple[float, float]):
        self.tracker.start(*start)
        return self.tracker.end(*end)

    def test_horizontal(self):
        self.assertEqual(self.swipe((200, 100), (100, 110)), Direction.LEFT)
        self.assertEqual(self.swipe((100, 100), (200, 90)), Direction.RIGHT)

    def test_vertical_screen_coordinates(self):
        """With y growing downwards, moving the finger up decreases y."""
        self.assertEqual(self.swipe((100, 200), (110, 100)), Direction.UP)
        self.assertEqual(self.swipe((100, 100), (90, 200)), Direction.DOWN)

    def test_vertical_display_coordinates(self):
        tracker = SwipeTracker(y_down=False)
        tracker.start(100, 100)
        self.assertEqual(tracker.end(100, 200), Direction.UP)
        tracker.start(100, 200)
        self.assertEqual(tracker.end(100, 100), Direction.DOWN)

    def test_threshold_is_exclusive(self):
        self.assertIsNone(self.swipe((100, 100), (50, 100)))
        self.assertEqual(self.swipe((100, 100), (49, 100)), Direction.LEFT)

    def test_dominant_axis(self):
        """A diagonal gesture follows its larger component, even when it is too short."""
        self.assertEqual(self.swipe((0, 0), (80, 60)), Direction.RIGHT)
        self.assertIsNone(self.swipe((0, 0), (40, 30)))

    def test_one_direction_per_gesture(self):
        self.tracker.start(200, 100)
        self.assertTrue(self.tracker.tracking)
        self.assertEqual(self.tracker.end(100, 100), Direction.LEFT)
        self.assertFalse(self.tracker.tracking)
        self.assertIsNone(self.tracker.end(0, 100))

    def test_cancel(self):
        self.tracker.start(200, 100)
        self.tracker.cancel()
        self.assertIsNone(self.tracker.end(0, 100))


if __name__ == '__main__':
    main()
