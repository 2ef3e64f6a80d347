"""
Translation of raw input events (key presses, swipe gestures) into move directions.
"""

from slide2048.addons.types import Direction

# ##: Key names of matplotlib and of browsers.
KEY_BINDINGS: dict[str, Direction] = {
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
    'up': Direction.UP,
    'down': Direction.DOWN,
    'ArrowLeft': Direction.LEFT,
    'ArrowRight': Direction.RIGHT,
    'ArrowUp': Direction.UP,
    'ArrowDown': Direction.DOWN,
}


def direction_from_key(key: str | None) -> Direction | None:
    """
    Map a key name to a direction.

    Parameters
    ----------
    key : str | None
        Name of the pressed key.

    Returns
    -------
    Direction | None
        The direction bound to the key, None for any other key.
    """
    if key is None:
        return None
    return KEY_BINDINGS.get(key)


class SwipeTracker:
    """
    Turn a press/release pair into at most one direction.

    Parameters
    ----------
    threshold : float, optional
        Distance the gesture must exceed on its dominant axis (default is 50).
    y_down : bool, optional
        True for screen coordinates where y grows downwards (touch events), False when y
        grows upwards (matplotlib display coordinates). Default is True.

    Notes
    -----
    The dominant axis is horizontal when ``|dx| > |dy|``, vertical otherwise. The start point
    is cleared by ``end``, so a gesture yields exactly one call, and a release without a
    press yields nothing.
    """

    def __init__(self, threshold: float = 50.0, y_down: bool = True):
        self.threshold = threshold
        self.y_down = y_down
        self._start: tuple[float, float] | None = None

    @property
    def tracking(self) -> bool:
        """Whether a gesture has started."""
        return self._start is not None

    def start(self, x: float, y: float) -> None:
        """Record the point where the gesture starts."""
        self._start = (x, y)

    def cancel(self) -> None:
        """Forget the current gesture."""
        self._start = None

    def end(self, x: float, y: float) -> Direction | None:
        """
        Finish the gesture.

        Parameters
        ----------
        x, y : float
            Point where the gesture ends.

        Returns
        -------
        Direction | None
            The swipe direction, None when the gesture is too short or was never started.
        """
        if self._start is None:
            return None

        start_x, start_y = self._start
        self._start = None

        diff_x = start_x - x
        diff_y = start_y - y if self.y_down else y - start_y

        if abs(diff_x) > abs(diff_y):
            if diff_x > self.threshold:
                return Direction.LEFT
            if diff_x < -self.threshold:
                return Direction.RIGHT
            return None

        if diff_y > self.threshold:
            return Direction.UP
        if diff_y < -self.threshold:
            return Direction.DOWN
        return None
