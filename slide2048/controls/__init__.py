"""Input translation collaborators."""
from .inputs import KEY_BINDINGS, SwipeTracker, direction_from_key

__all__ = ["KEY_BINDINGS", "SwipeTracker", "direction_from_key"]
