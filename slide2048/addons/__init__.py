"""Types, errors and configuration shared across the package."""
from .config import SIZE, GameConfig, default_config
from .exceptions import CorruptSaveError, InvalidDirectionError, Slide2048Error
from .types import BoardState, Direction, GameStatus, MoveResult, Position, Snapshot

__all__ = [
    "SIZE",
    "GameConfig",
    "default_config",
    "Slide2048Error",
    "InvalidDirectionError",
    "CorruptSaveError",
    "BoardState",
    "Direction",
    "GameStatus",
    "MoveResult",
    "Position",
    "Snapshot",
]
