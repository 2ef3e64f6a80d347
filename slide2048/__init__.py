# -*- coding: utf-8 -*-
"""
Rules engine of the 2048 sliding-tile puzzle.

The `BoardEngine` owns the board and applies moves, undo and new games; `slide2048.core` holds the
pure functions it sequences, `slide2048.storage` and `slide2048.controls` the persistence and input
collaborators.
"""

from .addons import BoardState, Direction, GameConfig, GameStatus, InvalidDirectionError, MoveResult
from .envs import BoardEngine

__all__ = [
    "BoardEngine",
    "BoardState",
    "Direction",
    "GameConfig",
    "GameStatus",
    "InvalidDirectionError",
    "MoveResult",
]
