# -*- coding: utf-8 -*-
"""
Set of types shared by the engine and its collaborators.
"""
from dataclasses import dataclass
from enum import Enum

from numpy import ndarray

# ##: Cell coordinate (row, col).
Position = tuple[int, int]


class Direction(str, Enum):
    """
    Direction of a move.

    The value of each member is the name used by key bindings and saved logs.
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'


class GameStatus(str, Enum):
    """Derived classification of a board."""

    IN_PROGRESS = 'in-progress'
    WON = 'won'
    GAME_OVER = 'game-over'


@dataclass(frozen=True)
class BoardState:
    """
    Copy of the engine state handed to external readers.

    Attributes
    ----------
    grid : ndarray
        Copy of the board, shape (4, 4).
    score : int
        Current score.
    """

    grid: ndarray
    score: int


@dataclass(frozen=True)
class Snapshot:
    """Board and score captured right before a move."""

    grid: ndarray
    score: int


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a move attempt.

    Attributes
    ----------
    moved : bool
        Whether any line changed.
    merged_positions : frozenset[Position]
        Cells holding a freshly merged tile, in absolute grid coordinates.
    status : GameStatus
        Status of the board after the move (and the spawn).
    score_gain : int
        Sum of the merged values.
    spawned : Position | None
        Cell of the spawned tile, None when nothing was spawned.
    won_now : bool
        True only on the move that first latched the won flag.
    """

    moved: bool
    merged_positions: frozenset[Position]
    status: GameStatus
    score_gain: int = 0
    spawned: Position | None = None
    won_now: bool = False
