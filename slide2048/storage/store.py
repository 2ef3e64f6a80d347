"""
Persistence of the game between sessions.

A store keeps three independent records: the current game, the best score ever reached and
the auto-save preference. Stores never raise on I/O problems: a failed write is logged,
reported through the return value and flips the ``available`` flag.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any

from slide2048.addons.config import SIZE
from slide2048.addons.exceptions import CorruptSaveError

# ##>: Largest power of two held by an int64 board.
_MAX_TILE = 2**62

_logger = logging.getLogger(__name__)


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_tile(value: Any) -> bool:
    # ##>: Empty, or a power of two that fits a 64-bit cell.
    return _is_count(value) and (value == 0 or (value >= 2 and value & (value - 1) == 0 and value <= _MAX_TILE))


@dataclass
class SavedGame:
    """
    Persisted record of a game in progress.

    Attributes
    ----------
    grid : list[list[int]]
        The board, one list per row.
    score : int
        Score of the game.
    won : bool
        Whether the won flag was latched.
    """

    grid: list[list[int]]
    score: int
    won: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize the record to JSON-compatible data."""
        return {'grid': [list(row) for row in self.grid], 'score': self.score, 'won': self.won}

    @classmethod
    def from_dict(cls, data: Any) -> 'SavedGame':
        """
        Build a record from deserialized data.

        Parameters
        ----------
        data : Any
            Data produced by ``to_dict``, usually read back from disk.

        Returns
        -------
        SavedGame
            The validated record.

        Raises
        ------
        CorruptSaveError
            If the data does not describe a 4x4 board of empty cells and power of two
            tiles, with a non-negative integer score.
        """
        if not isinstance(data, dict):
            raise CorruptSaveError(f'Saved game must be an object, got {type(data).__name__}')

        grid = data.get('grid')
        if not isinstance(grid, list) or len(grid) != SIZE:
            raise CorruptSaveError(f'Saved grid must hold {SIZE} rows')
        for row in grid:
            if not isinstance(row, list) or len(row) != SIZE or not all(_is_tile(cell) for cell in row):
                raise CorruptSaveError(f'Saved grid rows must hold {SIZE} cells, each 0 or a power of two')

        score = data.get('score')
        if not _is_count(score):
            raise CorruptSaveError(f'Saved score must be a non-negative integer, got {score!r}')

        won = data.get('won', False)
        if not isinstance(won, bool):
            raise CorruptSaveError(f'Saved won flag must be a boolean, got {won!r}')

        return cls(grid=[list(row) for row in grid], score=score, won=won)


class GameStore(ABC):
    """
    Interface of a persistence collaborator.

    Attributes
    ----------
    available : bool
        False once a write failed, True again after a successful write.
    """

    available: bool = True

    @abstractmethod
    def load(self) -> SavedGame | None:
        """Return the saved game, or None when there is none or it is unreadable."""

    @abstractmethod
    def save(self, game: SavedGame) -> bool:
        """Save the game and return whether the write succeeded."""

    @abstractmethod
    def load_best_score(self) -> int:
        """Return the best score ever saved, 0 when unknown."""

    @abstractmethod
    def save_best_score(self, score: int) -> bool:
        """Save the best score and return whether the write succeeded."""

    @abstractmethod
    def load_auto_save(self, default: bool) -> bool:
        """Return the auto-save preference, ``default`` when unknown."""

    @abstractmethod
    def save_auto_save(self, enabled: bool) -> bool:
        """Save the auto-save preference and return whether the write succeeded."""


@dataclass
class MemoryStore(GameStore):
    """Store living in memory, for tests and embedding."""

    game: dict[str, Any] | None = None
    best_score: int = 0
    auto_save: bool | None = None
    available: bool = True

    def load(self) -> SavedGame | None:
        if self.game is None:
            return None
        try:
            return SavedGame.from_dict(self.game)
        except CorruptSaveError:
            _logger.warning('Ignoring corrupt saved game', exc_info=True)
            return None

    def save(self, game: SavedGame) -> bool:
        self.game = game.to_dict()
        return True

    def load_best_score(self) -> int:
        return self.best_score

    def save_best_score(self, score: int) -> bool:
        self.best_score = score
        return True

    def load_auto_save(self, default: bool) -> bool:
        return default if self.auto_save is None else self.auto_save

    def save_auto_save(self, enabled: bool) -> bool:
        self.auto_save = enabled
        return True


class JsonFileStore(GameStore):
    """
    Store keeping every record in a single JSON document.

    Parameters
    ----------
    path : str | PathLike
        Location of the document. Parent directories are created on first write.

    Notes
    -----
    - A missing document means an empty store.
    - An unreadable or malformed document is treated as empty and logged at WARNING.
    - The document is rewritten through a temporary file, so a crash never leaves a
      half-written save behind.
    """

    def __init__(self, path: str | PathLike):
        self.path = Path(path)
        self.available = True

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open('r', encoding='utf-8') as handler:
                document = json.load(handler)
        except (OSError, ValueError):
            _logger.warning('Unable to read %s, starting from an empty store', self.path, exc_info=True)
            return {}

        if not isinstance(document, dict):
            _logger.warning('Ignoring %s: expected a JSON object', self.path)
            return {}
        return document

    def _update(self, key: str, value: Any) -> bool:
        document = self._read()
        document[key] = value
        temporary = self.path.with_name(self.path.name + '.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with temporary.open('w', encoding='utf-8') as handler:
                json.dump(document, handler)
            temporary.replace(self.path)
        except OSError:
            _logger.warning('Auto-save unavailable: cannot write %s', self.path, exc_info=True)
            self.available = False
            return False

        self.available = True
        return True

    def load(self) -> SavedGame | None:
        data = self._read().get('game')
        if data is None:
            return None
        try:
            return SavedGame.from_dict(data)
        except CorruptSaveError:
            _logger.warning('Ignoring corrupt saved game in %s', self.path, exc_info=True)
            return None

    def save(self, game: SavedGame) -> bool:
        return self._update('game', game.to_dict())

    def load_best_score(self) -> int:
        score = self._read().get('best_score', 0)
        return score if _is_count(score) else 0

    def save_best_score(self, score: int) -> bool:
        return self._update('best_score', int(score))

    def load_auto_save(self, default: bool) -> bool:
        enabled = self._read().get('auto_save')
        return enabled if isinstance(enabled, bool) else default

    def save_auto_save(self, enabled: bool) -> bool:
        return self._update('auto_save', bool(enabled))
