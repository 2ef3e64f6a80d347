"""Board engine of the 2048 puzzle: authoritative state, moves, win/loss detection and undo."""

import logging

from numpy import array, int64, ndarray, zeros
from numpy.random import Generator, default_rng

from slide2048.addons.config import SIZE, GameConfig, default_config
from slide2048.addons.exceptions import InvalidDirectionError
from slide2048.addons.types import BoardState, Direction, GameStatus, MoveResult, Position, Snapshot
from slide2048.core.gameboard import fill_cells, has_won, is_done, latent_state, spawn_tile
from slide2048.core.gamemove import DIRECTIONS_ORDER, legal_directions, legal_directions_mask
from slide2048.storage.store import GameStore, SavedGame

_logger = logging.getLogger(__name__)


class BoardEngine:
    """
    2048 board engine.

    This class owns the grid, the score, the sticky won flag and the single undo snapshot.
    Every operation runs to completion before returning; readers only receive copies of the
    grid.

    Parameters
    ----------
    rng : Generator, optional
        Source of randomness for tile spawning. Built from ``seed`` when omitted.
    seed : int, optional
        Seed used when ``rng`` is omitted.
    store : GameStore, optional
        Persistence collaborator. Without a store nothing is saved or loaded.
    config : GameConfig, optional
        Rules configuration (default is the classic 2048 rules).

    Notes
    -----
    When a store is given and auto-save is enabled, a valid saved game is resumed. Otherwise,
    including when the saved game is missing or malformed, a new game starts.
    """

    # ##: All directions, by key name.
    ACTIONS = {direction.value: direction for direction in Direction}

    def __init__(
        self,
        rng: Generator | None = None,
        seed: int | None = None,
        store: GameStore | None = None,
        config: GameConfig | None = None,
    ):
        self.size = SIZE
        self._config = config or default_config()
        self._rng = rng if rng is not None else default_rng(seed)
        self._store = store

        self._grid: ndarray = zeros((SIZE, SIZE), dtype=int64)
        self._score = 0
        self._won = False
        self._snapshot: Snapshot | None = None

        self._best_score = store.load_best_score() if store is not None else 0
        self._auto_save = store.load_auto_save(self._config.auto_save) if store is not None else False

        if not self._resume():
            self.new_game()

    # ##: Accessors.

    @property
    def grid(self) -> ndarray:
        """Copy of the current board."""
        return self._grid.copy()

    @property
    def score(self) -> int:
        """Current score."""
        return self._score

    @property
    def won(self) -> bool:
        """Whether the won flag has been latched in this game."""
        return self._won

    @property
    def best_score(self) -> int:
        """Best score ever reached, across games."""
        return self._best_score

    @property
    def auto_save(self) -> bool:
        """Whether the game is saved after every state change."""
        return self._auto_save

    @property
    def auto_save_available(self) -> bool:
        """False when the last write to the store failed."""
        return self._store is not None and self._store.available

    @property
    def can_undo(self) -> bool:
        """Whether a snapshot is waiting to be restored."""
        return self._snapshot is not None

    @property
    def status(self) -> GameStatus:
        """
        Derived status of the board.

        Returns
        -------
        GameStatus
            ``GAME_OVER`` when no move is possible, else ``WON`` when a cell holds the target
            tile, else ``IN_PROGRESS``.
        """
        if self.is_game_over():
            return GameStatus.GAME_OVER
        if self.check_win():
            return GameStatus.WON
        return GameStatus.IN_PROGRESS

    def get_status(self) -> GameStatus:
        """Return the derived status of the board."""
        return self.status

    def state(self) -> BoardState:
        """Return a copy of the grid and the score."""
        return BoardState(grid=self.grid, score=self._score)

    # ##: Rules.

    def check_win(self) -> bool:
        """True iff a cell holds the target tile. The won flag is left untouched."""
        return has_won(self._grid, self._config.target)

    def is_game_over(self) -> bool:
        """True iff the board is full and no two adjacent cells are equal."""
        return is_done(self._grid)

    def legal_directions(self) -> list[Direction]:
        """Directions whose move would change the board."""
        return legal_directions(self._grid)

    def spawn_random_tile(self) -> Position | None:
        """
        Place a 2 (90%) or a 4 (10%) on a random empty cell.

        Returns
        -------
        Position | None
            The cell that received the tile, None when the board is full.
        """
        return spawn_tile(self._grid, self._rng, self._config.four_probability)

    # ##: Operations.

    def new_game(self) -> BoardState:
        """
        Start a new game.

        The board is cleared, the score and the won flag are reset, the snapshot is discarded
        and the starting tiles are placed.

        Returns
        -------
        BoardState
            The new board and its score.
        """
        self._grid = zeros((SIZE, SIZE), dtype=int64)
        self._score = 0
        self._won = False
        self._snapshot = None
        fill_cells(self._grid, self._config.start_tiles, self._rng, self._config.four_probability)

        _logger.info('New game started')
        self._save()
        return self.state()

    def move(self, direction: Direction | str) -> MoveResult:
        """
        Slide and merge every line towards ``direction``.

        Parameters
        ----------
        direction : Direction | str
            One of left, up, right, down.

        Returns
        -------
        MoveResult
            Whether the board changed, the merged cells and the resulting status.

        Raises
        ------
        InvalidDirectionError
            If ``direction`` is not one of the four directions. The state is left untouched.

        Notes
        -----
        - A move that changes no line discards its snapshot, spawns nothing and saves nothing.
        - After a successful move one tile is spawned, then the win check runs (only while
          the won flag is not latched) followed by the game over check.
        """
        direction = self._parse(direction)

        # ##: A move changing no line leaves nothing to undo.
        if not legal_directions_mask(self._grid)[DIRECTIONS_ORDER.index(direction)]:
            self._snapshot = None
            _logger.debug('Move %s changed nothing', direction.value)
            return MoveResult(moved=False, merged_positions=frozenset(), status=self.status)

        snapshot_grid = self.grid
        snapshot_grid.setflags(write=False)
        self._snapshot = Snapshot(grid=snapshot_grid, score=self._score)

        new_grid, reward, merged_positions = latent_state(self._grid, direction)

        # ##: Commit the move and spawn a tile.
        self._grid = new_grid
        self._score += reward
        spawned = self.spawn_random_tile()
        _logger.debug('Move %s: +%d points, %d merges', direction.value, reward, len(merged_positions))

        # ##: Latch the won flag once.
        won_now = False
        if not self._won and self.check_win():
            self._won = won_now = True
            _logger.info('Reached %d with a score of %d', self._config.target, self._score)

        status = self.status
        if status is GameStatus.GAME_OVER:
            _logger.info('Game over with a score of %d', self._score)

        self._save()
        return MoveResult(
            moved=True,
            merged_positions=merged_positions,
            status=status,
            score_gain=reward,
            spawned=spawned,
            won_now=won_now,
        )

    def undo(self) -> BoardState | None:
        """
        Restore the board and the score from before the last move.

        Returns
        -------
        BoardState | None
            The restored state, None when there was nothing to undo.

        Notes
        -----
        Only one step is kept: a second consecutive undo is a no-op. The won flag is not
        part of the snapshot and stays latched.
        """
        if self._snapshot is None:
            return None

        self._grid = self._snapshot.grid.copy()
        self._score = self._snapshot.score
        self._snapshot = None

        _logger.info('Undo, score back to %d', self._score)
        self._save()
        return self.state()

    def toggle_auto_save(self) -> bool:
        """
        Flip the auto-save preference.

        Returns
        -------
        bool
            The new preference. Turning it on saves the current game right away.
        """
        self._auto_save = not self._auto_save
        if self._store is not None:
            self._store.save_auto_save(self._auto_save)
        _logger.info('Auto-save %s', 'on' if self._auto_save else 'off')
        self._save()
        return self._auto_save

    # ##: Internals.

    def _parse(self, direction: Direction | str) -> Direction:
        if isinstance(direction, Direction):
            return direction
        if isinstance(direction, str) and direction in self.ACTIONS:
            return self.ACTIONS[direction]
        raise InvalidDirectionError(direction)

    def _resume(self) -> bool:
        """Load the saved game when auto-save is on. Returns whether a game was resumed."""
        if self._store is None or not self._auto_save:
            return False

        saved = self._store.load()
        if saved is None:
            return False

        try:
            grid = array(saved.grid, dtype=int64)
        except (OverflowError, ValueError):
            _logger.warning('Ignoring saved game: the grid does not fit the board', exc_info=True)
            return False

        self._grid = grid
        self._score = saved.score
        self._won = saved.won
        self._best_score = max(self._best_score, saved.score)
        _logger.info('Resumed saved game with a score of %d', self._score)
        return True

    def _save(self) -> None:
        if self._store is None:
            return

        if self._score > self._best_score:
            self._best_score = self._score
            self._store.save_best_score(self._best_score)

        if self._auto_save:
            self._store.save(SavedGame(grid=self._grid.tolist(), score=self._score, won=self._won))
