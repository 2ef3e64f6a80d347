"""
Core functionality of the 2048 rules: line reduction, tile spawning and terminal detection.
"""

import logging

from numpy import all as np_all
from numpy import any as np_any
from numpy import arange, argwhere, array, ndarray, rot90, zeros_like
from numpy.random import Generator

from slide2048.addons.types import Direction, Position

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Number of counter-clockwise quarter turns that bring a direction to the left.
ROTATIONS: dict[Direction, int] = {Direction.LEFT: 0, Direction.UP: 1, Direction.RIGHT: 2, Direction.DOWN: 3}

# ##>: Tile value that wins the game.
WINNING_TILE = 2048

_logger = logging.getLogger(__name__)


def merge_line(line: ndarray) -> tuple[int, ndarray, list[int]]:
    """
    Merge adjacent equal values in a line and compute the total score.

    Parameters
    ----------
    line : ndarray
        A 1D array representing one line of the game board, oriented so that index 0 is
        the side the tiles travel towards.

    Returns
    -------
    score : int
        The total score obtained from merging.
    merged_line : ndarray
        The compacted line after merging, without padding.
    merged_indices : list[int]
        Indices in ``merged_line`` holding a freshly merged value.

    Notes
    -----
    - Zeros (empty cells) are removed before merging, relative order is kept.
    - Merging occurs from the start of the line towards the end.
    - Each value can only be merged once per call: ``[2, 2, 2, 2]`` gives ``[4, 4]``.
    """
    # ##: Handle lines with nothing to merge.
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        return 0, non_zero, []

    result = []
    merged_indices = []
    score = 0

    # ##: Iterate over the line and merge values.
    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            merged_indices.append(len(result))
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    if i == len(non_zero) - 1:
        result.append(non_zero[-1])

    return score, array(result, dtype=line.dtype), merged_indices


def slide_and_merge(board: ndarray) -> tuple[int, ndarray, list[Position]]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The updated game board after sliding and merging.
    merged_positions : list[Position]
        Cells of ``updated_board`` holding a freshly merged value.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the board before calling this function.
    - Empty cells (zeros) are added to the right side of each row after merging.
    """
    result = zeros_like(board)
    merged_positions = []
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row, merged_indices = merge_line(row)
        score += score_row
        result[i, : len(merged_row)] = merged_row
        merged_positions.extend((i, j) for j in merged_indices)

    return score, result, merged_positions


def latent_state(state: ndarray, direction: Direction) -> tuple[ndarray, int, frozenset[Position]]:
    """
    Compute the board after a move, without adding a new tile.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Not modified.
    direction : Direction
        The direction of the move.

    Returns
    -------
    new_state : ndarray
        The new state of the board after the move.
    reward : int
        The sum of the merged values.
    merged_positions : frozenset[Position]
        Cells of ``new_state`` holding a freshly merged value.

    Notes
    -----
    Every direction is reduced to a left move on a rotated board. Rotating an index grid the
    same way gives, for each cell of the rotated board, the cell of ``state`` it comes from,
    which maps merge positions back to absolute coordinates. Right and down moves thus act
    on reversed lines and pad the zeros at the far end of the travel.
    """
    rotation = ROTATIONS[direction]
    size = state.shape[1]

    rotated_board = rot90(state, k=rotation)
    reward, updated_board, merged = slide_and_merge(rotated_board)

    # ##: Map rotated coordinates back to the original board.
    origins = rot90(arange(state.size).reshape(state.shape), k=rotation)
    positions = frozenset(divmod(int(origins[row, col]), size) for row, col in merged)

    return rot90(updated_board, k=-rotation).copy(), reward, positions


def spawn_tile(state: ndarray, rng: Generator, four_probability: float = TILE_SPAWN_PROBS[4]) -> Position | None:
    """
    Place a new tile (2 or 4) on a random empty cell.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    rng : Generator
        Source of randomness.
    four_probability : float, optional
        Probability that the new tile is a 4 (default is 0.1).

    Returns
    -------
    Position | None
        The cell that received the tile, None when the board is full.

    Notes
    -----
    - The cell is chosen uniformly among the empty cells. A full board is left untouched.
    - Draws below ``1 - four_probability`` give a 2, the top of the range gives a 4.
    """
    available_cells = argwhere(state == 0)
    if len(available_cells) == 0:
        _logger.debug('No empty cell, spawn skipped')
        return None

    row, col = (int(index) for index in available_cells[rng.integers(len(available_cells))])
    state[row, col] = 4 if rng.random() >= 1 - four_probability else 2
    _logger.debug('Spawned %d at (%d, %d)', state[row, col], row, col)
    return row, col


def fill_cells(
    state: ndarray, number_tile: int, rng: Generator, four_probability: float = TILE_SPAWN_PROBS[4]
) -> list[Position]:
    """
    Fill empty cells with new tiles (2 or 4).

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    number_tile : int
        Number of new tiles to add.
    rng : Generator
        Source of randomness.
    four_probability : float, optional
        Probability that a new tile is a 4 (default is 0.1).

    Returns
    -------
    list[Position]
        Cells that received a tile. Shorter than ``number_tile`` when the board fills up.
    """
    positions = []
    for _ in range(number_tile):
        position = spawn_tile(state, rng, four_probability)
        if position is None:
            break
        positions.append(position)
    return positions


def has_won(state: ndarray, target: int = WINNING_TILE) -> bool:
    """
    Check whether any cell holds the winning tile.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.
    target : int, optional
        Winning tile value (default is 2048).

    Returns
    -------
    bool
        True if a cell equals ``target``.
    """
    return bool(np_any(state == target))


def is_done(state: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the game is over (no more moves possible), False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no adjacent cells have the same value.
    Comparing each cell with its right and lower neighbour covers every adjacent pair once.
    """
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )
