"""
Game move utilities, providing functions for determining which directions change the board.
"""

from numpy import ndarray

from slide2048.addons.types import Direction

# ##>: Order of the entries of a legal directions mask.
DIRECTIONS_ORDER = (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN)


def _line_changes(near: ndarray, far: ndarray, can_merge: ndarray) -> bool:
    """
    Check whether a move along one axis changes at least one line.

    Parameters
    ----------
    near : ndarray
        Cells on the side the tiles travel towards, for every adjacent pair.
    far : ndarray
        The other cell of each pair.
    can_merge : ndarray
        Pairs holding two equal tiles.

    Returns
    -------
    bool
        True if a tile can slide into an empty neighbour or merge with an equal one.
    """
    return bool(((near == 0) & (far != 0)).any() or can_merge.any())


def legal_directions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.

    Notes
    -----
    Equal neighbours merge whichever way the axis is travelled, so they are computed once
    per axis. Opposite directions only swap the roles of the two cells of a pair.
    """
    west, east = state[:, :-1], state[:, 1:]
    north, south = state[:-1, :], state[1:, :]

    # ##>: Merges are symmetric along an axis.
    h_can_merge = (west != 0) & (west == east)
    v_can_merge = (north != 0) & (north == south)

    return (
        _line_changes(west, east, h_can_merge),
        _line_changes(north, south, v_can_merge),
        _line_changes(east, west, h_can_merge),
        _line_changes(south, north, v_can_merge),
    )


def legal_directions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions whose move slides or merges at least one tile.
    """
    mask = legal_directions_mask(state)
    return [direction for direction, legal in zip(DIRECTIONS_ORDER, mask) if legal]
