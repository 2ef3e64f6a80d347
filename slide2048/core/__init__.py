# -*- coding: utf-8 -*-
"""
Pure functions implementing the 2048 rules on numpy boards.

It includes functions for sliding and merging lines, spawning tiles, checking the win and
the end of the game, and listing the directions that change the board.
"""

from .gameboard import (
    ROTATIONS,
    TILE_SPAWN_PROBS,
    WINNING_TILE,
    fill_cells,
    has_won,
    is_done,
    latent_state,
    merge_line,
    slide_and_merge,
    spawn_tile,
)
from .gamemove import legal_directions, legal_directions_mask

__all__ = [
    "ROTATIONS",
    "TILE_SPAWN_PROBS",
    "WINNING_TILE",
    "merge_line",
    "slide_and_merge",
    "latent_state",
    "spawn_tile",
    "fill_cells",
    "has_won",
    "is_done",
    "legal_directions",
    "legal_directions_mask",
]
