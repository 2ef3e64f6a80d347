# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 rules engine.

This module provides the `BoardEngine` class, which owns the game board and applies moves, undo and
new games to it.
"""

from .board_engine import BoardEngine

__all__ = ["BoardEngine"]
