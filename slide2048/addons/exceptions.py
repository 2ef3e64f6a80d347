# -*- coding: utf-8 -*-
"""
Errors raised by slide2048.
"""


class Slide2048Error(Exception):
    """Base class for all errors of the package."""


class InvalidDirectionError(Slide2048Error, ValueError):
    """Raised when a move is requested with an unknown direction."""

    def __init__(self, direction: object):
        super().__init__(f'Invalid direction: {direction!r}. Must be one of left, up, right, down.')
        self.direction = direction


class CorruptSaveError(Slide2048Error, ValueError):
    """Raised when a saved game does not describe a valid board."""
