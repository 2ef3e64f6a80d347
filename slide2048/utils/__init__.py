# -*- coding: utf-8 -*-
"""
Presentation utilities: a Matplotlib window drawing the board and forwarding user events.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
