# -*- coding: utf-8 -*-
"""
Graphical User Interface for the 2048 board engine

This module provides functionality to create and manage a graphical window for displaying the
2048 game board. It utilizes Matplotlib for rendering and for capturing keyboard and mouse
events. The window only draws what it is given: the board, the cells merged by the last move,
the scores and an optional end of game message.
"""
from typing import Callable, Iterable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray

from slide2048.addons.types import Position


class WindowBoard:
    """
    A class for rendering and managing the 2048 game board using Matplotlib.

    Methods
    -------
    show_image(board, merged_positions, score, best_score, message)
        Update the display with the current game board state.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    register_swipe_handler(press_handler: Callable, release_handler: Callable)
        Register functions to handle mouse drags.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
        4096: "#00A2D8",
        8192: "#9ED682",
    }

    # ##: Border of the cells merged by the last move.
    MERGED_EDGE = "#776E65"

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        """
        self.title = title
        self.size = size
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Set up the axes for the game board, one subplot per cell plus a centered message.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.92, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_axis_off()

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

        self.header = self.fig.text(0.5, 0.96, "", ha="center", va="center", fontsize="large")
        self.message = self.fig.text(
            0.5, 0.5, "", ha="center", va="center", fontsize="xx-large", fontweight="bold", zorder=10
        )

    def _close_handler(self, event: Optional[Event] = None):
        """Set the closed flag when the window is closed."""
        self.closed = True

    def show_image(
        self,
        board: ndarray,
        merged_positions: Iterable[Position] = (),
        score: int = 0,
        best_score: int = 0,
        message: str = "",
    ):
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            The current state of the game board to be displayed.
        merged_positions : Iterable[Position], optional
            Cells to highlight as freshly merged.
        score : int, optional
            Current score.
        best_score : int, optional
            Best score ever reached.
        message : str, optional
            End of game message drawn over the board, empty to hide it.
        """
        merged = set(merged_positions)
        for index, (ax, text, value) in enumerate(zip(self.axes, self.texts, board.flat)):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            ax.set_facecolor(self.COLORS.get(value, "#3C3A32"))

            highlighted = divmod(index, self.size) in merged
            for spine in ax.spines.values():
                spine.set_edgecolor(self.MERGED_EDGE if highlighted else "black")
                spine.set_linewidth(3.0 if highlighted else 0.8)

        self.header.set_text(f"Score: {score}    Best: {best_score}")
        self.message.set_text(message)

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function called with every key press event.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def register_swipe_handler(self, press_handler: Callable, release_handler: Callable):
        """
        Register mouse handlers used to emulate swipe gestures.

        Parameters
        ----------
        press_handler : Callable
            A function called when a mouse button is pressed.
        release_handler : Callable
            A function called when a mouse button is released.
        """
        self.fig.canvas.mpl_connect("button_press_event", press_handler)
        self.fig.canvas.mpl_connect("button_release_event", release_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
