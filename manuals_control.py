# -*- coding: utf-8 -*-
"""
Play 2048 Game

Arrow keys or mouse drags move the tiles, ``u`` undoes the last move, ``backspace`` starts a new
game, ``s`` toggles auto-save and ``escape`` quits.
"""
import logging
from typing import Any, Iterable

from slide2048.addons import GameStatus, Position, default_config
from slide2048.controls import SwipeTracker, direction_from_key
from slide2048.envs import BoardEngine
from slide2048.storage import JsonFileStore
from slide2048.utils import WindowBoard

# ##: Overlay messages by status.
MESSAGES = {GameStatus.WON: "You win!", GameStatus.GAME_OVER: "Game over!"}


def redraw(engine: BoardEngine, window: WindowBoard, merged_positions: Iterable[Position] = (), message: str = ""):
    """
    Redraw the game board.

    Parameters
    ----------
    engine: BoardEngine
        The game engine

    window: WindowBoard
        Class to draw the game board

    merged_positions: Iterable[Position]
        Cells merged by the last move

    message: str
        Overlay message
    """
    window.show_image(
        engine.grid,
        merged_positions=merged_positions,
        score=engine.score,
        best_score=engine.best_score,
        message=message,
    )


def step(engine: BoardEngine, window: WindowBoard, direction: Any):
    """
    Applied a move into the game.

    Parameters
    ----------
    engine: BoardEngine
        The game engine

    window: WindowBoard
        Class to draw the game board

    direction: Any
        Direction to apply
    """
    result = engine.move(direction)
    if not result.moved:
        return

    # ##: The win message is shown once, the game over message every time.
    message = ""
    if result.won_now:
        message = MESSAGES[GameStatus.WON]
    elif result.status is GameStatus.GAME_OVER:
        message = MESSAGES[GameStatus.GAME_OVER]
        print(f"terminated! final score={engine.score}")

    redraw(engine, window, result.merged_positions, message)


def key_handler(engine: BoardEngine, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    engine: BoardEngine
        The game engine

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return

    if event.key == "backspace":
        engine.new_game()
        redraw(engine, window)
        return

    if event.key == "u":
        if engine.undo() is not None:
            redraw(engine, window)
        return

    if event.key == "s":
        enabled = engine.toggle_auto_save()
        print(f"auto-save {'ON' if enabled else 'OFF'}")
        if enabled and not engine.auto_save_available:
            print("auto-save unavailable")
        return

    direction = direction_from_key(event.key)
    if direction is not None:
        step(engine, window, direction)


def press_handler(tracker: SwipeTracker, event: Any):
    """Start a swipe on mouse press."""
    tracker.start(event.x, event.y)


def release_handler(engine: BoardEngine, window: WindowBoard, tracker: SwipeTracker, event: Any):
    """Finish a swipe on mouse release."""
    direction = tracker.end(event.x, event.y)
    if direction is not None:
        step(engine, window, direction)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = default_config()
    env = BoardEngine(store=JsonFileStore(config.save_path), config=config)
    swipe = SwipeTracker(threshold=config.swipe_threshold, y_down=False)

    window_board = WindowBoard(title="2048 Game", size=env.size)
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))
    window_board.register_swipe_handler(
        lambda event: press_handler(swipe, event),
        lambda event: release_handler(env, window_board, swipe, event),
    )

    redraw(env, window_board, message=MESSAGES[GameStatus.GAME_OVER] if env.is_game_over() else "")

    # Blocking event loop
    window_board.show(block=True)
