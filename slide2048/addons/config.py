"""
Configuration for a game of slide2048.

The board dimension is fixed; only the rules that surround it are configurable.
"""

from dataclasses import dataclass, field
from pathlib import Path

# ##>: Board dimension, not configurable.
SIZE = 4


def _default_save_path() -> Path:
    return Path.home() / '.slide2048' / 'state.json'


@dataclass
class GameConfig:
    """
    Configuration of the engine and of its collaborators.

    Attributes are grouped by the component that reads them.
    """

    # ##>: Rules.
    target: int = 2048  # Tile value that wins the game
    start_tiles: int = 2  # Tiles placed by a new game
    four_probability: float = 0.1  # Chance that a spawned tile is a 4

    # ##>: Input translation.
    swipe_threshold: float = 50.0  # Minimum gesture distance, exclusive

    # ##>: Persistence.
    auto_save: bool = True  # Used when the store holds no preference
    save_path: Path = field(default_factory=_default_save_path)

    def __post_init__(self):
        if not 0.0 <= self.four_probability <= 1.0:
            raise ValueError(f'four_probability must be in [0, 1], got {self.four_probability}')
        if not 0 <= self.start_tiles <= SIZE * SIZE:
            raise ValueError(f'start_tiles must be in [0, {SIZE * SIZE}], got {self.start_tiles}')
        if self.swipe_threshold < 0:
            raise ValueError(f'swipe_threshold must be >= 0, got {self.swipe_threshold}')
        self.save_path = Path(self.save_path)


def default_config() -> GameConfig:
    """
    Create the default configuration.

    Returns
    -------
    GameConfig
        Configuration of the classic 2048 rules.
    """
    return GameConfig()
