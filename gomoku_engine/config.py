"""
Configuration for the Gomoku engine.

Module constants are fixed rules of the game; GameConfig holds the
settings a player may change between games.
"""
import json
from pathlib import Path
from typing import Dict, Optional, Union

BOARD_SIZE = 15
CENTER = BOARD_SIZE // 2
WIN_LENGTH = 5
SCAN_LENGTH = WIN_LENGTH - 1  # cells walked on each side of the origin

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 10
DEFAULT_DIFFICULTY = 5
RANDOM_MAX_DIFFICULTY = 3  # levels at or below this play random moves

# Per-level multipliers applied to the line scores
OFFENSE_WEIGHT = 0.1
DEFENSE_WEIGHT = 0.2

THINKING_DELAY = 0.5  # seconds

MODES = ('pvp', 'pve')


def validate_difficulty(level):
    """
    Check that a difficulty level is usable.

    Args:
        level (int): Difficulty level

    Returns:
        int: The level, unchanged

    Raises:
        ValueError: If the level is not an integer in [1, 10]
    """
    if isinstance(level, bool) or not isinstance(level, int):
        raise ValueError(f"difficulty must be an integer, got {level!r}")
    if not MIN_DIFFICULTY <= level <= MAX_DIFFICULTY:
        raise ValueError(
            f"difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}, got {level}"
        )
    return level


class GameConfig:
    """Configuration for a game session."""

    def __init__(self,
                 mode: str = 'pve',
                 difficulty: int = DEFAULT_DIFFICULTY,
                 machine_player: str = 'white',
                 thinking_delay: float = THINKING_DELAY,
                 seed: Optional[int] = None):

        self.mode = mode
        self.difficulty = difficulty
        self.machine_player = machine_player
        self.thinking_delay = thinking_delay
        self.seed = seed

    def validate(self) -> 'GameConfig':
        """Raise ValueError if any setting is out of range."""
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        validate_difficulty(self.difficulty)
        if self.machine_player not in ('black', 'white'):
            raise ValueError(f"machine_player must be 'black' or 'white', got {self.machine_player!r}")
        if self.thinking_delay < 0:
            raise ValueError("thinking_delay must not be negative")
        return self

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {k: v for k, v in self.__dict__.items()}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'GameConfig':
        """Create config from dictionary."""
        return cls(**config_dict).validate()

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'GameConfig':
        """Load config from a JSON file."""
        with open(path, 'r') as f:
            return cls.from_dict(json.load(f))
