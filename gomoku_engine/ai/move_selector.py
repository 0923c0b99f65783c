"""
Difficulty-based choice between the random and heuristic agents.
"""
import logging

from ..config import RANDOM_MAX_DIFFICULTY, validate_difficulty
from ..core.errors import BoardFullError
from .agents.heuristic_agent import HeuristicAgent
from .agents.random_agent import RandomAgent

logger = logging.getLogger(__name__)


def create_agent(difficulty, seed=None):
    """Random play up to RANDOM_MAX_DIFFICULTY, heuristic scoring above it."""
    validate_difficulty(difficulty)
    if difficulty <= RANDOM_MAX_DIFFICULTY:
        return RandomAgent(seed=seed)
    return HeuristicAgent(difficulty=difficulty, seed=seed)


class MoveSelector:
    """Picks the machine's moves for one difficulty level."""

    def __init__(self, difficulty, seed=None):
        self.difficulty = difficulty
        self.agent = create_agent(difficulty, seed=seed)

    @property
    def strategy(self):
        return self.agent.strategy

    def select_move(self, game):
        """
        Choose a move for the player to move.

        Raises:
            BoardFullError: If no empty cell remains
        """
        move = self.agent.select_action(game)
        if move is None:
            raise BoardFullError("no empty cell left for the machine to play")
        logger.debug("%s strategy (difficulty %d) chose %s",
                     self.strategy, self.difficulty, tuple(move))
        return move
