"""
Heuristic agent for Gomoku.
"""
import random

import numpy as np

from ...config import CENTER, DEFAULT_DIFFICULTY, DEFENSE_WEIGHT, OFFENSE_WEIGHT
from ...core.board import Cell, Move
from ...core.lines import DIRECTIONS, scan_axis


def line_score(count, blocked):
    """
    Score one axis around a candidate cell.

    Args:
        count (int): Contiguous same-colour neighbours on both legs
        blocked (int): 1 if either leg ends at the edge or an opposing stone

    Returns:
        int: Pattern bonus for the axis
    """
    if count >= 4:
        return 10000  # Completes five
    if count == 3:
        return 1000 if blocked == 0 else 100  # Open four vs blocked four
    if count == 2:
        return 100 if blocked == 0 else 10  # Open three vs blocked three
    if count == 1 and blocked == 0:
        return 10  # Open two
    return 0


class HeuristicAgent:
    """
    An agent that scores every empty cell and plays the best one.

    The score of a cell combines:
    1. Center proximity - minus the Manhattan distance to the center
    2. Offense - line scores for our own colour, weighted by (1 + 0.1 * difficulty)
    3. Defense - line scores for the opponent, weighted by (1 + 0.2 * difficulty)

    Defense outweighs offense so blocking is preferred over building.
    Ties are broken uniformly at random.
    """

    strategy = 'heuristic'

    def __init__(self, difficulty=DEFAULT_DIFFICULTY, seed=None):
        """
        Initialize the heuristic agent.

        Args:
            difficulty (int): Difficulty level scaling both weights
            seed (int, optional): Random seed for tie-breaking reproducibility
        """
        self.difficulty = difficulty
        self.offense_weight = 1 + difficulty * OFFENSE_WEIGHT
        self.defense_weight = 1 + difficulty * DEFENSE_WEIGHT
        self.rng = random.Random(seed)

    def select_action(self, game):
        """
        Select the best move for the player to move.

        Args:
            game: Game session with ``board`` and ``current_player``

        Returns:
            Move: coordinates of the selected move, or None if no legal moves
        """
        scores = self.score_board(game.board, game.current_player)
        best_score = scores.max()
        if best_score == -np.inf:
            return None

        rows, cols = np.nonzero(scores == best_score)
        best_moves = [Move(int(r), int(c)) for r, c in zip(rows, cols)]
        return self.rng.choice(best_moves)

    def score_board(self, board, player):
        """
        Score every cell of the board for the player.

        Returns:
            np.ndarray: float scores, -inf on occupied cells
        """
        scores = np.full((board.size, board.size), -np.inf)
        for row, col in board.get_legal_moves():
            scores[row, col] = self.score_move(board, row, col, player)
        return scores

    def score_move(self, board, row, col, player):
        """
        Score placing the player's stone at an empty (row, col).

        Args:
            board: Board instance
            row, col: Candidate coordinates
            player: Player about to move

        Returns:
            float: Score for this move (higher is better)
        """
        if board.state[row, col] != Cell.EMPTY:
            return -np.inf

        score = -float(abs(row - CENTER) + abs(col - CENTER))
        opponent = -player

        for direction in DIRECTIONS:
            ours = scan_axis(board, row, col, direction, player)
            score += line_score(*ours) * self.offense_weight

            theirs = scan_axis(board, row, col, direction, opponent)
            score += line_score(*theirs) * self.defense_weight

        return score
