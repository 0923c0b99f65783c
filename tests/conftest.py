"""
Shared board fixtures.
"""
import pytest
from gomoku_engine.core.board import Board, Player


def pattern_player(row, col):
    """Colour of (row, col) in a fill with no run longer than two on any axis."""
    return Player.BLACK if ((col + 2 * row) // 2) % 2 == 0 else Player.WHITE


def fill_board(board, skip=()):
    """Fill every cell except those in skip with the no-five pattern."""
    for row in range(board.size):
        for col in range(board.size):
            if (row, col) not in skip:
                board.place(row, col, pattern_player(row, col))
    return board


@pytest.fixture
def drawn_board():
    return fill_board(Board())
