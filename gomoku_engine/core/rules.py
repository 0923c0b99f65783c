"""
Terminal-state detection: five in a row and full-board draws.
"""
from ..config import WIN_LENGTH
from .lines import DIRECTIONS, scan_axis


def check_win(board, row, col, player):
    """
    Check if the stone at (row, col) completes a line for the player.

    Any run of five or more counts, overlines included.

    Args:
        board: Board instance
        row (int): Row of the last move
        col (int): Column of the last move
        player (Player): Player who made the move

    Returns:
        bool: True if some axis through (row, col) holds at least five stones
    """
    for direction in DIRECTIONS:
        if scan_axis(board, row, col, direction, player).count + 1 >= WIN_LENGTH:
            return True
    return False


def check_draw(board):
    """
    A draw is a full board. Callers check for a win first, so a move that
    both fills the board and completes five is reported as a win.
    """
    return board.is_full()
