"""
Line scanning shared by win detection and move scoring.
"""
from typing import NamedTuple

from ..config import SCAN_LENGTH
from .board import Cell


class Direction(NamedTuple):
    dr: int
    dc: int


# One vector per axis; the opposite leg is scanned with the negated vector.
DIRECTIONS = (
    Direction(0, 1),   # Horizontal
    Direction(1, 0),   # Vertical
    Direction(1, 1),   # Diagonal (↘)
    Direction(1, -1),  # Anti-diagonal (↙)
)


class LineScan(NamedTuple):
    count: int
    blocked: int


def scan_line(board, row, col, dr, dc, player):
    """
    Walk away from (row, col) counting the player's contiguous stones.

    The origin itself is never inspected, so it may be empty (a candidate
    move) or hold the stone just placed.

    Args:
        board: Board instance
        row, col: Origin of the scan
        dr, dc: Step direction
        player: Player whose stones are counted

    Returns:
        LineScan: count of contiguous stones, and blocked=1 if the walk
        stopped at the edge or an opposing stone, 0 otherwise
    """
    count = 0
    for step in range(1, SCAN_LENGTH + 1):
        r, c = row + dr * step, col + dc * step
        if not board.in_bounds(r, c):
            return LineScan(count, 1)
        cell = board.state[r, c]
        if cell == player:
            count += 1
        elif cell != Cell.EMPTY:
            return LineScan(count, 1)
        else:
            break
    return LineScan(count, 0)


def scan_axis(board, row, col, direction, player):
    """
    Scan both legs of an axis through (row, col) and combine them.

    Returns:
        LineScan: summed count, blocked=1 if either leg was blocked
    """
    dr, dc = direction
    forward = scan_line(board, row, col, dr, dc, player)
    backward = scan_line(board, row, col, -dr, -dc, player)
    return LineScan(forward.count + backward.count,
                    1 if forward.blocked or backward.blocked else 0)
