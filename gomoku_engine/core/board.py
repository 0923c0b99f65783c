"""
Board implementation for Gomoku game.
"""
from enum import IntEnum
from typing import NamedTuple

import numpy as np

from ..config import BOARD_SIZE
from .errors import CellOccupiedError, OutOfBoundsError


class Cell(IntEnum):
    """Contents of a board cell, as stored in the board array."""
    EMPTY = 0
    BLACK = 1
    WHITE = -1


class Player(IntEnum):
    """A side in the game. Black always moves first."""
    BLACK = 1
    WHITE = -1

    @property
    def opponent(self):
        return Player(-self.value)

    @property
    def display_name(self):
        return self.name.capitalize()


class Move(NamedTuple):
    row: int
    col: int


class Board:
    """
    Represents a 15x15 Gomoku board.

    Board state representation:
    - 0: empty cell
    - 1: black stone
    - -1: white stone
    """

    def __init__(self):
        """Initialize an empty 15x15 board."""
        self.size = BOARD_SIZE
        self.state = np.zeros((self.size, self.size), dtype=np.int8)

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row, col):
        """
        Get the contents of a cell.

        Raises:
            OutOfBoundsError: If (row, col) is not on the board
        """
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        return Cell(int(self.state[row, col]))

    def place(self, row, col, player):
        """
        Place a stone on the board.

        Args:
            row (int): Row position (0-14)
            col (int): Column position (0-14)
            player (Player): Side placing the stone

        Returns:
            Move: The applied move

        Raises:
            OutOfBoundsError: If (row, col) is not on the board
            CellOccupiedError: If the cell already holds a stone
            ValueError: If player is not black or white
        """
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        if self.state[row, col] != Cell.EMPTY:
            raise CellOccupiedError(row, col)
        if player not in (Player.BLACK, Player.WHITE):
            raise ValueError(f"player must be black (1) or white (-1), got {player!r}")

        self.state[row, col] = player
        return Move(row, col)

    def get_legal_moves(self):
        """
        Get all legal move positions on the board.

        Returns:
            list: Move tuples for every empty position, in row-major order
        """
        rows, cols = np.nonzero(self.state == Cell.EMPTY)
        return [Move(int(r), int(c)) for r, c in zip(rows, cols)]

    def is_full(self):
        return not np.any(self.state == Cell.EMPTY)

    def stone_count(self):
        return int(np.count_nonzero(self.state))

    def reset(self):
        """Clear every cell."""
        self.state.fill(Cell.EMPTY)

    def copy(self):
        new_board = Board()
        new_board.state = self.state.copy()
        return new_board
