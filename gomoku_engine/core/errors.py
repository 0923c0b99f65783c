"""
Errors raised by the Gomoku engine.

Every error leaves the board and the game status unchanged.
"""


class MoveError(ValueError):
    """Base class for rejected moves."""


class OutOfBoundsError(MoveError):
    """Coordinate outside the 15x15 grid."""

    def __init__(self, row, col):
        super().__init__(f"position ({row}, {col}) is off the board")
        self.row = row
        self.col = col


class CellOccupiedError(MoveError):
    """Target cell already holds a stone."""

    def __init__(self, row, col):
        super().__init__(f"position ({row}, {col}) is already occupied")
        self.row = row
        self.col = col


class GameOverError(MoveError):
    """Move requested after the game was won or drawn."""


class BoardFullError(MoveError):
    """Machine move requested with no empty cell left."""


class WrongTurnError(MoveError):
    """Move requested by a mover whose turn it is not."""
