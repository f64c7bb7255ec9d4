"""
errors.py - Exceptions raised by the Connect Four rules engine

All of these signal caller misuse. They are raised before any board
mutation, so a caller can reject the input and prompt again.
"""


class ConnectFourError(Exception):
    """Base class for every error raised by the engine."""


class InvalidArgumentError(ConnectFourError, ValueError):
    """Raised when a value handed to the engine is malformed."""


class InvalidColumnError(InvalidArgumentError):
    """Raised when a move names a column outside the board."""

    def __init__(self, column):
        super().__init__(f"Column {column!r} is not a valid column")
        self.column = column


class GameOverError(ConnectFourError):
    """Raised when a move is attempted after the game has ended."""

    def __init__(self, result):
        super().__init__(f"Game is over ({result.name})")
        self.result = result


class ColumnFullError(ConnectFourError):
    """Raised when a move is attempted into a column with no empty cell."""

    def __init__(self, column):
        super().__init__(f"Column {column} is full")
        self.column = column
