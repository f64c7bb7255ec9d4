"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

The board is a flat sequence of CELL_COUNT cells in row-major order, index 0
being the top-left cell and index CELL_COUNT - 1 the bottom-right one.
"""

from enum import IntEnum
from typing import Iterable, Sequence, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CELL_COUNT = ROWS * COLS
CONNECT_N = 4  # Number of pieces in a row to win
MIN_PIECES_FOR_WIN = 2 * CONNECT_N - 1  # fewest pieces on a board that holds a win


class Player(IntEnum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class WinState(IntEnum):
    """Outcome of a win check. Win values match the winning player's number."""
    NO_WINNER = 0
    PLAYER1_WINS = 1
    PLAYER2_WINS = 2
    TIE = 3

    def is_game_over(self) -> bool:
        """Check if the state is terminal."""
        return self != WinState.NO_WINNER

    @classmethod
    def for_player(cls, player: int) -> 'WinState':
        """Get the win state for a player number (1 or 2)."""
        return cls(int(player))


def row_col_to_index(row: int, col: int) -> int:
    """Convert a 0-indexed (row, col) position to a flat board index."""
    return row * COLS + col


def index_to_row_col(index: int) -> Tuple[int, int]:
    """Convert a flat board index to a 0-indexed (row, col) position."""
    return divmod(index, COLS)


def index_to_row_number(index: int) -> int:
    """
    Convert a flat board index to a 1-indexed row number.

    Row 1 is the top row of the board and row ROWS the bottom one.
    """
    return index // COLS + 1


def is_integer(value) -> bool:
    """
    Check that a value is an integer.

    Booleans are rejected even though they are ints; numpy integers are
    accepted so values taken from numpy arrays and spaces can be used directly.
    """
    return not isinstance(value, bool) and isinstance(value, (int, np.integer))


def is_valid_column(column) -> bool:
    """Check that a column is an integer within the board."""
    if not is_integer(column):
        return False
    return 0 <= column < COLS


def render_board_ascii(cells: Sequence[int], highlight: Iterable[int] = ()) -> str:
    """
    Render a flat board as ASCII art.

    Args:
        cells: The CELL_COUNT board cells
        highlight: Indices to draw in lower case, e.g. the winning line

    Returns:
        ASCII representation of the board, top row first
    """
    highlight = set(highlight)
    result = ["|" + "-" * (COLS * 2 - 1) + "|"]

    for row in range(ROWS):
        glyphs = []
        for col in range(COLS):
            index = row_col_to_index(row, col)
            glyph = str(Player(int(cells[index])))
            if index in highlight:
                glyph = glyph.lower()
            glyphs.append(glyph)
        result.append("|" + " ".join(glyphs) + "|")

    result.append("|" + "-" * (COLS * 2 - 1) + "|")
    result.append("|" + " ".join(str(i) for i in range(COLS)) + "|")

    return "\n".join(result)
