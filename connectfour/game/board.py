"""
board.py - Board representation for Connect Four

This module implements the Board class, a flat array of CELL_COUNT cells in
row-major order (index 0 is the top-left cell). The board is the single source
of truth for piece placement; the turn count is derived from its occupancy.
"""

from typing import Iterable, List, Optional

import numpy as np

from connectfour.debug import debug
from connectfour.errors import InvalidArgumentError, InvalidColumnError
from connectfour.utils import (ROWS, COLS, CELL_COUNT, Player,
                               is_integer, is_valid_column, render_board_ascii,
                               row_col_to_index)


class Board:
    """
    Represents a Connect Four game board.

    Cells hold Player values (0 empty, 1 or 2). A cell that has been filled
    stays filled until the whole board is reset.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        self.reset()

    def reset(self):
        """Reset the board to an empty state."""
        debug.trace("Resetting board", "board")
        self._cells = np.zeros(CELL_COUNT, dtype=np.int8)

    @classmethod
    def from_cells(cls, values: Iterable[int]) -> 'Board':
        """
        Build a board from CELL_COUNT cell values in row-major order.

        Raises:
            InvalidArgumentError: wrong number of values or a value that is
                not an integer Player value
        """
        values = list(values)
        if len(values) != CELL_COUNT:
            raise InvalidArgumentError(
                f"A board needs exactly {CELL_COUNT} cells, got {len(values)}")
        if not all(is_integer(v) and v in (Player.EMPTY, Player.ONE, Player.TWO) for v in values):
            raise InvalidArgumentError("Cell values must be the integers 0, 1 or 2")

        board = cls()
        board._cells[:] = values
        return board

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        new_board = Board()
        new_board._cells = self._cells.copy()
        return new_board

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cells; writing to it raises ValueError."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def turn_count(self) -> int:
        """Number of pieces on the board."""
        return int(np.count_nonzero(self._cells))

    def is_full(self) -> bool:
        return self.turn_count() == CELL_COUNT

    def is_column_full(self, column: int) -> bool:
        """A column is full once its top cell is occupied."""
        if not is_valid_column(column):
            raise InvalidColumnError(column)
        return bool(self._cells[column] != Player.EMPTY)

    def valid_columns(self) -> List[int]:
        """Columns that can still take a piece."""
        return [col for col in range(COLS) if self._cells[col] == Player.EMPTY]

    def landing_index(self, column: int) -> Optional[int]:
        """
        Find where a piece dropped into a column comes to rest.

        Walks the column from the top and stops just before the first
        occupied cell, or at the bottom row if the column is empty.

        Returns:
            The board index of the landing cell, or None if the column is full
        """
        if self.is_column_full(column):
            return None

        column = int(column)
        landing = column
        for row in range(1, ROWS):
            index = row_col_to_index(row, column)
            if self._cells[index] != Player.EMPTY:
                break
            landing = index
        return landing

    def place(self, index: int, player: int):
        """
        Put a player's piece on an empty cell.

        Raises:
            InvalidArgumentError: index off the board, cell occupied, or
                player not 1 or 2
        """
        if not 0 <= index < CELL_COUNT:
            raise InvalidArgumentError(f"Cell index {index} is off the board")
        if player not in (Player.ONE, Player.TWO):
            raise InvalidArgumentError(f"Invalid player {player!r}")
        if self._cells[index] != Player.EMPTY:
            raise InvalidArgumentError(f"Cell {index} is already occupied")

        debug.trace(f"Placing player {int(player)} at index {index}", "board")
        self._cells[index] = player

    def render(self, highlight: Iterable[int] = ()) -> str:
        """Render the board as a string."""
        return render_board_ascii(self._cells, highlight)

    def __len__(self) -> int:
        return CELL_COUNT

    def __str__(self) -> str:
        return self.render()
