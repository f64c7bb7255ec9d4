"""
win_lines.py - Precomputed catalog of every four-in-a-row on the board

The catalog depends only on the fixed board geometry, so it is built once at
import time into the immutable WIN_LINES constant and shared read-only by every
game. Its order is significant: when several lines are complete at once, the
first one in catalog order is the one reported as the winning line.
"""

from typing import Tuple

from connectfour.utils import ROWS, COLS, CONNECT_N, row_col_to_index

WinLine = Tuple[int, ...]


def _line(row: int, col: int, dr: int, dc: int) -> WinLine:
    """Indices of the CONNECT_N cells starting at (row, col) stepping by (dr, dc)."""
    return tuple(row_col_to_index(row + dr * i, col + dc * i) for i in range(CONNECT_N))


def compute_win_lines() -> Tuple[WinLine, ...]:
    """
    Enumerate every line of CONNECT_N cells on the board.

    Order: horizontal lines row by row, vertical lines column by column,
    forward diagonals ("/", listed from the lower-left cell) and back
    diagonals ("\\", listed from the upper-left cell), each group scanned
    by start column and then start row.

    Returns:
        Tuple of win lines, each a tuple of CONNECT_N board indices
    """
    span = CONNECT_N - 1
    lines = []

    # Horizontal rows
    for row in range(ROWS):
        for col in range(COLS - span):
            lines.append(_line(row, col, 0, 1))

    # Vertical columns
    for col in range(COLS):
        for row in range(ROWS - span):
            lines.append(_line(row, col, 1, 0))

    # Forward slash "/": start at the bottom end, go up and right
    for col in range(COLS - span):
        for row in range(span, ROWS):
            lines.append(_line(row, col, -1, 1))

    # Back slash "\": start at the top end, go down and right
    for col in range(COLS - span):
        for row in range(ROWS - span):
            lines.append(_line(row, col, 1, 1))

    return tuple(lines)


WIN_LINES = compute_win_lines()
