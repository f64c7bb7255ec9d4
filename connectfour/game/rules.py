"""
rules.py - Rules engine and game state management for Connect Four

This module provides:
1. Pure rule functions (turn derivation, win detection) over a flat board
2. GameState, the authoritative state of one game and the operations on it

Whose turn it is never gets stored: it is derived from the number of pieces on
the board and the starting player, so it cannot drift out of sync with the board.
Score counters are plain attributes owned by the caller; the engine reports
outcomes but never increments them itself.
"""

from collections import abc
from typing import List, Optional, Sequence, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.errors import (ColumnFullError, GameOverError,
                                InvalidArgumentError, InvalidColumnError)
from connectfour.game.board import Board
from connectfour.game.win_lines import WIN_LINES, WinLine
from connectfour.utils import (CELL_COUNT, CONNECT_N, MIN_PIECES_FOR_WIN,
                               Player, WinState, index_to_row_number,
                               is_integer, is_valid_column)


def current_turn_count(cells: Sequence[int]) -> int:
    """Number of pieces played so far, i.e. the count of non-empty cells."""
    return int(np.count_nonzero(np.asarray(cells)))


def current_player(turn_count: int, starting_player: int) -> int:
    """
    The player (1 or 2) who moves next.

    Args:
        turn_count: Pieces already on the board
        starting_player: The player who moved first this game
    """
    return (turn_count + starting_player - 1) % 2 + 1


def find_winner(cells: Sequence[int],
                win_lines: Sequence[WinLine] = WIN_LINES) -> Tuple[WinState, Optional[WinLine]]:
    """
    Check a board for a completed line or a tie.

    Lines are tested in catalog order and the first one held entirely by a
    single player wins, so when a board carries several complete lines the
    earliest in the catalog is the one reported.

    Args:
        cells: The CELL_COUNT board cells
        win_lines: Catalog of lines to test

    Returns:
        The win state and the winning line (None unless a player has won)
    """
    turn_count = current_turn_count(cells)
    if turn_count < MIN_PIECES_FOR_WIN:
        return WinState.NO_WINNER, None

    for line in win_lines:
        owner = cells[line[0]]
        if owner == Player.EMPTY:
            continue
        if all(cells[index] == owner for index in line[1:]):
            return WinState.for_player(owner), line

    if turn_count == CELL_COUNT:
        return WinState.TIE, None

    return WinState.NO_WINNER, None


class GameState:
    """
    Authoritative state of a Connect Four game.

    Holds the board, the starting player, the last winning line, the players'
    display colors and cumulative score counters. The colors and counters are
    plain attributes for the presentation layer to read and set.
    """

    def __init__(self, board: Optional[Board] = None,
                 win_lines: Sequence[WinLine] = WIN_LINES):
        """
        Initialize a new game.

        Args:
            board: Board to play on (a new empty board by default)
            win_lines: Catalog of winning lines shared between games
        """
        self._board = board if board is not None else Board()
        self._win_lines = win_lines
        self._starting_player = Player.ONE.value
        self._winning_pieces: List[int] = []

        self.player1_color = ""
        self.player2_color = ""
        self.player1_wins = 0
        self.player2_wins = 0
        self.ties = 0

        debug.debug("Initialized GameState", "rules")

    @property
    def starting_player(self) -> int:
        return self._starting_player

    @starting_player.setter
    def starting_player(self, value):
        # Anything other than exactly 1 means player 2 starts
        self._starting_player = 1 if value == 1 else 2

    def alternate_starting_player(self):
        """Hand the first move of the next game to the other player."""
        self._starting_player = 1 if self._starting_player == 2 else 2
        debug.debug(f"Starting player is now {self._starting_player}", "rules")

    @property
    def board(self) -> np.ndarray:
        """Read-only view of the CELL_COUNT board cells."""
        return self._board.cells

    @property
    def win_lines(self) -> Sequence[WinLine]:
        return self._win_lines

    @property
    def current_turn(self) -> int:
        """Number of turns completed and pieces played so far."""
        return self._board.turn_count()

    @property
    def player_turn(self) -> int:
        """The player whose turn it is."""
        return current_player(self.current_turn, self._starting_player)

    @property
    def winning_pieces(self) -> List[int]:
        """A copy of the last winning line found, empty until there is one."""
        return list(self._winning_pieces)

    @winning_pieces.setter
    def winning_pieces(self, value):
        if not isinstance(value, (abc.Sequence, np.ndarray)) or isinstance(value, str) \
                or len(value) != CONNECT_N:
            raise InvalidArgumentError(
                f"Winning pieces must be a sequence of {CONNECT_N} board indices")
        if not all(is_integer(index) and 0 <= index < CELL_COUNT for index in value):
            raise InvalidArgumentError(
                f"Winning pieces must be integers between 0 and {CELL_COUNT - 1}")
        self._winning_pieces = [int(index) for index in value]

    def check_for_win(self) -> WinState:
        """
        Check the board for a winner or a tie.

        A found winning line is recorded in winning_pieces.

        Returns:
            NO_WINNER, PLAYER1_WINS, PLAYER2_WINS or TIE
        """
        debug.start_timer("win_check")
        result, line = find_winner(self._board.cells, self._win_lines)
        debug.end_timer("win_check", "rules")

        if line is not None:
            self._winning_pieces = list(line)
            debug.debug(f"{result.name} with line {list(line)}", "rules")
        elif result == WinState.TIE:
            debug.debug("Board is full with no winner", "rules")

        return result

    def play_piece(self, column: int) -> int:
        """
        Drop the current player's piece into a column.

        Args:
            column: 0-indexed column to place the piece into

        Returns:
            The 1-indexed row the piece landed on (1 is the top row)

        Raises:
            GameOverError: the game has already been won or tied
            InvalidColumnError: column is not on the board
            ColumnFullError: the column has no empty cell
        """
        result = self.check_for_win()
        if result.is_game_over():
            debug.debug(f"Rejected move in column {column}: game is over", "rules")
            raise GameOverError(result)

        if not is_valid_column(column):
            debug.debug(f"Rejected move: column {column!r} out of range", "rules")
            raise InvalidColumnError(column)

        landing = self._board.landing_index(column)
        if landing is None:
            debug.debug(f"Rejected move: column {column} is full", "rules")
            raise ColumnFullError(column)

        player = self.player_turn
        self._board.place(landing, player)
        row = index_to_row_number(landing)
        debug.debug(f"Player {player} played column {column}, landed on row {row}", "rules")
        return row

    def valid_columns(self) -> List[int]:
        """Columns that accept a move right now; none once the game is over."""
        if self.check_for_win().is_game_over():
            return []
        return self._board.valid_columns()

    def reset_board(self):
        """
        Clear the board and the winning line for a new game.

        The starting player, colors and score counters are kept.
        """
        self._board.reset()
        self._winning_pieces = []
        debug.debug("Board reset", "rules")

    def record_result(self, result: WinState):
        """
        Add a finished game to the score counters.

        The engine never calls this itself; it is for the caller that decides
        a game is over.
        """
        if result == WinState.PLAYER1_WINS:
            self.player1_wins += 1
        elif result == WinState.PLAYER2_WINS:
            self.player2_wins += 1
        elif result == WinState.TIE:
            self.ties += 1
        else:
            raise InvalidArgumentError(f"Cannot record unfinished game ({result!r})")
        debug.info(f"Recorded {WinState(result).name}: "
                   f"{self.player1_wins}-{self.player2_wins}-{self.ties}", "rules")

    def render(self) -> str:
        """Render the board with the winning line in lower case."""
        return self._board.render(self._winning_pieces)

    def __str__(self) -> str:
        return self.render()
