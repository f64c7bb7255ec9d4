"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the precomputed win-line
catalog and the rules engine.
"""

from connectfour.game.board import Board
from connectfour.game.win_lines import WIN_LINES, WinLine, compute_win_lines
from connectfour.game.rules import (GameState, current_player,
                                    current_turn_count, find_winner)

__all__ = ['Board', 'GameState', 'WIN_LINES', 'WinLine', 'compute_win_lines',
           'current_player', 'current_turn_count', 'find_winner']
