"""
cli.py - Command-line interface for the Connect Four engine

This module provides a hot-seat game for two players at one terminal and a
position checker that loads a board and reports what the engine makes of it.
Score keeping lives here: the engine reports results, the CLI counts them.
"""

import argparse
import sys
from typing import List, Optional

from connectfour.debug import debug, DebugLevel
from connectfour.errors import ConnectFourError
from connectfour.game.board import Board
from connectfour.game.rules import GameState
from connectfour.utils import COLS, WinState

QUIT = "q"
RESTART = "r"


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, state: Optional[GameState] = None):
        """Initialize the CLI."""
        self.state = state if state is not None else GameState()
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', default=None, help='Also write logs to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game at this terminal')
        play_parser.add_argument('--player1-color', default='red', help='Display color of player 1')
        play_parser.add_argument('--player2-color', default='yellow', help='Display color of player 2')
        play_parser.add_argument('--starting-player', type=int, default=1,
                                 help='Player who moves first (1 or 2)')

        check_parser = subparsers.add_parser('check', help='Check a board position')
        check_parser.add_argument('--position', type=str, required=True,
                                  help='42 comma-separated cell values (0, 1, 2), top row first')
        check_parser.add_argument('--starting-player', type=int, default=1,
                                  help='Player who moved first in the position')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments; returns an exit status."""
        if argv is not None or not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'check':
            return self.check_position()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def _player_label(self, player: int) -> str:
        color = self.state.player1_color if player == 1 else self.state.player2_color
        return f"Player {player} ({color})" if color else f"Player {player}"

    def print_scores(self):
        print(f"Score: {self._player_label(1)} {self.state.player1_wins}, "
              f"{self._player_label(2)} {self.state.player2_wins}, "
              f"ties {self.state.ties}")

    def play_game(self):
        """Play rounds of Connect Four until a player quits."""
        self.state.player1_color = self.args.player1_color
        self.state.player2_color = self.args.player2_color
        self.state.starting_player = self.args.starting_player

        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{COLS - 1}) to drop a piece.")
        print(f"Other commands: '{QUIT}' to quit, '{RESTART}' to restart the round.")

        while True:
            result = self.play_round()
            if result is None:
                print("Quitting game.")
                break

            self.state.record_result(result)
            if result == WinState.TIE:
                print("It's a tie!")
            else:
                print(f"{self._player_label(int(result))} wins!")
            self.print_scores()

            again = input("Play again? (y/n): ").strip().lower()
            if again != 'y':
                break
            self.state.alternate_starting_player()
            self.state.reset_board()

    def play_round(self) -> Optional[WinState]:
        """
        Play one round to its end.

        Returns:
            The terminal result, or None if a player quit
        """
        print(self.state.render())

        while True:
            result = self.state.check_for_win()
            if result.is_game_over():
                return result

            command = input(f"{self._player_label(self.state.player_turn)}, "
                            f"your move: ").strip().lower()
            if command == QUIT:
                return None
            if command == RESTART:
                self.state.reset_board()
                print("Round restarted.")
                print(self.state.render())
                continue

            try:
                column = int(command)
            except ValueError:
                print("Invalid input. Please enter a column number or a command.")
                continue

            try:
                row = self.state.play_piece(column)
            except ConnectFourError as e:
                print(f"Invalid move: {e}")
                continue

            debug.debug(f"Piece landed on row {row} of column {column}", "cli")
            print(self.state.render())

    def check_position(self) -> int:
        """Load a board position and report what the engine makes of it."""
        try:
            board = Board.from_cells(int(c) for c in self.args.position.split(','))
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        state = GameState(board=board)
        state.starting_player = self.args.starting_player
        result = state.check_for_win()

        print("Loaded position:")
        print(state.render())
        print(f"Pieces played: {state.current_turn}")
        print(f"Result: {result.name}")
        if result in (WinState.PLAYER1_WINS, WinState.PLAYER2_WINS):
            print(f"Winning pieces: {state.winning_pieces}")
        elif result == WinState.NO_WINNER:
            print(f"Player to move: {state.player_turn}")
            print(f"Valid moves: {state.valid_columns()}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the connectfour command."""
    try:
        return SimpleCLI().run(argv)
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted. Exiting.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
