"""
env.py - Gymnasium environment for Connect Four

Wraps a GameState behind the Gymnasium interface so that the engine can be
driven step by step by external agents or tooling. Both players act through
the same environment; the observation is always the full board.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.errors import ConnectFourError
from connectfour.game.rules import GameState
from connectfour.utils import ROWS, COLS, WinState


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Rewards are given from the point of view of the player who just moved.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None, state: Optional[GameState] = None):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: Mode for rendering the environment
            state: Game to drive (a new GameState by default)
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(COLS)

        # Observation space: 6x7 board with 3 possible values (0, 1, 2)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )

        self.state = state if state is not None else GameState()
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict[str, Any]] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to an empty board.

        Args:
            seed: Random seed for reproducibility
            options: ``{"alternate_start": True}`` hands the first move to the
                other player before clearing the board

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)

        if options and options.get('alternate_start'):
            self.state.alternate_starting_player()
        self.state.reset_board()
        debug.debug(f"Environment reset, player {self.state.starting_player} starts", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play a piece for the player whose turn it is.

        Args:
            action: Column to place a piece (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        try:
            self.state.play_piece(action)
        except ConnectFourError as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        result = self.state.check_for_win()
        reward = self.reward_step
        terminated = result.is_game_over()
        if result == WinState.TIE:
            reward = self.reward_draw
        elif terminated:
            reward = self.reward_win
        if terminated:
            debug.info(f"Game over: {result.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        """Render the current board according to render_mode."""
        if self.render_mode == "ascii":
            return self.state.render()
        if self.render_mode == "human":
            print(self.state.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return np.array(self.state.board, dtype=np.int8).reshape(ROWS, COLS)

    def _get_info(self) -> Dict[str, Any]:
        result = self.state.check_for_win()
        valid_moves = self.state.valid_columns()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'player_turn': self.state.player_turn,
            'current_turn': self.state.current_turn,
            'game_result': result.name,
            'winning_line': list(self.state.winning_pieces),
        }
