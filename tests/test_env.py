"""
Tests for the Gymnasium environment.
"""
import numpy as np
import pytest

from connectfour.game.env import ConnectFourEnv
from connectfour.game.rules import GameState


def test_env_reset():
    """Test that reset returns an empty board and full move list."""
    env = ConnectFourEnv()

    observation, info = env.reset(seed=0)

    assert observation.shape == (6, 7)
    assert observation.dtype == np.int8
    assert np.all(observation == 0)
    assert env.observation_space.contains(observation)
    assert info['valid_moves'] == list(range(7))
    assert info['player_turn'] == 1
    assert info['current_turn'] == 0
    assert info['game_result'] == 'NO_WINNER'


def test_env_step():
    """Test that a step drops a piece for the player to move."""
    env = ConnectFourEnv()
    env.reset()

    observation, reward, terminated, truncated, info = env.step(3)

    assert observation[5, 3] == 1
    assert reward == env.reward_step
    assert terminated is False
    assert truncated is False
    assert info['player_turn'] == 2
    assert info['current_turn'] == 1


def test_env_win():
    """Test that completing a line terminates the episode with a win reward."""
    env = ConnectFourEnv()
    env.reset()

    for action in [0, 1, 0, 1, 0, 1]:
        _, _, terminated, _, _ = env.step(action)
        assert terminated is False

    observation, reward, terminated, truncated, info = env.step(0)

    assert terminated is True
    assert truncated is False
    assert reward == env.reward_win
    assert info['game_result'] == 'PLAYER1_WINS'
    assert info['winning_line'] == [14, 21, 28, 35]
    assert info['valid_moves'] == []
    assert list(observation[2:, 0]) == [1, 1, 1, 1]


def test_env_invalid_action():
    """Test that an illegal action is reported without changing the board."""
    env = ConnectFourEnv()
    env.reset()
    for _ in range(6):
        env.step(0)

    observation, reward, terminated, truncated, info = env.step(0)

    assert reward == env.reward_invalid_move
    assert terminated is False
    assert truncated is True
    assert info['invalid_move'] is True
    assert info['current_turn'] == 6
    assert 0 not in info['valid_moves']

    _, reward, _, truncated, info = env.step(9)
    assert truncated is True
    assert info['current_turn'] == 6


def test_env_step_after_game_over():
    """Test that the environment refuses moves after the game ended."""
    env = ConnectFourEnv()
    env.reset()
    for action in [0, 1, 0, 1, 0, 1, 0]:
        env.step(action)

    _, reward, terminated, truncated, info = env.step(2)

    assert truncated is True
    assert info['invalid_move'] is True
    assert info['current_turn'] == 7


def test_env_reset_alternates_start():
    """Test the alternate_start reset option."""
    state = GameState()
    state.player1_wins = 4
    env = ConnectFourEnv(state=state)
    env.reset()
    env.step(2)

    observation, info = env.reset(options={'alternate_start': True})

    assert np.all(observation == 0)
    assert state.starting_player == 2
    assert info['player_turn'] == 2
    assert state.player1_wins == 4


def test_env_sampled_actions():
    """Test that actions sampled from the action space can be played."""
    env = ConnectFourEnv()
    env.reset(seed=1)
    env.action_space.seed(1)

    action = env.action_space.sample()
    _, _, _, truncated, info = env.step(action)

    assert truncated is False
    assert info['current_turn'] == 1


def test_env_render():
    """Test ascii rendering and render mode validation."""
    env = ConnectFourEnv(render_mode='ascii')
    env.reset()
    env.step(3)

    rendered = env.render()

    assert isinstance(rendered, str)
    assert "X" in rendered
    assert ConnectFourEnv().render() is None

    with pytest.raises(ValueError):
        ConnectFourEnv(render_mode='rgb_array')
