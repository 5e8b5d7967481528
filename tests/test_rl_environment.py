"""Tests de l'environnement Gymnasium."""

from __future__ import annotations

import numpy as np
import pytest

from twixt.engine.errors import PreconditionError
from twixt.rl.environment import TwixtEnv

from .scenario_utils import RED_WIN_GAME_5


def test_spaces():
    """Espaces d'observation et d'action dimensionnés sur le plateau."""
    env = TwixtEnv(board_size=7)
    assert env.observation_space.shape == (11, 7, 5)
    assert env.action_space.n == 49


def test_reset_returns_observation_and_mask():
    """reset() retourne l'observation et le masque d'actions."""
    env = TwixtEnv(board_size=5)
    obs, info = env.reset(seed=0)
    assert env.observation_space.contains(obs)
    assert info["action_mask"].shape == (25,)
    assert info["action_mask"].sum() == 15
    assert info["current_player"] == 0


def test_step_before_reset():
    """step() sans reset() lève RuntimeError."""
    with pytest.raises(RuntimeError):
        TwixtEnv(board_size=5).step(12)


def test_illegal_step_raises():
    """Une action illégale lève PreconditionError."""
    env = TwixtEnv(board_size=5)
    env.reset()
    with pytest.raises(PreconditionError):
        env.step(0)


def test_winning_move_is_rewarded():
    """Le coup gagnant est récompensé et termine l'épisode."""
    env = TwixtEnv(board_size=5, discount=0.5, render_mode="ansi")
    env.reset()
    rewards = []
    terminated = False
    for action in RED_WIN_GAME_5:
        obs, reward, terminated, truncated, info = env.step(np.int64(action))
        rewards.append(reward)
        assert not truncated
    assert terminated
    assert rewards[:-1] == [0.0] * 4
    assert rewards[-1] == pytest.approx(0.5 ** 5)
    assert info["result"] == "RED_WON"
    assert not info["action_mask"].any()
    assert "[X has won]" in env.render()


def test_unsupported_render_mode():
    """Un mode de rendu inconnu est refusé."""
    with pytest.raises(ValueError):
        TwixtEnv(board_size=5, render_mode="human")
