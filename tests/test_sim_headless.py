"""Tests de l'environnement headless et des épisodes simulés."""

from __future__ import annotations

import pytest

from twixt.engine.board import Result
from twixt.engine.config import GameConfig
from twixt.engine.errors import PreconditionError
from twixt.engine.state import GameState
from twixt.rl.policies import RandomLegalPolicy
from twixt.sim.runner import HeadlessEnv, StepResult, play_episode

from .scenario_utils import RED_WIN_GAME_5, FirstLegalPolicy


@pytest.fixture
def headless_env():
    return HeadlessEnv(GameConfig(board_size=5, ansi_color_output=False))


def test_reset_returns_initial_state(headless_env):
    """reset() produit un GameState initial."""
    state = headless_env.reset()
    assert isinstance(state, GameState)
    assert state.move_counter == 0
    assert headless_env.state is state


def test_state_requires_reset():
    """L'état n'est pas accessible avant reset()."""
    with pytest.raises(RuntimeError):
        HeadlessEnv().state


def test_legal_actions_mask(headless_env):
    """Le masque compte autant de True que d'actions légales."""
    headless_env.reset()
    mask = headless_env.legal_actions_mask()
    assert len(mask) == 25
    assert sum(mask) == len(headless_env.legal_actions())


def test_step_result(headless_env):
    """step() renvoie un StepResult cohérent."""
    headless_env.reset()
    result = headless_env.step(12)
    assert isinstance(result, StepResult)
    assert result.reward == (0.0, 0.0)
    assert not result.done
    assert result.info["label"] == "C3"
    assert headless_env.state is result.state


def test_step_to_victory(headless_env):
    """La victoire est signalée avec les gains."""
    headless_env.reset()
    for action in RED_WIN_GAME_5:
        result = headless_env.step(action)
    assert result.done
    assert result.reward == (1.0, -1.0)
    assert result.info["result"] is Result.RED_WON


def test_illegal_step(headless_env):
    """Une action illégale lève PreconditionError."""
    headless_env.reset()
    with pytest.raises(PreconditionError):
        headless_env.step(0)


def test_play_episode_reaches_the_end(headless_env):
    """Un épisode aléatoire va jusqu'au bout."""
    policies = [RandomLegalPolicy(seed=1), RandomLegalPolicy(seed=2)]
    state = play_episode(headless_env, policies)
    assert state.is_terminal


def test_play_episode_is_deterministic(headless_env):
    """Deux épisodes déterministes donnent le même historique."""
    policies = [FirstLegalPolicy(), FirstLegalPolicy()]
    first = play_episode(headless_env, policies)
    second = play_episode(headless_env, policies)
    assert first.history == second.history


def test_play_episode_max_steps(headless_env):
    """max_steps borne la longueur de l'épisode."""
    policies = [FirstLegalPolicy(), FirstLegalPolicy()]
    state = play_episode(headless_env, policies, max_steps=3)
    assert len(state.history) == 3


def test_play_episode_needs_two_policies(headless_env):
    """Il faut une politique par joueur."""
    with pytest.raises(ValueError):
        play_episode(headless_env, [FirstLegalPolicy()])
