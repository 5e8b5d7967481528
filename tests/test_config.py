"""Tests de la configuration et des erreurs associées."""

from __future__ import annotations

import dataclasses

import pytest

from twixt.engine.config import GameConfig, check_board_size
from twixt.engine.errors import ConfigurationError, TwixtError


def test_defaults():
    """Valeurs par défaut de la configuration."""
    config = GameConfig()
    assert config.board_size == 8
    assert config.ansi_color_output is True
    assert config.discount == 1.0


@pytest.mark.parametrize("size", [4, 25, 0, -8])
def test_board_size_out_of_range(size):
    """Une taille hors [5, 24] est refusée."""
    with pytest.raises(ConfigurationError, match="out of range"):
        GameConfig(board_size=size)


@pytest.mark.parametrize("size", [5, 24])
def test_board_size_bounds_are_inclusive(size):
    """Les bornes 5 et 24 sont acceptées."""
    assert GameConfig(board_size=size).board_size == size


@pytest.mark.parametrize("size", [8.0, "8", True])
def test_board_size_must_be_int(size):
    """La taille doit être un entier."""
    with pytest.raises(ConfigurationError):
        check_board_size(size)


@pytest.mark.parametrize("discount", [0.0, -0.5, 1.5])
def test_discount_out_of_range(discount):
    """Un escompte hors ]0, 1] est refusé."""
    with pytest.raises(ConfigurationError, match="discount"):
        GameConfig(discount=discount)


def test_config_errors_are_value_errors():
    """ConfigurationError est aussi une ValueError."""
    with pytest.raises(ValueError):
        GameConfig(board_size=3)
    assert issubclass(ConfigurationError, TwixtError)


def test_from_params():
    """from_params construit la configuration attendue."""
    config = GameConfig.from_params({"board_size": 11, "discount": 0.99})
    assert config == GameConfig(board_size=11, discount=0.99)


def test_from_params_rejects_unknown_keys():
    """Une clé inconnue est refusée."""
    with pytest.raises(ConfigurationError, match="inconnus"):
        GameConfig.from_params({"board_size": 8, "komi": 1})


def test_config_is_frozen():
    """La configuration est immuable."""
    config = GameConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.board_size = 10  # type: ignore[misc]


@pytest.mark.parametrize("discount", ["0.5", None, True])
def test_discount_must_be_a_real(discount):
    """Un escompte non numérique lève ConfigurationError, pas TypeError."""
    with pytest.raises(ConfigurationError, match="discount"):
        GameConfig(discount=discount)
    with pytest.raises(ConfigurationError, match="discount"):
        GameConfig.from_params({"discount": discount})
