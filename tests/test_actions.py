"""Tests des conversions action <-> coordonnées <-> libellés."""

from __future__ import annotations

import numpy as np
import pytest

from twixt.engine.actions import (
    action_to_coord,
    action_to_label,
    check_action,
    coord_to_action,
    label_to_action,
    swap_action,
)
from twixt.engine.errors import PreconditionError


def test_action_index_is_row_major():
    """L'index d'action vaut y * n + x."""
    assert action_to_coord(26, 8) == (2, 3)
    assert coord_to_action((2, 3), 8) == 26
    assert action_to_coord(0, 5) == (0, 0)
    assert action_to_coord(24, 5) == (4, 4)


def test_labels_count_rows_from_the_top():
    """Le numéro de ligne du libellé se compte depuis le haut."""
    assert action_to_label(26, 8) == "C5"
    assert action_to_label(1, 8) == "B8"
    assert action_to_label(62, 8) == "G1"


@pytest.mark.parametrize("label, action", [("C5", 26), ("c5", 26), (" B8 ", 1), ("G1", 62)])
def test_label_to_action(label, action):
    """Un libellé valide (casse et espaces tolérés) donne l'action attendue."""
    assert label_to_action(label, 8) == action


@pytest.mark.parametrize("label", ["", "C", "5C", "I1", "A0", "A9", "CC5", "C123"])
def test_bad_labels_raise(label):
    """Un libellé mal formé ou hors plateau lève PreconditionError."""
    with pytest.raises(PreconditionError):
        label_to_action(label, 8)


def test_label_roundtrip_on_large_board():
    """Les libellés restent inversibles sur un plateau 24x24."""
    size = 24
    for action in (0, 25, 287, size * size - 1):
        assert label_to_action(action_to_label(action, size), size) == action


def test_swap_action_turns_the_cell():
    """L'échange tourne la case de 90°."""
    # (3, 3) -> (4, 3) sur 8x8
    assert swap_action(27, 8) == 28
    # (1, 0) -> (4, 1) sur 5x5
    assert action_to_coord(swap_action(1, 5), 5) == (4, 1)


@pytest.mark.parametrize("action", [-1, 64, 1.0, "3", True, None])
def test_check_action_rejects_invalid(action):
    """Une action hors bornes ou non entière est refusée."""
    with pytest.raises(PreconditionError):
        check_action(action, 8)


def test_check_action_accepts_numpy_integers():
    """Un entier numpy est accepté et converti en int."""
    value = check_action(np.int64(12), 8)
    assert value == 12
    assert type(value) is int
