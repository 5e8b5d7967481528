"""Tests unitaires de la case."""

from __future__ import annotations

from twixt.engine.cell import Border, Cell, Color
from twixt.engine.geometry import Compass
from twixt.engine.rules import PLAYER_BLUE, PLAYER_RED


def test_new_cell_is_empty():
    """Une nouvelle case est vide, sans lien ni candidat."""
    cell = Cell(coord=(2, 2))
    assert cell.color is Color.EMPTY
    assert not cell.has_links()
    assert cell.candidates == [0, 0]
    assert not cell.is_linked_to_border(PLAYER_RED, Border.START)


def test_links_bitmask():
    """Les liens sont stockés dans un masque de bits."""
    cell = Cell(coord=(2, 2))
    cell.set_link(Compass.ENE)
    cell.set_link(Compass.NNW)
    assert cell.has_link(Compass.ENE)
    assert not cell.has_link(Compass.NNE)
    assert list(cell.link_directions()) == [Compass.ENE, Compass.NNW]


def test_delete_candidate_for_one_player():
    """Retirer un candidat pour un joueur épargne l'autre."""
    cell = Cell(coord=(2, 2))
    for player in (PLAYER_RED, PLAYER_BLUE):
        cell.set_candidate(player, Compass.SSE)
    cell.delete_candidate(Compass.SSE, PLAYER_BLUE)
    assert cell.is_candidate(PLAYER_RED, Compass.SSE)
    assert not cell.is_candidate(PLAYER_BLUE, Compass.SSE)


def test_delete_candidate_for_both_players():
    """Sans joueur, le candidat est retiré pour les deux."""
    cell = Cell(coord=(2, 2))
    for player in (PLAYER_RED, PLAYER_BLUE):
        cell.set_candidate(player, Compass.SSE)
        cell.set_candidate(player, Compass.NNE)
    cell.delete_candidate(Compass.SSE)
    assert not cell.is_candidate(PLAYER_RED, Compass.SSE)
    assert not cell.is_candidate(PLAYER_BLUE, Compass.SSE)
    assert cell.is_candidate(PLAYER_RED, Compass.NNE)


def test_copy_is_independent():
    """La copie ne partage aucune liste avec l'original."""
    cell = Cell(coord=(1, 1))
    cell.set_candidate(PLAYER_RED, Compass.NNE)
    clone = cell.copy()
    assert clone == cell

    clone.set_candidate(PLAYER_BLUE, Compass.ENE)
    clone.set_linked_to_border(PLAYER_BLUE, Border.END)
    clone.neighbors[0] = (2, 3)
    assert not cell.is_candidate(PLAYER_BLUE, Compass.ENE)
    assert not cell.is_linked_to_border(PLAYER_BLUE, Border.END)
    assert cell.neighbors[0] is None


def test_color_player_mapping():
    """Correspondance couleur <-> joueur."""
    assert Color.of_player(PLAYER_RED) is Color.RED
    assert Color.of_player(PLAYER_BLUE) is Color.BLUE
    assert Color.RED.player == PLAYER_RED
    assert Color.EMPTY.player is None
    assert Color.OFFBOARD.player is None
