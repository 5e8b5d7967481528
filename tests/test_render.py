"""Tests du rendu texte du plateau."""

from __future__ import annotations

from twixt.engine.board import Board
from twixt.engine.render import ANSI_BLUE, ANSI_RED, render_board
from twixt.engine.rules import PLAYER_RED

from .scenario_utils import LINK_GAME, RED_WIN_GAME_5, play


def test_empty_board_layout():
    """Disposition du plateau vide: en-tête, rangées, pied."""
    text = render_board(Board(5))
    lines = text.split("\n")
    assert lines[0].split() == ["A", "B", "C", "D", "E"]
    # en-tête + 3 lignes par rangée + ligne vide + pied
    assert len(lines) == 1 + 3 * 5 + 2
    assert lines[2].split()[0] == "1"
    assert lines[-4].split()[0] == "5"
    assert "X" not in text and "O" not in text
    assert "|" not in text


def test_pegs_and_links_are_drawn():
    """Les pions et les liens apparaissent dans le rendu."""
    board = play(8, LINK_GAME)
    text = render_board(board)
    assert text.count("X") == 2
    assert text.count("O") == 1
    assert "|" in text


def test_swap_and_result_markers():
    """Marqueurs d'échange et de résultat dans le pied."""
    assert "[swapped]" in render_board(play(8, (27, 27)))
    assert render_board(play(5, RED_WIN_GAME_5)).endswith("[X has won]")
    assert render_board(Board(5)).split("\n")[-1] == ""


def test_ansi_output_is_optional():
    """Les couleurs ANSI ne sont émises que sur demande."""
    board = Board(5)
    board.apply_action(PLAYER_RED, 12)
    assert ANSI_RED in render_board(board, ansi_color_output=True)
    assert ANSI_BLUE in render_board(board, ansi_color_output=True)
    assert "\x1b" not in render_board(board, ansi_color_output=False)


def test_str_uses_board_setting():
    """str(board) suit le réglage ansi_color_output du plateau."""
    assert "\x1b" in str(Board(5))
    assert "\x1b" not in str(Board(5, ansi_color_output=False))
