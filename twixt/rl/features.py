"""Encodage du plateau TwixT en plans numpy.

Le tenseur d'état compte 11 plans de forme (n, n - 2):
- pour chaque couleur, un plan des pions sans lien puis un plan par direction
  de lien NNE, ENE, ESE, SSE
- un plan constant valant l'identifiant du joueur au trait

Les plans rouges ignorent les deux colonnes bleues (x = 0 et x = n - 1). Les
plans bleus sont tournés de 90° et ignorent les lignes rouges, de sorte que
chaque joueur lit sa direction de connexion selon le premier axe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from twixt.engine.board import Board
from twixt.engine.geometry import FORWARD_DIRECTIONS
from twixt.engine.rules import NUM_PLANES, PLAYER_BLUE, PLAYER_RED
from twixt.engine.state import GameState


@dataclass(frozen=True)
class ObservationTensor:
    """Tenseurs exposés aux pipelines d'apprentissage."""

    planes: np.ndarray
    legal_actions_mask: np.ndarray
    to_play: int


def information_state_shape(size: int) -> Tuple[int, int, int]:
    return NUM_PLANES, size, size - 2


def _board_arrays(board: Board) -> Tuple[np.ndarray, np.ndarray]:
    """Propriétaire (-1 si aucun) et masque de liens, indexés [x, y]."""

    owner = np.full((board.size, board.size), -1, dtype=np.int8)
    links = np.zeros((board.size, board.size), dtype=np.uint8)
    for cell in board.cells():
        x, y = cell.coord
        player = cell.color.player
        if player is not None:
            owner[x, y] = player
        links[x, y] = cell.links
    return owner, links


def _player_view(grid: np.ndarray, player: int) -> np.ndarray:
    if player == PLAYER_RED:
        # [y, x] sans les colonnes bleues
        return grid[1:-1, :].T
    # [x, n - 2 - y] sans les lignes rouges
    return grid[:, -2:0:-1]


def information_state_planes(board: Board, player: int) -> np.ndarray:
    """Tenseur (11, n, n - 2) en float32 vu par ``player`` au trait."""

    owner, links = _board_arrays(board)
    planes: List[np.ndarray] = []
    for color in (PLAYER_RED, PLAYER_BLUE):
        mine = owner == color
        planes.append(_player_view(mine & (links == 0), color))
        for direction in FORWARD_DIRECTIONS:
            has_link = ((links >> int(direction)) & 1).astype(bool)
            planes.append(_player_view(mine & has_link, color))
    planes.append(np.full((board.size, board.size - 2), float(player)))
    return np.stack(planes).astype(np.float32)


def legal_actions_mask(board: Board, player: int) -> np.ndarray:
    """Masque booléen de longueur n² des cases jouables par ``player``."""

    mask = np.zeros(board.size * board.size, dtype=np.bool_)
    legal = board.legal_actions(player)
    if legal:
        mask[np.asarray(legal, dtype=np.int64)] = True
    return mask


def build_observation(state: GameState) -> ObservationTensor:
    """Construit l'observation du joueur au trait.

    Un état terminal n'a pas de joueur au trait: le plan constant vaut 0 et
    le masque est vide.
    """

    if state.is_terminal:
        planes = information_state_planes(state.board, PLAYER_RED)
        mask = np.zeros(state.size * state.size, dtype=np.bool_)
        return ObservationTensor(planes=planes, legal_actions_mask=mask, to_play=state.current_player)

    player = state.current_player
    return ObservationTensor(
        planes=information_state_planes(state.board, player),
        legal_actions_mask=legal_actions_mask(state.board, player),
        to_play=player,
    )


__all__ = [
    "ObservationTensor",
    "build_observation",
    "information_state_planes",
    "information_state_shape",
    "legal_actions_mask",
]
