"""Plateau TwixT: pions, liens et connexité aux bordures.

Le plateau est une grille n×n adressée par (x, y), x vers la droite et y vers
le haut. Rouge (X, joueur 0) relie la ligne y = 0 (START) à la ligne
y = n - 1 (END); bleu (O, joueur 1) relie la colonne x = 0 à la colonne
x = n - 1. Les coins sont hors plateau.

À chaque pion posé:
- les liens encore candidats vers des pions de même couleur sont tracés,
  sauf si un lien déjà tracé les croise
- les liens croisés par un nouveau lien sont retirés des candidats
- les drapeaux "relié à la bordure" se propagent le long des liens
- le résultat (victoire, nulle) est recalculé

Le deuxième coup peut reprendre la case du premier: c'est l'échange (règle du
gâteau). Le plateau est alors réinitialisé et le pion posé sur la case
tournée de 90°.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterator, List, Optional

from twixt.engine.actions import action_to_coord, action_to_label, check_action, swap_action
from twixt.engine.blockers import BlockerIndex, Link, blocker_index
from twixt.engine.cell import Border, Cell, Color
from twixt.engine.config import check_board_size
from twixt.engine.errors import PreconditionError
from twixt.engine.geometry import Compass, Coord, off_board, on_border, opposite, target_of
from twixt.engine.render import render_board
from twixt.engine.rules import DEFAULT_ANSI_COLOR_OUTPUT, NUM_PLAYERS, PLAYER_BLUE, PLAYER_RED

log = logging.getLogger(__name__)


class Result(Enum):
    """Issue de la partie vue par le plateau."""

    OPEN = "OPEN"
    RED_WON = "RED_WON"
    BLUE_WON = "BLUE_WON"
    DRAW = "DRAW"

    @property
    def is_terminal(self) -> bool:
        return self is not Result.OPEN

    @property
    def winner(self) -> Optional[int]:
        if self is Result.RED_WON:
            return PLAYER_RED
        if self is Result.BLUE_WON:
            return PLAYER_BLUE
        return None


def check_player(player: int) -> int:
    if isinstance(player, bool) or player not in (PLAYER_RED, PLAYER_BLUE):
        raise PreconditionError(f"Joueur inconnu: {player!r}")
    return int(player)


class Board:
    """Moteur de connexité et de légalité des liens."""

    def __init__(self, size: int, ansi_color_output: bool = DEFAULT_ANSI_COLOR_OUTPUT) -> None:
        self.size: int = check_board_size(size)
        self.ansi_color_output: bool = ansi_color_output
        self._blockers: BlockerIndex = blocker_index(self.size)
        self._cells: List[Cell] = []
        self._legal_actions: List[List[int]] = [[] for _ in range(NUM_PLAYERS)]
        self._legal_action_index: List[List[int]] = [[] for _ in range(NUM_PLAYERS)]
        self._move_counter: int = 0
        self._move_one: Optional[int] = None
        self._swapped: bool = False
        self._result: Result = Result.OPEN
        self._initialize()

    # -- Initialisation --
    def _initialize(self) -> None:
        self._initialize_cells()
        self._initialize_legal_actions()

    def _initialize_cells(self) -> None:
        size = self.size
        cells: List[Cell] = []
        for y in range(size):
            for x in range(size):
                coord = (x, y)
                if off_board(coord, size):
                    cells.append(Cell(coord=coord, color=Color.OFFBOARD))
                    continue
                cell = Cell(coord=coord)
                if x == 0:
                    cell.set_linked_to_border(PLAYER_BLUE, Border.START)
                elif x == size - 1:
                    cell.set_linked_to_border(PLAYER_BLUE, Border.END)
                elif y == 0:
                    cell.set_linked_to_border(PLAYER_RED, Border.START)
                elif y == size - 1:
                    cell.set_linked_to_border(PLAYER_RED, Border.END)
                self._initialize_candidates(cell)
                cells.append(cell)
        self._cells = cells

    def _initialize_candidates(self, cell: Cell) -> None:
        size = self.size
        for direction in Compass:
            target = target_of(cell.coord, direction)
            if off_board(target, size):
                continue
            cell.neighbors[direction] = target
            # Pas de lien entre une bordure rouge et une bordure bleue
            if on_border(PLAYER_RED, cell.coord, size) and on_border(PLAYER_BLUE, target, size):
                continue
            if on_border(PLAYER_BLUE, cell.coord, size) and on_border(PLAYER_RED, target, size):
                continue
            cell.set_candidate(PLAYER_RED, direction)
            cell.set_candidate(PLAYER_BLUE, direction)

    def _initialize_legal_actions(self) -> None:
        size = self.size
        for player in (PLAYER_RED, PLAYER_BLUE):
            legal: List[int] = []
            index = [-1] * (size * size)
            for y in range(size):
                for x in range(size):
                    coord = (x, y)
                    if off_board(coord, size) or on_border(1 - player, coord, size):
                        continue
                    action = y * size + x
                    index[action] = len(legal)
                    legal.append(action)
            self._legal_actions[player] = legal
            self._legal_action_index[player] = index

    def _remove_legal_action(self, player: int, action: int) -> None:
        index = self._legal_action_index[player]
        pos = index[action]
        if pos < 0:
            return
        legal = self._legal_actions[player]
        last = legal[-1]
        legal[pos] = last
        index[last] = pos
        legal.pop()
        index[action] = -1

    # -- Accès aux cases --
    def cell(self, coord: Coord) -> Cell:
        """Case en ``coord`` (lecture); lève PreconditionError hors grille."""

        x, y = coord
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise PreconditionError(f"Case hors grille: {coord}")
        return self._cells[y * self.size + x]

    def cells(self) -> Iterator[Cell]:
        return iter(self._cells)

    def color(self, coord: Coord) -> Color:
        return self.cell(coord).color

    def has_link(self, coord: Coord, direction: int) -> bool:
        return self.cell(coord).has_link(direction)

    def is_linked_to_border(self, player: int, coord: Coord, border: Border) -> bool:
        return self.cell(coord).is_linked_to_border(check_player(player), border)

    @property
    def blockers(self) -> BlockerIndex:
        return self._blockers

    # -- Requêtes --
    @property
    def result(self) -> Result:
        return self._result

    @property
    def move_counter(self) -> int:
        return self._move_counter

    @property
    def swapped(self) -> bool:
        return self._swapped

    @property
    def move_one(self) -> Optional[int]:
        return self._move_one

    def legal_actions(self, player: int) -> List[int]:
        """Cases jouables par ``player`` (ordre quelconque, copie).

        Après le premier coup, la case jouée reste dans la liste de
        l'adversaire tant que le deuxième coup n'a pas tranché l'échange.
        """

        return list(self._legal_actions[check_player(player)])

    def has_legal_actions(self, player: int) -> bool:
        return bool(self._legal_actions[check_player(player)])

    def is_legal_action(self, player: int, action: int) -> bool:
        player = check_player(player)
        action = check_action(action, self.size)
        return self._legal_action_index[player][action] >= 0

    def action_to_string(self, action: int) -> str:
        return action_to_label(action, self.size)

    # -- Coups --
    def apply_action(self, player: int, action: int) -> None:
        """Pose un pion de ``player`` en ``action`` et met le plateau à jour.

        Raises:
            PreconditionError: partie terminée, joueur inconnu ou case non jouable
        """

        player = check_player(player)
        action = check_action(action, self.size)
        if self._result.is_terminal:
            raise PreconditionError(f"Partie terminée ({self._result.value})")
        if self._legal_action_index[player][action] < 0:
            raise PreconditionError(
                f"Action illégale pour le joueur {player}: {self.action_to_string(action)}"
            )

        if self._move_counter == 1:
            if action == self._move_one:
                self._swapped = True
                rotated = swap_action(action, self.size)
                log.debug(
                    "Échange: %s devient %s",
                    self.action_to_string(action),
                    self.action_to_string(rotated),
                )
                action = rotated
                # Annule le premier coup (pion, liens, candidats, actions)
                self._initialize()
            else:
                self._remove_legal_action(PLAYER_RED, self._move_one)
                self._remove_legal_action(PLAYER_BLUE, self._move_one)

        coord = action_to_coord(action, self.size)
        self._set_peg_and_links(player, coord)
        self._move_counter += 1

        if self._move_counter == 1:
            # Reste jouable par l'adversaire jusqu'au deuxième coup (échange)
            self._move_one = action
        else:
            self._remove_legal_action(PLAYER_RED, action)
            self._remove_legal_action(PLAYER_BLUE, action)

        self._update_result(player, coord)

    def _set_peg_and_links(self, player: int, coord: Coord) -> None:
        cell = self.cell(coord)
        cell.color = Color.of_player(player)
        opponent = 1 - player
        linked: List[Cell] = []

        for direction in Compass:
            if not cell.is_candidate(player, direction):
                continue
            target = self.cell(cell.neighbors[direction])
            if target.color is Color.EMPTY:
                # L'adversaire ne pourra jamais relier cette case au nouveau pion
                target.delete_candidate(opposite(direction), opponent)
            elif target.color is cell.color:
                # Un candidat survivant ne croise aucun lien tracé
                self._set_link(Link(coord, direction), cell, target)
                linked.append(target)
                for border in Border:
                    if target.is_linked_to_border(player, border):
                        cell.set_linked_to_border(player, border)
            else:
                cell.delete_candidate(direction, player)

        for border in Border:
            if not cell.is_linked_to_border(player, border):
                continue
            if any(not target.is_linked_to_border(player, border) for target in linked):
                self._explore_local_graph(player, cell, border)

    def _set_link(self, link: Link, cell: Cell, target: Cell) -> None:
        cell.set_link(link.direction)
        target.set_link(opposite(link.direction))
        for blocker in self._blockers.blockers(link):
            self.cell(blocker.coord).delete_candidate(blocker.direction)

    def _explore_local_graph(self, player: int, start: Cell, border: Border) -> None:
        """Propage le drapeau ``border`` à tout le réseau relié à ``start``."""

        stack = [start]
        marked = 0
        while stack:
            current = stack.pop()
            for direction in current.link_directions():
                target = self.cell(current.neighbors[direction])
                if target.color is not current.color:
                    continue
                if target.is_linked_to_border(player, border):
                    continue
                target.set_linked_to_border(player, border)
                marked += 1
                stack.append(target)
        log.debug(
            "Propagation %s joueur %d depuis %s: %d pions",
            border.name,
            player,
            start.coord,
            marked,
        )

    def _update_result(self, player: int, coord: Coord) -> None:
        cell = self.cell(coord)
        if cell.is_linked_to_border(player, Border.START) and cell.is_linked_to_border(
            player, Border.END
        ):
            self._result = Result.RED_WON if player == PLAYER_RED else Result.BLUE_WON
            log.debug("Victoire joueur %d au coup %d", player, self._move_counter)
            return

        # Ni victoire ni nulle possible avant n - 1 coups
        if self._move_counter < self.size - 1:
            return

        if not self._legal_actions[1 - player]:
            self._result = Result.DRAW
            log.debug("Nulle au coup %d", self._move_counter)

    # -- Copie --
    def copy(self) -> "Board":
        """Copie profonde des cases et des listes; l'index des bloqueurs est partagé."""

        clone = Board.__new__(Board)
        clone.size = self.size
        clone.ansi_color_output = self.ansi_color_output
        clone._blockers = self._blockers
        clone._cells = [cell.copy() for cell in self._cells]
        clone._legal_actions = [list(legal) for legal in self._legal_actions]
        clone._legal_action_index = [list(index) for index in self._legal_action_index]
        clone._move_counter = self._move_counter
        clone._move_one = self._move_one
        clone._swapped = self._swapped
        clone._result = self._result
        return clone

    def snapshot_cells(self) -> Dict[Coord, Cell]:
        """Copies des cases indexées par coordonnées (tests, diagnostics)."""

        return {cell.coord: cell.copy() for cell in self._cells}

    def __str__(self) -> str:
        return render_board(self, self.ansi_color_output)


__all__ = ["Board", "Result", "check_player"]
