"""Case du plateau TwixT.

Chaque case garde:
- sa couleur (vide, rouge, bleu, hors plateau pour les coins)
- un masque de 8 bits de ses liens sortants
- un masque de 8 bits de liens encore possibles, par joueur
- les coordonnées de ses voisins cavalier sur le plateau
- pour chaque joueur et chaque bordure, si elle y est reliée
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, List, Optional

from twixt.engine.geometry import COMPASS_COUNT, Compass, Coord
from twixt.engine.rules import NUM_PLAYERS, PLAYER_BLUE, PLAYER_RED


class Color(Enum):
    """Contenu d'une case."""

    RED = "RED"
    BLUE = "BLUE"
    EMPTY = "EMPTY"
    OFFBOARD = "OFFBOARD"

    @classmethod
    def of_player(cls, player: int) -> "Color":
        return _PLAYER_COLORS[player]

    @property
    def player(self) -> Optional[int]:
        """Joueur propriétaire, None pour une case vide ou hors plateau."""

        return _COLOR_PLAYERS.get(self)


_PLAYER_COLORS = (Color.RED, Color.BLUE)
_COLOR_PLAYERS = {Color.RED: PLAYER_RED, Color.BLUE: PLAYER_BLUE}


class Border(IntEnum):
    """Les deux bordures d'un joueur."""

    START = 0
    END = 1


def _empty_flags() -> List[List[bool]]:
    return [[False, False] for _ in range(NUM_PLAYERS)]


@dataclass
class Cell:
    coord: Coord
    color: Color = Color.EMPTY
    links: int = 0
    candidates: List[int] = field(default_factory=lambda: [0] * NUM_PLAYERS)
    neighbors: List[Optional[Coord]] = field(default_factory=lambda: [None] * COMPASS_COUNT)
    linked_to_border: List[List[bool]] = field(default_factory=_empty_flags)

    # -- Liens --
    def has_link(self, direction: int) -> bool:
        return bool(self.links & (1 << direction))

    def has_links(self) -> bool:
        return self.links != 0

    def set_link(self, direction: int) -> None:
        self.links |= 1 << direction

    def link_directions(self) -> Iterator[Compass]:
        for direction in Compass:
            if self.links & (1 << direction):
                yield direction

    # -- Candidats --
    def is_candidate(self, player: int, direction: int) -> bool:
        return bool(self.candidates[player] & (1 << direction))

    def set_candidate(self, player: int, direction: int) -> None:
        self.candidates[player] |= 1 << direction

    def delete_candidate(self, direction: int, player: Optional[int] = None) -> None:
        """Retire un lien possible pour un joueur, ou pour les deux."""

        mask = ~(1 << direction)
        if player is None:
            for idx in range(NUM_PLAYERS):
                self.candidates[idx] &= mask
        else:
            self.candidates[player] &= mask

    # -- Bordures --
    def is_linked_to_border(self, player: int, border: Border) -> bool:
        return self.linked_to_border[player][border]

    def set_linked_to_border(self, player: int, border: Border) -> None:
        self.linked_to_border[player][border] = True

    def copy(self) -> "Cell":
        """Copie indépendante (aucune liste partagée)."""

        return Cell(
            coord=self.coord,
            color=self.color,
            links=self.links,
            candidates=list(self.candidates),
            neighbors=list(self.neighbors),
            linked_to_border=[list(flags) for flags in self.linked_to_border],
        )


__all__ = ["Border", "Cell", "Color"]
