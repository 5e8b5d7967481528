"""Géométrie des liens TwixT.

Un lien relie deux pions distants d'un saut de cavalier. Les huit directions
sont numérotées dans le sens horaire à partir de NNE; l'axe x pointe vers la
droite et l'axe y vers le haut.

Pour chaque direction, la table des descripteurs donne:
- le décalage du pion cible
- les liens qui croisent ce lien, exprimés par (décalage du pion de départ,
  direction) avec une direction "avant" (NNE, ENE, ESE, SSE)

Les croisements sont calculés une fois à l'import par intersection de
segments: un segment de cavalier ne contient aucun point entier intérieur,
deux liens se gênent donc exactement quand leurs segments se coupent en un
point intérieur aux deux.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple

Coord = Tuple[int, int]


class Compass(IntEnum):
    """Huit directions de lien, sens horaire."""

    NNE = 0  # 2 haut, 1 droite
    ENE = 1  # 1 haut, 2 droite
    ESE = 2  # 1 bas, 2 droite
    SSE = 3  # 2 bas, 1 droite
    SSW = 4  # 2 bas, 1 gauche
    WSW = 5  # 1 bas, 2 gauche
    WNW = 6  # 1 haut, 2 gauche
    NNW = 7  # 2 haut, 1 gauche


COMPASS_COUNT: int = len(Compass)
FORWARD_DIRECTIONS: Tuple[Compass, ...] = (
    Compass.NNE,
    Compass.ENE,
    Compass.ESE,
    Compass.SSE,
)

OFFSETS: Dict[Compass, Coord] = {
    Compass.NNE: (1, 2),
    Compass.ENE: (2, 1),
    Compass.ESE: (2, -1),
    Compass.SSE: (1, -2),
    Compass.SSW: (-1, -2),
    Compass.WSW: (-2, -1),
    Compass.WNW: (-2, 1),
    Compass.NNW: (-1, 2),
}

# Un lien traversant un autre démarre au plus à 4 cases de son origine
_SEARCH_RADIUS = 4


@dataclass(frozen=True)
class LinkDescriptor:
    """Propriétés statiques d'une direction de lien."""

    direction: Compass
    offset: Coord
    blocking_links: Tuple[Tuple[Coord, Compass], ...]


def opposite(direction: int) -> Compass:
    """Direction inverse (NNE <-> SSW, ENE <-> WSW, ...)."""

    return Compass((direction + COMPASS_COUNT // 2) % COMPASS_COUNT)


def add(coord: Coord, offset: Coord) -> Coord:
    return coord[0] + offset[0], coord[1] + offset[1]


def target_of(coord: Coord, direction: int) -> Coord:
    """Case visée par un lien partant de ``coord`` dans ``direction``."""

    return add(coord, OFFSETS[Compass(direction)])


def off_board(coord: Coord, size: int) -> bool:
    """Vrai hors de la grille et sur les quatre coins (sans pion possible)."""

    x, y = coord
    if x < 0 or y < 0 or x > size - 1 or y > size - 1:
        return True
    return (x == 0 or x == size - 1) and (y == 0 or y == size - 1)


def on_border(player: int, coord: Coord, size: int) -> bool:
    """Vrai si ``coord`` est sur une bordure de ``player`` (coins exclus).

    Rouge (0) possède les lignes y = 0 et y = n - 1, bleu (1) les colonnes
    x = 0 et x = n - 1.
    """

    x, y = coord
    if player == 0:
        return (y == 0 or y == size - 1) and 0 < x < size - 1
    return (x == 0 or x == size - 1) and 0 < y < size - 1


def _orientation(origin: Coord, end: Coord, point: Coord) -> int:
    return (end[0] - origin[0]) * (point[1] - origin[1]) - (end[1] - origin[1]) * (
        point[0] - origin[0]
    )


def segments_cross(a0: Coord, a1: Coord, b0: Coord, b1: Coord) -> bool:
    """Vrai si les segments [a0, a1] et [b0, b1] se coupent strictement.

    Deux segments qui partagent une extrémité ou qui se touchent seulement
    au bout ne se croisent pas.
    """

    d1 = _orientation(a0, a1, b0)
    d2 = _orientation(a0, a1, b1)
    d3 = _orientation(b0, b1, a0)
    d4 = _orientation(b0, b1, a1)
    return d1 * d2 < 0 and d3 * d4 < 0


def _crossing_links(direction: Compass) -> Tuple[Tuple[Coord, Compass], ...]:
    origin = (0, 0)
    end = OFFSETS[direction]
    crossing = []
    span = range(-_SEARCH_RADIUS, _SEARCH_RADIUS + 1)
    for forward in FORWARD_DIRECTIONS:
        for dx in span:
            for dy in span:
                start = (dx, dy)
                if segments_cross(origin, end, start, add(start, OFFSETS[forward])):
                    crossing.append((start, forward))
    return tuple(crossing)


LINK_DESCRIPTORS: Tuple[LinkDescriptor, ...] = tuple(
    LinkDescriptor(
        direction=direction,
        offset=OFFSETS[direction],
        blocking_links=_crossing_links(direction),
    )
    for direction in Compass
)


def descriptor(direction: int) -> LinkDescriptor:
    return LINK_DESCRIPTORS[direction]


__all__ = [
    "Coord",
    "Compass",
    "COMPASS_COUNT",
    "FORWARD_DIRECTIONS",
    "OFFSETS",
    "LinkDescriptor",
    "LINK_DESCRIPTORS",
    "add",
    "off_board",
    "on_border",
    "descriptor",
    "opposite",
    "segments_cross",
    "target_of",
]
