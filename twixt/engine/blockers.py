"""Index des liens bloquants.

Pour chaque lien possible (case, direction) d'un plateau de taille n, l'index
liste les liens qui le croisent. Chaque lien croisant y figure sous ses deux
orientations (depuis chacune de ses extrémités), ce qui permet de retirer les
candidats des deux pions concernés dès qu'un lien est tracé.

L'index ne dépend que de la taille: il est construit une fois par taille et
partagé entre plateaux (lecture seule).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterator, List, Tuple

from twixt.engine.geometry import (
    Compass,
    Coord,
    add,
    descriptor,
    off_board,
    opposite,
    target_of,
)


@dataclass(frozen=True)
class Link:
    """Lien orienté: pion de départ et direction."""

    coord: Coord
    direction: Compass

    @property
    def target(self) -> Coord:
        return target_of(self.coord, self.direction)

    def reversed(self) -> "Link":
        """Le même lien vu depuis l'autre pion."""

        return Link(self.target, opposite(self.direction))


class BlockerIndex:
    """Table immuable lien -> liens qui le croisent."""

    __slots__ = ("_size", "_blockers")

    def __init__(self, size: int) -> None:
        self._size = size
        blockers: Dict[Link, Tuple[Link, ...]] = {}
        for x in range(size):
            for y in range(size):
                coord = (x, y)
                if off_board(coord, size):
                    continue
                for direction in Compass:
                    if off_board(target_of(coord, direction), size):
                        continue
                    link = Link(coord, direction)
                    blockers[link] = tuple(self._crossing(link))
        self._blockers = blockers

    def _crossing(self, link: Link) -> List[Link]:
        crossing: List[Link] = []
        for offset, direction in descriptor(link.direction).blocking_links:
            start = add(link.coord, offset)
            if off_board(start, self._size):
                continue
            end = target_of(start, direction)
            if off_board(end, self._size):
                continue
            crossing.append(Link(start, direction))
            crossing.append(Link(end, opposite(direction)))
        return crossing

    @property
    def size(self) -> int:
        return self._size

    def blockers(self, link: Link) -> Tuple[Link, ...]:
        """Liens croisant ``link`` (tuple vide pour un lien inconnu)."""

        return self._blockers.get(link, ())

    def __contains__(self, link: object) -> bool:
        return link in self._blockers

    def __iter__(self) -> Iterator[Link]:
        return iter(self._blockers)

    def __len__(self) -> int:
        return len(self._blockers)


@lru_cache(maxsize=None)
def blocker_index(size: int) -> BlockerIndex:
    """Index partagé pour une taille de plateau."""

    return BlockerIndex(size)


__all__ = ["BlockerIndex", "Link", "blocker_index"]
