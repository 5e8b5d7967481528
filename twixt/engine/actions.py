"""Actions TwixT: index, coordonnées et libellés.

Une action est l'index ``y * n + x`` de la case où poser un pion. Le libellé
humain est la lettre de colonne suivie du numéro de ligne compté depuis le
haut: sur un plateau 8×8, l'action 26 (x=2, y=3) se lit "C5".
"""

from __future__ import annotations

import numbers
import re

from twixt.engine.errors import PreconditionError
from twixt.engine.geometry import Coord

_LABEL_PATTERN = re.compile(r"^([A-Za-z])(\d{1,2})$")


def check_action(action: int, size: int) -> int:
    if isinstance(action, bool) or not isinstance(action, numbers.Integral):
        raise PreconditionError(f"Action invalide: {action!r}")
    if not 0 <= action < size * size:
        raise PreconditionError(f"Action hors plateau [0, {size * size}): {action}")
    return int(action)


def action_to_coord(action: int, size: int) -> Coord:
    action = check_action(action, size)
    return action % size, action // size


def coord_to_action(coord: Coord, size: int) -> int:
    x, y = coord
    if not (0 <= x < size and 0 <= y < size):
        raise PreconditionError(f"Case hors grille: {coord}")
    return y * size + x


def action_to_label(action: int, size: int) -> str:
    """Libellé lettre de colonne + numéro de ligne (ex. "C5")."""

    x, y = action_to_coord(action, size)
    return f"{chr(ord('A') + x)}{size - y}"


def label_to_action(label: str, size: int) -> int:
    """Inverse de :func:`action_to_label`."""

    match = _LABEL_PATTERN.match(label.strip())
    if match is None:
        raise PreconditionError(f"Libellé invalide: {label!r}")
    x = ord(match.group(1).upper()) - ord("A")
    row = int(match.group(2))
    if not (0 <= x < size and 1 <= row <= size):
        raise PreconditionError(f"Libellé hors plateau {size}x{size}: {label!r}")
    return coord_to_action((x, size - row), size)


def swap_action(action: int, size: int) -> int:
    """Case du premier pion tournée de 90° lors d'un échange."""

    x, y = action_to_coord(action, size)
    return x * size + (size - 1 - y)


__all__ = [
    "action_to_coord",
    "action_to_label",
    "check_action",
    "coord_to_action",
    "label_to_action",
    "swap_action",
]
