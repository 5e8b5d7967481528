"""Paramètres d'une partie TwixT."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, fields
from typing import Any, Mapping

from twixt.engine.errors import ConfigurationError
from twixt.engine.rules import (
    DEFAULT_ANSI_COLOR_OUTPUT,
    DEFAULT_BOARD_SIZE,
    DEFAULT_DISCOUNT,
    MAX_BOARD_SIZE,
    MAX_DISCOUNT,
    MIN_BOARD_SIZE,
    MIN_DISCOUNT,
)


def check_board_size(board_size: int) -> int:
    """Valide une taille de plateau et la retourne."""

    if isinstance(board_size, bool) or not isinstance(board_size, int):
        raise ConfigurationError(f"board_size doit être un entier (reçu: {board_size!r})")
    if board_size < MIN_BOARD_SIZE or board_size > MAX_BOARD_SIZE:
        raise ConfigurationError(
            f"board_size out of range [{MIN_BOARD_SIZE}..{MAX_BOARD_SIZE}]: {board_size}"
        )
    return board_size


@dataclass(frozen=True)
class GameConfig:
    """Configuration immuable d'une partie.

    Args:
        board_size: côté du plateau (5 à 24)
        ansi_color_output: colorer le rendu texte avec des séquences ANSI
        discount: facteur appliqué aux récompenses, ``discount ** coups``
    """

    board_size: int = DEFAULT_BOARD_SIZE
    ansi_color_output: bool = DEFAULT_ANSI_COLOR_OUTPUT
    discount: float = DEFAULT_DISCOUNT

    def __post_init__(self) -> None:
        check_board_size(self.board_size)
        if not isinstance(self.ansi_color_output, bool):
            raise ConfigurationError(
                f"ansi_color_output doit être un booléen (reçu: {self.ansi_color_output!r})"
            )
        if isinstance(self.discount, bool) or not isinstance(self.discount, numbers.Real):
            raise ConfigurationError(f"discount doit être un réel (reçu: {self.discount!r})")
        if not MIN_DISCOUNT < self.discount <= MAX_DISCOUNT:
            raise ConfigurationError(
                f"discount out of range [{MIN_DISCOUNT} < discount <= {MAX_DISCOUNT}]: "
                f"{self.discount}"
            )

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "GameConfig":
        """Construit une configuration à partir d'un dictionnaire de paramètres."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(params) - known)
        if unknown:
            raise ConfigurationError(f"Paramètres inconnus: {', '.join(unknown)}")
        return cls(**dict(params))


__all__ = ["GameConfig", "check_board_size"]
