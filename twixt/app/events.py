"""Évènements publiés par `twixt.app`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from twixt.engine.board import Result
from twixt.engine.state import GameState


@dataclass(frozen=True)
class GameStartedEvent:
    """Émis lorsqu'une nouvelle partie est initialisée."""

    state: GameState


@dataclass(frozen=True)
class ActionAppliedEvent:
    """Émis après qu'un pion a été posé."""

    player: int
    action: int
    previous_state: GameState
    new_state: GameState


@dataclass(frozen=True)
class GameEndedEvent:
    """Émis quand le résultat du plateau n'est plus `Result.OPEN`."""

    state: GameState
    result: Result
    winner_id: Optional[int]
