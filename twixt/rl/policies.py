"""Politiques de base pour la simulation et les tests de propriétés."""

from __future__ import annotations

import random
from typing import Optional

from twixt.engine.state import GameState


class AgentPolicy:
    """Interface minimale utilisée par la simulation headless."""

    def __init__(self, *, name: str | None = None) -> None:
        self._name = name or self.__class__.__name__

    @property
    def name(self) -> str:
        return self._name

    def select_action(self, state: GameState) -> int:
        raise NotImplementedError


class RandomLegalPolicy(AgentPolicy):
    """Politique uniformément aléatoire sur les actions légales."""

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(name="RandomLegal")
        self._random = rng or random.Random(seed)

    def select_action(self, state: GameState) -> int:
        legal = state.legal_actions()
        if not legal:
            raise ValueError("Aucune action légale disponible pour RandomLegalPolicy")
        return self._random.choice(legal)


__all__ = ["AgentPolicy", "RandomLegalPolicy"]
