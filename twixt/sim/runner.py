"""Boucle headless pour le moteur TwixT.

`HeadlessEnv` pilote le moteur via `reset()` / `step()` avec des actions
entières et un masque aligné sur les n² cases. `play_episode` fait jouer une
partie complète à deux politiques.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from twixt.engine.config import GameConfig
from twixt.engine.errors import PreconditionError
from twixt.engine.rules import NUM_PLAYERS
from twixt.engine.state import GameState
from twixt.rl.policies import AgentPolicy

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """Résultat d'un appel à HeadlessEnv.step()."""

    state: GameState
    reward: Tuple[float, float]
    done: bool
    info: Dict[str, Any]


class HeadlessEnv:
    """Environnement headless léger pour le moteur TwixT."""

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config or GameConfig(ansi_color_output=False)
        self._state: GameState | None = None

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> GameState:
        """Retourne l'état courant (reset doit avoir été appelé)."""

        if self._state is None:
            raise RuntimeError("reset() doit être appelé avant d'accéder à l'état")
        return self._state

    def reset(self, *, state: GameState | None = None) -> GameState:
        """Réinitialise l'environnement et renvoie l'état initial."""

        self._state = state if state is not None else GameState.new_game(self._config)
        return self._state

    def legal_actions(self) -> List[int]:
        return self.state.legal_actions()

    def legal_actions_mask(self) -> List[bool]:
        return self.state.legal_actions_mask()

    def step(self, action: int) -> StepResult:
        """Applique une action et renvoie le résultat."""

        current_state = self.state
        if not current_state.is_action_legal(action):
            raise PreconditionError(f"Action illégale: {action!r}")

        new_state = current_state.apply_action(action)
        self._state = new_state

        info = {
            "last_action": int(action),
            "label": new_state.action_to_string(action),
            "result": new_state.result,
        }
        return StepResult(
            state=new_state,
            reward=new_state.returns(),
            done=new_state.is_terminal,
            info=info,
        )


def play_episode(
    env: HeadlessEnv,
    policies: Sequence[AgentPolicy],
    max_steps: int | None = None,
) -> GameState:
    """Joue une partie avec une politique par joueur (rouge puis bleu).

    S'arrête à la fin de la partie ou après ``max_steps`` coups.
    """

    if len(policies) != NUM_PLAYERS:
        raise ValueError(f"Une politique par joueur attendue, reçu {len(policies)}")

    state = env.reset()
    steps = 0
    while not state.is_terminal:
        if max_steps is not None and steps >= max_steps:
            break
        policy = policies[state.current_player]
        result = env.step(policy.select_action(state))
        state = result.state
        steps += 1

    log.debug(
        "Épisode %s: %d coups, résultat %s",
        "/".join(policy.name for policy in policies),
        steps,
        state.result.value,
    )
    return state
