"""Service d'orchestration d'une partie TwixT."""

from __future__ import annotations

import logging
from typing import List

from twixt.app.event_bus import EventBus
from twixt.app.events import ActionAppliedEvent, GameEndedEvent, GameStartedEvent
from twixt.engine.config import GameConfig
from twixt.engine.errors import PreconditionError
from twixt.engine.state import GameState

log = logging.getLogger(__name__)


class GameService:
    """Wrappe `GameState` et publie les évènements de la partie."""

    def __init__(self, *, event_bus: EventBus | None = None) -> None:
        self._event_bus = event_bus or EventBus()
        self._state: GameState | None = None

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def state(self) -> GameState:
        """État courant de la partie (erreur si aucune partie lancée)."""

        if self._state is None:
            raise RuntimeError("Aucune partie initialisée. Utiliser start_new_game().")
        return self._state

    def start_new_game(self, config: GameConfig | None = None) -> GameState:
        state = GameState.new_game(config)
        self._state = state
        log.info(
            "Nouvelle partie %dx%d (discount=%s)",
            state.size,
            state.size,
            state.config.discount,
        )
        self._event_bus.publish(GameStartedEvent(state=state))
        return state

    def legal_actions(self) -> List[int]:
        return self.state.legal_actions()

    def dispatch(self, action: int) -> GameState:
        """Valide et applique une action, puis notifie les observateurs.

        Raises:
            PreconditionError: si l'action n'est pas légale
        """

        current_state = self.state
        if not current_state.is_action_legal(action):
            raise PreconditionError(f"Action illégale: {action!r}")

        player = current_state.current_player
        new_state = current_state.apply_action(action)
        self._state = new_state

        self._event_bus.publish(
            ActionAppliedEvent(
                player=player,
                action=int(action),
                previous_state=current_state,
                new_state=new_state,
            )
        )

        if new_state.is_terminal:
            result = new_state.result
            log.info("Partie terminée après %d coups: %s", new_state.move_counter, result.value)
            self._event_bus.publish(
                GameEndedEvent(state=new_state, result=result, winner_id=result.winner)
            )

        return new_state
