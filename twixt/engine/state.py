"""État d'une partie TwixT et transitions.

`GameState` enveloppe le plateau avec le joueur au trait et l'historique des
coups. Comme pour les autres états du moteur, `apply_action` ne modifie pas
l'état courant: il retourne un nouvel état dont le plateau est une copie
profonde.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, List, Optional, Tuple

from twixt.engine.board import Board, Result
from twixt.engine.config import GameConfig
from twixt.engine.errors import PreconditionError
from twixt.engine.render import render_board
from twixt.engine.rules import PLAYER_BLUE, PLAYER_RED, TERMINAL_PLAYER_ID


@dataclass
class GameState:
    """État d'une partie: plateau, joueur au trait, historique."""

    config: GameConfig
    board: Board
    current_player: int = PLAYER_RED
    history: List[int] = field(default_factory=list)

    @classmethod
    def new_game(cls, config: Optional[GameConfig] = None, **overrides: Any) -> "GameState":
        """Crée une partie; ``overrides`` remplace des champs de la configuration.

        Exemple: ``GameState.new_game(board_size=6, discount=0.99)``
        """

        if config is None:
            config = GameConfig(**overrides)
        elif overrides:
            config = replace(config, **overrides)
        board = Board(config.board_size, config.ansi_color_output)
        return cls(config=config, board=board)

    # -- Requêtes --
    @property
    def size(self) -> int:
        return self.board.size

    @property
    def result(self) -> Result:
        return self.board.result

    @property
    def is_terminal(self) -> bool:
        return self.board.result.is_terminal

    @property
    def move_counter(self) -> int:
        return self.board.move_counter

    def legal_actions(self) -> List[int]:
        """Actions légales du joueur au trait, triées."""

        if self.is_terminal:
            return []
        return sorted(self.board.legal_actions(self.current_player))

    def legal_actions_mask(self) -> List[bool]:
        """Masque booléen aligné sur les n² actions."""

        mask = [False] * (self.size * self.size)
        for action in self.legal_actions():
            mask[action] = True
        return mask

    def is_action_legal(self, action: int) -> bool:
        if self.is_terminal:
            return False
        try:
            return self.board.is_legal_action(self.current_player, action)
        except PreconditionError:
            return False

    def returns(self) -> Tuple[float, float]:
        """Gains (rouge, bleu); la victoire vaut ``discount ** coups``."""

        winner = self.board.result.winner
        if winner is None:
            return 0.0, 0.0
        reward = self.config.discount ** self.board.move_counter
        if winner == PLAYER_RED:
            return reward, -reward
        return -reward, reward

    # -- Transitions --
    def apply_action(self, action: int) -> "GameState":
        """Applique une action et retourne le nouvel état.

        Raises:
            PreconditionError: si l'action n'est pas légale
        """

        if not self.is_action_legal(action):
            raise PreconditionError(f"Action illégale: {action!r}")

        board = self.board.copy()
        board.apply_action(self.current_player, action)
        if board.result.is_terminal:
            next_player = TERMINAL_PLAYER_ID
        else:
            next_player = PLAYER_BLUE if self.current_player == PLAYER_RED else PLAYER_RED

        return GameState(
            config=self.config,
            board=board,
            current_player=next_player,
            history=self.history + [int(action)],
        )

    def clone(self) -> "GameState":
        return GameState(
            config=self.config,
            board=self.board.copy(),
            current_player=self.current_player,
            history=list(self.history),
        )

    # -- Chaînes --
    def action_to_string(self, action: int) -> str:
        return self.board.action_to_string(action)

    def history_string(self) -> str:
        return ",".join(str(action) for action in self.history)

    def information_state_string(self) -> str:
        # Information parfaite: l'historique suffit
        return self.history_string()

    def __str__(self) -> str:
        return render_board(self.board, self.config.ansi_color_output)


__all__ = ["GameState"]
