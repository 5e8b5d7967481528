"""Environnement Gymnasium pour TwixT.

Wrapper autour du GameState pour l'entraînement RL. Les deux joueurs jouent
dans le même environnement: la récompense d'un pas est celle du joueur qui
vient de jouer.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from twixt.engine.config import GameConfig
from twixt.engine.rules import DEFAULT_BOARD_SIZE, DEFAULT_DISCOUNT
from twixt.engine.state import GameState
from twixt.rl.features import build_observation, information_state_shape


class TwixtEnv(gym.Env):
    """
    Environnement TwixT compatible Gymnasium.

    Observations:
    - tenseur (11, n, n - 2) vu par le joueur au trait

    Actions:
    - entier y * n + x, masqué par ``info["action_mask"]``

    Rewards:
    - ``discount ** coups`` pour le coup gagnant, 0 sinon
    """

    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        discount: float = DEFAULT_DISCOUNT,
        render_mode: Optional[str] = None,
    ):
        super().__init__()
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"render_mode non supporté: {render_mode!r}")

        self.config = GameConfig(board_size=board_size, ansi_color_output=False, discount=discount)
        self.render_mode = render_mode
        self.game_state: Optional[GameState] = None

        self.observation_space = spaces.Box(
            low=0.0,
            high=1.0,
            shape=information_state_shape(board_size),
            dtype=np.float32,
        )
        self.action_space = spaces.Discrete(board_size * board_size)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """Réinitialise l'environnement."""
        super().reset(seed=seed)
        self.game_state = GameState.new_game(self.config)
        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Exécute une action du joueur au trait.

        Raises:
            RuntimeError: si reset() n'a pas été appelé
            PreconditionError: si l'action est illégale
        """
        if self.game_state is None:
            raise RuntimeError("Appeler reset() avant step()")

        mover = self.game_state.current_player
        self.game_state = self.game_state.apply_action(int(action))

        terminated = self.game_state.is_terminal
        reward = 0.0
        if terminated:
            reward = float(self.game_state.returns()[mover])

        return self._get_observation(), reward, terminated, False, self._get_info()

    def _get_observation(self) -> np.ndarray:
        assert self.game_state is not None
        return build_observation(self.game_state).planes

    def _get_info(self) -> Dict[str, Any]:
        assert self.game_state is not None
        observation = build_observation(self.game_state)
        return {
            "action_mask": observation.legal_actions_mask.astype(np.int8),
            "current_player": self.game_state.current_player,
            "move_counter": self.game_state.move_counter,
            "result": self.game_state.result.value,
        }

    def render(self) -> Optional[str]:
        if self.render_mode == "ansi" and self.game_state is not None:
            return str(self.game_state)
        return None


__all__ = ["TwixtEnv"]
