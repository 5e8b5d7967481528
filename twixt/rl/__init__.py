"""Module RL pour TwixT.

- features.py : encodage du plateau en plans numpy
- policies.py : politiques de base pour la simulation
- environment.py : environnement Gymnasium

Exemple :
    >>> from twixt.engine.state import GameState
    >>> from twixt.rl.features import build_observation
    >>>
    >>> state = GameState.new_game(board_size=8)
    >>> obs = build_observation(state)
    >>> obs.planes.shape
    (11, 8, 6)
"""

from .features import ObservationTensor, build_observation, information_state_planes, legal_actions_mask
from .policies import AgentPolicy, RandomLegalPolicy

__all__ = [
    "AgentPolicy",
    "RandomLegalPolicy",
    "ObservationTensor",
    "build_observation",
    "information_state_planes",
    "legal_actions_mask",
]
