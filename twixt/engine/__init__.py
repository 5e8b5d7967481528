"""Moteur TwixT: géométrie des liens, plateau et état de partie."""

from . import rules  # re-export for convenience
from .board import Board, Result
from .cell import Border, Cell, Color
from .config import GameConfig
from .errors import ConfigurationError, PreconditionError, TwixtError
from .geometry import Compass
from .state import GameState

__all__ = [
    "rules",
    "Board",
    "Border",
    "Cell",
    "Color",
    "Compass",
    "ConfigurationError",
    "GameConfig",
    "GameState",
    "PreconditionError",
    "Result",
    "TwixtError",
]
