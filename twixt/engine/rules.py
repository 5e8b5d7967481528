"""Règles et constantes TwixT.

Ce module expose le contrat minimal partagé par le moteur et les adaptateurs:
- bornes de taille du plateau et valeur par défaut
- bornes du facteur d'escompte des récompenses
- identifiants de joueurs et nombre de plans du tenseur d'état
"""

# Plateau
MIN_BOARD_SIZE: int = 5
MAX_BOARD_SIZE: int = 24
DEFAULT_BOARD_SIZE: int = 8

DEFAULT_ANSI_COLOR_OUTPUT: bool = True

# Escompte: 0 < discount <= 1
MIN_DISCOUNT: float = 0.0
MAX_DISCOUNT: float = 1.0
DEFAULT_DISCOUNT: float = MAX_DISCOUNT

# Joueurs (X joue haut/bas, O joue gauche/droite)
PLAYER_RED: int = 0
PLAYER_BLUE: int = 1
NUM_PLAYERS: int = 2
TERMINAL_PLAYER_ID: int = -4

# 2 * (1 plan de pions + 4 plans de liens) + 1 plan "joueur au trait"
NUM_PLANES: int = 11

__all__ = [
    "MIN_BOARD_SIZE",
    "MAX_BOARD_SIZE",
    "DEFAULT_BOARD_SIZE",
    "DEFAULT_ANSI_COLOR_OUTPUT",
    "MIN_DISCOUNT",
    "MAX_DISCOUNT",
    "DEFAULT_DISCOUNT",
    "PLAYER_RED",
    "PLAYER_BLUE",
    "NUM_PLAYERS",
    "TERMINAL_PLAYER_ID",
    "NUM_PLANES",
]
