"""Exceptions du moteur TwixT.

Deux familles seulement: une configuration invalide (refusée à la
construction) et un appelant qui ne respecte pas le contrat du plateau
(coup illégal, joueur inconnu, case hors grille).
"""

from __future__ import annotations


class TwixtError(Exception):
    """Racine des erreurs levées par le paquet."""


class ConfigurationError(TwixtError, ValueError):
    """Paramètre de partie hors bornes (taille, escompte, clé inconnue)."""


class PreconditionError(TwixtError, ValueError):
    """Contrat violé par l'appelant: l'état du plateau n'a pas été modifié."""


__all__ = ["TwixtError", "ConfigurationError", "PreconditionError"]
