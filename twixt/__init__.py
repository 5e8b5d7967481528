"""Moteur de règles TwixT (plateau n×n, liens en saut de cavalier)."""

__version__ = "0.1.0"
