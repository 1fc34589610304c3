"""Gambit, a turn-based chess board state engine."""

__version__ = "0.1.0"
