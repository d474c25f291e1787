"""Reversi (Othello) rules engine, minimax bot and console front end."""

__version__ = "0.1.0"
