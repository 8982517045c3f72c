"""Tic-tac-toe rules engine, turn cycle and PyQt6 front end."""

__version__ = "0.1.0"
