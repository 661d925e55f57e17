"""Grind Tracker - poker tournament results and bankroll tracking."""

__version__ = "0.1.0"
