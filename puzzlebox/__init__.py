"""Solvers for a season of daily programming puzzles, with a command line runner."""

__version__ = "0.1.0"