"""Solvers for short programming puzzles, with text-input drivers and a command."""

__version__ = "0.1.0"
__all__ = ["__version__"]