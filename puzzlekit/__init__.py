"""Worked solutions to classic algorithm puzzles and three judge-style problems."""

__version__ = "0.1.0"

__all__ = [
    "ccf",
    "counting",
    "dynamic",
    "graphs",
    "greedy",
    "searching",
    "structures",
    "windows",
]