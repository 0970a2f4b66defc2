"""Greedy conference track scheduling as a reusable Django app."""

__version__ = "0.1.0"
