"""Pyrobase: a terminal resource-collection game."""

__version__ = "0.1.0"
