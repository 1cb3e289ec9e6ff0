"""Sorting, searching and hashing over trade-effects CSV records."""

__version__ = "0.1.0"