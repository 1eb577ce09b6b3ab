"""Vyapar Flow: bookkeeping for small workshops."""

__version__ = "0.1.0"
