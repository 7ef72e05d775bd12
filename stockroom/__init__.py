"""Typed entity store with JSON persistence."""

__version__ = "0.1.0"
