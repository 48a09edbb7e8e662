"""Typed, composable option builders backed by a plain dictionary."""

__version__ = "0.1.0"

__all__ = ["build", "field", "option", "var"]