"""Stopwatch with optional per-activity time tracking."""

__version__ = "0.1.0"
