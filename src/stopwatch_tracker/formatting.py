"""Render millisecond durations for display."""

from __future__ import annotations


def _split(milliseconds: int) -> tuple[int, int, int]:
    total_seconds = max(int(milliseconds), 0) // 1000
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return hours, minutes, seconds


def format_clock(milliseconds: int) -> str:
    """Format as ``HH:MM:SS``; hours are not wrapped at 24 or 100."""
    hours, minutes, seconds = _split(milliseconds)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_human(milliseconds: int) -> str:
    hours, minutes, seconds = _split(milliseconds)
    if hours > 0:
        return f"{hours} h {minutes} min {seconds} sec"
    if minutes > 0:
        return f"{minutes} min {seconds} sec"
    return f"{seconds} sec"
