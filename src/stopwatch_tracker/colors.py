"""Utilities to parse and normalize activity colors."""

from __future__ import annotations

import random
import re
from typing import Optional

PALETTE: tuple[str, ...] = (
    "#FF5252",
    "#FF9800",
    "#FFEB3B",
    "#4CAF50",
    "#2196F3",
    "#3F51B5",
    "#9C27B0",
    "#E91E63",
    "#795548",
    "#607D8B",
    "#00BCD4",
    "#8BC34A",
)

BLACK = (0, 0, 0, 255)

_HEX_PATTERN = re.compile(r"^(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def normalize_color(value: Optional[str]) -> Optional[str]:
    """Return ``#RRGGBB`` or ``#AARRGGBB`` in upper case, or ``None`` if invalid."""
    if not value:
        return None
    cleaned = value.strip().removeprefix("#")
    if not _HEX_PATTERN.match(cleaned):
        return None
    return f"#{cleaned.upper()}"


def parse_color(value: Optional[str]) -> tuple[int, int, int, int]:
    """Split a hex color into ``(r, g, b, a)``; invalid input yields opaque black."""
    normalized = normalize_color(value)
    if normalized is None:
        return BLACK
    digits = normalized[1:]
    channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        r, g, b = channels
        return r, g, b, 255
    a, r, g, b = channels
    return r, g, b, a


def random_color(rng: Optional[random.Random] = None) -> str:
    """Pick a color for a new activity from the primary part of the palette."""
    return (rng or random).choice(PALETTE[:8])
