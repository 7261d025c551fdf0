from __future__ import annotations

import math
from typing import Final

from .convert import hex_to_rgb

MAX_DISTANCE: Final = math.sqrt(3 * 255 ** 2)
DEFAULT_THRESHOLD: Final = 100.0


def color_distance(a: str, b: str) -> float:
    """Euclidean distance between two colors in RGB space (0 to ~441.67)."""
    return math.dist(hex_to_rgb(a, "a"), hex_to_rgb(b, "b"))


def is_similar(a: str, b: str, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """True when ``a`` and ``b`` are within ``threshold`` of each other."""
    return color_distance(a, b) <= threshold


__all__ = ["MAX_DISTANCE", "DEFAULT_THRESHOLD", "color_distance", "is_similar"]
