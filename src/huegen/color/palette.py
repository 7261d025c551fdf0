from __future__ import annotations

from typing import List

from .convert import hex_to_rgb, hsl_to_hex, rgb_to_hex, rgb_to_hsl


def analogous_palette(base: str, n: int) -> List[str]:
    """Spread ``n`` mid-tone colors evenly around the hue circle.

    Hues are ``i * 360 / n`` starting from 0 with saturation and lightness
    fixed at 0.5. ``base`` is validated but its own hue is not used.
    """
    hex_to_rgb(base, "base")
    if n < 1:
        raise ValueError(f"Palette size must be at least 1, got {n}")
    return [hsl_to_hex(i * 360 / n, 0.5, 0.5) for i in range(n)]


def complementary_palette(base: str) -> List[str]:
    """Return ``[base, complement]``, the complement rotated 180 degrees in hue."""
    rgb = hex_to_rgb(base, "base")
    h, s, l = rgb_to_hsl(*rgb)
    return [rgb_to_hex(*rgb), hsl_to_hex((h + 180) % 360, s, l)]


__all__ = ["analogous_palette", "complementary_palette"]
