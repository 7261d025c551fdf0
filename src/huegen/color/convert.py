from __future__ import annotations

import math
import re
from typing import Any, Final, Tuple

RGB = Tuple[int, int, int]
HSL = Tuple[int, float, float]

_HEX_COLOR: Final = re.compile(r"^#[0-9A-F]{6}$", re.IGNORECASE)


class InvalidColorFormat(ValueError):
    """Raised when a caller-supplied color is not a ``#RRGGBB`` string."""

    def __init__(self, param: str, value: Any):
        super().__init__(f"Invalid hex color for '{param}': {value!r} (expected #RRGGBB)")
        self.param = param
        self.value = value


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; colors use .5 -> up
    return int(math.floor(value + 0.5))


def is_valid_color(value: Any) -> bool:
    """Check whether ``value`` is a hex color code in the form ``#RRGGBB``."""
    return isinstance(value, str) and _HEX_COLOR.fullmatch(value) is not None


def validate_color(value: Any, param: str = "color") -> str:
    """Return the canonical upper-case form of ``value``.

    Raises:
        InvalidColorFormat: if ``value`` is not ``#RRGGBB`` (any case).
    """
    if not is_valid_color(value):
        raise InvalidColorFormat(param, value)
    return value.upper()


def hex_to_rgb(color: str, param: str = "color") -> RGB:
    """Split a ``#RRGGBB`` color into its red, green and blue channels."""
    value = int(validate_color(color, param)[1:], 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode integer channels (0-255) as an upper-case ``#RRGGBB`` string.

    Channels outside [0, 255] or of a non-integer type raise ``ValueError``;
    nothing is clamped.
    """
    for name, channel in (("r", r), ("g", g), ("b", b)):
        if isinstance(channel, bool) or not isinstance(channel, int):
            raise ValueError(f"Channel {name} must be an int, got {type(channel).__name__}")
        if not 0 <= channel <= 255:
            raise ValueError(f"Channel {name} out of range 0-255: {channel}")
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert RGB (0-255) to HSL.

    Hue comes back as whole degrees in [0, 360); saturation and lightness
    are unrounded fractions in [0, 1].
    """
    rf, gf, bf = r / 255, g / 255, b / 255
    hi = max(rf, gf, bf)
    lo = min(rf, gf, bf)
    l = (hi + lo) / 2

    if hi == lo:
        return 0, 0.0, l

    d = hi - lo
    s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
    if hi == rf:
        h = (gf - bf) / d + (6 if gf < bf else 0)
    elif hi == gf:
        h = (bf - rf) / d + 2
    else:
        h = (rf - gf) / d + 4
    h /= 6

    return round_half_up(h * 360) % 360, s, l


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL (0-360, 0-1, 0-1) to RGB channels (0-255)."""
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if 0 <= h < 60:
        r1, g1, b1 = c, x, 0.0
    elif 60 <= h < 120:
        r1, g1, b1 = x, c, 0.0
    elif 120 <= h < 180:
        r1, g1, b1 = 0.0, c, x
    elif 180 <= h < 240:
        r1, g1, b1 = 0.0, x, c
    elif 240 <= h < 300:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    return (
        round_half_up((r1 + m) * 255),
        round_half_up((g1 + m) * 255),
        round_half_up((b1 + m) * 255),
    )


def hex_to_hsl(color: str, param: str = "color") -> HSL:
    return rgb_to_hsl(*hex_to_rgb(color, param))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


__all__ = [
    "RGB",
    "HSL",
    "InvalidColorFormat",
    "is_valid_color",
    "validate_color",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
]
