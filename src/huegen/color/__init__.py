from __future__ import annotations

from .convert import (
    RGB,
    HSL,
    InvalidColorFormat,
    is_valid_color,
    validate_color,
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hsl_to_rgb,
    hex_to_hsl,
    hsl_to_hex,
)
from .distance import (
    MAX_DISTANCE,
    DEFAULT_THRESHOLD,
    color_distance,
    is_similar,
)
from .generate import (
    random_color,
    random_colors,
    colors_avoiding_list,
    colors_avoiding_background,
    biased_color,
)
from .palette import (
    analogous_palette,
    complementary_palette,
)
from .session import ColorSession

__all__ = [
    # Conversions
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
    # Distance
    "MAX_DISTANCE",
    "DEFAULT_THRESHOLD",
    "color_distance",
    "is_similar",
    # Generators
    "random_color",
    "random_colors",
    "colors_avoiding_list",
    "colors_avoiding_background",
    "biased_color",
    # Palettes
    "analogous_palette",
    "complementary_palette",
    # Session memory
    "ColorSession",
]
