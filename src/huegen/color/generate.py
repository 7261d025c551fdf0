from __future__ import annotations

from typing import Iterable, List, Optional

from huegen.config import GeneratorSettings
from huegen.logging import get_logger
from huegen.random import ByteSource, resolve_source

from .convert import round_half_up, hex_to_rgb, rgb_to_hex, validate_color
from .distance import color_distance

log = get_logger(__name__)

_DEFAULTS = GeneratorSettings()


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"Color count must be non-negative, got {n}")


def random_color(rng: Optional[ByteSource] = None) -> str:
    """Generate a random ``#RRGGBB`` color from three random bytes."""
    return "#" + resolve_source(rng).bytes(3).hex().upper()


def random_colors(n: int, rng: Optional[ByteSource] = None) -> List[str]:
    """Generate ``n`` independent random colors."""
    _check_count(n)
    source = resolve_source(rng)
    return [random_color(source) for _ in range(n)]


def _top_up(colors: List[str], n: int, source: ByteSource) -> int:
    missing = n - len(colors)
    colors.extend(random_color(source) for _ in range(missing))
    return missing


def colors_avoiding_list(
    avoid: Iterable[str],
    n: int,
    rng: Optional[ByteSource] = None,
    max_attempts: Optional[int] = None,
    settings: Optional[GeneratorSettings] = None,
) -> List[str]:
    """Generate ``n`` colors, none of which appear in ``avoid``.

    Membership is an exact match on the canonical upper-case form. With
    ``max_attempts=None`` drawing continues until ``n`` colors are accepted.
    With a cap, a shortfall is filled with unconstrained colors and logged.
    An omitted cap falls back to ``settings.avoid_list_max_attempts``.
    """
    _check_count(n)
    cfg = _DEFAULTS if settings is None else settings
    max_attempts = cfg.avoid_list_max_attempts if max_attempts is None else max_attempts
    blocked = {validate_color(c, f"avoid[{i}]") for i, c in enumerate(avoid)}
    source = resolve_source(rng)

    colors: List[str] = []
    attempts = 0
    while len(colors) < n and (max_attempts is None or attempts < max_attempts):
        candidate = random_color(source)
        if candidate not in blocked:
            colors.append(candidate)
        attempts += 1

    if len(colors) < n:
        missing = _top_up(colors, n, source)
        log.warning(
            f"Avoid-list budget of {max_attempts} draws exhausted; "
            f"{missing} of {n} colors were drawn without the constraint"
        )
    return colors


def colors_avoiding_background(
    bg: str,
    n: int,
    threshold: Optional[float] = None,
    max_attempts: Optional[int] = None,
    rng: Optional[ByteSource] = None,
    settings: Optional[GeneratorSettings] = None,
) -> List[str]:
    """Generate ``n`` colors that are not shades of ``bg``.

    A candidate is accepted when its RGB distance to ``bg`` exceeds
    ``threshold``. After ``max_attempts`` draws the result is filled up to
    ``n`` with unconstrained colors, so the count is always exact. Omitted
    ``threshold`` and ``max_attempts`` come from ``settings``.
    """
    background = validate_color(bg, "bg")
    _check_count(n)
    cfg = _DEFAULTS if settings is None else settings
    threshold = cfg.threshold if threshold is None else threshold
    max_attempts = cfg.max_attempts if max_attempts is None else max_attempts
    source = resolve_source(rng)

    colors: List[str] = []
    attempts = 0
    while len(colors) < n and attempts < max_attempts:
        candidate = random_color(source)
        if color_distance(candidate, background) > threshold:
            colors.append(candidate)
        attempts += 1

    if len(colors) < n:
        missing = _top_up(colors, n, source)
        log.warning(
            f"Could not find {n} colors farther than {threshold} from {background} "
            f"in {max_attempts} attempts; added {missing} unconstrained colors"
        )
    else:
        log.debug(f"Generated {n} colors avoiding {background} in {attempts} attempts")
    return colors


def biased_color(bias: str, rng: Optional[ByteSource] = None) -> str:
    """Generate a random color pulled halfway toward ``bias``."""
    bias_rgb = hex_to_rgb(bias, "bias")
    random_rgb = hex_to_rgb(random_color(rng))
    r, g, b = (round_half_up((x + y) / 2) for x, y in zip(bias_rgb, random_rgb))
    return rgb_to_hex(r, g, b)


__all__ = [
    "random_color",
    "random_colors",
    "colors_avoiding_list",
    "colors_avoiding_background",
    "biased_color",
]
