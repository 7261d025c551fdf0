from __future__ import annotations

from typing import List, Optional

from huegen.config import GeneratorSettings
from huegen.logging import get_logger
from huegen.random import ByteSource, resolve_source

from .convert import validate_color
from .generate import colors_avoiding_background

log = get_logger(__name__)


class ColorSession:
    """Generator that can remember the colors it handed out.

    Each session owns its memory; nothing is shared between sessions.
    Not thread-safe: callers sharing one session across threads must lock
    around it themselves.
    """

    def __init__(
        self,
        settings: Optional[GeneratorSettings] = None,
        rng: Optional[ByteSource] = None,
    ):
        self.settings = settings or GeneratorSettings()
        self._rng = resolve_source(rng)
        self._previous: List[str] = []

    @property
    def previous_colors(self) -> List[str]:
        """Copy of the colors currently remembered."""
        return list(self._previous)

    def forget(self) -> None:
        self._previous = []

    def _avoiding(self, bg: str, n: int) -> List[str]:
        return colors_avoiding_background(bg, n, rng=self._rng, settings=self.settings)

    def generate(self, bg: str, n: int, remember: bool) -> List[str]:
        """Generate ``n`` colors avoiding shades of ``bg``.

        With ``remember`` the remembered colors are reused as a prefix and
        only the shortfall is drawn; the combined list becomes the new
        memory. When memory already holds ``n`` or more colors it is
        returned as-is, which can be longer than ``n``. Without
        ``remember`` ``n`` fresh colors are returned and memory is cleared.
        """
        bg = validate_color(bg, "bg")
        if n < 0:
            raise ValueError(f"Color count must be non-negative, got {n}")

        if not remember:
            colors = self._avoiding(bg, n)
            self._previous = []
            return colors

        needed = n - len(self._previous)
        if needed > 0:
            self._previous = self._previous + self._avoiding(bg, needed)
        log.debug(f"Session memory holds {len(self._previous)} colors")
        return list(self._previous)


__all__ = ["ColorSession"]
