from __future__ import annotations

import logging
from typing import Iterable, List

import pytest

from huegen.logging import get_logger


class ScriptedBytes:
    """Byte source that replays the given ``#RRGGBB`` colors in order."""

    def __init__(self, colors: Iterable[str]):
        self.script: List[int] = []
        for color in colors:
            self.script.extend(bytes.fromhex(color.lstrip("#")))
        self.position = 0

    @property
    def draws(self) -> int:
        return self.position // 3

    def bytes(self, length: int) -> bytes:
        if self.position + length > len(self.script):
            raise LookupError("script exhausted")
        chunk = self.script[self.position:self.position + length]
        self.position += length
        return bytes(chunk)


@pytest.fixture
def scripted():
    return ScriptedBytes


@pytest.fixture
def generator_logs(caplog):
    """Capture records from the generator logger (it does not propagate)."""
    logger = get_logger("huegen.color.generate")
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger="huegen.color.generate")
    yield caplog
    logger.removeHandler(caplog.handler)
