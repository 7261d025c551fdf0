from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass
class SeededRandom:
    """Seeded random byte source for reproducible colors."""
    seed: int

    def __post_init__(self):
        self._random = random.Random(self.seed)

    def reseed(self, seed: int) -> None:
        """Change the seed and reset the generator."""
        self.seed = seed
        self._random = random.Random(seed)

    def bytes(self, length: int) -> bytes:
        """Generate seeded random bytes."""
        if length < 0:
            raise ValueError("Length must be non-negative")
        return bytes(self._random.getrandbits(8) for _ in range(length))
