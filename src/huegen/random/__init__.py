from __future__ import annotations

from .secure import (
    ByteSource,
    CryptoRandom,
    resolve_source,
    secure_random_bytes,
)
from .seeded import (
    SeededRandom,
)

__all__ = [
    # Byte sources
    "ByteSource",
    "CryptoRandom",
    "resolve_source",
    "secure_random_bytes",
    # Reproducible sources
    "SeededRandom",
]
