from __future__ import annotations

import secrets
from typing import Optional, Protocol, runtime_checkable
from dataclasses import dataclass


@runtime_checkable
class ByteSource(Protocol):
    """Anything that can hand out uniformly random bytes."""

    def bytes(self, length: int) -> bytes: ...


@dataclass
class CryptoRandom:
    """Cryptographically secure random byte source."""

    @staticmethod
    def bytes(length: int) -> bytes:
        """Generate cryptographically secure random bytes."""
        if length < 0:
            raise ValueError("Length must be non-negative")
        return secrets.token_bytes(length)


_default_source = CryptoRandom()


def resolve_source(rng: Optional[ByteSource] = None) -> ByteSource:
    """Return ``rng`` or the shared cryptographic source when omitted."""
    return _default_source if rng is None else rng


def secure_random_bytes(length: int) -> bytes:
    """Generate cryptographically secure random bytes."""
    return CryptoRandom.bytes(length)
