"""A protocol-independent socket address buffer."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from daytime.unp import MAXSOCKADDR

_FAMILY = struct.Struct("=H")
STORAGE_SIZE = MAXSOCKADDR
_PADDING_SIZE = STORAGE_SIZE - _FAMILY.size


@dataclass(frozen=True)
class SockaddrStorage:
    """An address family tag followed by room for any address structure."""

    family: int
    padding: bytes = field(default=bytes(_PADDING_SIZE))

    def __post_init__(self) -> None:
        if not 0 <= self.family <= 0xFFFF:
            raise ValueError(f"address family out of range: {self.family}")
        if len(self.padding) != _PADDING_SIZE:
            raise ValueError(
                f"padding must be {_PADDING_SIZE} bytes, got {len(self.padding)}"
            )

    def to_bytes(self) -> bytes:
        """Return the structure as its in-memory bytes."""
        return _FAMILY.pack(self.family) + bytes(self.padding)

    @classmethod
    def from_bytes(cls, data: bytes) -> SockaddrStorage:
        """Build a structure from exactly STORAGE_SIZE bytes."""
        if len(data) != STORAGE_SIZE:
            raise ValueError(f"expected {STORAGE_SIZE} bytes, got {len(data)}")
        (family,) = _FAMILY.unpack_from(data)
        return cls(family=family, padding=bytes(data[_FAMILY.size:]))


def zeroed_storage(family: int) -> SockaddrStorage:
    """Return an all-zero address structure tagged with *family*."""
    return SockaddrStorage(family=family)