"""64-bit FNV-1a hashing, one-shot or incremental."""

from __future__ import annotations

FNV64_PRIME = 1099511628211
FNV64_OFFSET_BASIS = 14695981039346656037
_MASK64 = (1 << 64) - 1


class Hasher:
    """Incremental 64-bit FNV-1a hasher."""

    __slots__ = ("_accum",)

    def __init__(self) -> None:
        self._accum = FNV64_OFFSET_BASIS

    def reset(self) -> None:
        """Return to the initial state."""
        self._accum = FNV64_OFFSET_BASIS

    def sink(self, data: bytes | bytearray | memoryview) -> None:
        """Feed more bytes into the hash."""
        if isinstance(data, str):
            raise TypeError("hash input must be bytes-like, not str")
        accum = self._accum
        for byte in bytes(data):
            accum = ((accum ^ byte) * FNV64_PRIME) & _MASK64
        self._accum = accum

    def done(self) -> int:
        """Return the hash of everything sunk so far, and reset."""
        result = self._accum
        self.reset()
        return result


def hash_onepass(data: bytes | bytearray | memoryview) -> int:
    """Hash a buffer in one pass."""
    hasher = Hasher()
    hasher.sink(data)
    return hasher.done()