"""A buffered stream of random bits drawn from a seeded generator."""

from __future__ import annotations

from .rng import MersenneTwister64, uint64_to_double

_MASK64 = (1 << 64) - 1
_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF
_UINT64_MAX = _MASK64


class RandomBits:
    """Hand out random bits in requested sizes, wasting none of the stream.

    Bits come little-endian: earlier bits of the generator's output end up
    in the lower-order positions of the returned integers.
    """

    __slots__ = ("_rng", "_buf", "_available")

    def __init__(self, seed: int) -> None:
        self._rng = MersenneTwister64(seed)
        self._buf = 0
        self._available = 0

    def set_seed(self, seed: int) -> None:
        """Re-seed the generator and discard any buffered bits."""
        self._buf = 0
        self._available = 0
        self._rng.reset(seed)

    def bits(self, count: int) -> int:
        """Return ``count`` random bits (at most 64) as an unsigned integer."""
        if not 0 <= count <= 64:
            raise ValueError(f"can take 0 to 64 bits at once, not {count}")
        return self.bits_bulk(count)

    def bits_bulk(self, count: int) -> int:
        """Return ``count`` random bits, any number of them, as one integer."""
        if count < 0:
            raise ValueError("bit count cannot be negative")
        result = 0
        shift = 0
        remaining = count
        while remaining > 0:
            if self._available == 0:
                self._buf = self._rng.random()
                self._available = 64
            take = min(remaining, self._available)
            result |= (self._buf & ((1 << take) - 1)) << shift
            self._buf >>= take
            self._available -= take
            shift += take
            remaining -= take
        return result

    def random(self) -> int:
        """Return 64 random bits."""
        return self.bits(64)

    def random_double(self) -> float:
        """Return a random float on the [0, 1] interval."""
        return uint64_to_double(self.bits(64))

    def random_choice(self, ceil: int) -> int:
        """Return an approximately uniform integer in ``range(ceil)``."""
        if ceil < 0:
            raise ValueError("choice ceiling cannot be negative")
        if ceil < 2:
            return 0
        if ceil & (ceil - 1) == 0:
            return self.bits(ceil.bit_length() - 1)

        if ceil < _UINT8_MAX:
            sample = self.bits(16)
            limit = float(1 << 16)
        elif ceil < _UINT16_MAX:
            sample = self.bits(32)
            limit = float(1 << 32)
        else:
            sample = self.bits(64)
            limit = float(_UINT64_MAX)
        return int((sample / limit) * ceil)