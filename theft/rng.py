"""64-bit Mersenne Twister (MT19937-64) pseudo-random number generator."""

from __future__ import annotations

_NN = 312
_MM = 156
_MATRIX_A = 0xB5026F5AA96619E9
_UM = 0xFFFFFFFF80000000  # most significant 33 bits
_LM = 0x7FFFFFFF  # least significant 31 bits
_MASK64 = (1 << 64) - 1
_INIT_MULT = 6364136223846793005
_DOUBLE_SCALE = 1.0 / 9007199254740991.0


class MersenneTwister64:
    """A seeded MT19937-64 generator producing 64-bit unsigned integers."""

    __slots__ = ("_mt", "_mti")

    def __init__(self, seed: int) -> None:
        self._mt: list[int] = [0] * _NN
        self._mti = _NN
        self.reset(seed)

    def reset(self, seed: int) -> None:
        """Re-initialise the state from ``seed`` (taken modulo 2**64)."""
        mt = self._mt
        prev = seed & _MASK64
        mt[0] = prev
        for i in range(1, _NN):
            prev = (_INIT_MULT * (prev ^ (prev >> 62)) + i) & _MASK64
            mt[i] = prev
        self._mti = _NN

    def _regenerate(self) -> None:
        mt = self._mt
        for i in range(_NN):
            x = (mt[i] & _UM) | (mt[(i + 1) % _NN] & _LM)
            value = mt[(i + _MM) % _NN] ^ (x >> 1)
            if x & 1:
                value ^= _MATRIX_A
            mt[i] = value
        self._mti = 0

    def random(self) -> int:
        """Return the next number on the interval [0, 2**64 - 1]."""
        if self._mti >= _NN:
            self._regenerate()
        x = self._mt[self._mti]
        self._mti += 1

        x ^= (x >> 29) & 0x5555555555555555
        x ^= (x << 17) & 0x71D67FFFEDA60000
        x ^= (x << 37) & 0xFFF7EEE000000000
        x ^= x >> 43
        return x & _MASK64


def uint64_to_double(x: int) -> float:
    """Map a 64-bit unsigned integer onto the [0, 1] real interval."""
    return ((x & _MASK64) >> 11) * _DOUBLE_SCALE