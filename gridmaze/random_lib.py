"""Seeded pseudo-random source for maze generation.

A 48-bit linear congruential generator with the same constants and seed
scrambling as `java.util.Random`, so a seed always maps to the same layout
no matter where the maze was generated.
"""

_MULTIPLIER = 0x5DEECE66D
_ADDEND = 0xB
_MASK = (1 << 48) - 1


class SeededRandom:

    def __init__(self, seed: int):
        self.seed = seed
        self._state = (seed ^ _MULTIPLIER) & _MASK

    def _next(self, bits):
        self._state = (self._state * _MULTIPLIER + _ADDEND) & _MASK
        result = self._state >> (48 - bits)
        # top `bits` bits, read as a signed 32-bit int
        if result >= 1 << 31:
            result -= 1 << 32
        return result

    def next_int(self, bound: int) -> int:
        """Uniform int in [0, bound)."""
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        r = self._next(31)
        m = bound - 1
        if bound & m == 0:
            return (bound * r) >> 31
        u = r
        r = u % bound
        # reject the tail that would overflow a signed 32-bit int
        while u - r + m >= 1 << 31:
            u = self._next(31)
            r = u % bound
        return r

    def __repr__(self):
        return f"SeededRandom(seed={self.seed})"
