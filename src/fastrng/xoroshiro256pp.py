"""
xoroshiro256pp.py
-----------------

xoshiro256++ 1.0 (Blackman & Vigna) with derived uniform-double and
Gaussian (polar method) outputs.

The 256-bit state must not be everywhere zero; it is filled from four
successive SplitMix64 outputs, which avalanche any 64-bit seed.

Reference: https://prng.di.unimi.it/xoshiro256plusplus.c
"""

from __future__ import annotations

__all__ = ["Xoroshiro256PlusPlus", "to_unit_interval",]

import math
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .base import MASK64, BitGenerator64, coerce_seed, _check_size
from .splitmix64 import SplitMix64

# =============================================================================
# Constants
# =============================================================================
DOUBLE_UNIT = 1.0 / (1 << 53)  # 0x1.0p-53

JUMP = (0x180EC6D33CFD0ABA, 0xD5A61266F0C9392C,
        0xA9582618E03FC9AA, 0x39ABDC4529B1661C)
LONG_JUMP = (0x76E15D3EFEFDCBBF, 0xC5004E441C522FB3,
             0x77710069854EE241, 0x39109BB02ACBE635)


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & MASK64


def to_unit_interval(x: int) -> float:
    """Map a 64-bit word onto [0.0, 1.0) using its top 53 bits."""
    return (x >> 11) * DOUBLE_UNIT


class Xoroshiro256PlusPlus(BitGenerator64):
    """
    All-purpose 64-bit generator with a 256-bit state.

    Attributes:
        _s:       State words [s0, s1, s2, s3]; order matters.
        _odd:     True when a second Gaussian deviate is cached.
        _v1, _v2: Last accepted point in the unit disk.
        _r2:      Its squared radius S = v1**2 + v2**2.
    """

    __slots__ = ("_s", "_odd", "_v1", "_v2", "_r2",)

    # -------------------------------------------------------------------------
    # Core seeding
    # -------------------------------------------------------------------------
    def seed(self, seed: Optional[int] = None) -> None:
        """Fill the state from a SplitMix64 counter started at `seed`.

        Also drops any cached Gaussian deviate, so the output stream depends
        on the seed alone.
        """
        seed = coerce_seed(seed)
        counter = SplitMix64(seed)
        self._s = [counter.next() for _ in range(4)]
        self._odd = False
        self._v1 = self._v2 = self._r2 = 0.0
        self._log_seed(seed)

    @property
    def state(self) -> Tuple[int, int, int, int]:
        """Current state as an (s0, s1, s2, s3) tuple."""
        return tuple(self._s)

    # -------------------------------------------------------------------------
    # Raw output
    # -------------------------------------------------------------------------
    def next(self) -> int:
        s = self._s
        s0, s1, s2, s3 = s
        result = (_rotl((s0 + s3) & MASK64, 23) + s0) & MASK64
        t = (s1 << 17) & MASK64

        s2 ^= s0
        s3 ^= s1
        s[0] = s0 ^ s3
        s[1] = s1 ^ s2
        s[2] = s2 ^ t
        s[3] = _rotl(s3, 45)

        return result

    def _jump(self, poly: Tuple[int, int, int, int]) -> None:
        s0 = s1 = s2 = s3 = 0
        for word in poly:
            for b in range(64):
                if word & (1 << b):
                    s0 ^= self._s[0]
                    s1 ^= self._s[1]
                    s2 ^= self._s[2]
                    s3 ^= self._s[3]
                self.next()
        self._s = [s0, s1, s2, s3]

    def jump(self) -> None:
        """Advance the state by 2**128 calls to next().

        Gives 2**128 non-overlapping subsequences for parallel streams.
        """
        self._jump(JUMP)

    def long_jump(self) -> None:
        """Advance the state by 2**192 calls to next()."""
        self._jump(LONG_JUMP)

    # -------------------------------------------------------------------------
    # Derived outputs
    # -------------------------------------------------------------------------
    def next_uniform(self) -> float:
        """Return a float uniformly distributed over [0.0, 1.0)."""
        return to_unit_interval(self.next())

    def next_gaussian(self) -> float:
        """Return a standard normal deviate (polar / Marsaglia method).

        Each accepted point in the unit disk yields two deviates: the first
        call returns the V1 deviate and caches the pair, the following call
        returns the V2 deviate without drawing any uniforms.
        """
        if self._odd:
            self._odd = False
            return self._v2 * math.sqrt(-2.0 * math.log(self._r2) / self._r2)

        while True:
            v1 = 2.0 * self.next_uniform() - 1.0
            v2 = 2.0 * self.next_uniform() - 1.0
            r2 = v1 * v1 + v2 * v2
            # outside the disk or at the origin
            if r2 < 1.0 and r2 != 0.0:
                break

        self._v1, self._v2, self._r2 = v1, v2, r2
        self._odd = True
        return v1 * math.sqrt(-2.0 * math.log(r2) / r2)

    # -------------------------------------------------------------------------
    # Bulk helpers
    # -------------------------------------------------------------------------
    def uniform_array(self, size: int) -> NDArray[np.float64]:
        """Return `size` successive next_uniform() values."""
        size = _check_size(size)
        return np.fromiter((self.next_uniform() for _ in range(size)),
                           dtype=np.float64, count=size)

    def gaussian_array(self, size: int) -> NDArray[np.float64]:
        """Return `size` successive next_gaussian() values."""
        size = _check_size(size)
        return np.fromiter((self.next_gaussian() for _ in range(size)),
                           dtype=np.float64, count=size)

    def __repr__(self) -> str:
        words = " ".join(f"{w:#018x}" for w in self._s)
        return f"<Xoroshiro256PlusPlus state=[{words}]>"
