"""
lehmer64.py
-----------

Lehmer-style multiplicative generator over a 128-bit state; each call
returns the high 64 bits of the product.
"""

from __future__ import annotations

__all__ = ["LEHMER64_MULTIPLIER", "Lehmer64",]

from typing import Optional

from .base import MASK64, BitGenerator64, coerce_seed
from .splitmix64 import splitmix64_stateless

MASK128 = (1 << 128) - 1
LEHMER64_MULTIPLIER = 0xDA942042E4DD58B5


class Lehmer64(BitGenerator64):
    """
    128-bit multiplicative congruential generator (D. Lemire's lehmer64).

    The state is seeded from two consecutive stateless SplitMix64 outputs,
    for `seed` (high word) and `seed + 1` (low word).
    """

    __slots__ = ("_state",)

    def seed(self, seed: Optional[int] = None) -> None:
        seed = coerce_seed(seed)
        high = splitmix64_stateless(seed)
        low = splitmix64_stateless((seed + 1) & MASK64)
        self._state = (high << 64) | low
        self._log_seed(seed)

    @property
    def state(self) -> int:
        """Current 128-bit state."""
        return self._state

    def next(self) -> int:
        self._state = (self._state * LEHMER64_MULTIPLIER) & MASK128
        return self._state >> 64

    def __repr__(self) -> str:
        return f"<Lehmer64 state={self._state:#034x}>"
