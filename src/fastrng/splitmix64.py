"""
splitmix64.py
-------------

SplitMix64 mixer, the seeding primitive for every other generator here.

Two forms:
- `splitmix64_stateless(x)`: pure function of `x`.
- `SplitMix64`: stepwise form driven by a running 64-bit counter.

Reference: Steele, Lea & Flood, "Fast splittable pseudorandom number
generators" (OOPSLA 2014); constants follow Vigna's splitmix64.c.
"""

from __future__ import annotations

__all__ = ["GOLDEN_GAMMA", "SplitMix64", "splitmix64_stateless", "splitmix64_stepwise",]

from typing import Optional

from .base import MASK64, BitGenerator64, coerce_seed

# =============================================================================
# Constants
# =============================================================================
GOLDEN_GAMMA = 0x9E3779B97F4A7C15
MIX_MUL_1 = 0xBF58476D1CE4E5B9
MIX_MUL_2 = 0x94D049BB133111EB


def _mix64(z: int) -> int:
    z = ((z ^ (z >> 30)) * MIX_MUL_1) & MASK64
    z = ((z ^ (z >> 27)) * MIX_MUL_2) & MASK64
    return z ^ (z >> 31)


def splitmix64_stateless(x: int) -> int:
    """Return the output of a single stepwise call started from state `x`."""
    if x is None:
        raise TypeError("x must be an int, not NoneType")
    return _mix64((coerce_seed(x) + GOLDEN_GAMMA) & MASK64)


class SplitMix64(BitGenerator64):
    """Stepwise SplitMix64: add the golden gamma to the counter, then mix."""

    __slots__ = ("_state",)

    def seed(self, seed: Optional[int] = None) -> None:
        seed = coerce_seed(seed)
        self._state = seed
        self._log_seed(seed)

    @property
    def state(self) -> int:
        """Current 64-bit counter."""
        return self._state

    def next(self) -> int:
        self._state = (self._state + GOLDEN_GAMMA) & MASK64
        return _mix64(self._state)

    def __repr__(self) -> str:
        return f"<SplitMix64 state={self._state:#018x}>"


def splitmix64_stepwise(counter: SplitMix64) -> int:
    """Advance `counter` in place and return its next mixed output."""
    return counter.next()
