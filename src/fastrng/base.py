"""
base.py
-------

Defines the abstract base class for 64-bit pseudo-random generators and the
seed handling shared by all of them.
"""

from __future__ import annotations

__all__ = ["MASK64", "BitGenerator64", "coerce_seed", "entropy_seed",]

import os
import time
import random
import logging
from abc import ABC, abstractmethod
from numbers import Integral
from typing import Any, Iterator, Optional

import numpy as np
from numpy.typing import NDArray

# =============================================================================
# Constants
# =============================================================================
MASK64 = 0xFFFFFFFFFFFFFFFF
LOGGER_NAME = "fastrng"


# -----------------------------------------------------------------------------
# Seed helpers
# -----------------------------------------------------------------------------
def entropy_seed() -> int:
    """Return a non-reproducible 64-bit seed from PID, clock and stdlib RNG."""
    return (os.getpid() << 32
            ^ time.time_ns()
            ^ random.getrandbits(64)) & MASK64


def coerce_seed(seed: Optional[int]) -> int:
    """Reduce `seed` modulo 2**64, drawing entropy when it is None.

    Raises:
        TypeError: `seed` is not an integer (bool is rejected too).
    """
    if seed is None:
        return entropy_seed()
    if isinstance(seed, bool) or not isinstance(seed, Integral):
        raise TypeError(f"seed must be an int, not {type(seed).__name__}")
    return int(seed) & MASK64


def _check_size(size: int) -> int:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    return int(size)


class BitGenerator64(ABC):
    """
    Abstract base class for generators producing one 64-bit word per call.

    Construction always seeds the instance, so there is no unseeded state.
    Instances carry no lock: share one between threads only with external
    synchronization, or give each thread its own.
    """

    __slots__ = ()

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Args:
            seed (int | None): 64-bit seed; None draws an entropy seed.
        """
        self.seed(seed)

    # -------------------------------------------------------------------------
    # Abstract interface
    # -------------------------------------------------------------------------
    @abstractmethod
    def seed(self, seed: Optional[int] = None) -> None:
        """Reinitialize the state in place (preserves object identity)."""
        raise NotImplementedError

    @abstractmethod
    def next(self) -> int:
        """Advance the state and return the next unsigned 64-bit word."""
        raise NotImplementedError

    @property
    @abstractmethod
    def state(self) -> Any:
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Shared helpers
    # -------------------------------------------------------------------------
    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()

    def next_array(self, size: int) -> NDArray[np.uint64]:
        """Return `size` successive outputs as a uint64 array."""
        size = _check_size(size)
        return np.fromiter((self.next() for _ in range(size)),
                           dtype=np.uint64, count=size)

    def as_numpy(self) -> np.random.Generator:
        """Return a NumPy Generator seeded from this generator's next output."""
        logger = logging.getLogger(LOGGER_NAME)
        seed_val = self.next()
        logger.debug(f"Seeding numpy Generator from {type(self).__name__}: {seed_val:#018x}")
        return np.random.default_rng(seed_val)

    def _log_seed(self, seed: int) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        logger.debug(f"Seeded {type(self).__name__} with {seed:#018x}")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={id(self):#x}>"
