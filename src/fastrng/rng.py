"""
rng.py
------

Generator factory plus process-wide and thread-local generator accessors.

- `make_rng` / `from_config` build independent, instance-scoped streams.
- `get_rng` returns the shared process-wide instance of a kind, or a
  per-thread instance when `thread_safe=True`.
- The flat `splitmix64_*`, `lehmer64_*` and `xoroshiro256pp_*` functions
  drive the process-wide instances.

The process-wide instances are entropy-seeded at import and have no lock:
using them from several threads without external synchronization is a data
race. Prefer one instance per thread.
"""

from __future__ import annotations

__all__ = [
    "GENERATORS", "make_rng", "from_config", "get_rng", "set_global_seed",
    "splitmix64_seed_stateless", "splitmix64_seed_stepwise",
    "lehmer64_seed", "lehmer64_next",
    "xoroshiro256pp_seed", "xoroshiro256pp_next",
    "xoroshiro256pp_next_uniform", "xoroshiro256pp_next_gaussian",
]

import logging
import threading
from typing import Dict, Optional, Type

from .base import LOGGER_NAME, BitGenerator64
from .config import GENERATOR_KINDS, GeneratorConfig
from .lehmer64 import Lehmer64
from .splitmix64 import SplitMix64, splitmix64_stateless, splitmix64_stepwise
from .xoroshiro256pp import Xoroshiro256PlusPlus

GENERATORS: Dict[str, Type[BitGenerator64]] = {
    "splitmix64": SplitMix64,
    "lehmer64": Lehmer64,
    "xoroshiro256pp": Xoroshiro256PlusPlus,
}


# ---------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------
def _generator_class(kind: str) -> Type[BitGenerator64]:
    try:
        return GENERATORS[kind]
    except KeyError:
        raise ValueError(f"Unknown generator kind {kind!r}; "
                         f"expected one of {GENERATOR_KINDS}") from None


def make_rng(kind: str = "xoroshiro256pp", seed: Optional[int] = None) -> BitGenerator64:
    """Return a new, independently seeded generator of the given kind."""
    cls = _generator_class(kind)
    logger = logging.getLogger(LOGGER_NAME)
    logger.debug(f"Creating {cls.__name__} (seed={seed})")
    return cls(seed)


def from_config(config: GeneratorConfig) -> BitGenerator64:
    """Build a generator from a GeneratorConfig."""
    logging.getLogger(LOGGER_NAME).setLevel(config.logger_level)
    return make_rng(config.kind, config.seed)


# =============================================================================
# GLOBAL & THREAD-LOCAL ACCESSORS
# =============================================================================
_global_rngs: Dict[str, BitGenerator64] = {kind: cls() for kind, cls in GENERATORS.items()}
_thread_local = threading.local()


def get_rng(kind: str = "xoroshiro256pp", thread_safe: bool = False) -> BitGenerator64:
    """Return a generator instance (shared or per-thread)."""
    _generator_class(kind)
    if thread_safe:
        if not hasattr(_thread_local, "rngs"):
            _thread_local.rngs = {}
        if kind not in _thread_local.rngs:
            _thread_local.rngs[kind] = make_rng(kind)
        return _thread_local.rngs[kind]
    return _global_rngs[kind]


def set_global_seed(seed: int) -> None:
    """Re-seed every process-wide generator with the same seed."""
    for rng in _global_rngs.values():
        rng.seed(seed)


# ---------------------------------------------------------------------
# Flat functional surface over the process-wide instances
# ---------------------------------------------------------------------
def splitmix64_seed_stateless(seed: int) -> int:
    return splitmix64_stateless(seed)


def splitmix64_seed_stepwise(counter: SplitMix64) -> int:
    """Advance `counter` in place and return the mixed output."""
    return splitmix64_stepwise(counter)


def lehmer64_seed(seed: int) -> None:
    _global_rngs["lehmer64"].seed(seed)


def lehmer64_next() -> int:
    return _global_rngs["lehmer64"].next()


def xoroshiro256pp_seed(seed: int) -> None:
    _global_rngs["xoroshiro256pp"].seed(seed)


def xoroshiro256pp_next() -> int:
    return _global_rngs["xoroshiro256pp"].next()


def xoroshiro256pp_next_uniform() -> float:
    return _global_rngs["xoroshiro256pp"].next_uniform()


def xoroshiro256pp_next_gaussian() -> float:
    return _global_rngs["xoroshiro256pp"].next_gaussian()
