"""
config.py - Configuration dataclass for building generators.

`rng.from_config` turns it into a seeded generator instance.
"""

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Optional

GENERATOR_KINDS = ("splitmix64", "lehmer64", "xoroshiro256pp")


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable description of one generator stream."""
    kind: str = "xoroshiro256pp"
    seed: Optional[int] = None  # None -> entropy seed
    logger_level: int = logging.INFO

    def __post_init__(self):
        if self.kind not in GENERATOR_KINDS:
            raise ValueError(f"Unknown generator kind {self.kind!r}; "
                             f"expected one of {GENERATOR_KINDS}")
        if self.seed is not None and (isinstance(self.seed, bool)
                                      or not isinstance(self.seed, Integral)):
            raise TypeError(f"seed must be an int or None, not {type(self.seed).__name__}")
