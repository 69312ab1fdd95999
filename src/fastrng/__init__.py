from .base import BitGenerator64
from .splitmix64 import SplitMix64, splitmix64_stateless, splitmix64_stepwise
from .lehmer64 import Lehmer64
from .xoroshiro256pp import Xoroshiro256PlusPlus, to_unit_interval
from .config import GeneratorConfig
from .rng import (
    make_rng, from_config, get_rng, set_global_seed,
    splitmix64_seed_stateless, splitmix64_seed_stepwise,
    lehmer64_seed, lehmer64_next,
    xoroshiro256pp_seed, xoroshiro256pp_next,
    xoroshiro256pp_next_uniform, xoroshiro256pp_next_gaussian,
)
from .logging_utils import configure_logging


__all__ = [
    "base",
    "config",
    "lehmer64",
    "logging_utils",
    "rng",
    "splitmix64",
    "xoroshiro256pp",
]
