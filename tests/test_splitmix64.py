"""
test_splitmix64.py
------------------

Unit tests for splitmix64.py: reference vectors, stepwise counter
behavior and seed coercion.
"""

import numpy as np
import pytest

from fastrng.base import MASK64
from fastrng.splitmix64 import (
    GOLDEN_GAMMA, SplitMix64, splitmix64_stateless, splitmix64_stepwise,
)

# First five stepwise outputs for counters starting at 0, 1 and 42.
STEPWISE_GOLDEN = {
    0: [16294208416658607535, 7960286522194355700, 487617019471545679,
        17909611376780542444, 1961750202426094747],
    1: [10451216379200822465, 13757245211066428519, 17911839290282890590,
        8196980753821780235, 8195237237126968761],
    42: [13679457532755275413, 2949826092126892291, 5139283748462763858,
         6349198060258255764, 701532786141963250],
}


# ---------------------------------------------------------------------
# 1. Published reference vectors
# ---------------------------------------------------------------------
def test_stateless_reference_vectors():
    assert splitmix64_stateless(0) == 0xE220A8397B1DCDAF
    assert splitmix64_stateless(1) == 0x910A2DEC89025CC1


@pytest.mark.parametrize("seed", sorted(STEPWISE_GOLDEN))
def test_stepwise_golden(seed):
    sm = SplitMix64(seed)
    assert [sm.next() for _ in range(5)] == STEPWISE_GOLDEN[seed]


@pytest.mark.parametrize("seed", [0, 1, 42, 2**63, MASK64])
def test_stateless_equals_first_stepwise_call(seed):
    assert splitmix64_stateless(seed) == SplitMix64(seed).next()


def test_stateless_is_pure():
    assert splitmix64_stateless(42) == splitmix64_stateless(42) == 13679457532755275413


# ---------------------------------------------------------------------
# 2. Counter behavior
# ---------------------------------------------------------------------
def test_stepwise_advances_counter_by_golden_gamma(splitmix0):
    splitmix_stepwise_out = splitmix64_stepwise(splitmix0)
    assert splitmix0.state == GOLDEN_GAMMA
    assert splitmix_stepwise_out == STEPWISE_GOLDEN[0][0]
    splitmix64_stepwise(splitmix0)
    assert splitmix0.state == (2 * GOLDEN_GAMMA) & MASK64


def test_counter_wraps_modulo_2_64():
    sm = SplitMix64(MASK64)
    sm.next()
    assert sm.state == (MASK64 + GOLDEN_GAMMA) & MASK64
    assert 0 <= sm.state <= MASK64


def test_outputs_fit_in_64_bits(splitmix0):
    for _ in range(1000):
        assert 0 <= splitmix0.next() <= MASK64


# ---------------------------------------------------------------------
# 3. Seed coercion
# ---------------------------------------------------------------------
def test_seed_reduced_modulo_2_64():
    assert splitmix64_stateless(2**64 + 1) == splitmix64_stateless(1)
    assert splitmix64_stateless(-1) == splitmix64_stateless(MASK64)


def test_numpy_integer_seed_accepted():
    assert splitmix64_stateless(np.uint64(42)) == splitmix64_stateless(42)


@pytest.mark.parametrize("bad", [1.5, "42", True])
def test_non_integer_seed_rejected(bad):
    with pytest.raises(TypeError):
        splitmix64_stateless(bad)
    with pytest.raises(TypeError):
        SplitMix64(bad)


def test_stateless_rejects_none():
    with pytest.raises(TypeError):
        splitmix64_stateless(None)


def test_repr_shows_counter():
    assert "0x000000000000002a" in repr(SplitMix64(42))
