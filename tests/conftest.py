"""
-------
conftest.py
-------
Shared pytest fixtures for generator tests.
"""

import pytest

from fastrng import Lehmer64, SplitMix64, Xoroshiro256PlusPlus


# -----------------------------------------------------------------------------
# Seeded generators
# -----------------------------------------------------------------------------
@pytest.fixture
def xoro42() -> Xoroshiro256PlusPlus:
  """xoshiro256++ seeded with 42."""
  return Xoroshiro256PlusPlus(42)


@pytest.fixture
def lehmer42() -> Lehmer64:
  return Lehmer64(42)


@pytest.fixture
def splitmix0() -> SplitMix64:
  """SplitMix64 counter starting at 0."""
  return SplitMix64(0)


@pytest.fixture(params=[SplitMix64, Lehmer64, Xoroshiro256PlusPlus],
                ids=lambda cls: cls.__name__)
def generator_cls(request):
  """Each concrete generator class in turn."""
  return request.param
