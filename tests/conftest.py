"""
Shared test fixtures for the detrand test suite.

Provides fixtures for:
- Isolated settings (no DETRAND_* leakage between tests)
- Seeded Random instances over each generator
"""

import pytest

from detrand import GaloisLfsr, Random, XorShift128Plus
from detrand.core.config import get_settings


# =============================================================================
# Settings Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Clear DETRAND_* environment and the cached Settings."""
    for name in ("DETRAND_SEED", "DETRAND_GENERATOR", "DETRAND_ENTROPY_FALLBACK_ROUNDS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Random Instances
# =============================================================================


@pytest.fixture
def rng() -> Random:
    """Random over xorshift128+ with seed 42."""
    return Random(42)


@pytest.fixture
def lfsr_rng() -> Random:
    """Random over the Galois LFSR with seed 42."""
    return Random(42, GaloisLfsr())


@pytest.fixture(params=[XorShift128Plus, GaloisLfsr], ids=["xorshift128+", "lfsr"])
def generator_class(request):
    """Each registered generator class."""
    return request.param
