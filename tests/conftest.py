"""
Shared test fixtures for the Saikoro test suite.

Provides fixtures for:
- Isolated configuration (no SAIKORO_* leakage between tests)
- Seeded generators and crafted states
"""

import pytest

from saikoro.config import get_settings
from saikoro.defaults import get_seed_source
from saikoro.state import XorShiftState
from saikoro.xorshift import XorShiftRandom

from reference import GOLDEN_SEED


# =============================================================================
# Configuration Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Clear SAIKORO_* variables and cached settings around every test."""
    monkeypatch.delenv("SAIKORO_SEED", raising=False)
    monkeypatch.delenv("SAIKORO_SOURCE", raising=False)
    get_settings.cache_clear()
    get_seed_source.cache_clear()
    yield
    get_settings.cache_clear()
    get_seed_source.cache_clear()


# =============================================================================
# Generators
# =============================================================================


@pytest.fixture
def rng() -> XorShiftRandom:
    """Generator seeded with the golden seed."""
    return XorShiftRandom(GOLDEN_SEED)


@pytest.fixture
def max_output_state() -> XorShiftState:
    """State whose next core output is 0xFFFF_FFFF.

    With x == 0 the output is w ^ (w >> 19), and 0xFFFF_E000 maps to all ones.
    """
    return XorShiftState(0, 1, 1, 0xFFFF_E000)


@pytest.fixture
def zero_output_state() -> XorShiftState:
    """State whose next core output is 0."""
    return XorShiftState(0, 1, 1, 0)
