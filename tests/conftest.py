"""Pytest configuration and shared fixtures for wavestring tests.

This module provides:
- A deterministic numpy RNG fixture
- A fixture restoring the global debug flag after each test
"""

import os

import numpy as np
import pytest

from wavestring.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_flag():
    """Keep the global debug flag unchanged across tests."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
