"""Pytest configuration for chclt tests."""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Provide a seeded random number generator for reproducibility."""
    return np.random.default_rng(42)


@pytest.fixture
def srgb():
    """Provide the default sRGB color space."""
    from chclt.space import SRGB_SPACE
    return SRGB_SPACE


@pytest.fixture
def random_colors(rng):
    """Linear RGB colors inside the unit cube, shape (64, 3)."""
    return rng.uniform(0.0, 1.0, size=(64, 3))
