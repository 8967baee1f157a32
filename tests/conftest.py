"""
Shared pytest fixtures for the spurious_cv test suite.

Provides:
  - ``random_walk``: a reproducible driftless random walk of length 60.
  - ``independent_walks``: two independent random walks of length 60.
  - ``linear_pair``: a response that is an exact linear function of a
    random-walk predictor.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def random_walk() -> np.ndarray:
    """A seeded driftless random walk of 60 observations."""
    rng = np.random.RandomState(123)
    return np.cumsum(rng.normal(size=60))


@pytest.fixture
def independent_walks() -> pd.DataFrame:
    """Two independent seeded random walks in columns 'y' and 'x'."""
    rng = np.random.RandomState(2024)
    return pd.DataFrame({
        "y": np.cumsum(rng.normal(size=60)),
        "x": np.cumsum(rng.normal(size=60)),
    })


@pytest.fixture
def linear_pair(random_walk: np.ndarray) -> pd.DataFrame:
    """Response ``3 + 2 * x`` with no noise, for a random-walk predictor x."""
    return pd.DataFrame({"y": 3.0 + 2.0 * random_walk, "x": random_walk})
