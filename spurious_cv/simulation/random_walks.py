"""
Synthetic series pairs for testing spurious regression detection.

Each pair consists of two *independent* series, so any regression between
them is spurious by construction.
"""

from typing import Optional
import numpy as np
import pandas as pd


def simulate_random_walk(
    n: int = 60,
    drift: float = 0.0,
    trend: float = 0.0,
    noise_std: float = 1.0,
    random_state: Optional[np.random.RandomState] = None,
) -> np.ndarray:
    """
    Simulate ``cumsum(drift + noise) + trend * i`` for ``i = 0 .. n-1``.

    Parameters
    ----------
    n : int, default=60
        Number of observations.
    drift : float, default=0.0
        Mean of each random-walk step.
    trend : float, default=0.0
        Slope of an added deterministic linear trend.
    noise_std : float, default=1.0
        Standard deviation of the Gaussian steps.
    random_state : np.random.RandomState, optional
        Generator to draw from. If None, a fresh unseeded one is used.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if noise_std < 0:
        raise ValueError(f"noise_std must be >= 0, got {noise_std}")

    rng = random_state if random_state is not None else np.random.RandomState()
    steps = drift + rng.normal(0.0, noise_std, size=n)
    return np.cumsum(steps) + trend * np.arange(n)


def simulate_random_walk_pair(
    n: int = 60,
    drift: float = 0.0,
    trend: float = 0.0,
    noise_std: float = 1.0,
    random_state: Optional[int] = None,
) -> pd.DataFrame:
    """
    Generate two independent random walks sharing the same parameters.

    Parameters
    ----------
    n : int, default=60
        Number of observations in each series.
    drift : float, default=0.0
        Mean step size of both walks.
    trend : float, default=0.0
        Deterministic trend slope added to both walks.
    noise_std : float, default=1.0
        Step standard deviation.
    random_state : int, optional
        Random seed for reproducibility.

    Returns
    -------
    pd.DataFrame
        Columns 'y' (response) and 'x' (predictor), indexed ``0 .. n-1``.

    Notes
    -----
    With ``drift = trend = 0`` this is the textbook spurious-regression
    setting: two driftless random walks. Adding a drift or a trend gives
    both series a common direction, which makes the in-sample fit look
    even better while the series remain unrelated.

    Examples
    --------
    >>> pair = simulate_random_walk_pair(n=60, random_state=1)
    >>> result = detect_spurious_regression(pair['y'], pair['x'])
    """
    rng = np.random.RandomState(random_state)
    y = simulate_random_walk(n, drift, trend, noise_std, random_state=rng)
    x = simulate_random_walk(n, drift, trend, noise_std, random_state=rng)
    return pd.DataFrame({"y": y, "x": x})
