"""
Naive-drift forecaster.

Extrapolates the straight line through the first and last observations of
the training window. It is the benchmark a regression on another series has
to beat: it uses nothing but the response's own history.
"""

import numpy as np

from spurious_cv.forecasting.regression import (
    ArrayLike,
    ForecastError,
    _as_float_array,
)


def compute_drift(y_train: ArrayLike) -> float:
    """
    Average per-step change between the first and last training values.

    Returns 0.0 for a single-observation window.
    """
    y = _as_float_array(y_train)
    if len(y) == 0:
        raise ForecastError("Training window is empty")
    if len(y) == 1:
        return 0.0
    return float((y[-1] - y[0]) / (len(y) - 1))


def naive_drift_forecast(
    y_train: ArrayLike,
    h: int = 1,
) -> np.ndarray:
    """
    Forecast ``h`` steps ahead with the random-walk-with-drift method.

    Parameters
    ----------
    y_train : array-like
        Response values ``y[0:t]``.
    h : int, default=1
        Forecast horizon.

    Returns
    -------
    np.ndarray
        ``y[t-1] + k * drift`` for ``k = 1..h``.

    Raises
    ------
    ForecastError
        If the window is empty or its endpoints are not finite.

    Notes
    -----
    With drift ``(y[t-1] - y[0]) / (t - 1)``, a perfectly linear window
    ``y[i] = a + b*i`` is continued exactly: ``a + b*(t - 1 + k)``.

    Examples
    --------
    >>> naive_drift_forecast([1.0, 2.0, 3.0], h=2)
    array([4., 5.])
    """
    if h < 1:
        raise ValueError(f"h must be >= 1, got {h}")

    y = _as_float_array(y_train)
    if len(y) == 0:
        raise ForecastError("Training window is empty")
    if not (np.isfinite(y[0]) and np.isfinite(y[-1])):
        raise ForecastError("Training window endpoints are not finite")

    drift = compute_drift(y)
    steps = np.arange(1, h + 1, dtype=float)
    return y[-1] + steps * drift
