"""
Linear-regression forecaster.

This module fits an ordinary least-squares model of a response series on a
single predictor series over a training window, then forecasts the response
at future positions from the predictor values observed there.

The forecaster is deliberately "oracle-like" with respect to the predictor:
future predictor values are taken as given. Even with that advantage, a
regression between unrelated non-stationary series usually forecasts worse
than a naive drift, which is what makes the comparison informative.
"""

from typing import Sequence, Union
import numpy as np
import pandas as pd
from sklearn.linear_model import LinearRegression


ArrayLike = Union[Sequence[float], np.ndarray, pd.Series]


class ForecastError(ValueError):
    """Raised when a forecaster cannot produce a forecast for an origin."""


def _as_float_array(values: ArrayLike) -> np.ndarray:
    if isinstance(values, pd.Series):
        values = values.to_numpy()
    return np.asarray(values, dtype=float).ravel()


def fit_linear_model(
    y_train: ArrayLike,
    x_train: ArrayLike,
) -> LinearRegression:
    """
    Fit an OLS model of ``y_train`` on ``x_train`` (intercept + slope).

    Parameters
    ----------
    y_train : array-like
        Training response values.
    x_train : array-like
        Training predictor values, same length as ``y_train``.

    Returns
    -------
    LinearRegression
        Fitted scikit-learn estimator.

    Raises
    ------
    ForecastError
        If the window has fewer than 2 points, the lengths differ or any
        value is non-finite.
    """
    y = _as_float_array(y_train)
    x = _as_float_array(x_train)

    if len(y) != len(x):
        raise ForecastError(
            f"y_train and x_train must have the same length. "
            f"Got y_train: {len(y)}, x_train: {len(x)}"
        )
    if len(y) < 2:
        raise ForecastError(
            f"At least 2 training observations are required, got {len(y)}"
        )
    if not (np.isfinite(y).all() and np.isfinite(x).all()):
        raise ForecastError("Training window contains non-finite values")

    model = LinearRegression(fit_intercept=True)
    model.fit(x.reshape(-1, 1), y)
    return model


def regression_forecast(
    y_train: ArrayLike,
    x_train: ArrayLike,
    x_future: ArrayLike,
    h: int = 1,
) -> np.ndarray:
    """
    Forecast ``h`` future response values from a regression on the predictor.

    Parameters
    ----------
    y_train : array-like
        Response values ``y[0:t]``.
    x_train : array-like
        Predictor values ``x[0:t]``.
    x_future : array-like
        Predictor values at the future positions ``x[t:t+h]``. Only the
        first ``h`` values are used.
    h : int, default=1
        Forecast horizon.

    Returns
    -------
    np.ndarray
        Point forecasts of length ``h``; element ``k-1`` is the forecast
        for position ``t + k - 1``.

    Raises
    ------
    ForecastError
        If fewer than ``h`` future predictor values are available, or the
        model cannot be fitted (see ``fit_linear_model``).

    Examples
    --------
    >>> forecast = regression_forecast([1.0, 3.0, 5.0], [0.0, 1.0, 2.0], [3.0])
    >>> print(f"Forecast: {forecast[0]:.2f}")
    """
    if h < 1:
        raise ValueError(f"h must be >= 1, got {h}")

    x_new = _as_float_array(x_future)
    if len(x_new) < h:
        raise ForecastError(
            f"Need {h} future predictor values, got {len(x_new)}"
        )
    x_new = x_new[:h]
    if not np.isfinite(x_new).all():
        raise ForecastError("Future predictor values contain non-finite values")

    model = fit_linear_model(y_train, x_train)
    return model.predict(x_new.reshape(-1, 1))
