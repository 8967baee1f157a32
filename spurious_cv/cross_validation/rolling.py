"""
Rolling-origin (walk-forward) cross-validation of two forecasters.

At each origin ``t`` both forecasters see only the training window
``[0, t)`` and are scored on the observation ``h`` steps ahead, at position
``t + h - 1``. The origin then moves forward by one step.

```
origin t=initial:    [Train              ] . . [h]
origin t=initial+1:  [Train                ] . . [h]
origin t=initial+2:  [Train                  ] . . [h]
...
```

The training window expands from a fixed start, so every forecast uses all
history available at its origin.
"""

from dataclasses import dataclass
from typing import Generator, Optional, Tuple
import logging
import numpy as np
import pandas as pd

from spurious_cv.cross_validation.alignment import ArrayLike, align_series
from spurious_cv.forecasting import (
    ForecastError,
    naive_drift_forecast,
    regression_forecast,
)

logger = logging.getLogger(__name__)

DEFAULT_HORIZON = 1
DEFAULT_INITIAL = 20


def _validate_parameters(h: int, initial: int) -> None:
    if h < 1:
        raise ValueError(f"h must be >= 1, got {h}")
    if initial < 1:
        raise ValueError(f"initial must be >= 1, got {initial}")


@dataclass(frozen=True)
class RollingOriginSplit:
    """
    One rolling-origin evaluation point.

    Attributes
    ----------
    origin : int
        End (exclusive) of the training window.
    train_indices : np.ndarray
        Positions ``0 .. origin - 1``.
    test_index : int
        Position ``origin + horizon - 1`` being forecast.
    horizon : int
        Steps ahead of the training window.
    """

    origin: int
    train_indices: np.ndarray
    test_index: int
    horizon: int


class RollingOriginCV:
    """
    Expanding-window rolling-origin cross-validator.

    Parameters
    ----------
    horizon : int, default=1
        Forecast horizon ``h``.
    initial : int, default=20
        Minimum training window size (first origin).

    Notes
    -----
    Origins run over ``t = initial, initial + 1, ..., n - horizon``. Every
    test position lies strictly after its training window, so no test
    information leaks into training.

    Examples
    --------
    >>> cv = RollingOriginCV(horizon=1, initial=20)
    >>> for train_idx, test_idx in cv.split(y):
    ...     forecast = naive_drift_forecast(y[train_idx])
    ...     error = y[test_idx] - forecast
    """

    def __init__(self, horizon: int = DEFAULT_HORIZON, initial: int = DEFAULT_INITIAL):
        _validate_parameters(horizon, initial)
        self.horizon = horizon
        self.initial = initial

    def origins(self, num_samples: int) -> range:
        """Rolling origins for a series of ``num_samples`` observations."""
        return range(self.initial, num_samples - self.horizon + 1)

    def iter_splits(self, X) -> Generator[RollingOriginSplit, None, None]:
        """Yield a ``RollingOriginSplit`` for every origin."""
        num_samples = len(X)
        for origin in self.origins(num_samples):
            yield RollingOriginSplit(
                origin=origin,
                train_indices=np.arange(origin, dtype=np.int64),
                test_index=origin + self.horizon - 1,
                horizon=self.horizon,
            )

    def split(
        self,
        X,
        y: Optional[np.ndarray] = None,
        groups: Optional[np.ndarray] = None,
    ) -> Generator[Tuple[np.ndarray, np.ndarray], None, None]:
        """
        Generate indices to split data into training and test sets.

        Parameters
        ----------
        X : array-like
            Series or feature matrix; only its length is used.
        y : np.ndarray, optional
            Not used, for API compatibility.
        groups : np.ndarray, optional
            Not used, for API compatibility.

        Yields
        ------
        train_indices : np.ndarray
            Positions ``[0, t)``.
        test_indices : np.ndarray
            Single-element array holding ``t + h - 1``.
        """
        for fold in self.iter_splits(X):
            yield fold.train_indices, np.array([fold.test_index], dtype=np.int64)

    def get_n_splits(
        self,
        X=None,
        y: Optional[np.ndarray] = None,
        groups: Optional[np.ndarray] = None,
    ) -> int:
        """Return the number of rolling origins for ``X``."""
        if X is None:
            raise ValueError("X is required to count rolling origins")
        return len(self.origins(len(X)))


def _residual_at_origin(forecast_func, actual: float, h: int) -> float:
    """Residual ``actual - forecast`` at horizon ``h``; NaN when unavailable."""
    try:
        forecast = forecast_func()
    except ForecastError as exc:
        logger.debug("Forecast unavailable: %s", exc)
        return np.nan
    return actual - forecast[h - 1]


def rolling_residuals(
    response: ArrayLike,
    predictor: ArrayLike,
    h: int = DEFAULT_HORIZON,
    initial: int = DEFAULT_INITIAL,
) -> pd.DataFrame:
    """
    Per-origin forecast residuals for the regression and naive-drift models.

    Parameters
    ----------
    response : array-like
        Response series (y).
    predictor : array-like
        Predictor series (x). Truncated together with ``response`` to their
        common length (with a warning) when lengths differ.
    h : int, default=1
        Forecast horizon.
    initial : int, default=20
        Minimum training window size.

    Returns
    -------
    pd.DataFrame
        Indexed by origin ``t`` (named ``origin``), with columns:
        - 'regression': ``y[t+h-1]`` minus the regression forecast
        - 'naive': ``y[t+h-1]`` minus the naive-drift forecast
        Missing residuals are NaN. The frame is empty when the series is too
        short to hold a single origin.

    Raises
    ------
    ValueError
        If ``h < 1`` or ``initial < 1``.

    Notes
    -----
    Each origin is a pure function of the training window up to that
    origin. Origins are evaluated in order, but the result does not depend
    on that order.

    Examples
    --------
    >>> residuals = rolling_residuals(y, x, h=1, initial=20)
    >>> print(residuals.pow(2).mean())
    """
    _validate_parameters(h, initial)

    y_series, x_series = align_series(response, predictor)
    y = y_series.to_numpy()
    x = x_series.to_numpy()

    cv = RollingOriginCV(horizon=h, initial=initial)

    origins = []
    regression_errors = []
    naive_errors = []

    for fold in cv.iter_splits(y):
        t = fold.origin
        actual = y[fold.test_index]
        y_train = y[:t]
        x_train = x[:t]
        x_future = x[t:t + h]

        origins.append(t)
        regression_errors.append(_residual_at_origin(
            lambda: regression_forecast(y_train, x_train, x_future, h=h),
            actual,
            h,
        ))
        naive_errors.append(_residual_at_origin(
            lambda: naive_drift_forecast(y_train, h=h),
            actual,
            h,
        ))

    residuals = pd.DataFrame(
        {"regression": regression_errors, "naive": naive_errors},
        index=pd.Index(origins, name="origin", dtype=np.int64),
        dtype=float,
    )

    logger.debug(
        "Evaluated %d origins (h=%d, initial=%d): %d regression and %d naive "
        "residuals missing",
        len(residuals),
        h,
        initial,
        int(residuals["regression"].isna().sum()),
        int(residuals["naive"].isna().sum()),
    )

    return residuals
