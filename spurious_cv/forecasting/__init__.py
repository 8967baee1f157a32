"""
Forecasting module for spurious regression detection.

Two competing one-step (or h-step) forecasters evaluated on the same
training window:

- **Regression**: OLS of the response on the predictor, applied to the
  predictor's future values.
- **Naive drift**: straight-line extrapolation from the first to the last
  training observation of the response.

A regression that cannot beat the naive drift out of sample has no real
predictive value, however significant it looks in sample.
"""

from spurious_cv.forecasting.regression import (
    ForecastError,
    fit_linear_model,
    regression_forecast,
)
from spurious_cv.forecasting.naive import (
    compute_drift,
    naive_drift_forecast,
)

__all__ = [
    # Errors
    "ForecastError",
    # Regression forecaster
    "fit_linear_model",
    "regression_forecast",
    # Naive forecaster
    "compute_drift",
    "naive_drift_forecast",
]
