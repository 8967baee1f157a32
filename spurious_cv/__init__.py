"""
Spurious regression detection by rolling-origin cross-validation.

A regression between two non-stationary series can look highly significant
without carrying any predictive information. This package cross-validates
such a regression against a naive-drift forecast of the response: when the
regression forecasts worse than the drift, it is flagged as spurious.

Subpackages:
- ``forecasting``: regression and naive-drift forecasters
- ``cross_validation``: alignment, rolling-origin residuals, comparison
- ``diagnostics``: in-sample/holdout fit and unit-root tests
- ``simulation``: random-walk pairs and detection-rate studies
- ``datasets``: example annual series
"""

from spurious_cv.cross_validation import (
    CVResult,
    InsufficientDataError,
    SeriesLengthMismatchWarning,
    detect_spurious_regression,
)
from spurious_cv.forecasting import ForecastError

__version__ = "0.1.0"

__all__ = [
    "CVResult",
    "ForecastError",
    "InsufficientDataError",
    "SeriesLengthMismatchWarning",
    "detect_spurious_regression",
]
