"""
Cross-Validation module for spurious regression detection.

This module evaluates a regression between two time series out of sample,
by rolling-origin cross-validation against a naive-drift benchmark.

Key Concepts:
- **Alignment**: Response and predictor are truncated to a common length
- **Rolling origin**: Train on ``[0, t)``, forecast ``t + h - 1``, move ``t``
- **Symmetric masking**: Both MSEs use exactly the same origins
- **Spurious**: Regression CV-MSE strictly above the naive-drift CV-MSE

Why In-Sample Fit Misleads:
1. Two independent random walks often regress with a "significant" slope
2. The in-sample R-squared rewards shared trends, not shared information
3. Out-of-sample, such a regression loses to the response's own drift
"""

from spurious_cv.cross_validation.alignment import (
    SeriesLengthMismatchWarning,
    align_series,
    to_series,
)
from spurious_cv.cross_validation.rolling import (
    DEFAULT_HORIZON,
    DEFAULT_INITIAL,
    RollingOriginCV,
    RollingOriginSplit,
    rolling_residuals,
)
from spurious_cv.cross_validation.comparison import (
    CVResult,
    InsufficientDataError,
    compare_residuals,
    detect_spurious_regression,
    paired_residuals,
)

__all__ = [
    # Alignment
    "SeriesLengthMismatchWarning",
    "align_series",
    "to_series",
    # Rolling-origin cross-validation
    "DEFAULT_HORIZON",
    "DEFAULT_INITIAL",
    "RollingOriginCV",
    "RollingOriginSplit",
    "rolling_residuals",
    # Comparison
    "CVResult",
    "InsufficientDataError",
    "compare_residuals",
    "detect_spurious_regression",
    "paired_residuals",
]
