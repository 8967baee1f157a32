"""
Classical diagnostics for regressions between time series.

Complements the cross-validation check with the evidence usually inspected
first:

- **In-sample fit**: slope significance and R-squared (``fit_summary``)
- **Holdout fit**: R-squared on held-out data against the training mean
  (``holdout_r_squared``)
- **Unit roots**: augmented Dickey-Fuller test on both series
  (``adf_test``, ``check_unit_roots``)
"""

from spurious_cv.diagnostics.fit import (
    fit_summary,
    holdout_r_squared,
    r_squared_vs_constant,
)
from spurious_cv.diagnostics.stationarity import (
    adf_test,
    check_unit_roots,
    summarize_unit_roots,
)

__all__ = [
    # Goodness of fit
    "fit_summary",
    "holdout_r_squared",
    "r_squared_vs_constant",
    # Stationarity
    "adf_test",
    "check_unit_roots",
    "summarize_unit_roots",
]
