"""
Paired comparison of regression and naive-drift residuals.

Both mean squared errors are computed over exactly the same origins: an
origin where either model has no residual is dropped for both. The
regression is flagged as spurious when its cross-validated MSE is strictly
larger than the naive drift's.
"""

from dataclasses import dataclass
import logging
import pandas as pd

from spurious_cv.cross_validation.alignment import ArrayLike
from spurious_cv.cross_validation.rolling import (
    DEFAULT_HORIZON,
    DEFAULT_INITIAL,
    rolling_residuals,
)

logger = logging.getLogger(__name__)


class InsufficientDataError(ValueError):
    """Raised when no origin has residuals from both models."""


@dataclass(frozen=True)
class CVResult:
    """
    Outcome of a spurious-regression check.

    Attributes
    ----------
    mse_regression : float
        Cross-validated MSE of the regression forecaster.
    mse_naive : float
        Cross-validated MSE of the naive-drift forecaster.
    is_spurious : bool
        ``mse_regression > mse_naive``.
    n_origins : int
        Number of origins both MSEs were computed over.
    """

    mse_regression: float
    mse_naive: float
    is_spurious: bool
    n_origins: int


def paired_residuals(residuals: pd.DataFrame) -> pd.DataFrame:
    """
    Keep only origins where both 'regression' and 'naive' residuals exist.

    Returns a filtered copy; the input frame is not modified.
    """
    missing = [c for c in ("regression", "naive") if c not in residuals.columns]
    if missing:
        raise ValueError(f"residuals is missing columns: {missing}")

    both_present = residuals["regression"].notna() & residuals["naive"].notna()
    return residuals.loc[both_present, ["regression", "naive"]]


def compare_residuals(residuals: pd.DataFrame) -> CVResult:
    """
    Compare cross-validated MSEs over the origins shared by both models.

    Parameters
    ----------
    residuals : pd.DataFrame
        Per-origin residuals with 'regression' and 'naive' columns, as
        returned by ``rolling_residuals``. NaN marks a missing residual.

    Returns
    -------
    CVResult
        MSEs, spurious flag and number of origins compared.

    Raises
    ------
    InsufficientDataError
        If no origin has both residuals.

    Notes
    -----
    Ties are not flagged: a regression that does exactly as well as the
    naive drift is given the benefit of the doubt.
    """
    paired = paired_residuals(residuals)

    if len(paired) == 0:
        raise InsufficientDataError(
            "insufficient overlapping data for comparison: "
            f"0 of {len(residuals)} origins have both residuals"
        )

    squared = paired.pow(2)
    mse_regression = float(squared["regression"].mean())
    mse_naive = float(squared["naive"].mean())

    logger.debug(
        "Compared %d of %d origins: mse_regression=%.6g, mse_naive=%.6g",
        len(paired),
        len(residuals),
        mse_regression,
        mse_naive,
    )

    return CVResult(
        mse_regression=mse_regression,
        mse_naive=mse_naive,
        is_spurious=bool(mse_regression > mse_naive),
        n_origins=len(paired),
    )


def detect_spurious_regression(
    response: ArrayLike,
    predictor: ArrayLike,
    h: int = DEFAULT_HORIZON,
    initial: int = DEFAULT_INITIAL,
) -> CVResult:
    """
    Check whether a regression of ``response`` on ``predictor`` is spurious.

    Runs rolling-origin cross-validation of an OLS regression on the
    predictor against a naive-drift forecast of the response, and compares
    their MSEs over the same origins.

    Parameters
    ----------
    response : array-like
        Response series (y).
    predictor : array-like
        Predictor series (x). When lengths differ both series are truncated
        to their common prefix and a ``SeriesLengthMismatchWarning`` is
        issued.
    h : int, default=1
        Forecast horizon.
    initial : int, default=20
        Minimum training window size.

    Returns
    -------
    CVResult
        ``mse_regression``, ``mse_naive``, ``is_spurious`` and
        ``n_origins``.

    Raises
    ------
    ValueError
        If inputs are empty or ``h``/``initial`` are below 1.
    InsufficientDataError
        If no origin yields residuals from both models, for instance when
        the series is shorter than ``initial + h``.

    Examples
    --------
    >>> result = detect_spurious_regression(air_passengers, rice_production)
    >>> if result.is_spurious:
    ...     print("Regression forecasts worse than a naive drift")
    >>> print(f"CV MSE: {result.mse_regression:.3f} vs {result.mse_naive:.3f}")
    """
    residuals = rolling_residuals(response, predictor, h=h, initial=initial)
    return compare_residuals(residuals)
