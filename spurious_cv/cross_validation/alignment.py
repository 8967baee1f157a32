"""
Alignment of response and predictor series before cross-validation.

Series of different lengths are truncated to their common prefix. This is a
recoverable condition, so it is reported with a warning rather than an
exception.
"""

from typing import Tuple
import warnings
import numpy as np
import pandas as pd

from spurious_cv.forecasting.regression import ArrayLike


class SeriesLengthMismatchWarning(UserWarning):
    """Issued when response and predictor are truncated to a common length."""


def to_series(values: ArrayLike, name: str) -> pd.Series:
    """
    Convert a 1-D sequence to a float ``pd.Series``.

    A ``pd.Series`` keeps its index; anything else gets a ``RangeIndex``.
    """
    if isinstance(values, pd.DataFrame):
        if values.shape[1] != 1:
            raise ValueError(f"{name} must be one-dimensional, got {values.shape[1]} columns")
        values = values.iloc[:, 0]

    if isinstance(values, pd.Series):
        series = values.astype(float)
    else:
        array = np.asarray(values, dtype=float)
        if array.ndim != 1:
            raise ValueError(f"{name} must be one-dimensional, got shape {array.shape}")
        series = pd.Series(array)

    if len(series) == 0:
        raise ValueError(f"{name} must not be empty")

    return series.rename(name)


def align_series(
    response: ArrayLike,
    predictor: ArrayLike,
) -> Tuple[pd.Series, pd.Series]:
    """
    Truncate response and predictor to their common leading observations.

    Parameters
    ----------
    response : array-like
        Response series (y).
    predictor : array-like
        Predictor series (x).

    Returns
    -------
    response : pd.Series
        First ``min(len(response), len(predictor))`` response values.
    predictor : pd.Series
        First ``min(len(response), len(predictor))`` predictor values.

    Raises
    ------
    ValueError
        If either series is empty or not one-dimensional.

    Warns
    -----
    SeriesLengthMismatchWarning
        If the two series have different lengths.

    Notes
    -----
    Alignment is positional: the index labels of ``pd.Series`` inputs are
    kept but not matched against each other.

    Examples
    --------
    >>> y, x = align_series(air_passengers, rice_production)
    >>> print(f"Aligned length: {len(y)}")
    """
    y = to_series(response, "response")
    x = to_series(predictor, "predictor")

    if len(y) == len(x):
        return y, x

    common_length = min(len(y), len(x))
    warnings.warn(
        f"response has {len(y)} observations and predictor has {len(x)}; "
        f"truncating both to the first {common_length}",
        SeriesLengthMismatchWarning,
        stacklevel=2,
    )
    return y.iloc[:common_length], x.iloc[:common_length]
