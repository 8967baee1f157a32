"""
In-sample and holdout goodness of fit for a regression between two series.

A spurious regression typically shows a highly significant slope and a large
in-sample R-squared, while its R-squared on held-out data, measured against
the training mean, is close to zero or negative.
"""

from typing import Any, Dict
import numpy as np
import statsmodels.api as sm

from spurious_cv.cross_validation.alignment import ArrayLike, align_series
from spurious_cv.forecasting import fit_linear_model


def fit_summary(
    response: ArrayLike,
    predictor: ArrayLike,
    significance_level: float = 0.05,
) -> Dict[str, Any]:
    """
    Fit OLS of response on predictor over the full sample.

    Parameters
    ----------
    response : array-like
        Response series (y).
    predictor : array-like
        Predictor series (x). Truncated with ``response`` to a common
        length when lengths differ.
    significance_level : float, default=0.05
        Level for the slope's t-test.

    Returns
    -------
    dict
        Dictionary containing:
        - 'intercept': Fitted intercept
        - 'slope': Fitted slope
        - 'slope_p_value': Two-sided p-value of the slope
        - 'r_squared': In-sample R-squared
        - 'num_observations': Observations used
        - 'is_significant': True if slope_p_value < significance_level

    Raises
    ------
    ValueError
        If fewer than 3 complete observations are available.
    """
    y, x = align_series(response, predictor)
    complete = y.notna() & x.notna()
    y, x = y[complete], x[complete]

    if len(y) < 3:
        raise ValueError(
            f"At least 3 complete observations are required, got {len(y)}"
        )

    design = sm.add_constant(x.to_numpy(), has_constant="add")
    model = sm.OLS(y.to_numpy(), design).fit()

    return {
        "intercept": float(model.params[0]),
        "slope": float(model.params[1]),
        "slope_p_value": float(model.pvalues[1]),
        "r_squared": float(model.rsquared),
        "num_observations": int(model.nobs),
        "is_significant": bool(model.pvalues[1] < significance_level),
    }


def r_squared_vs_constant(
    actuals: np.ndarray,
    predictions: np.ndarray,
    constant: float,
) -> float:
    """
    Share of squared error around ``constant`` removed by ``predictions``.

    ``(MSE_null - MSE_model) / MSE_null`` with ``MSE_null`` the mean squared
    deviation of ``actuals`` from ``constant``. Negative when the model does
    worse than the constant.
    """
    mse_null = np.mean((actuals - constant) ** 2)
    mse_model = np.mean((actuals - predictions) ** 2)

    if mse_null == 0:
        raise ValueError("Actuals equal the constant; R-squared is undefined")

    return float((mse_null - mse_model) / mse_null)


def holdout_r_squared(
    response: ArrayLike,
    predictor: ArrayLike,
    train_size: int,
) -> Dict[str, float]:
    """
    Train and test R-squared of a regression fitted on the leading window.

    Parameters
    ----------
    response : array-like
        Response series (y).
    predictor : array-like
        Predictor series (x).
    train_size : int
        Number of leading observations used for fitting. The rest form the
        test set.

    Returns
    -------
    dict
        - 'train_r_squared': R-squared on the training window
        - 'test_r_squared': R-squared on the test window
        - 'train_size': Training observations
        - 'test_size': Test observations

    Raises
    ------
    ValueError
        If ``train_size`` leaves fewer than 2 training or 1 test point.

    Notes
    -----
    Both R-squared values use the *training* mean of the response as the
    null forecast, so the test value answers "does the model beat the
    in-sample average on new data?". For a spurious regression between
    random walks it is usually negative.

    Examples
    --------
    >>> scores = holdout_r_squared(y, x, train_size=80)
    >>> print(f"Train: {scores['train_r_squared']:.2f}")
    >>> print(f"Test: {scores['test_r_squared']:.2f}")
    """
    y_series, x_series = align_series(response, predictor)
    y = y_series.to_numpy()
    x = x_series.to_numpy()

    if train_size < 2 or train_size >= len(y):
        raise ValueError(
            f"train_size must be in [2, {len(y) - 1}], got {train_size}"
        )

    y_train, y_test = y[:train_size], y[train_size:]
    x_train, x_test = x[:train_size], x[train_size:]

    model = fit_linear_model(y_train, x_train)
    constant = float(np.mean(y_train))

    train_predictions = model.predict(x_train.reshape(-1, 1))
    test_predictions = model.predict(x_test.reshape(-1, 1))

    return {
        "train_r_squared": r_squared_vs_constant(y_train, train_predictions, constant),
        "test_r_squared": r_squared_vs_constant(y_test, test_predictions, constant),
        "train_size": train_size,
        "test_size": len(y_test),
    }
