"""
Unit-root testing for response and predictor series.

Spurious regressions arise between non-stationary series. These helpers run
the augmented Dickey-Fuller test on each series so a result from the
cross-validation check can be read alongside the stationarity evidence.
"""

from typing import Any, Dict, Optional
import pandas as pd
from statsmodels.tsa.stattools import adfuller

from spurious_cv.cross_validation.alignment import ArrayLike, align_series, to_series


MIN_ADF_OBSERVATIONS = 10


def adf_test(
    series: ArrayLike,
    max_lag: Optional[int] = None,
    regression: str = "c",
    autolag: Optional[str] = "AIC",
    significance_level: float = 0.05,
) -> Dict[str, Any]:
    """
    Unit-root check of one series with the augmented Dickey-Fuller test.

    Missing values are dropped first, so a series with gaps is tested on
    its observed values only. The series counts as stationary when the
    unit-root null is rejected at ``significance_level``.

    Parameters
    ----------
    series : array-like
        List, ndarray or pd.Series of observations.
    max_lag : int, optional
        Largest lag tried; None leaves the choice to statsmodels.
    regression : str, default='c'
        Deterministic terms of the test regression ('c', 'ct', 'ctt', 'n').
        Use 'ct' for series that trend, such as the packaged datasets.
    autolag : str, optional
        Lag selection rule passed through to ``adfuller``.
    significance_level : float, default=0.05
        Threshold applied to the p-value.

    Returns
    -------
    dict
        'adf_statistic', 'p_value', 'lags_used', 'num_observations',
        'critical_1%', 'critical_5%', 'critical_10%' and 'is_stationary'.

    Raises
    ------
    ValueError
        If fewer than ``MIN_ADF_OBSERVATIONS`` values remain after
        dropping missing ones.

    Examples
    --------
    >>> result = adf_test(load_ausair(), regression="ct")
    >>> print(f"p-value: {result['p_value']:.3f}")
    """
    clean_series = to_series(series, "series").dropna()

    if len(clean_series) < MIN_ADF_OBSERVATIONS:
        raise ValueError(
            f"Series too short for ADF test: {len(clean_series)} observations"
        )

    adf_result = adfuller(
        clean_series.to_numpy(),
        maxlag=max_lag,
        regression=regression,
        autolag=autolag,
        result_object=True,
    )
    critical_values = adf_result.critical_values

    return {
        "adf_statistic": float(adf_result.statistic),
        "p_value": float(adf_result.pvalue),
        "lags_used": int(adf_result.lags),
        "num_observations": int(adf_result.nobs),
        "critical_1%": critical_values["1%"],
        "critical_5%": critical_values["5%"],
        "critical_10%": critical_values["10%"],
        "is_stationary": bool(adf_result.pvalue < significance_level),
    }


def check_unit_roots(
    response: ArrayLike,
    predictor: ArrayLike,
    regression: str = "c",
    significance_level: float = 0.05,
) -> Dict[str, Any]:
    """
    Run ``adf_test`` on aligned response and predictor series.

    Returns
    -------
    dict
        - 'response': ADF result for the response
        - 'predictor': ADF result for the predictor
        - 'both_nonstationary': True if neither series rejects a unit root

    Examples
    --------
    >>> check = check_unit_roots(y, x)
    >>> if check['both_nonstationary']:
    ...     print("Regression in levels is at risk of being spurious")
    """
    y, x = align_series(response, predictor)

    response_result = adf_test(
        y, regression=regression, significance_level=significance_level
    )
    predictor_result = adf_test(
        x, regression=regression, significance_level=significance_level
    )

    return {
        "response": response_result,
        "predictor": predictor_result,
        "both_nonstationary": not (
            response_result["is_stationary"] or predictor_result["is_stationary"]
        ),
    }


def summarize_unit_roots(check: Dict[str, Any]) -> pd.DataFrame:
    """Tabulate a ``check_unit_roots`` result, one row per series."""
    rows = []
    for name in ("response", "predictor"):
        result = check[name]
        rows.append({
            "series": name,
            "adf_statistic": result["adf_statistic"],
            "p_value": result["p_value"],
            "is_stationary": result["is_stationary"],
        })
    return pd.DataFrame(rows).set_index("series")
