"""
Tests for unit-root diagnostics.

What we test
------------
1. White noise is found stationary.
2. An explosive series is found non-stationary.
3. check_unit_roots reports both series and the combined flag.
4. Short series are rejected.
5. The test runs without statsmodels deprecation warnings.
"""

from __future__ import annotations

import warnings

import numpy as np
import pytest

from spurious_cv.diagnostics import adf_test, check_unit_roots, summarize_unit_roots


def _explosive(seed: int, n: int = 100) -> np.ndarray:
    rng = np.random.RandomState(seed)
    return 1.05 ** np.arange(n) + rng.normal(scale=0.1, size=n)


def test_white_noise_is_stationary() -> None:
    noise = np.random.RandomState(0).normal(size=300)
    result = adf_test(noise)
    assert result["is_stationary"] is True
    assert result["p_value"] < 0.01
    assert set(result) >= {"adf_statistic", "lags_used", "critical_5%"}


def test_explosive_series_is_not_stationary() -> None:
    result = adf_test(_explosive(1))
    assert result["is_stationary"] is False
    assert result["p_value"] > 0.5


def test_missing_values_are_dropped() -> None:
    noise = np.random.RandomState(3).normal(size=200)
    noise[::20] = np.nan
    assert adf_test(noise)["num_observations"] < 200


def test_short_series_rejected() -> None:
    with pytest.raises(ValueError, match="too short"):
        adf_test(np.arange(5.0))


def test_check_unit_roots_both_nonstationary() -> None:
    check = check_unit_roots(_explosive(1), _explosive(2))
    assert check["both_nonstationary"] is True
    table = summarize_unit_roots(check)
    assert table.index.tolist() == ["response", "predictor"]
    assert not table["is_stationary"].any()


def test_check_unit_roots_with_stationary_predictor() -> None:
    noise = np.random.RandomState(0).normal(size=100)
    check = check_unit_roots(_explosive(1), noise)
    assert check["predictor"]["is_stationary"] is True
    assert check["both_nonstationary"] is False


def test_adf_test_emits_no_future_warning() -> None:
    noise = np.random.RandomState(4).normal(size=120)
    with warnings.catch_warnings():
        warnings.simplefilter("error", FutureWarning)
        result = adf_test(noise, autolag=None, max_lag=2)
    assert result["lags_used"] == 2
