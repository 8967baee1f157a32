"""
Tests for rolling-origin splits and per-origin residuals.

What we test
------------
1. Origins run from ``initial`` to ``n - h`` inclusive.
2. Training windows are ``[0, t)`` and the test position is ``t + h - 1``.
3. No leakage: every test position lies after its training window.
4. Residuals equal ``actual - forecast`` for both models.
5. Forecast failures become NaN residuals instead of exceptions.
6. Parameter validation.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from spurious_cv.cross_validation import RollingOriginCV, rolling_residuals
from spurious_cv.forecasting import naive_drift_forecast, regression_forecast


# ── Splits ─────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("h,expected", [(1, 5), (3, 3)])
def test_number_of_origins(h: int, expected: int) -> None:
    cv = RollingOriginCV(horizon=h, initial=20)
    assert cv.get_n_splits(np.zeros(25)) == expected


def test_split_structure() -> None:
    cv = RollingOriginCV(horizon=2, initial=3)
    n = 7
    splits = list(cv.split(np.zeros(n)))
    assert [len(train) for train, _ in splits] == [3, 4, 5]
    # last origin n - h forecasts the final observation
    assert splits[-1][1].tolist() == [n - 1]
    for train, test in splits:
        t = len(train)
        assert train.tolist() == list(range(t))
        assert test.tolist() == [t + 1]


def test_no_leakage() -> None:
    cv = RollingOriginCV(horizon=3, initial=5)
    for fold in cv.iter_splits(np.zeros(30)):
        assert fold.test_index > fold.train_indices.max()
        assert fold.test_index == fold.origin + fold.horizon - 1


def test_too_short_series_has_no_origins() -> None:
    cv = RollingOriginCV(horizon=1, initial=20)
    assert list(cv.split(np.zeros(20))) == []


def test_get_n_splits_requires_data() -> None:
    with pytest.raises(ValueError, match="X is required"):
        RollingOriginCV().get_n_splits()


@pytest.mark.parametrize("h,initial", [(0, 20), (1, 0), (-1, 5)])
def test_invalid_parameters(h: int, initial: int) -> None:
    with pytest.raises(ValueError, match="must be >= 1"):
        RollingOriginCV(horizon=h, initial=initial)


# ── Residuals ──────────────────────────────────────────────────────────────────

def test_residual_frame_shape(independent_walks: pd.DataFrame) -> None:
    residuals = rolling_residuals(independent_walks["y"], independent_walks["x"])
    assert residuals.columns.tolist() == ["regression", "naive"]
    assert residuals.index.name == "origin"
    assert residuals.index.tolist() == list(range(20, 60))


def test_residuals_match_forecasters(independent_walks: pd.DataFrame) -> None:
    y = independent_walks["y"].to_numpy()
    x = independent_walks["x"].to_numpy()
    h = 2
    residuals = rolling_residuals(y, x, h=h, initial=10)

    for t in (10, 25, 58):
        actual = y[t + h - 1]
        expected_regression = actual - regression_forecast(y[:t], x[:t], x[t:t + h], h=h)[h - 1]
        expected_naive = actual - naive_drift_forecast(y[:t], h=h)[h - 1]
        assert residuals.loc[t, "regression"] == pytest.approx(expected_regression)
        assert residuals.loc[t, "naive"] == pytest.approx(expected_naive)


def test_regression_failure_becomes_missing() -> None:
    """With initial=1 the first origin has a single training point."""
    y = [1.0, 2.0, 4.0, 7.0]
    x = [1.0, 3.0, 2.0, 5.0]
    residuals = rolling_residuals(y, x, h=1, initial=1)
    assert np.isnan(residuals.loc[1, "regression"])
    assert residuals.loc[1, "naive"] == pytest.approx(1.0)
    assert residuals.loc[2:, "regression"].notna().all()


def test_missing_actual_gives_missing_residuals(random_walk: np.ndarray) -> None:
    y = random_walk.copy()
    y[30] = np.nan
    residuals = rolling_residuals(y, random_walk, h=1, initial=20)
    assert residuals.loc[30].isna().all()


def test_series_shorter_than_initial_gives_empty_frame() -> None:
    residuals = rolling_residuals(np.arange(10.0), np.arange(10.0), initial=20)
    assert residuals.empty


def test_invalid_horizon_rejected(random_walk: np.ndarray) -> None:
    with pytest.raises(ValueError, match="h must be >= 1"):
        rolling_residuals(random_walk, random_walk, h=0)
