"""
Tests for Monte Carlo detection-rate studies.

What we test
------------
1. Independent driftless random walks are flagged in the large majority of
   trials.
2. With a strong common trend, a longer horizon does not raise the
   detection rate over the same simulated pairs.
3. Result structure, confidence interval and reproducibility.
4. Parallel and sequential runs agree.
5. Parameter validation, including the valid range of base seeds.
"""

from __future__ import annotations

import pytest

from spurious_cv.simulation import compare_horizons, spurious_detection_rate


def test_independent_random_walks_mostly_spurious() -> None:
    study = spurious_detection_rate(n_trials=200, n=60, h=1, initial=20, random_state=0)
    assert study["n_trials"] == 200
    assert study["detection_rate"] >= 0.9


def test_longer_horizon_does_not_raise_detection_rate() -> None:
    table = compare_horizons(
        horizons=(1, 3),
        n_trials=60,
        n=60,
        initial=20,
        drift=0.5,
        trend=1.0,
        random_state=7,
    )
    rates = table.set_index("horizon")["detection_rate"]
    assert rates[3] <= rates[1]


def test_study_structure_and_interval() -> None:
    study = spurious_detection_rate(n_trials=10, random_state=3)
    assert set(study) == {
        "detection_rate", "n_spurious", "n_trials", "ci_lower", "ci_upper", "random_state",
    }
    assert study["detection_rate"] == study["n_spurious"] / 10
    assert 0.0 <= study["ci_lower"] <= study["detection_rate"] <= study["ci_upper"] <= 1.0
    assert study["random_state"] == 3


def test_study_is_reproducible() -> None:
    a = spurious_detection_rate(n_trials=15, random_state=42)
    b = spurious_detection_rate(n_trials=15, random_state=42)
    assert a == b


def test_parallel_matches_sequential() -> None:
    sequential = spurious_detection_rate(n_trials=8, random_state=5, num_threads=1)
    parallel = spurious_detection_rate(n_trials=8, random_state=5, num_threads=2)
    assert parallel["n_spurious"] == sequential["n_spurious"]


def test_compare_horizons_table() -> None:
    table = compare_horizons(horizons=(1, 2), n_trials=5, random_state=1)
    assert table["horizon"].tolist() == [1, 2]
    assert (table["n_trials"] == 5).all()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n_trials": 0},
        {"num_threads": 0},
        {"n": 20, "initial": 20, "h": 1},
    ],
)
def test_invalid_parameters(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        spurious_detection_rate(random_state=0, **kwargs)


def test_compare_horizons_requires_horizons() -> None:
    with pytest.raises(ValueError, match="horizons"):
        compare_horizons(horizons=())


def test_highest_valid_base_seed() -> None:
    study = spurious_detection_rate(n_trials=3, random_state=2**32 - 3)
    assert study["n_trials"] == 3


@pytest.mark.parametrize("random_state", [-1, 2**32 - 5])
def test_base_seed_out_of_range(random_state: int) -> None:
    with pytest.raises(ValueError, match="random_state must be in"):
        spurious_detection_rate(n_trials=10, random_state=random_state)
