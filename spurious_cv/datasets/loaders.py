"""
Loaders for the annual series packaged with the library.

Both series trend upwards over the same decades for unrelated reasons, which
makes them a classic example of a regression that fits well in sample and
means nothing.

Source: the ``ausair`` and ``guinearice`` datasets of the fpp2 R package
(Hyndman, "Forecasting: Principles and Practice", 2nd ed.).
"""

from importlib import resources
import pandas as pd


DATA_PACKAGE = "spurious_cv.datasets.data"


def _load_annual_series(filename: str, value_column: str, name: str) -> pd.Series:
    with resources.files(DATA_PACKAGE).joinpath(filename).open("r") as handle:
        frame = pd.read_csv(handle)

    series = frame.set_index("year")[value_column].astype(float)
    series.index = series.index.astype(int)
    return series.rename(name)


def load_ausair() -> pd.Series:
    """
    Total annual air passengers of Australian air carriers, 1970-2016.

    Returns
    -------
    pd.Series
        Passengers in millions, indexed by year (47 observations).
    """
    return _load_annual_series("ausair.csv", "passengers", "ausair")


def load_guinearice() -> pd.Series:
    """
    Total annual rice production in Guinea, 1970-2011.

    Returns
    -------
    pd.Series
        Production in million tonnes, indexed by year (42 observations).
    """
    return _load_annual_series("guinearice.csv", "production", "guinearice")
