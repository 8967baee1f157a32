"""
Example datasets.

- ``load_ausair``: Australian air passengers, 1970-2016
- ``load_guinearice``: Guinea rice production, 1970-2011
"""

from spurious_cv.datasets.loaders import (
    load_ausair,
    load_guinearice,
)

__all__ = [
    "load_ausair",
    "load_guinearice",
]
