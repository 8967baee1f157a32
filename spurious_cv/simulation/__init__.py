"""
Simulation module for spurious regression studies.

Generates independent series pairs (random walks, optionally with drift and
a deterministic trend) and measures how often the rolling-origin check
flags a regression between them as spurious.
"""

from spurious_cv.simulation.random_walks import (
    simulate_random_walk,
    simulate_random_walk_pair,
)
from spurious_cv.simulation.study import (
    compare_horizons,
    spurious_detection_rate,
)

__all__ = [
    # Series generation
    "simulate_random_walk",
    "simulate_random_walk_pair",
    # Detection studies
    "spurious_detection_rate",
    "compare_horizons",
]
