"""Registries.

Strategy names map to splitter factories; adding a strategy means registering
a factory, the rest of the library stays unchanged.
"""

from .splitters import list_strategies, make_resamples, make_splitter, register_splitter
from .metrics import get_metric, list_metrics, register_metric
