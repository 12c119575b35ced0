from .helpers import as_1d, check_len
from .metric_set import MetricSet, metric_set, resolve_metrics
from .registry import BUILTIN_METRICS

__all__ = [
    "as_1d",
    "check_len",
    "MetricSet",
    "metric_set",
    "resolve_metrics",
    "BUILTIN_METRICS",
]
