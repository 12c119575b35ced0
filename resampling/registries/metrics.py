from __future__ import annotations

from typing import Callable

from resampling.components.evaluation.metrics.registry import BUILTIN_METRICS
from resampling.components.interfaces import MetricFn
from resampling.errors import InvalidConfiguration
from resampling.registries.base import Registry

_METRICS: Registry[str, MetricFn] = Registry(_name="metrics")

for _name, _fn in BUILTIN_METRICS.items():
    _METRICS.register(_name)(_fn)


def register_metric(name: str, *, replace: bool = False) -> Callable[[MetricFn], MetricFn]:
    """Register a custom ``(observed, predicted) -> float`` metric by name."""
    return _METRICS.register(name, replace=replace)


def get_metric(name: str) -> MetricFn:
    fn = _METRICS.try_get(name)
    if fn is None:
        raise InvalidConfiguration(
            f"Unknown metric {name!r}. Supported: {list_metrics()}"
        )
    return fn


def list_metrics() -> list[str]:
    return _METRICS.names()
