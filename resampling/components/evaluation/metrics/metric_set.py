from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

from resampling.components.interfaces import MetricFn
from resampling.errors import InvalidConfiguration


class MetricSet(Mapping[str, MetricFn]):
    """Ordered, read-only mapping of metric name -> metric function.

    All members are evaluated together on one (observed, predicted) pair:

        ms = metric_set("rmse", "rsq")
        ms(y_true, y_pred)  # {"rmse": ..., "rsq": ...}
    """

    def __init__(self, metrics: Mapping[str, MetricFn]):
        if not metrics:
            raise InvalidConfiguration("A metric set needs at least one metric.")
        for name, fn in metrics.items():
            if not callable(fn):
                raise InvalidConfiguration(f"Metric {name!r} is not callable.")
        self._metrics: Tuple[Tuple[str, MetricFn], ...] = tuple(metrics.items())

    def __getitem__(self, name: str) -> MetricFn:
        for key, fn in self._metrics:
            if key == name:
                return fn
        raise KeyError(name)

    def __iter__(self) -> Iterator[str]:
        return (k for k, _ in self._metrics)

    def __len__(self) -> int:
        return len(self._metrics)

    def __call__(self, observed: Any, predicted: Any) -> Dict[str, float]:
        return {name: float(fn(observed, predicted)) for name, fn in self._metrics}

    def __repr__(self) -> str:
        return f"MetricSet({', '.join(self.keys())})"


def metric_set(*metrics: Union[str, MetricFn], **named: MetricFn) -> MetricSet:
    """Build a :class:`MetricSet` from registered names, bare functions (named by
    ``__name__``) and keyword ``name=function`` pairs."""
    from resampling.registries.metrics import get_metric

    items: Dict[str, MetricFn] = {}
    for m in metrics:
        if isinstance(m, str):
            items[m] = get_metric(m)
        elif callable(m):
            items[getattr(m, "__name__", repr(m))] = m
        else:
            raise InvalidConfiguration(f"Cannot use {m!r} as a metric.")
    items.update(named)
    return MetricSet(items)


def resolve_metrics(
    metrics: Optional[Union[MetricSet, Sequence[Union[str, MetricFn]], Mapping[str, MetricFn]]],
    *,
    numeric_outcome: bool = True,
) -> MetricSet:
    """Normalize the ``metrics`` argument of a run; ``None`` picks the defaults
    for the outcome type (rmse + rsq for numeric, accuracy otherwise)."""
    from .registry import DEFAULT_CLASSIFICATION_METRICS, DEFAULT_REGRESSION_METRICS

    if metrics is None:
        names = DEFAULT_REGRESSION_METRICS if numeric_outcome else DEFAULT_CLASSIFICATION_METRICS
        return metric_set(*names)
    if isinstance(metrics, MetricSet):
        return metrics
    if isinstance(metrics, Mapping):
        return MetricSet(dict(metrics))
    if isinstance(metrics, str):
        return metric_set(metrics)
    return metric_set(*metrics)
