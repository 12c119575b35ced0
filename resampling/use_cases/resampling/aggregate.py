"""Aggregation of per-split results.

Everything here is a pure function of the results passed in, so aggregating
the same results twice gives identical output.
"""

from __future__ import annotations

import math
import warnings
from typing import Any, Dict, List, Sequence

import numpy as np
import pandas as pd

from resampling.contracts.results.resamples import MetricSummary, SplitResult, SummaryResult
from resampling.errors import AggregationWarning, PredictionMismatchError


def _metric_names(results: Sequence[SplitResult]) -> List[str]:
    names: List[str] = []
    for r in results:
        for name in r.metrics:
            if name not in names:
                names.append(name)
    return names


def summarize_metrics(results: Sequence[SplitResult], *, warn: bool = True) -> SummaryResult:
    """Mean and standard error (``sd / sqrt(n)``, sample sd) per metric.

    A split contributes to a metric only when it produced a finite value;
    failed splits (and undefined values such as the ``rsq`` of a constant
    prediction) are left out of both the mean and ``n``. Metrics with fewer
    contributors than splits get an :class:`AggregationWarning`.
    """
    n_splits = len(results)
    summaries: List[MetricSummary] = []
    messages: List[str] = []

    for name in _metric_names(results):
        values = np.asarray(
            [r.metrics[name] for r in results if name in r.metrics and math.isfinite(r.metrics[name])],
            dtype=float,
        )
        n = int(values.shape[0])
        mean = float(np.mean(values)) if n else float("nan")
        std_err = float(np.std(values, ddof=1) / math.sqrt(n)) if n > 1 else float("nan")
        summaries.append(MetricSummary(metric=name, mean=mean, std_err=std_err, n=n))

        if n < n_splits:
            messages.append(f"{name}: only {n} of {n_splits} splits produced a value.")

    if warn:
        for msg in messages:
            warnings.warn(msg, AggregationWarning, stacklevel=2)

    return SummaryResult(metrics=summaries, n_splits=n_splits, warnings=messages)


def metrics_long_frame(results: Sequence[SplitResult]) -> pd.DataFrame:
    """Per-split metric values: one row per (split, metric)."""
    rows = [
        {"id": r.id, "id2": r.id2, "metric": name, "estimate": value}
        for r in results
        for name, value in r.metrics.items()
    ]
    return pd.DataFrame(rows, columns=["id", "id2", "metric", "estimate"])


def collect_metrics(results: Sequence[SplitResult], *, summarize: bool = True):
    """A :class:`SummaryResult` (default) or the per-split long table."""
    if summarize:
        return summarize_metrics(results)
    return metrics_long_frame(results)


def _raw_predictions(results: Sequence[SplitResult]) -> pd.DataFrame:
    rows: List[Dict[str, Any]] = []
    for pos, r in enumerate(results):
        if not r.predictions:
            continue
        for p in r.predictions:
            rows.append(
                {
                    "_pos": pos,
                    "id": r.id,
                    "id2": r.id2,
                    "row": p.row,
                    "observed": p.observed,
                    "predicted": p.predicted,
                }
            )
    frame = pd.DataFrame(rows, columns=["_pos", "id", "id2", "row", "observed", "predicted"])
    frame = frame.sort_values(["_pos", "row"], kind="stable").drop(columns="_pos")
    return frame.reset_index(drop=True)


def _first_mode(values: pd.Series) -> Any:
    counts: Dict[Any, int] = {}
    for v in values:
        counts[v] = counts.get(v, 0) + 1
    best = max(counts.values())
    # dicts keep insertion order: ties go to the first value seen
    return next(v for v, c in counts.items() if c == best)


def collect_predictions(results: Sequence[SplitResult], *, summarize: bool = False) -> pd.DataFrame:
    """Held-out predictions across splits.

    ``summarize=False``: one row per (split, assessment row), in split order.

    ``summarize=True``: one row per original row index. Numeric predictions
    are averaged, other predictions take their most frequent value. The
    observed outcome of a row must be the same in every occurrence; otherwise
    :class:`PredictionMismatchError` is raised.
    """
    frame = _raw_predictions(results)
    if not summarize:
        return frame
    if frame.empty:
        return pd.DataFrame(columns=["row", "observed", "predicted"])

    grouped = frame.groupby("row", sort=True)
    n_observed = grouped["observed"].nunique(dropna=False)
    bad = n_observed[n_observed > 1]
    if not bad.empty:
        row = int(bad.index[0])
        seen = frame.loc[frame["row"] == row, "observed"].drop_duplicates().tolist()
        raise PredictionMismatchError(row, seen)

    observed = grouped["observed"].agg(lambda s: s.iloc[0])
    pred = frame["predicted"]
    if pd.api.types.is_numeric_dtype(pred) and not pd.api.types.is_bool_dtype(pred):
        predicted = grouped["predicted"].mean()
    else:
        predicted = grouped["predicted"].agg(_first_mode)

    out = pd.DataFrame(
        {
            "row": observed.index.to_numpy(dtype=int),
            "observed": observed.to_numpy(),
            "predicted": predicted.to_numpy(),
        }
    )
    return out


def collect_extracts(results: Sequence[SplitResult]) -> pd.DataFrame:
    rows = [
        {"id": r.id, "id2": r.id2, "extract": item}
        for r in results
        if r.extracts is not None
        for item in r.extracts
    ]
    return pd.DataFrame(rows, columns=["id", "id2", "extract"])
