from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from .common import JSONDict, Label, ResultModel


class PredictionRow(ResultModel):
    """One held-out prediction, keyed by the row's index in the source data."""

    row: int
    observed: Label
    predicted: Label


class SplitResult(ResultModel):
    """Outcome of fitting and evaluating one split.

    A failed split has no ``metrics`` and explains itself in ``notes``;
    ``errors`` carries the same failure as structured markers.
    """

    # extracts are caller-defined objects (fitted coefficients, models, ...)
    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    id: str
    id2: Optional[str] = None

    n_analysis: int = 0
    n_assessment: int = 0

    metrics: Dict[str, float] = Field(default_factory=dict)
    predictions: Optional[List[PredictionRow]] = None
    extracts: Optional[List[Any]] = None

    notes: List[str] = Field(default_factory=list)
    errors: List[JSONDict] = Field(default_factory=list)

    @property
    def label(self) -> str:
        return self.id if self.id2 is None else f"{self.id}/{self.id2}"

    @property
    def failed(self) -> bool:
        return bool(self.errors) and not self.metrics


class MetricSummary(ResultModel):
    metric: str
    mean: float
    std_err: float
    n: int


class SummaryResult(ResultModel):
    """Per-metric summary across splits."""

    metrics: List[MetricSummary] = Field(default_factory=list)
    n_splits: int = 0
    warnings: List[str] = Field(default_factory=list)

    def get(self, metric: str) -> MetricSummary:
        for m in self.metrics:
            if m.metric == metric:
                return m
        raise KeyError(f"No summary for metric {metric!r}")

    def to_frame(self):
        import pandas as pd

        rows = [
            {
                "metric": m.metric,
                "mean": m.mean,
                "std_err": m.std_err,
                "n": m.n,
            }
            for m in self.metrics
        ]
        return pd.DataFrame(rows, columns=["metric", "mean", "std_err", "n"])

    def __eq__(self, other: object) -> bool:
        # NaN standard errors (single contributing split) must still compare equal
        if not isinstance(other, SummaryResult):
            return NotImplemented
        if (self.n_splits, self.warnings) != (other.n_splits, other.warnings):
            return False
        if len(self.metrics) != len(other.metrics):
            return False
        for a, b in zip(self.metrics, other.metrics):
            if (a.metric, a.n) != (b.metric, b.n):
                return False
            for x, y in ((a.mean, b.mean), (a.std_err, b.std_err)):
                if not (x == y or (math.isnan(x) and math.isnan(y))):
                    return False
        return True
