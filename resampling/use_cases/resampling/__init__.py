"""Resampled fit/evaluate orchestration.

- jobs: fit -> predict -> metrics -> extract for one split
- run: submit split jobs to an executor and reassemble them in split order
- aggregate: metric summaries and prediction/extract tables
- types: the run result container
"""

from .aggregate import (
    collect_extracts,
    collect_metrics,
    collect_predictions,
    metrics_long_frame,
    summarize_metrics,
)
from .jobs import SplitJob
from .run import fit_resamples, run_resampling
from .types import ResampleResults

__all__ = [
    "SplitJob",
    "fit_resamples",
    "run_resampling",
    "ResampleResults",
    "summarize_metrics",
    "collect_metrics",
    "metrics_long_frame",
    "collect_predictions",
    "collect_extracts",
]
