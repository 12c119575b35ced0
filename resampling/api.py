"""Public API.

This module is the **stable public surface** of the library. Prefer importing
from here instead of reaching into internal subpackages:

    from resampling.api import make_resamples, fit_resamples, metric_set

Typical flow:

    ds = Dataset(frame=housing, outcome="price")
    folds = make_resamples(ds, strategy="kfold", v=10, seed=55)
    res = fit_resamples(SklearnPredictor(RandomForestRegressor()), folds, ds,
                        control={"save_predictions": True})
    res.collect_metrics()          # mean / std_err / n per metric
    res.collect_predictions(summarize=True)
"""

from __future__ import annotations

from resampling.components.data.dataset import Dataset, as_dataset
from resampling.components.evaluation.metrics.metric_set import MetricSet, metric_set
from resampling.components.execution.executors import (
    JoblibExecutor,
    SequentialExecutor,
    ThreadExecutor,
    make_executor,
)
from resampling.components.predictors import NullModel, SklearnPredictor
from resampling.components.splitters.types import ResampleCollection, Split
from resampling.contracts.control_configs import ControlModel
from resampling.contracts.results.resamples import (
    MetricSummary,
    PredictionRow,
    SplitResult,
    SummaryResult,
)
from resampling.contracts.run_config import ResampleRunConfig
from resampling.contracts.split_configs import parse_split_config
from resampling.core.progress import LogProgress, ProgressCallback
from resampling.errors import (
    AggregationWarning,
    InvalidConfiguration,
    PredictionMismatchError,
    SplitExecutionError,
)
from resampling.registries.metrics import list_metrics, register_metric
from resampling.registries.splitters import list_strategies, make_resamples
from resampling.use_cases.resampling import (
    ResampleResults,
    collect_extracts,
    collect_metrics,
    collect_predictions,
    fit_resamples,
    run_resampling,
    summarize_metrics,
)

__all__ = [
    # data + splits
    "Dataset",
    "as_dataset",
    "Split",
    "ResampleCollection",
    "make_resamples",
    "list_strategies",
    "parse_split_config",
    # metrics
    "MetricSet",
    "metric_set",
    "register_metric",
    "list_metrics",
    # predictors
    "NullModel",
    "SklearnPredictor",
    # execution
    "SequentialExecutor",
    "ThreadExecutor",
    "JoblibExecutor",
    "make_executor",
    "ProgressCallback",
    "LogProgress",
    # runner + aggregation
    "ControlModel",
    "ResampleRunConfig",
    "fit_resamples",
    "run_resampling",
    "ResampleResults",
    "collect_metrics",
    "summarize_metrics",
    "collect_predictions",
    "collect_extracts",
    # results
    "SplitResult",
    "PredictionRow",
    "MetricSummary",
    "SummaryResult",
    # errors
    "InvalidConfiguration",
    "SplitExecutionError",
    "AggregationWarning",
    "PredictionMismatchError",
]
