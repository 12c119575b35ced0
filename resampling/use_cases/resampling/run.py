"""Resampled fit/evaluate (Evaluation Runner).

Each split is an independent job: fit on the analysis rows, predict the
assessment rows, compute the metric set, optionally keep predictions and an
extracted artifact. Jobs go to a parallel executor; results come back in split
order no matter which finished first. A failing split becomes a noted,
metric-less result and never stops the run.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from pydantic import ValidationError

from resampling.components.data.dataset import as_dataset
from resampling.components.evaluation.metrics.metric_set import resolve_metrics
from resampling.components.execution.executors import make_executor
from resampling.components.interfaces import ParallelExecutor
from resampling.components.predictors.functional import as_predictor
from resampling.components.splitters.types import ResampleCollection, Split
from resampling.contracts.control_configs import ControlModel
from resampling.contracts.results.resamples import SplitResult
from resampling.contracts.run_config import parse_run_config
from resampling.core.progress import ProgressCallback
from resampling.errors import InvalidConfiguration
from resampling.registries.splitters import make_resamples

from .jobs import SplitJob
from .types import ResampleResults

logger = logging.getLogger(__name__)


def _resolve_control(control: Any) -> ControlModel:
    if control is None:
        return ControlModel()
    if isinstance(control, ControlModel):
        return control
    try:
        return ControlModel.model_validate(control)
    except ValidationError as e:
        raise InvalidConfiguration(str(e)) from e


def fit_resamples(
    predictor: Any,
    resamples: ResampleCollection,
    data: Any,
    *,
    outcome: Optional[str] = None,
    metrics: Any = None,
    control: Any = None,
    extract: Optional[Callable[[Any], Any]] = None,
    executor: Optional[ParallelExecutor] = None,
    progress: Optional[ProgressCallback] = None,
    cancel: Any = None,
) -> ResampleResults:
    """Fit ``predictor`` on every split of ``resamples`` and evaluate it.

    Parameters
    ----------
    predictor
        Object with ``fit(data, outcome) -> fitted`` where ``fitted.predict(new_data)``
        returns one value per row; an unfitted scikit-learn estimator or a bare
        ``fit`` callable are adapted automatically.
    resamples
        Splits produced by :func:`~resampling.registries.splitters.make_resamples`.
    data
        A :class:`~resampling.components.data.Dataset`, or a DataFrame plus ``outcome``.
    metrics
        MetricSet, metric names, or a ``{name: fn}`` mapping. Defaults to
        rmse + rsq for a numeric outcome and accuracy otherwise.
    control
        :class:`ControlModel` (or dict): prediction retention, worker count,
        backend, timeout.
    extract
        Called with each fitted predictor; its return value is kept per split.
    executor
        Overrides the executor chosen from ``control``.
    progress
        Receives one update per finished split.
    cancel
        Object with ``is_set()`` (e.g. ``threading.Event``); once set, splits
        that have not finished are abandoned.
    """
    dataset = as_dataset(data, outcome)
    if not isinstance(resamples, ResampleCollection):
        raise InvalidConfiguration(
            f"resamples must be a ResampleCollection; got {type(resamples).__name__}."
        )
    if resamples.n != len(dataset):
        raise InvalidConfiguration(
            f"Resamples were made for {resamples.n} rows but the data has {len(dataset)}."
        )

    ctrl = _resolve_control(control)
    metric_set = resolve_metrics(metrics, numeric_outcome=dataset.outcome_is_numeric())
    predictor = as_predictor(predictor)
    if executor is None:
        executor = make_executor(ctrl.worker_count, ctrl.backend)

    splits: List[Split] = list(resamples)
    jobs = [
        SplitJob(
            split=split,
            dataset=dataset,
            predictor=predictor,
            metrics=metric_set,
            save_predictions=ctrl.save_predictions,
            extract=extract,
        )
        for split in splits
    ]

    total = len(jobs)
    done_level = logging.INFO if ctrl.verbose else logging.DEBUG
    logger.info(
        "Fitting %d %s split(s) with %s (%s)",
        total,
        resamples.strategy,
        type(executor).__name__,
        ", ".join(metric_set.keys()),
    )
    if progress is not None:
        progress.init(total=total, label=f"{resamples.strategy} resamples")

    finished = 0

    def _on_result(pos: int, res: SplitResult) -> None:
        nonlocal finished
        finished += 1
        logger.log(done_level, "Split %s finished (%d/%d)", res.label, finished, total)
        if progress is not None:
            progress.update(current=finished, label=res.label)

    raw = executor.run(jobs, on_result=_on_result, timeout=ctrl.timeout, cancel=cancel)

    results = [r for r in raw if r is not None]
    abandoned = [s.label for s, r in zip(splits, raw) if r is None]
    notes: List[str] = []
    if abandoned:
        msg = (
            f"{len(abandoned)} of {total} split(s) abandoned before finishing "
            f"(timeout or cancellation): {', '.join(abandoned)}"
        )
        notes.append(msg)
        logger.warning(msg)

    n_failed = sum(1 for r in results if r.failed)
    if n_failed:
        logger.warning("%d of %d split(s) failed; see show_notes()", n_failed, total)
    logger.info("Finished %d of %d split(s)", len(results), total)
    if progress is not None:
        progress.finalize(label=f"{len(results)}/{total} splits")

    return ResampleResults(
        results=results,
        strategy=resamples.strategy,
        outcome=dataset.outcome,
        metric_names=list(metric_set.keys()),
        control=ctrl,
        abandoned=abandoned,
        notes=notes,
    )


def run_resampling(
    predictor: Any,
    data: Any,
    *,
    outcome: Optional[str] = None,
    config: Any = None,
    metrics: Any = None,
    extract: Optional[Callable[[Any], Any]] = None,
    executor: Optional[ParallelExecutor] = None,
    progress: Optional[ProgressCallback] = None,
    cancel: Any = None,
) -> ResampleResults:
    """Generate splits from a :class:`ResampleRunConfig` payload and fit them.

    ``config`` holds ``resampling`` (strategy options) and ``control``.
    """
    cfg = parse_run_config(config if config is not None else {})
    dataset = as_dataset(data, outcome)
    resamples = make_resamples(dataset, cfg.resampling)
    return fit_resamples(
        predictor,
        resamples,
        dataset,
        metrics=metrics,
        control=cfg.control,
        extract=extract,
        executor=executor,
        progress=progress,
        cancel=cancel,
    )
