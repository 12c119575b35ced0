from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from resampling.components.data.dataset import Dataset
from resampling.components.evaluation.metrics.helpers import as_1d
from resampling.components.evaluation.metrics.metric_set import MetricSet
from resampling.components.splitters.types import Split
from resampling.contracts.choices import StageName
from resampling.contracts.results.resamples import SplitResult
from resampling.errors import SplitExecutionError
from resampling.reporting.common.report_errors import record_error
from resampling.reporting.prediction.prediction_table import build_prediction_rows

logger = logging.getLogger(__name__)


@dataclass
class SplitJob:
    """Fit and evaluate one split; calling the job returns its :class:`SplitResult`.

    The job only carries the split's index arrays and references to the shared,
    read-only dataset, predictor and metric set. Analysis/assessment frames are
    built inside the call, so nothing split-specific is materialized before a
    worker picks the job up. Jobs are picklable whenever the predictor, metrics
    and ``extract`` are.
    """

    split: Split
    dataset: Dataset
    predictor: Any
    metrics: MetricSet
    save_predictions: bool = False
    extract: Optional[Callable[[Any], Any]] = None

    def _stage(self, stage: StageName, fn: Callable[..., Any], *args: Any) -> Any:
        try:
            return fn(*args)
        except Exception as e:
            raise SplitExecutionError(self.split.label, stage, e) from e

    def _fit(self) -> Any:
        analysis = self.dataset.subset(self.split.analysis)
        return self.predictor.fit(analysis, self.dataset.outcome)

    def _predict(self, fitted: Any) -> Tuple[np.ndarray, np.ndarray]:
        assessment = self.dataset.subset(self.split.assessment)
        observed = self.dataset.outcome_values(assessment)
        predicted = as_1d(fitted.predict(self.dataset.predictors(assessment)))
        if predicted.shape[0] != observed.shape[0]:
            raise ValueError(
                f"predict returned {predicted.shape[0]} values for "
                f"{observed.shape[0]} assessment rows."
            )
        return observed, predicted

    def _evaluate(self, observed: np.ndarray, predicted: np.ndarray) -> Dict[str, float]:
        return self.metrics(observed, predicted)

    def __call__(self) -> SplitResult:
        split = self.split
        notes: List[str] = []
        errors: List[Dict[str, Any]] = []
        base = dict(
            id=split.id,
            id2=split.id2,
            n_analysis=split.n_analysis,
            n_assessment=split.n_assessment,
        )

        try:
            fitted = self._stage("fit", self._fit)
            observed, predicted = self._stage("predict", self._predict, fitted)
            metrics = self._stage("metrics", self._evaluate, observed, predicted)
        except SplitExecutionError as err:
            record_error(errors, notes, where=err.stage, exc=err.cause, context={"split": split.label})
            logger.warning("%s", err)
            return SplitResult(**base, notes=notes, errors=errors)

        predictions = None
        if self.save_predictions:
            predictions = build_prediction_rows(
                rows=split.assessment, observed=observed, predicted=predicted
            )

        extracts = None
        if self.extract is not None:
            try:
                extracts = [self.extract(fitted)]
            except Exception as e:
                # metrics stay valid; only the artifact is missing
                record_error(errors, notes, where="extract", exc=e, context={"split": split.label})
                logger.warning("%s: extract failed: %s: %s", split.label, type(e).__name__, e)

        return SplitResult(
            **base,
            metrics=metrics,
            predictions=predictions,
            extracts=extracts,
            notes=notes,
            errors=errors,
        )
