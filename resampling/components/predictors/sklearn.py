from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np
import pandas as pd
from sklearn.base import clone


@dataclass
class FittedSklearnPredictor:
    """A fitted estimator plus the predictor columns it was trained on."""

    model: Any
    columns: list[str]

    def predict(self, new_data: pd.DataFrame) -> np.ndarray:
        missing = [c for c in self.columns if c not in new_data.columns]
        if missing:
            raise ValueError(f"New data is missing predictor columns: {missing}")
        return np.asarray(self.model.predict(new_data[self.columns]))


@dataclass
class SklearnPredictor:
    """Adapt a scikit-learn estimator to the ``fit(data, outcome)`` capability.

    Each call to :meth:`fit` trains a fresh ``clone`` of ``estimator``, so one
    instance can be shared by every split (and every worker).

    Parameters
    ----------
    estimator : Any
        Unfitted estimator or Pipeline exposing ``fit(X, y)`` and ``predict(X)``.
    predictors : sequence of str, optional
        Columns to train on. Defaults to every column except the outcome.
    """

    estimator: Any
    predictors: Optional[Sequence[str]] = None

    def fit(self, data: pd.DataFrame, outcome: str) -> FittedSklearnPredictor:
        if not hasattr(self.estimator, "fit"):
            raise AttributeError("`estimator` has no `.fit(...)` method.")
        if self.predictors is None:
            columns = [c for c in data.columns if c != outcome]
        else:
            columns = list(self.predictors)
        if not columns:
            raise ValueError("No predictor columns to fit on.")

        model = clone(self.estimator)
        model.fit(data[columns], data[outcome].to_numpy())
        return FittedSklearnPredictor(model=model, columns=columns)
