"""Built-in metric definitions.

Every metric is a pure ``(observed, predicted) -> float``. Regression metrics
follow the usual tidy-modelling names (``rmse``, ``rsq``, ...); ``rsq`` is the
squared correlation between observed and predicted values, ``rsq_trad`` the
traditional coefficient of determination.
"""

from __future__ import annotations

from typing import Callable, Dict

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    balanced_accuracy_score,
    cohen_kappa_score,
    explained_variance_score,
    mean_absolute_error,
    mean_absolute_percentage_error,
    mean_squared_error,
    r2_score,
)

from .helpers import as_1d, check_len


def _rsq(y: np.ndarray, yhat: np.ndarray) -> float:
    y = np.asarray(y, dtype=float)
    yhat = np.asarray(yhat, dtype=float)
    if y.shape[0] < 2 or np.ptp(y) == 0 or np.ptp(yhat) == 0:
        # correlation is undefined for a constant vector (e.g. a null model)
        return float("nan")
    r = np.corrcoef(y, yhat)[0, 1]
    return float(r * r)


_REG_METRICS: Dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    "rmse": lambda y, yhat: np.sqrt(mean_squared_error(y, yhat)),
    "mse": lambda y, yhat: mean_squared_error(y, yhat),
    "mae": lambda y, yhat: mean_absolute_error(y, yhat),
    "mape": lambda y, yhat: 100.0 * mean_absolute_percentage_error(y, yhat),
    "rsq": _rsq,
    "rsq_trad": lambda y, yhat: r2_score(y, yhat),
    "explained_variance": lambda y, yhat: explained_variance_score(y, yhat),
}

_CLASS_METRICS: Dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    "accuracy": lambda y, yhat: accuracy_score(y, yhat),
    "balanced_accuracy": lambda y, yhat: balanced_accuracy_score(y, yhat),
    "kap": lambda y, yhat: cohen_kappa_score(y, yhat),
}

DEFAULT_REGRESSION_METRICS = ("rmse", "rsq")
DEFAULT_CLASSIFICATION_METRICS = ("accuracy",)


def _wrap(name: str, fn: Callable[[np.ndarray, np.ndarray], float]) -> Callable[[np.ndarray, np.ndarray], float]:
    def _metric(observed, predicted) -> float:
        y = as_1d(observed)
        yhat = as_1d(predicted)
        check_len(y, yhat, "predicted")
        if y.shape[0] == 0:
            raise ValueError(f"Metric '{name}' needs at least one observation.")
        return float(fn(y, yhat))

    _metric.__name__ = name
    _metric.__qualname__ = name
    return _metric


BUILTIN_METRICS: Dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    name: _wrap(name, fn) for name, fn in {**_REG_METRICS, **_CLASS_METRICS}.items()
}
