from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import pandas as pd


@dataclass
class FunctionPredictor:
    """Wrap a plain ``fit(data, outcome) -> fitted`` callable."""

    fit_fn: Callable[[pd.DataFrame, str], Any]

    def fit(self, data: pd.DataFrame, outcome: str) -> Any:
        return self.fit_fn(data, outcome)


def as_predictor(obj: Any) -> Any:
    """Return ``obj`` if it exposes ``fit(data, outcome)``; wrap a bare callable;
    wrap an unfitted scikit-learn estimator."""
    from .sklearn import SklearnPredictor

    if hasattr(obj, "get_params") and hasattr(obj, "fit"):
        return SklearnPredictor(estimator=obj)
    if hasattr(obj, "fit"):
        return obj
    if callable(obj):
        return FunctionPredictor(fit_fn=obj)
    raise TypeError(
        f"{type(obj).__name__} is not a predictor: expected an object with "
        "fit(data, outcome) or a callable."
    )
