from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd


@dataclass
class FittedNullModel:
    value: Any

    def predict(self, new_data: pd.DataFrame) -> np.ndarray:
        return np.full(int(new_data.shape[0]), self.value)


@dataclass
class NullModel:
    """Baseline predictor: the analysis-set mean (numeric outcome) or the most
    frequent class (anything else) for every row."""

    def fit(self, data: pd.DataFrame, outcome: str) -> FittedNullModel:
        y = data[outcome]
        if y.shape[0] == 0:
            raise ValueError("Cannot fit a null model on an empty analysis set.")
        if pd.api.types.is_numeric_dtype(y) and not pd.api.types.is_bool_dtype(y):
            return FittedNullModel(value=float(y.mean()))
        return FittedNullModel(value=y.mode().iloc[0])
