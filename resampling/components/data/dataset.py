"""Dataset wrapper.

Rows are addressed by their 0-based *position* in the frame, never by the
frame's own index labels; those positions are what splits carry and what
prediction rows report back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np
import pandas as pd

from resampling.errors import InvalidConfiguration


@dataclass(frozen=True)
class Dataset:
    """A read-only table of predictors plus one designated outcome column."""

    frame: pd.DataFrame
    outcome: str

    def __post_init__(self) -> None:
        if not isinstance(self.frame, pd.DataFrame):
            raise InvalidConfiguration(
                f"Dataset expects a pandas DataFrame; got {type(self.frame).__name__}."
            )
        if self.outcome not in self.frame.columns:
            raise InvalidConfiguration(
                f"Outcome column {self.outcome!r} not found. Columns: {list(self.frame.columns)}"
            )

    def __len__(self) -> int:
        return int(self.frame.shape[0])

    @property
    def n_rows(self) -> int:
        return len(self)

    @property
    def predictor_names(self) -> list[str]:
        return [c for c in self.frame.columns if c != self.outcome]

    def subset(self, indices: Sequence[int]) -> pd.DataFrame:
        """Rows at the given positions, as a new frame (duplicates kept)."""
        idx = np.asarray(indices, dtype=int)
        return self.frame.iloc[idx].reset_index(drop=True)

    def predictors(self, frame: pd.DataFrame) -> pd.DataFrame:
        return frame.drop(columns=[self.outcome])

    def outcome_values(self, frame: Optional[pd.DataFrame] = None) -> np.ndarray:
        src = self.frame if frame is None else frame
        return src[self.outcome].to_numpy()

    def column(self, name: str) -> pd.Series:
        if name not in self.frame.columns:
            raise InvalidConfiguration(
                f"Column {name!r} not found. Columns: {list(self.frame.columns)}"
            )
        return self.frame[name]

    def outcome_is_numeric(self) -> bool:
        return bool(pd.api.types.is_numeric_dtype(self.frame[self.outcome])) and not bool(
            pd.api.types.is_bool_dtype(self.frame[self.outcome])
        )


def as_dataset(data: Any, outcome: Optional[str] = None) -> Dataset:
    """Coerce ``data`` into a :class:`Dataset`.

    ``data`` may already be a Dataset (``outcome`` is then ignored) or a
    DataFrame together with the outcome column name.
    """
    if isinstance(data, Dataset):
        return data
    if outcome is None:
        raise InvalidConfiguration("An outcome column name is required for a DataFrame.")
    return Dataset(frame=data, outcome=outcome)
