from __future__ import annotations

from typing import Any

import numpy as np


def as_1d(a: Any) -> np.ndarray:
    """Flatten column vectors / Series / lists to a 1-D numpy array."""
    arr = np.asarray(a)
    if arr.ndim == 0:
        return arr.reshape(1)
    if arr.ndim == 2 and 1 in arr.shape:
        return arr.ravel()
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-D vector; got shape {arr.shape}.")
    return arr


def check_len(y_true: np.ndarray, y_pred_like: np.ndarray, name: str) -> None:
    if y_true.shape[0] != y_pred_like.shape[0]:
        raise ValueError(
            f"Length mismatch: observed({y_true.shape[0]}) vs {name}({y_pred_like.shape[0]})."
        )
