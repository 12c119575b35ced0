from __future__ import annotations

from typing import Any, Iterable, List

import numpy as np

from resampling.contracts.results.resamples import PredictionRow


def to_python_scalar(v: Any) -> Any:
    """numpy scalars -> builtin types (pydantic rows only take plain values)."""
    return v.item() if isinstance(v, np.generic) else v


def build_prediction_rows(
    *,
    rows: Iterable[int],
    observed: Any,
    predicted: Any,
) -> List[PredictionRow]:
    """One :class:`PredictionRow` per assessment row, keyed by its original index."""
    idx = np.asarray(list(rows), dtype=int)
    obs = np.asarray(observed).ravel()
    pred = np.asarray(predicted).ravel()
    if not (idx.shape[0] == obs.shape[0] == pred.shape[0]):
        raise ValueError(
            f"Prediction table length mismatch: rows={idx.shape[0]}, "
            f"observed={obs.shape[0]}, predicted={pred.shape[0]}."
        )

    return [
        PredictionRow(
            row=int(r),
            observed=to_python_scalar(o),
            predicted=to_python_scalar(p),
        )
        for r, o, p in zip(idx, obs, pred)
    ]
