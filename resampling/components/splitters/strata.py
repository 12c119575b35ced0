"""Strata construction for stratified random splits.

Numeric columns are cut into ``breaks`` quantile bins; other columns use their
levels. Any stratum holding fewer than ``pool * n`` rows is merged into a
neighbour until none is left (or only one stratum remains):

- numeric bins merge into the adjacent bin with fewer rows (lower bin on ties);
- categorical levels merge into the next-smallest level (first in sorted level
  order on ties).

The returned codes are consecutive ints ``0..k-1`` in bin/level order.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd


def _numeric_bins(values: np.ndarray, breaks: int) -> np.ndarray:
    edges = np.unique(np.quantile(values, np.linspace(0.0, 1.0, breaks + 1)))
    if edges.shape[0] <= 2:
        return np.zeros(values.shape[0], dtype=int)
    # interior edges only; right-closed bins like cut(include.lowest = TRUE)
    return np.searchsorted(edges[1:-1], values, side="left")


def _relabel(codes: np.ndarray) -> np.ndarray:
    _, inv = np.unique(codes, return_inverse=True)
    return inv.astype(int)


def _pool_ordered(codes: np.ndarray, min_size: float) -> np.ndarray:
    codes = _relabel(codes)
    while True:
        counts = np.bincount(codes)
        if counts.shape[0] <= 1:
            return codes
        small = np.flatnonzero(counts < min_size)
        if small.size == 0:
            return codes
        # merge the smallest offending bin into its smaller neighbour
        b = int(small[np.argmin(counts[small])])
        if b == 0:
            target = 1
        elif b == counts.shape[0] - 1:
            target = b - 1
        else:
            target = b - 1 if counts[b - 1] <= counts[b + 1] else b + 1
        codes = _relabel(np.where(codes == b, target, codes))


def _pool_unordered(codes: np.ndarray, min_size: float) -> np.ndarray:
    codes = _relabel(codes)
    while True:
        counts = np.bincount(codes)
        if counts.shape[0] <= 1:
            return codes
        order = np.argsort(counts, kind="stable")
        smallest = int(order[0])
        if counts[smallest] >= min_size:
            return codes
        target = int(order[1])
        codes = _relabel(np.where(codes == smallest, target, codes))


def make_strata(values: Any, *, breaks: int = 4, pool: float = 0.1) -> np.ndarray:
    """Return one integer stratum code per row of ``values``."""
    s = pd.Series(values)
    if s.isna().any():
        raise ValueError("Strata column must not contain missing values.")
    n = int(s.shape[0])
    min_size = pool * n

    if pd.api.types.is_numeric_dtype(s) and not pd.api.types.is_bool_dtype(s):
        arr = s.to_numpy(dtype=float)
        if np.unique(arr).shape[0] <= breaks:
            # few distinct values: treat each value as its own ordered level
            codes = _relabel(arr)
        else:
            codes = _numeric_bins(arr, breaks)
        return _pool_ordered(codes, min_size)

    levels = s.astype(str).to_numpy()
    return _pool_unordered(_relabel(levels), min_size)
