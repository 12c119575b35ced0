"""Resampling evaluation library.

Generate analysis/assessment splits (k-fold, repeated k-fold, leave-one-out,
Monte Carlo, bootstrap, rolling origin, validation), fit an opaque predictor per
split, and aggregate the per-split metrics and predictions.

The stable public surface lives in :mod:`resampling.api`.
"""

__version__ = "0.1.0"
