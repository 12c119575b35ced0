"""Literal-based "choice" types used across contracts.

Keep this file dependency-free (stdlib + typing only).
"""

from __future__ import annotations

from typing import Literal, TypeAlias


# Resampling strategies understood by the splitter registry
StrategyName: TypeAlias = Literal[
    "kfold",
    "repeated_kfold",
    "loo",
    "montecarlo",
    "bootstrap",
    "rolling_origin",
    "validation",
]

# Parallel execution backends
BackendName: TypeAlias = Literal["sequential", "threading", "loky"]

# Stage of a split's fit/evaluate sequence (used in error notes)
StageName: TypeAlias = Literal["fit", "predict", "metrics"]
