"""K-fold style splitters: V-fold, repeated V-fold and leave-one-out.

Fold assignment is delegated to scikit-learn. With a strata column the codes
from :func:`~resampling.components.splitters.strata.make_strata` are passed to
``StratifiedKFold`` as the class labels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

import numpy as np
from sklearn.model_selection import (
    KFold,
    LeaveOneOut,
    RepeatedKFold,
    RepeatedStratifiedKFold,
    StratifiedKFold,
)

from resampling.contracts.split_configs import KFoldModel, LooModel, RepeatedKFoldModel
from resampling.errors import InvalidConfiguration
from resampling.runtime.random.rng import RngManager, SeedLike

from .base import resolve_rows, resolve_strata
from .naming import names0
from .types import Split


def _check_v(v: int, n: int) -> None:
    if v < 2:
        raise InvalidConfiguration(f"v must be at least 2; got {v}.")
    if v > n:
        raise InvalidConfiguration(f"v ({v}) cannot exceed the number of rows ({n}).")


def fold_indices(splitter: Any, n: int, strata: Optional[np.ndarray] = None):
    """Run a scikit-learn splitter over ``n`` rows; yields ``(analysis, assessment)``."""
    X = np.zeros((n, 1))
    try:
        yield from splitter.split(X, strata)
    except ValueError as e:
        raise InvalidConfiguration(f"Cannot split {n} rows: {e}") from e


@dataclass
class KFoldSplitter:
    cfg: KFoldModel
    seed: SeedLike = None

    def split(self, data: Any) -> Iterator[Split]:
        n, dataset = resolve_rows(data)
        v = int(self.cfg.v)
        _check_v(v, n)
        strata = resolve_strata(self.cfg, dataset, n)

        state = RngManager(self.seed).child_seed("kfold")
        if strata is None:
            splitter = KFold(n_splits=v, shuffle=True, random_state=state)
        else:
            splitter = StratifiedKFold(n_splits=v, shuffle=True, random_state=state)

        ids = names0(v, "Fold")
        for fid, (analysis, assessment) in zip(ids, fold_indices(splitter, n, strata)):
            yield Split(analysis=analysis, assessment=assessment, id=fid)


@dataclass
class RepeatedKFoldSplitter:
    cfg: RepeatedKFoldModel
    seed: SeedLike = None

    def split(self, data: Any) -> Iterator[Split]:
        n, dataset = resolve_rows(data)
        v = int(self.cfg.v)
        repeats = int(self.cfg.repeats)
        _check_v(v, n)
        strata = resolve_strata(self.cfg, dataset, n)

        state = RngManager(self.seed).child_seed("repeated_kfold")
        cls = RepeatedKFold if strata is None else RepeatedStratifiedKFold
        splitter = cls(n_splits=v, n_repeats=repeats, random_state=state)

        # sklearn yields repeat by repeat, v folds each
        rep_ids = names0(repeats, "Repeat")
        fold_ids = names0(v, "Fold")
        for i, (analysis, assessment) in enumerate(fold_indices(splitter, n, strata)):
            yield Split(
                analysis=analysis,
                assessment=assessment,
                id=rep_ids[i // v],
                id2=fold_ids[i % v],
            )


@dataclass
class LooSplitter:
    cfg: LooModel
    seed: SeedLike = None  # unused; kept for a uniform factory signature

    def split(self, data: Any) -> Iterator[Split]:
        n, _ = resolve_rows(data)
        if n < 2:
            raise InvalidConfiguration(f"Leave-one-out needs at least 2 rows; got {n}.")
        ids = names0(n, "Resample")
        for rid, (analysis, assessment) in zip(ids, fold_indices(LeaveOneOut(), n)):
            yield Split(analysis=analysis, assessment=assessment, id=rid)
