"""Random draw splitters: Monte Carlo, validation and bootstrap.

Unlike V-fold, these are independent draws per split, so assessment sets
overlap across splits (and bootstrap assessment sets may miss rows entirely).
Draws go through scikit-learn: ``ShuffleSplit`` / ``StratifiedShuffleSplit``
without replacement and ``sklearn.utils.resample`` for bootstrap samples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

import numpy as np
from sklearn.model_selection import ShuffleSplit, StratifiedShuffleSplit
from sklearn.utils import resample

from resampling.contracts.split_configs import BootstrapModel, MonteCarloModel, ValidationModel
from resampling.errors import InvalidConfiguration
from resampling.runtime.random.rng import RngManager, SeedLike

from .base import resolve_rows, resolve_strata
from .naming import names0, round_half_up
from .types import Split


def analysis_size(n: int, proportion: float) -> int:
    """Rows in the analysis set: ``round(p * n)``, rounding half up."""
    k = round_half_up(proportion * n)
    if k < 1 or k > n - 1:
        raise InvalidConfiguration(
            f"proportion={proportion} on {n} rows leaves an empty "
            f"{'analysis' if k < 1 else 'assessment'} set."
        )
    return k


def shuffle_splits(
    n: int,
    k: int,
    times: int,
    random_state: int,
    strata: Optional[np.ndarray] = None,
) -> Iterator[tuple[np.ndarray, np.ndarray]]:
    """``times`` draws of ``k`` analysis rows without replacement; sorted indices."""
    if strata is None:
        splitter = ShuffleSplit(n_splits=times, train_size=k, test_size=n - k, random_state=random_state)
    else:
        splitter = StratifiedShuffleSplit(
            n_splits=times, train_size=k, test_size=n - k, random_state=random_state
        )
    try:
        for analysis, assessment in splitter.split(np.zeros((n, 1)), strata):
            yield np.sort(analysis), np.sort(assessment)
    except ValueError as e:
        raise InvalidConfiguration(f"Cannot draw {k} of {n} rows: {e}") from e


@dataclass
class MonteCarloSplitter:
    cfg: MonteCarloModel
    seed: SeedLike = None

    def split(self, data: Any) -> Iterator[Split]:
        n, dataset = resolve_rows(data)
        strata = resolve_strata(self.cfg, dataset, n)
        k = analysis_size(n, float(self.cfg.proportion))
        times = int(self.cfg.times)

        state = RngManager(self.seed).child_seed("montecarlo")
        draws = shuffle_splits(n, k, times, state, strata)
        for rid, (analysis, assessment) in zip(names0(times, "Resample"), draws):
            yield Split(analysis=analysis, assessment=assessment, id=rid)


@dataclass
class ValidationSplitter:
    cfg: ValidationModel
    seed: SeedLike = None

    def split(self, data: Any) -> Iterator[Split]:
        n, dataset = resolve_rows(data)
        strata = resolve_strata(self.cfg, dataset, n)
        k = analysis_size(n, float(self.cfg.proportion))

        state = RngManager(self.seed).child_seed("validation")
        for analysis, assessment in shuffle_splits(n, k, 1, state, strata):
            yield Split(analysis=analysis, assessment=assessment, id="validation")


@dataclass
class BootstrapSplitter:
    cfg: BootstrapModel
    seed: SeedLike = None

    def split(self, data: Any) -> Iterator[Split]:
        n, dataset = resolve_rows(data)
        if n < 1:
            raise InvalidConfiguration("Bootstrap resampling needs at least one row.")
        strata = resolve_strata(self.cfg, dataset, n)

        times = int(self.cfg.times)
        states = RngManager(self.seed).child_seeds(times, "bootstrap")
        all_rows = np.arange(n)
        for rid, state in zip(names0(times, "Bootstrap"), states):
            # n draws with replacement; stratified draws keep every stratum's size
            analysis = resample(all_rows, replace=True, n_samples=n, random_state=state, stratify=strata)
            # out-of-bag rows; sklearn has no helper for the complement
            assessment = np.setdiff1d(all_rows, analysis)
            yield Split(analysis=analysis, assessment=assessment, id=rid)
