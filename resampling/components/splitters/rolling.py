from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np

from resampling.contracts.split_configs import RollingOriginModel
from resampling.errors import InvalidConfiguration
from resampling.runtime.random.rng import SeedLike

from .base import resolve_rows
from .naming import names0
from .types import Split


def rolling_windows(n: int, initial: int, assess: int, skip: int = 0, cumulative: bool = True, lag: int = 0):
    """Yield ``(analysis, assessment)`` index ranges over rows in data order.

    Window ``k`` starts at ``k * (skip + 1)``; generation stops once the
    assessment window would run past ``n``.
    """
    if initial < 1 or assess < 1:
        raise InvalidConfiguration(f"initial and assess must be >= 1; got {initial}, {assess}.")
    if skip < 0 or lag < 0:
        raise InvalidConfiguration(f"skip and lag must be >= 0; got {skip}, {lag}.")
    if lag > initial:
        raise InvalidConfiguration(f"lag ({lag}) must not exceed initial ({initial}).")
    if initial + assess > n:
        raise InvalidConfiguration(
            f"initial + assess ({initial} + {assess}) exceeds the number of rows ({n}); "
            "no rolling-origin splits can be made."
        )

    step = skip + 1
    for start in range(0, n - initial - assess + 1, step):
        origin = start + initial
        a_start = 0 if cumulative else start
        yield np.arange(a_start, origin), np.arange(origin - lag, origin + assess)


@dataclass
class RollingOriginSplitter:
    cfg: RollingOriginModel
    seed: SeedLike = None  # unused; rolling origin is deterministic

    def split(self, data: Any) -> Iterator[Split]:
        n, _ = resolve_rows(data)
        windows = list(
            rolling_windows(
                n,
                int(self.cfg.initial),
                int(self.cfg.assess),
                skip=int(self.cfg.skip),
                cumulative=bool(self.cfg.cumulative),
                lag=int(self.cfg.lag),
            )
        )
        for rid, (analysis, assessment) in zip(names0(len(windows), "Slice"), windows):
            yield Split(analysis=analysis, assessment=assessment, id=rid)
