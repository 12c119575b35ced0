from __future__ import annotations
from typing import Any, Callable, Iterator, List, Optional, Protocol, Sequence, TypeVar

import numpy as np
import pandas as pd

from resampling.components.splitters.types import Split

T = TypeVar("T")


class Splitter(Protocol):
    def split(self, data: Any) -> Iterator[Split]:
        """Yield the splits for ``data`` (a Dataset or a row count).

        Implementations must yield :class:`resampling.components.splitters.types.Split`
        and must not modify the data.
        """
        ...


class FittedPredictor(Protocol):
    def predict(self, new_data: pd.DataFrame) -> Any:
        """Return one prediction per row of ``new_data``, in row order."""
        ...


class PredictorFactory(Protocol):
    """Trainable model capability.

    The runner only ever calls ``fit`` and then ``predict`` on what ``fit``
    returned; it never inspects either.
    """

    def fit(self, data: pd.DataFrame, outcome: str) -> FittedPredictor:
        """Fit on ``data`` (predictors plus the ``outcome`` column)."""
        ...


MetricFn = Callable[[np.ndarray, np.ndarray], float]


class ParallelExecutor(Protocol):
    def run(
        self,
        jobs: Sequence[Callable[[], T]],
        *,
        on_result: Optional[Callable[[int, T], None]] = None,
        timeout: Optional[float] = None,
        cancel: Any = None,
    ) -> List[Optional[T]]:
        """Run independent zero-argument jobs and return their results in
        submission order.

        Jobs abandoned because of ``timeout`` (seconds) or ``cancel`` (an object
        with ``is_set()``, e.g. ``threading.Event``) yield ``None``.
        ``on_result(position, result)`` is called as each job finishes.
        """
        ...
