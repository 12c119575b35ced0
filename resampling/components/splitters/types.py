"""Splitter return contracts.

Every splitter yields the same :class:`Split` payload: index arrays into the
*original* dataset plus the split's identifiers. Subsets are only materialized
when a split is executed, never by the splitter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Tuple

import numpy as np


def _frozen_indices(a: Any) -> np.ndarray:
    arr = np.array(a, dtype=np.int64).ravel()
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class Split:
    """A single analysis/assessment partition.

    Notes
    -----
    - ``analysis`` may contain repeated rows (bootstrap draws).
    - ``id2`` is only set for nested ids, e.g. ``("Repeat1", "Fold03")``.
    """

    analysis: np.ndarray
    assessment: np.ndarray
    id: str
    id2: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "analysis", _frozen_indices(self.analysis))
        object.__setattr__(self, "assessment", _frozen_indices(self.assessment))

    @property
    def n_analysis(self) -> int:
        return int(self.analysis.shape[0])

    @property
    def n_assessment(self) -> int:
        return int(self.assessment.shape[0])

    @property
    def label(self) -> str:
        return self.id if self.id2 is None else f"{self.id}/{self.id2}"


@dataclass(frozen=True)
class ResampleCollection:
    """Ordered splits over one dataset, produced by one strategy config."""

    splits: Tuple[Split, ...]
    n: int
    strategy: str
    config: Any = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.splits)

    def __iter__(self) -> Iterator[Split]:
        return iter(self.splits)

    def __getitem__(self, i: int) -> Split:
        return self.splits[i]

    @property
    def ids(self) -> list[str]:
        return [s.label for s in self.splits]
