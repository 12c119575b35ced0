from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

import pandas as pd

from resampling.contracts.control_configs import ControlModel
from resampling.contracts.results.resamples import SplitResult

from .aggregate import (
    collect_extracts,
    collect_metrics,
    collect_predictions,
    summarize_metrics,
)


@dataclass
class ResampleResults:
    """Per-split results of one run, in the original split order.

    Splits abandoned because of a timeout or cancellation have no entry in
    ``results``; their labels are listed in ``abandoned``.
    """

    results: List[SplitResult]
    strategy: str
    outcome: str
    metric_names: List[str]
    control: ControlModel = field(default_factory=ControlModel)
    abandoned: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[SplitResult]:
        return iter(self.results)

    def __getitem__(self, i: int) -> SplitResult:
        return self.results[i]

    @property
    def n_failed(self) -> int:
        return sum(1 for r in self.results if r.failed)

    def collect_metrics(self, summarize: bool = True):
        return collect_metrics(self.results, summarize=summarize)

    def metrics_frame(self) -> pd.DataFrame:
        return summarize_metrics(self.results, warn=False).to_frame()

    def collect_predictions(self, summarize: Optional[bool] = None) -> pd.DataFrame:
        if not self.control.save_predictions:
            raise ValueError(
                "Predictions were not saved; rerun with control save_predictions=True."
            )
        if summarize is None:
            summarize = self.control.summarize_predictions
        return collect_predictions(self.results, summarize=summarize)

    def collect_extracts(self) -> pd.DataFrame:
        return collect_extracts(self.results)

    def show_notes(self) -> List[str]:
        out = [f"{r.label}: {note}" for r in self.results for note in r.notes]
        out.extend(self.notes)
        return out
