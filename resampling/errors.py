"""Error taxonomy for resampling runs.

Configuration errors are fatal and raised before any fitting happens. Per-split
failures are captured on the split's result and never abort a run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from resampling.contracts.choices import StageName


class InvalidConfiguration(ValueError):
    """Raised for malformed resampling parameters (e.g. ``v < 2``)."""


class SplitExecutionError(RuntimeError):
    """A split's fit -> predict -> metrics sequence failed.

    Captured per split and recorded as a note; it is not propagated.
    """

    def __init__(self, split_id: str, stage: StageName, cause: BaseException):
        self.split_id = split_id
        self.stage = stage
        self.cause = cause
        super().__init__(f"{split_id}: {stage} failed: {type(cause).__name__}: {cause}")


class AggregationWarning(UserWarning):
    """A metric has fewer contributing splits than the run produced."""


class PredictionMismatchError(ValueError):
    """Observed outcome differs across assessment occurrences of one row."""

    def __init__(self, row: int, observed: Optional[list] = None):
        self.row = row
        self.observed = observed
        super().__init__(
            f"Observed outcome for row {row} differs across resamples: {observed!r}"
        )
