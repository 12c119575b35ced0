"""Progress reporting for resampling runs.

The runner calls ``init`` once with the number of splits, ``update`` after
each finished split (``current`` counts finished splits, not positions; with
parallel workers splits finish out of order) and ``finalize`` at the end,
including after a timeout or cancellation.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol


class ProgressCallback(Protocol):
    def init(self, *, total: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def update(self, *, current: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def finalize(self, *, label: Optional[str] = None) -> None:  # pragma: no cover
        ...


class LogProgress:
    """Log every ``every``-th finished split (and the last one)."""

    def __init__(self, logger: Optional[logging.Logger] = None, every: int = 1):
        self._log = logger or logging.getLogger("resampling.progress")
        self._every = max(1, int(every))
        self._total = 0

    def init(self, *, total: int, label: Optional[str] = None) -> None:
        self._total = int(total)
        self._log.info("Starting %s (%d)", label or "resampling", self._total)

    def update(self, *, current: int, label: Optional[str] = None) -> None:
        if current % self._every == 0 or current == self._total:
            self._log.info("%d/%d done (%s)", current, self._total, label or "-")

    def finalize(self, *, label: Optional[str] = None) -> None:
        self._log.info("Finished: %s", label or f"{self._total} splits")
