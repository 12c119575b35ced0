"""Parallel executors for independent split jobs.

All executors return one entry per job in *submission* order, whatever order
the jobs finish in. Jobs that are abandoned (deadline passed or cancel event
set) yield ``None``; a job already running in a worker is not interrupted, its
result is simply not waited for.
"""

from __future__ import annotations

import logging
import multiprocessing
import time
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from joblib import Parallel, delayed

from resampling.errors import InvalidConfiguration

T = TypeVar("T")

logger = logging.getLogger(__name__)

# How often a waiting executor re-checks its cancel event (seconds)
_POLL_INTERVAL = 0.05


class _Deadline:
    def __init__(self, timeout: Optional[float], cancel: Any):
        self._end = None if timeout is None else time.monotonic() + float(timeout)
        self._cancel = cancel

    def remaining(self) -> Optional[float]:
        if self._end is None:
            return None
        return max(0.0, self._end - time.monotonic())

    def expired(self) -> bool:
        if self._cancel is not None and self._cancel.is_set():
            return True
        return self._end is not None and time.monotonic() >= self._end


def _call(job: Callable[[], T]) -> T:
    return job()


@dataclass
class SequentialExecutor:
    """Run jobs one after another in the calling thread."""

    def run(
        self,
        jobs: Sequence[Callable[[], T]],
        *,
        on_result: Optional[Callable[[int, T], None]] = None,
        timeout: Optional[float] = None,
        cancel: Any = None,
    ) -> List[Optional[T]]:
        deadline = _Deadline(timeout, cancel)
        results: List[Optional[T]] = [None] * len(jobs)
        for i, job in enumerate(jobs):
            if deadline.expired():
                logger.debug("Stopping before job %d of %d", i + 1, len(jobs))
                break
            results[i] = job()
            if on_result is not None:
                on_result(i, results[i])
        return results


@dataclass
class ThreadExecutor:
    """Run jobs on a bounded ``concurrent.futures.ThreadPoolExecutor``."""

    worker_count: int = 2

    def run(
        self,
        jobs: Sequence[Callable[[], T]],
        *,
        on_result: Optional[Callable[[int, T], None]] = None,
        timeout: Optional[float] = None,
        cancel: Any = None,
    ) -> List[Optional[T]]:
        deadline = _Deadline(timeout, cancel)
        results: List[Optional[T]] = [None] * len(jobs)
        if not jobs:
            return results

        pool = ThreadPoolExecutor(max_workers=self.worker_count)
        try:
            positions = {pool.submit(job): i for i, job in enumerate(jobs)}
            pending = set(positions)
            while pending:
                if deadline.expired():
                    logger.debug("Abandoning %d unfinished job(s)", len(pending))
                    break
                wait_for = deadline.remaining()
                if cancel is not None:
                    wait_for = _POLL_INTERVAL if wait_for is None else min(wait_for, _POLL_INTERVAL)
                done, pending = wait(pending, timeout=wait_for, return_when=FIRST_COMPLETED)
                for fut in sorted(done, key=positions.__getitem__):
                    i = positions[fut]
                    results[i] = fut.result()
                    if on_result is not None:
                        on_result(i, results[i])
        finally:
            pool.shutdown(wait=False, cancel_futures=True)
        return results


@dataclass
class JoblibExecutor:
    """Run jobs through ``joblib.Parallel``.

    ``backend="loky"`` (processes) requires picklable jobs; ``"threading"``
    shares memory with the caller. Results are streamed back in submission
    order, so the deadline and cancel event are checked after every result.
    joblib's own ``timeout`` bounds each task and covers a result that never
    arrives; the run-wide deadline is enforced between results.
    """

    worker_count: int = 2
    backend: str = "loky"

    def run(
        self,
        jobs: Sequence[Callable[[], T]],
        *,
        on_result: Optional[Callable[[int, T], None]] = None,
        timeout: Optional[float] = None,
        cancel: Any = None,
    ) -> List[Optional[T]]:
        deadline = _Deadline(timeout, cancel)
        results: List[Optional[T]] = [None] * len(jobs)
        if not jobs or deadline.expired():
            return results

        parallel = Parallel(
            n_jobs=self.worker_count,
            backend=self.backend,
            return_as="generator",
            timeout=timeout,
        )
        stream = parallel(delayed(_call)(job) for job in jobs)
        try:
            for i, res in enumerate(stream):
                results[i] = res
                if on_result is not None:
                    on_result(i, res)
                if deadline.expired():
                    logger.debug("Abandoning %d unfinished job(s)", len(jobs) - i - 1)
                    break
        except (TimeoutError, multiprocessing.TimeoutError):
            logger.debug("joblib timed out after %s seconds", timeout)
        finally:
            stream.close()
        return results


def make_executor(worker_count: int = 1, backend: str = "loky"):
    """Pick an executor: sequential for one worker, otherwise by backend name."""
    if int(worker_count) < 1:
        raise InvalidConfiguration(f"worker_count must be >= 1; got {worker_count}.")
    if int(worker_count) == 1 or backend == "sequential":
        return SequentialExecutor()
    if backend == "threading":
        return ThreadExecutor(worker_count=int(worker_count))
    if backend == "loky":
        return JoblibExecutor(worker_count=int(worker_count), backend="loky")
    raise InvalidConfiguration(f"Unknown execution backend: {backend!r}")
