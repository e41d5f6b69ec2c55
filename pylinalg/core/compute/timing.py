"""
Wall-clock timing for the solver backends.

Every LinearSolution carries a timing dict: 'total_seconds' for the whole
solve plus one entry per named stage ('checks', 'cramer', 'inverse').
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Stage timer for one solve.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('checks'):
            coefficient = check_system(system)
        with timer.section('cramer'):
            system.calculate()
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'checks': ..., 'cramer': ...}

    A section entered more than once reports the sum of its runs.
    """

    def __init__(self):
        self._stages: dict[str, float] = {}
        self._started: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._started = time.perf_counter()
        self._elapsed = None

    def stop(self) -> None:
        if self._started is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._started

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent inside the block to stage ``name``."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._stages[name] = self._stages.get(name, 0.0) + (time.perf_counter() - began)

    def result(self) -> dict[str, float]:
        """
        Stage timings in seconds, 'total_seconds' first.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._stages}
