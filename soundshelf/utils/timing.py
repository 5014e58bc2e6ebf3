"""
Soundshelf Timing Utilities
"""

import time


class Timer:
    """
    Wall-clock stopwatch for a with-block.

    elapsed is filled in on exit; str(timer) renders it as "0.123s".
    """

    def __init__(self) -> None:
        self.elapsed: float = 0.0
        self._start: float = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self.elapsed = time.perf_counter() - self._start

    def __str__(self) -> str:
        return f"{self.elapsed:.3f}s"
