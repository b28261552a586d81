# sim/clock.py
from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class Stopwatch:
    """Monotonic wall-clock timer reporting milliseconds."""

    _start: float | None = field(default=None, repr=False)
    _stop: float | None = field(default=None, repr=False)

    @classmethod
    def started(cls) -> Stopwatch:
        sw = cls()
        sw.start()
        return sw

    def start(self) -> None:
        self._start = time.perf_counter()
        self._stop = None

    def stop(self) -> float:
        if self._start is None:
            raise RuntimeError("stopwatch was never started")
        self._stop = time.perf_counter()
        return self.elapsed_ms

    @property
    def running(self) -> bool:
        return self._start is not None and self._stop is None

    @property
    def elapsed_ms(self) -> float:
        if self._start is None:
            return 0.0
        end = self._stop if self._stop is not None else time.perf_counter()
        return (end - self._start) * 1000
