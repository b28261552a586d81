# io/kernel_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from pathlab.app.events import (
    AlgorithmCompleted,
    AlgorithmFailed,
    ComparisonCompleted,
    PlaybackChanged,
)
from pathlab.io.recorder import Recorder
from pathlab.sim.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="pathlab", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class KernelLogging(NoopHooks):
    """
    One place to shape and emit structured logs for the kernel, algorithm runs,
    comparisons and playback. Business records also go to the recorder.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
        clock=None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.clock = clock  # anything with .now (the kernel); stamps playback records
        self.log = logger or _default_json_logger(level=level)
        self._dispatched = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _shape_event(self, ev):
        base = {"t": getattr(ev, "t", None)}
        if is_dataclass(ev):
            evd = asdict(ev)
            evd.pop("t", None)
            evd.pop("token", None)
            if evd:
                base["data"] = evd
        return type(ev).__name__, base

    def _now(self) -> float:
        return self.clock.now if self.clock is not None else 0.0

    # --------------- kernel lifecycle --------------------

    def run_start(self, *, until, max_events, qsize):
        if self.debug:
            self._emit("DEBUG", "run_start", until=until, max_events=max_events, qsize=qsize)

    def run_end(self, *, processed: int, **extra):
        if self.debug:
            self._emit("DEBUG", "run_end", processed=processed, **extra)

    def schedule(self, ev, *, now: float, qsize: int):
        if self.debug and (qsize % self.sample_every) == 0:
            name, extra = self._shape_event(ev)
            self._emit("DEBUG", "schedule", event=name, **extra, now=now, qsize=qsize)

    def dispatch_start(self, ev, *, seq: int, qsize: int, handlers: int):
        self._dispatched += 1
        if self.debug and (self._dispatched % self.sample_every) == 0:
            name, extra = self._shape_event(ev)
            self._emit("DEBUG", name, **extra, seq=seq, qsize=qsize, handlers=handlers)

    def dispatch_end(self, ev, *, produced: int, qsize: int, **extra):
        if self.debug and (self._dispatched % self.sample_every) == 0:
            self._emit("DEBUG", "dispatch_done", produced=produced, qsize=qsize, **extra)

    def cancelled(self, ev, *, qsize: int):
        if self.debug:
            name, extra = self._shape_event(ev)
            self._emit("DEBUG", "cancelled", event=name, **extra, qsize=qsize)

    def error(self, ev, *, reason: str, **extra):
        name, shaped = self._shape_event(ev)
        self._emit("ERROR", "kernel_error", event=name, reason=reason, **shaped, **extra)

    # --------------- engine ------------------------------

    def algorithm_start(self, *, algorithm, source, nodes, edges):
        self._emit(
            "DEBUG",
            "algorithm_start",
            algorithm=algorithm.value,
            source=source,
            nodes=nodes,
            edges=edges,
        )

    def algorithm_end(self, result):
        rec = AlgorithmCompleted(
            algorithm=result.algorithm.value,
            source=result.source,
            steps=len(result.trace),
            reachable=len(result.reachable()),
            elapsed_ms=result.elapsed_ms,
        )
        self._emit("INFO", "algorithm_completed", **asdict(rec))
        self.biz(rec)

    def algorithm_error(self, *, algorithm, source, error: BaseException):
        rec = AlgorithmFailed(
            algorithm=algorithm.value,
            source=source,
            error=type(error).__name__,
            reason=str(error),
        )
        self._emit("WARNING", "algorithm_failed", **asdict(rec))
        self.biz(rec)

    def comparison_end(self, report):
        fastest = report.fastest()
        rec = ComparisonCompleted(
            source=report.source,
            algorithms=[a.value for a in report.algorithms()],
            elapsed_ms={r.algorithm.value: r.elapsed_ms for r in report},
            fastest=fastest.algorithm.value if fastest else None,
            distances_agree=report.distances_agree(),
        )
        self._emit("INFO", "comparison_completed", **asdict(rec))
        self.biz(rec)

    def playback_changed(self, state, *, reason: str):
        rec = PlaybackChanged(
            t=self._now(),
            reason=reason,
            mode=state.mode.value,
            cursor=state.cursor,
            last_index=state.last_index,
            interval_ms=state.interval_ms,
        )
        level = "DEBUG" if reason in ("next", "prev", "go_to") else "INFO"
        self._emit(level, "playback_changed", **asdict(rec))
        self.biz(rec)

    # ------------- Business Event Reporting --------------------------

    def biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)
