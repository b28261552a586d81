# app/controllers/playback.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pathlab.app.events import PlaybackTick
from pathlab.app.protocols import Scheduler
from pathlab.domain.entities.results import PathResult
from pathlab.domain.entities.trace import AlgorithmStep, Trace
from pathlab.sim.event import CancelToken
from pathlab.sim.hooks import EngineHooks, NoopHooks


class PlaybackMode(str, Enum):
    IDLE = "idle"
    PAUSED = "paused"
    PLAYING = "playing"


@dataclass(frozen=True)
class PlaybackState:
    trace: Trace | None
    cursor: int
    mode: PlaybackMode
    interval_ms: float

    @property
    def last_index(self) -> int:
        return self.trace.last_index if self.trace is not None else -1

    @property
    def current_step(self) -> AlgorithmStep | None:
        return self.trace[self.cursor] if self.trace is not None else None


class PlaybackController:
    """
    Cursor over one trace, auto-advanced by PlaybackTick events on the kernel.

    Each play() mints a CancelToken carried by every tick of that run; pause(), load()
    and unload() cancel it, so a tick already in the queue is dropped by the kernel and
    ignored here if it is ever delivered.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        interval_ms: float = 1000.0,
        hooks: EngineHooks | None = None,
    ):
        _check_interval(interval_ms)
        self.scheduler = scheduler
        self.hooks = hooks or NoopHooks()
        self._interval_ms = interval_ms
        self._trace: Trace | None = None
        self._cursor = 0
        self._mode = PlaybackMode.IDLE
        self._token: CancelToken | None = None

    # ---------------- read access ----------------

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def mode(self) -> PlaybackMode:
        return self._mode

    @property
    def interval_ms(self) -> float:
        return self._interval_ms

    @property
    def trace(self) -> Trace | None:
        return self._trace

    @property
    def last_index(self) -> int:
        return self._trace.last_index if self._trace is not None else -1

    @property
    def current_step(self) -> AlgorithmStep | None:
        return self._trace[self._cursor] if self._trace is not None else None

    @property
    def is_at_end(self) -> bool:
        return self._trace is not None and self._cursor >= self.last_index

    @property
    def state(self) -> PlaybackState:
        return PlaybackState(self._trace, self._cursor, self._mode, self._interval_ms)

    # ---------------- session ----------------

    def load(self, source: PathResult | Trace) -> None:
        trace = source.trace if isinstance(source, PathResult) else source
        if len(trace) == 0:
            raise ValueError("cannot play back an empty trace")
        self._cancel()
        self._trace = trace
        self._cursor = 0
        self._mode = PlaybackMode.PAUSED
        self._changed("load")

    def unload(self) -> None:
        self._cancel()
        self._trace = None
        self._cursor = 0
        self._mode = PlaybackMode.IDLE
        self._changed("unload")

    # ---------------- navigation ----------------

    def next(self) -> None:
        self._move(self._cursor + 1, "next")

    def prev(self) -> None:
        self._move(self._cursor - 1, "prev")

    def go_to(self, index: int) -> None:
        self._move(index, "go_to")

    def _move(self, index: int, reason: str) -> None:
        if self._trace is None:
            return
        clamped = max(0, min(index, self.last_index))
        if clamped != self._cursor:
            self._cursor = clamped
            self._changed(reason)

    # ---------------- timed playback ----------------

    def play(self) -> None:
        if self._trace is None or self._mode is PlaybackMode.PLAYING:
            return
        if self.is_at_end:
            self._mode = PlaybackMode.PAUSED
            self._changed("play_at_end")
            return
        self._token = CancelToken()
        self._mode = PlaybackMode.PLAYING
        self.scheduler.schedule(self._tick(self.scheduler.now))
        self._changed("play")

    def pause(self) -> None:
        if self._mode is not PlaybackMode.PLAYING:
            return
        self._cancel()
        self._mode = PlaybackMode.PAUSED
        self._changed("pause")

    def set_speed(self, interval_ms: float) -> None:
        """Applies from the next scheduled tick; the one already queued keeps its time."""
        _check_interval(interval_ms)
        self._interval_ms = interval_ms
        self._changed("set_speed")

    def on_tick(self, ev: PlaybackTick):
        if ev.token is not self._token or ev.token.cancelled:
            return None  # stale: a pause/load happened after it was scheduled
        self.next()
        if self.is_at_end:
            self._cancel()
            self._mode = PlaybackMode.PAUSED
            self._changed("finished")
            return None
        return [self._tick(ev.t)]

    def _tick(self, now: float) -> PlaybackTick:
        return PlaybackTick(t=now + self._interval_ms, token=self._token)

    def _cancel(self) -> None:
        if self._token is not None:
            self._token.cancel()
            self._token = None

    def _changed(self, reason: str) -> None:
        self.hooks.playback_changed(self.state, reason=reason)


def _check_interval(interval_ms: float) -> None:
    if interval_ms <= 0:
        raise ValueError(f"interval_ms must be > 0, got {interval_ms}")
