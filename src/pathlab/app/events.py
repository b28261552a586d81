# app/events.py
from dataclasses import dataclass, field

from pathlab.sim.event import BaseEvent, CancelToken


# Kernel events
@dataclass(order=True)
class PlaybackTick(BaseEvent):
    token: CancelToken = field(compare=False)  # minted by play(); cancelled by pause/load


# Business records (logged and recorded, never scheduled)
@dataclass
class AlgorithmCompleted:
    algorithm: str
    source: str
    steps: int
    reachable: int
    elapsed_ms: float


@dataclass
class AlgorithmFailed:
    algorithm: str
    source: str
    error: str
    reason: str


@dataclass
class ComparisonCompleted:
    source: str
    algorithms: list[str]
    elapsed_ms: dict[str, float]
    fastest: str | None
    distances_agree: bool


@dataclass
class PlaybackChanged:
    t: float
    reason: str
    mode: str
    cursor: int
    last_index: int
    interval_ms: float
