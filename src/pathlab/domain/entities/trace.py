# domain/entities/trace.py
from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import ClassVar

from pathlab.domain.entities.graph import Edge, NodeId


class StepKind(str, Enum):
    INIT = "init"
    VISIT = "visit"
    UPDATE = "update"
    FINAL = "final"


@dataclass(frozen=True, kw_only=True)
class AlgorithmStep:
    kind: ClassVar[StepKind]

    description: str
    distances: Mapping[NodeId, float]  # snapshot, never mutated after recording
    visited: tuple[NodeId, ...] = ()

    def to_dict(self) -> dict:
        d = asdict(self)
        d["distances"] = dict(self.distances)
        d["visited"] = list(self.visited)
        return {"kind": self.kind.value, **d}


@dataclass(frozen=True, kw_only=True)
class InitStep(AlgorithmStep):
    kind: ClassVar[StepKind] = StepKind.INIT


@dataclass(frozen=True, kw_only=True)
class VisitStep(AlgorithmStep):
    kind: ClassVar[StepKind] = StepKind.VISIT
    node: NodeId | None = None
    round: int | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateStep(AlgorithmStep):
    kind: ClassVar[StepKind] = StepKind.UPDATE
    node: NodeId
    via: NodeId
    old_distance: float
    new_distance: float


@dataclass(frozen=True, kw_only=True)
class FinalStep(AlgorithmStep):
    kind: ClassVar[StepKind] = StepKind.FINAL
    failure: str | None = None
    edge: Edge | None = None

    @property
    def failed(self) -> bool:
        return self.failure is not None


@dataclass(frozen=True)
class Trace:
    """Ordered, append-only record of one run. Frozen once the run returns."""

    steps: tuple[AlgorithmStep, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[AlgorithmStep]:
        return iter(self.steps)

    def __getitem__(self, i: int) -> AlgorithmStep:
        return self.steps[i]

    @property
    def last_index(self) -> int:
        return len(self.steps) - 1

    @property
    def first(self) -> AlgorithmStep:
        return self.steps[0]

    @property
    def last(self) -> AlgorithmStep:
        return self.steps[-1]

    def kinds(self) -> list[StepKind]:
        return [s.kind for s in self.steps]

    def count(self, kind: StepKind) -> int:
        return sum(1 for s in self.steps if s.kind is kind)

    def to_records(self) -> list[dict]:
        return [s.to_dict() for s in self.steps]


class TraceRecorder:
    """Appends steps while an algorithm runs; `freeze()` hands out the immutable Trace."""

    def __init__(self):
        self._steps: list[AlgorithmStep] = []

    def __len__(self) -> int:
        return len(self._steps)

    def init(self, distances: Mapping[NodeId, float], description: str) -> None:
        self._steps.append(InitStep(description=description, distances=dict(distances)))

    def visit(
        self,
        distances: Mapping[NodeId, float],
        visited,
        description: str,
        *,
        node: NodeId | None = None,
        round: int | None = None,
    ) -> None:
        self._steps.append(
            VisitStep(
                description=description,
                distances=dict(distances),
                visited=tuple(visited),
                node=node,
                round=round,
            )
        )

    def update(
        self,
        distances: Mapping[NodeId, float],
        visited,
        *,
        node: NodeId,
        via: NodeId,
        old: float,
        new: float,
    ) -> None:
        self._steps.append(
            UpdateStep(
                description=f"Update distance to {node} via {via}: {_fmt(old)} → {_fmt(new)}",
                distances=dict(distances),
                visited=tuple(visited),
                node=node,
                via=via,
                old_distance=old,
                new_distance=new,
            )
        )

    def final(
        self,
        distances: Mapping[NodeId, float],
        visited,
        description: str = "Algorithm completed",
        *,
        failure: str | None = None,
        edge: Edge | None = None,
    ) -> None:
        self._steps.append(
            FinalStep(
                description=description,
                distances=dict(distances),
                visited=tuple(visited),
                failure=failure,
                edge=edge,
            )
        )

    def freeze(self) -> Trace:
        return Trace(tuple(self._steps))


def _fmt(x: float) -> str:
    if x == float("inf"):
        return "∞"
    return f"{x:g}"
