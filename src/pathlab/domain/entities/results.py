# domain/entities/results.py
from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum

from pathlab.domain.entities.graph import NodeId
from pathlab.domain.entities.trace import Trace

INF = math.inf


class AlgorithmKind(str, Enum):
    DIJKSTRA = "dijkstra"
    BELLMAN_FORD = "bellman_ford"
    FLOYD_WARSHALL = "floyd_warshall"

    @classmethod
    def _missing_(cls, value):
        # camelCase spellings used by the browser UI
        aliases = {"bellmanFord": cls.BELLMAN_FORD, "floydWarshall": cls.FLOYD_WARSHALL}
        return aliases.get(value)

    @property
    def label(self) -> str:
        return {
            AlgorithmKind.DIJKSTRA: "Dijkstra's",
            AlgorithmKind.BELLMAN_FORD: "Bellman-Ford",
            AlgorithmKind.FLOYD_WARSHALL: "Floyd-Warshall",
        }[self]


@dataclass(frozen=True)
class PathResult:
    algorithm: AlgorithmKind
    source: NodeId
    trace: Trace
    distances: Mapping[NodeId, float]
    paths: Mapping[NodeId, tuple[NodeId, ...]]
    elapsed_ms: float

    def distance_to(self, node: NodeId) -> float:
        return self.distances[node]

    def path_to(self, node: NodeId) -> tuple[NodeId, ...]:
        return self.paths[node]

    def is_reachable(self, node: NodeId) -> bool:
        return self.distances[node] < INF

    def reachable(self) -> list[NodeId]:
        return [n for n, d in self.distances.items() if d < INF]

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm.value,
            "source": self.source,
            "steps": self.trace.to_records(),
            "distances": dict(self.distances),
            "paths": {k: list(v) for k, v in self.paths.items()},
            "elapsed_ms": self.elapsed_ms,
        }


@dataclass(frozen=True)
class ComparisonResult:
    algorithm: AlgorithmKind
    elapsed_ms: float
    distances: Mapping[NodeId, float]

    @classmethod
    def from_result(cls, result: PathResult) -> ComparisonResult:
        return cls(result.algorithm, result.elapsed_ms, dict(result.distances))

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm.value,
            "elapsed_ms": self.elapsed_ms,
            "distances": dict(self.distances),
        }


@dataclass(frozen=True)
class ComparisonReport:
    """Per-algorithm results in invocation order, plus simple aggregates."""

    source: NodeId
    results: tuple[ComparisonResult, ...]

    def __iter__(self) -> Iterator[ComparisonResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, i: int) -> ComparisonResult:
        return self.results[i]

    def algorithms(self) -> list[AlgorithmKind]:
        return [r.algorithm for r in self.results]

    def get(self, kind: AlgorithmKind | str) -> ComparisonResult | None:
        kind = AlgorithmKind(kind)
        return next((r for r in self.results if r.algorithm is kind), None)

    def fastest(self) -> ComparisonResult | None:
        return min(self.results, key=lambda r: r.elapsed_ms, default=None)

    def distances_agree(self) -> bool:
        if not self.results:
            return True
        first = dict(self.results[0].distances)
        return all(dict(r.distances) == first for r in self.results[1:])

    def distance_table(self, target: NodeId) -> list[dict]:
        """Rows for a timing/distance table; `distance` is None when target is unknown."""
        return [
            {
                "algorithm": r.algorithm.value,
                "label": r.algorithm.label,
                "elapsed_ms": r.elapsed_ms,
                "distance": r.distances.get(target),
            }
            for r in self.results
        ]

    def to_dict(self) -> dict:
        return {"source": self.source, "results": [r.to_dict() for r in self.results]}
