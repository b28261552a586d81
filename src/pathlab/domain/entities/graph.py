# domain/entities/graph.py
from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, dataclass, field
from functools import cached_property

from pathlab.domain.errors import GraphError

NodeId = str


@dataclass(frozen=True)
class Node:
    id: NodeId
    label: str = ""
    x: float = 0.0  # presentation only
    y: float = 0.0

    def __post_init__(self):
        if not self.id:
            raise GraphError("node id must be a non-empty string")
        if not self.label:
            object.__setattr__(self, "label", self.id)


@dataclass(frozen=True)
class Edge:
    source: NodeId
    target: NodeId
    weight: float

    @property
    def key(self) -> tuple[NodeId, NodeId]:
        return (self.source, self.target)

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


@dataclass(frozen=True)
class Graph:
    """
    Immutable snapshot read by the algorithms.

    Invariants (checked on construction):
      - node ids are unique
      - every edge endpoint is a node of this graph
      - at most one edge per ordered (source, target) pair
      - weights are finite
    """

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()
    _index: dict[NodeId, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))
        index: dict[NodeId, int] = {}
        for i, n in enumerate(self.nodes):
            if n.id in index:
                raise GraphError(f"duplicate node id {n.id!r}")
            index[n.id] = i
        seen: set[tuple[NodeId, NodeId]] = set()
        for e in self.edges:
            if e.source not in index or e.target not in index:
                raise GraphError(f"edge {e.source!r} -> {e.target!r} references unknown node")
            if not math.isfinite(e.weight):
                raise GraphError(f"edge {e.source!r} -> {e.target!r} has non-finite weight")
            if e.key in seen:
                raise GraphError(f"duplicate edge {e.source!r} -> {e.target!r}")
            seen.add(e.key)
        object.__setattr__(self, "_index", index)

    @classmethod
    def build(cls, nodes: Iterable[Node], edges: Iterable[Edge] = ()) -> Graph:
        """Construct a graph, collapsing repeated (source, target) pairs: last weight wins."""
        merged: dict[tuple[NodeId, NodeId], Edge] = {}
        for e in edges:
            merged[e.key] = e
        return cls(tuple(nodes), tuple(merged.values()))

    @classmethod
    def from_dict(cls, data: Mapping) -> Graph:
        nodes = [Node(**n) for n in data.get("nodes", ())]
        edges = [Edge(**e) for e in data.get("edges", ())]
        return cls.build(nodes, edges)

    def to_dict(self) -> dict:
        return {
            "nodes": [asdict(n) for n in self.nodes],
            "edges": [asdict(e) for e in self.edges],
        }

    # ---------------- queries ----------------

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def node_ids(self) -> tuple[NodeId, ...]:
        return tuple(n.id for n in self.nodes)

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._index

    def node(self, node_id: NodeId) -> Node:
        try:
            return self.nodes[self._index[node_id]]
        except KeyError:
            raise GraphError(f"unknown node {node_id!r}") from None

    def edge(self, source: NodeId, target: NodeId) -> Edge | None:
        return self._edge_map.get((source, target))

    @cached_property
    def _edge_map(self) -> dict[tuple[NodeId, NodeId], Edge]:
        return {e.key: e for e in self.edges}

    @cached_property
    def adjacency(self) -> dict[NodeId, tuple[Edge, ...]]:
        """Outgoing edges per node, in edge insertion order."""
        out: dict[NodeId, list[Edge]] = {n.id: [] for n in self.nodes}
        for e in self.edges:
            out[e.source].append(e)
        return {k: tuple(v) for k, v in out.items()}

    def path_weight(self, path: Sequence[NodeId]) -> float:
        total = 0.0
        for u, v in zip(path, path[1:]):
            e = self.edge(u, v)
            if e is None:
                raise GraphError(f"no edge {u!r} -> {v!r} on path")
            total += e.weight
        return total
