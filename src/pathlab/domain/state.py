# domain/state.py
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from enum import Enum

from pathlab.domain.entities.graph import Edge, Graph, Node, NodeId
from pathlab.domain.errors import GraphError, GraphLockedError


@dataclass
class NodeIdGenerator:
    """Mints `node1`, `node2`, ... for one editor. Not shared between graphs."""

    prefix: str = "node"
    start: int = 1
    _next: int = field(init=False, repr=False)

    def __post_init__(self):
        self._next = self.start

    def __call__(self, taken=()) -> NodeId:
        while True:
            nid = f"{self.prefix}{self._next}"
            self._next += 1
            if nid not in taken:
                return nid

    def reset(self) -> None:
        self._next = self.start


class EdgeInsert(str, Enum):
    ADDED = "added"
    REPLACED = "replaced"
    SELF_LOOP_DROPPED = "self_loop_dropped"


@dataclass
class GraphState:
    """
    Mutable editing surface behind the graph editor. Algorithms never see this object,
    only the immutable `snapshot()`. While locked (a run or playback session is active)
    every edit raises GraphLockedError.
    """

    ids: NodeIdGenerator = field(default_factory=NodeIdGenerator)
    nodes: dict[NodeId, Node] = field(default_factory=dict)
    edges: dict[tuple[NodeId, NodeId], Edge] = field(default_factory=dict)
    source: NodeId | None = None
    target: NodeId | None = None
    _locks: int = field(default=0, repr=False)

    # ---------------- locking ----------------

    @property
    def locked(self) -> bool:
        return self._locks > 0

    def lock(self) -> None:
        self._locks += 1

    def unlock(self) -> None:
        if self._locks == 0:
            raise RuntimeError("unlock() without matching lock()")
        self._locks -= 1

    @contextmanager
    def session(self) -> Iterator[Graph]:
        """Lock edits for the duration of the block and yield the snapshot."""
        self.lock()
        try:
            yield self.snapshot()
        finally:
            self.unlock()

    def _check_editable(self, operation: str) -> None:
        if self.locked:
            raise GraphLockedError(operation)

    # ---------------- nodes ----------------

    def add_node(self, x: float = 0.0, y: float = 0.0, label: str = "") -> Node:
        self._check_editable("add node")
        nid = self.ids(self.nodes)
        node = Node(id=nid, label=label or nid, x=x, y=y)
        self.nodes[nid] = node
        return node

    def update_node(self, node_id: NodeId, **changes) -> Node:
        self._check_editable("update node")
        if "id" in changes:
            raise GraphError("node id cannot be changed")
        node = replace(self._require(node_id), **changes)
        self.nodes[node_id] = node
        return node

    def remove_node(self, node_id: NodeId) -> None:
        self._check_editable("remove node")
        self._require(node_id)
        del self.nodes[node_id]
        self.edges = {k: e for k, e in self.edges.items() if node_id not in k}
        if self.source == node_id:
            self.source = None
        if self.target == node_id:
            self.target = None

    # ---------------- edges ----------------

    def add_edge(self, source: NodeId, target: NodeId, weight: float) -> EdgeInsert:
        self._check_editable("add edge")
        self._require(source)
        self._require(target)
        if source == target:
            return EdgeInsert.SELF_LOOP_DROPPED
        outcome = EdgeInsert.REPLACED if (source, target) in self.edges else EdgeInsert.ADDED
        self.edges[(source, target)] = Edge(source, target, float(weight))
        return outcome

    def update_edge(self, source: NodeId, target: NodeId, weight: float) -> Edge:
        self._check_editable("update edge")
        if (source, target) not in self.edges:
            raise GraphError(f"no edge {source!r} -> {target!r}")
        edge = Edge(source, target, float(weight))
        self.edges[(source, target)] = edge
        return edge

    def remove_edge(self, source: NodeId, target: NodeId) -> None:
        self._check_editable("remove edge")
        self.edges.pop((source, target), None)

    # ---------------- whole graph ----------------

    def set_source(self, node_id: NodeId | None) -> None:
        if node_id is not None:
            self._require(node_id)
        self.source = node_id

    def set_target(self, node_id: NodeId | None) -> None:
        if node_id is not None:
            self._require(node_id)
        self.target = node_id

    def clear(self) -> None:
        self._check_editable("clear graph")
        self.nodes.clear()
        self.edges.clear()
        self.source = self.target = None
        self.ids.reset()

    def load(
        self, graph: Graph, *, source: NodeId | None = None, target: NodeId | None = None
    ) -> None:
        self._check_editable("load graph")
        self.nodes = {n.id: n for n in graph.nodes}
        self.edges = {e.key: e for e in graph.edges}
        self.source = source
        self.target = target
        self.ids.reset()

    def snapshot(self) -> Graph:
        return Graph(tuple(self.nodes.values()), tuple(self.edges.values()))

    def _require(self, node_id: NodeId) -> Node:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise GraphError(f"unknown node {node_id!r}") from None
