# domain/errors.py
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlab.domain.entities.graph import Edge, NodeId
    from pathlab.domain.entities.trace import Trace


class PathlabError(Exception):
    """Base class for every error raised by the engine."""


class GraphError(PathlabError, ValueError):
    """A graph invariant does not hold (duplicate ids, dangling edges, bad weights)."""


class GraphLockedError(PathlabError):
    def __init__(self, operation: str):
        super().__init__(f"graph is locked by an active session; cannot {operation}")
        self.operation = operation


class EmptyGraphError(PathlabError):
    def __init__(self):
        super().__init__("graph has no nodes")


class UnknownSourceError(PathlabError):
    def __init__(self, source: NodeId):
        super().__init__(f"source node {source!r} not found in graph")
        self.source = source


class NegativeCycleError(PathlabError):
    """Raised by Bellman-Ford when an edge is still relaxable after |V|-1 rounds."""

    def __init__(self, edge: Edge, trace: Trace):
        super().__init__(
            f"graph contains a negative weight cycle (edge {edge.source} -> {edge.target})"
        )
        self.edge = edge
        self.trace = trace
