"""
Shared fixtures: small hand-checked graphs used across the test suite.
"""

import pytest

from pathlab.domain.entities.graph import Edge, Graph, Node


def graph_of(edges, nodes=None) -> Graph:
    """Build a Graph from (source, target, weight) triples; nodes default to endpoints."""
    if nodes is None:
        nodes = []
        for s, t, _ in edges:
            for nid in (s, t):
                if nid not in nodes:
                    nodes.append(nid)
    return Graph.build([Node(n) for n in nodes], [Edge(s, t, float(w)) for s, t, w in edges])


@pytest.fixture
def small_graph() -> Graph:
    return graph_of([("A", "B", 4), ("A", "C", 2), ("B", "C", 1)])


@pytest.fixture
def negative_cycle_graph() -> Graph:
    return graph_of([("A", "B", 1), ("B", "C", -1), ("C", "A", -1)])


@pytest.fixture
def disconnected_graph() -> Graph:
    return graph_of([("A", "B", 1), ("C", "D", 2)], nodes=["A", "B", "C", "D", "E"])


@pytest.fixture
def build_graph():
    return graph_of
