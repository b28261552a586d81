import math

import pytest

from pathlab.domain.entities.graph import Edge, Graph, Node
from pathlab.domain.errors import GraphError


def test_node_label_defaults_to_id():
    assert Node("A").label == "A"
    assert Node("A", "start").label == "start"
    with pytest.raises(GraphError):
        Node("")


def test_rejects_duplicate_node_ids():
    with pytest.raises(GraphError, match="duplicate node"):
        Graph((Node("A"), Node("A")))


def test_rejects_edges_to_unknown_nodes():
    with pytest.raises(GraphError, match="unknown node"):
        Graph((Node("A"),), (Edge("A", "Z", 1.0),))


def test_rejects_non_finite_weights():
    with pytest.raises(GraphError, match="non-finite"):
        Graph((Node("A"), Node("B")), (Edge("A", "B", math.inf),))


def test_constructor_rejects_duplicate_pairs_but_build_overwrites():
    nodes = (Node("A"), Node("B"), Node("C"))
    edges = (Edge("A", "B", 1.0), Edge("A", "C", 2.0), Edge("A", "B", 5.0))
    with pytest.raises(GraphError, match="duplicate edge"):
        Graph(nodes, edges)

    g = Graph.build(nodes, edges)
    # first position kept, last weight wins
    assert g.edges == (Edge("A", "B", 5.0), Edge("A", "C", 2.0))


def test_graph_errors_are_value_errors():
    with pytest.raises(ValueError):
        Graph((Node("A"), Node("A")))


def test_self_loops_are_allowed_by_the_data_model():
    g = Graph((Node("A"),), (Edge("A", "A", 3.0),))
    assert g.edges[0].is_self_loop


def test_queries(small_graph):
    assert small_graph.node_ids() == ("A", "B", "C")
    assert small_graph.has_node("B") and not small_graph.has_node("Z")
    assert small_graph.node("C").label == "C"
    assert [e.target for e in small_graph.adjacency["A"]] == ["B", "C"]
    assert small_graph.adjacency["C"] == ()
    assert small_graph.edge("B", "C").weight == 1.0
    assert small_graph.edge("C", "B") is None
    assert small_graph.path_weight(["A", "B", "C"]) == 5.0
    assert small_graph.path_weight(["A"]) == 0.0
    with pytest.raises(GraphError):
        small_graph.path_weight(["C", "A"])
    with pytest.raises(GraphError):
        small_graph.node("Z")


def test_plain_records(small_graph):
    data = small_graph.to_dict()
    assert data["edges"][0] == {"source": "A", "target": "B", "weight": 4.0}
    assert data["nodes"][0]["id"] == "A"
    assert Graph.from_dict(data) == small_graph


def test_empty_graph():
    g = Graph()
    assert g.is_empty
    assert len(g) == 0
