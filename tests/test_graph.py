import pytest

from pathgraph import DirectedEdge, Graph, GraphInputError, GraphView


def test_add_node_is_idempotent():
    g = Graph()
    g.add_node("A")
    g.add_node("A")

    assert g.number_of_nodes() == 1
    assert g.contains_node("A")
    assert "A" in g
    assert g.edges_from("A") == frozenset()


def test_add_node_rejects_missing():
    with pytest.raises(GraphInputError):
        Graph().add_node(None)


def test_add_edge_adds_endpoints():
    g = Graph()
    g.add_edge("A", "B", 1.0)

    assert set(g.nodes()) == {"A", "B"}
    assert g.edges_from("B") == frozenset()


def test_add_edge_requires_label():
    g = Graph()
    with pytest.raises(GraphInputError):
        g.add_edge("A", "B", None)
    assert g.number_of_nodes() == 0


def test_add_edge_rejects_missing_endpoint():
    with pytest.raises(GraphInputError):
        Graph().add_edge(None, "B", 1.0)


def test_duplicate_edge_collapses():
    g = Graph()
    g.add_edge("A", "B", 1.0)
    g.add_edge("A", "B", 1.0)

    assert len(g.edges_from("A")) == 1


def test_parallel_edges_with_different_labels_coexist():
    g = Graph()
    g.add_edge("A", "B", 1.0)
    g.add_edge("A", "B", 2.0)

    assert len(g.edges_from("A")) == 2
    assert g.contains_edge("A", "B", 1.0)
    assert g.contains_edge("A", "B", 2.0)
    assert not g.contains_edge("A", "B", 3.0)


def test_contains_edge_without_label_matches_any():
    g = Graph(edges=[("A", "B", 4.0)])

    assert g.contains_edge("A", "B")
    assert not g.contains_edge("B", "A")
    assert not g.contains_edge("Z", "A")


def test_contains_edge_rejects_missing_endpoint():
    g = Graph(edges=[("A", "B", 4.0)])
    with pytest.raises(GraphInputError):
        g.contains_edge("A", None)
    with pytest.raises(GraphInputError):
        g.contains_edge(None, "B")


def test_edges_from_unknown_node_is_none():
    assert Graph().edges_from("nope") is None


def test_edges_from_is_read_only():
    g = Graph(edges=[("A", "B", 1.0)])
    edges = g.edges_from("A")

    with pytest.raises(AttributeError):
        edges.add(DirectedEdge("A", "C", 1.0))
    assert not g.contains_node("C")


def test_nodes_view_is_live_and_read_only():
    g = Graph(nodes=["A"])
    nodes = g.nodes()
    g.add_node("B")

    assert set(nodes) == {"A", "B"}
    assert not hasattr(nodes, "add")


def test_self_loop_allowed():
    g = Graph()
    g.add_edge("A", "A", 1.0)

    assert g.contains_edge("A", "A")
    assert g.number_of_nodes() == 1


def test_constructor_accepts_edge_objects():
    g = Graph(edges=[DirectedEdge("A", "B", 1.0), ("B", "C", 2.0)])

    assert g.number_of_edges() == 2
    assert g.contains_edge("B", "C", 2.0)


def test_constructor_rejects_bad_edge_spec():
    with pytest.raises(GraphInputError):
        Graph(edges=[("A", "B")])


def test_add_directed_edge_requires_label():
    g = Graph()
    with pytest.raises(GraphInputError):
        g.add_directed_edge(DirectedEdge("A", "B"))


def test_iter_edges(abc_graph):
    edges = set(abc_graph.iter_edges())

    assert edges == {
        DirectedEdge("A", "B", 1.0),
        DirectedEdge("B", "C", 1.0),
        DirectedEdge("A", "C", 5.0),
    }
    assert abc_graph.number_of_edges() == 3
    assert abc_graph.children("A") == {"B", "C"}


def test_view_reflects_graph_but_cannot_mutate(abc_graph):
    view = abc_graph.view()

    assert isinstance(view, GraphView)
    assert not hasattr(view, "add_edge")
    assert not hasattr(view, "add_node")

    abc_graph.add_edge("C", "D", 1.0)
    assert view.contains_edge("C", "D")
    assert "D" in view
    assert len(view) == 4


def test_add_directed_edge_rejects_missing_edge():
    with pytest.raises(GraphInputError):
        Graph().add_directed_edge(None)
