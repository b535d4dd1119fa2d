import heapq

import pytest

from pathgraph import DirectedEdge, GraphInputError, Path, PathCursor


def _e(parent, child, label):
    return DirectedEdge(parent, child, label)


def test_seeded_from_one_edge():
    path = Path(_e("A", "B", 3.0))

    assert path.cost == 3.0
    assert path.start == "A"
    assert path.destination == "B"
    assert len(path) == 1


def test_cost_tracks_every_append():
    weights = [0.1, 0.2, 0.3, 1.5, 2.25]
    nodes = ["n0", "n1", "n2", "n3", "n4", "n5"]
    path = Path(_e(nodes[0], nodes[1], weights[0]))
    expected = weights[0]
    assert path.cost == expected

    for i in range(1, len(weights)):
        path.add_edge(_e(nodes[i], nodes[i + 1], weights[i]))
        expected += weights[i]
        assert path.cost == expected
        assert path.cost == sum(e.label for e in path.edges)


def test_edges_are_continuous():
    path = Path.from_edges([_e("A", "B", 1), _e("B", "C", 2), _e("C", "D", 3)])
    edges = path.edges

    for earlier, later in zip(edges, edges[1:]):
        assert earlier.child == later.parent
    assert path.nodes() == ["A", "B", "C", "D"]


def test_discontinuous_append_rejected():
    path = Path(_e("A", "B", 1.0))
    with pytest.raises(GraphInputError):
        path.add_edge(_e("C", "D", 1.0))


def test_unlabelled_edge_rejected():
    with pytest.raises(GraphInputError):
        Path(DirectedEdge("A", "B"))


def test_copy_drops_zero_weight_seed():
    path = Path(_e("A", "A", 0.0))
    path.add_edge(_e("A", "B", 2.0))
    path.add_edge(_e("B", "C", 1.0))

    clone = path.copy()

    assert clone.edges == (_e("A", "B", 2.0), _e("B", "C", 1.0))
    assert clone.cost == path.cost == 3.0


def test_copy_of_seed_alone_is_empty():
    clone = Path(_e("A", "A", 0.0)).copy()

    assert len(clone) == 0
    assert clone.cost == 0
    assert clone.destination is None


def test_copy_is_independent():
    path = Path(_e("A", "B", 1.0))
    clone = path.copy()
    clone.add_edge(_e("B", "C", 1.0))

    assert len(path) == 1
    assert path.cost == 1.0
    assert clone.cost == 2.0


def test_zero_weight_edge_between_distinct_nodes_survives_copy():
    path = Path.from_edges([_e("A", "B", 0.0), _e("B", "C", 1.0)])

    assert path.copy().edges == path.edges


def test_ordered_by_cost_only():
    cheap = Path(_e("A", "B", 1.0))
    dear = Path(_e("X", "Y", 4.0))
    same = Path(_e("P", "Q", 1.0))

    assert cheap < dear
    assert dear > cheap
    assert cheap <= same and cheap >= same
    assert cheap != same

    heap = [dear, cheap]
    heapq.heapify(heap)
    assert heapq.heappop(heap) is cheap


def test_cursor_walks_segments():
    path = Path.from_edges([_e("A", "B", 1.0), _e("B", "C", 2.0)])
    cursor = PathCursor(path)

    assert cursor.current_start() is None
    assert cursor.current_weight() is None
    assert cursor.has_more()

    cursor.advance()
    assert (cursor.current_start(), cursor.current_end(), cursor.current_weight()) == ("A", "B", 1.0)
    assert cursor.has_more()

    cursor.advance()
    assert (cursor.current_start(), cursor.current_end(), cursor.current_weight()) == ("B", "C", 2.0)
    assert not cursor.has_more()

    cursor.advance()
    assert cursor.exhausted
    assert cursor.current_start() is None
    assert cursor.current_end() is None
    assert cursor.current_weight() is None


def test_cursor_skips_seed_and_does_not_touch_path():
    path = Path(_e("A", "A", 0.0))
    path.add_edge(_e("A", "B", 1.0))
    cursor = PathCursor(path)

    cursor.advance()
    assert cursor.current_start() == "A"
    assert cursor.current_end() == "B"
    assert not cursor.has_more()
    assert len(path) == 2


def test_cursor_over_empty_path():
    cursor = PathCursor(Path.empty())

    assert not cursor.has_more()
    cursor.advance()
    assert cursor.current_end() is None
