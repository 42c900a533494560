"""Test graph container."""

import math

import numpy as np
import pytest

from steiner_approx.core.exceptions import InvalidArgumentError
from steiner_approx.core.graph import Graph
from steiner_approx.core.pair import VertexPair


def test_graph_creation(cycle_graph):
    """Test graph creation."""
    assert cycle_graph.num_vertices() == 4
    assert cycle_graph.num_edges() == 4


def test_negative_vertex_count():
    with pytest.raises(InvalidArgumentError):
        Graph(-1)


def test_empty_graph():
    graph = Graph(0)
    assert list(graph.vertex_iterator()) == []
    assert graph.edges() == []


def test_vertex_iterator_is_restartable(cycle_graph):
    """Each call returns a fresh iterator in the same order."""
    first = cycle_graph.vertex_iterator()
    next(first)
    assert list(cycle_graph.vertex_iterator()) == [0, 1, 2, 3]
    assert list(cycle_graph.vertex_iterator()) == [0, 1, 2, 3]


def test_find_edge_is_symmetric(cycle_graph):
    edge = cycle_graph.find_edge(0, 1)
    assert edge is not None
    assert edge is cycle_graph.find_edge(1, 0)
    assert edge.get_weight() == 1.0
    assert cycle_graph.find_edge(0, 2) is None


def test_find_edge_accepts_numpy_ints(cycle_graph):
    assert cycle_graph.find_edge(np.int64(2), np.int64(3)) is not None


def test_neighbors(cycle_graph):
    assert sorted(cycle_graph.neighbors(0)) == [1, 3]


@pytest.mark.parametrize("u, v, weight", [
    (0, 0, 1.0),           # self-loop
    (0, 4, 1.0),           # out of range
    (-1, 1, 1.0),          # negative id
    (0, 2, -1.0),          # negative weight
    (0, 2, math.inf),
    (0, 2, math.nan),
])
def test_add_edge_rejects_invalid(cycle_graph, u, v, weight):
    with pytest.raises(InvalidArgumentError):
        cycle_graph.add_edge(u, v, weight)


def test_add_edge_rejects_duplicate(cycle_graph):
    """Duplicates are rejected in either orientation."""
    with pytest.raises(InvalidArgumentError):
        cycle_graph.add_edge(1, 0, 5.0)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        Graph(2).add_edge(0, 0)


def test_non_int_vertex_rejected(cycle_graph):
    with pytest.raises(InvalidArgumentError):
        cycle_graph.find_edge(0, 1.0)
    with pytest.raises(InvalidArgumentError):
        cycle_graph.find_edge(True, 1)


def test_marks(cycle_graph):
    """Marking, reading back and resetting edge marks."""
    assert cycle_graph.marked_edges() == []

    count = cycle_graph.mark_edges([VertexPair(0, 1), VertexPair(1, 2)])
    assert count == 2
    assert {e.key for e in cycle_graph.marked_edges()} == {VertexPair(0, 1), VertexPair(1, 2)}
    assert cycle_graph.marked_weight() == 2.0

    cycle_graph.reset_marks()
    assert cycle_graph.marked_edges() == []


def test_mark_missing_edge(cycle_graph):
    with pytest.raises(InvalidArgumentError):
        cycle_graph.mark_edges([VertexPair(0, 2)])


def test_set_mark_normalizes_flag(cycle_graph):
    edge = cycle_graph.find_edge(2, 3)
    edge.set_mark(True)
    assert edge.mark == 1
    edge.set_mark(0)
    assert edge.mark == 0


def test_edge_other(cycle_graph):
    edge = cycle_graph.find_edge(0, 1)
    assert edge.other(0) == 1
    assert edge.other(1) == 0
    with pytest.raises(InvalidArgumentError):
        edge.other(2)


def test_labels():
    graph = Graph(3, labels={0: "src"})
    assert graph.label(0) == "src"
    assert graph.label(2) == "2"
    with pytest.raises(InvalidArgumentError):
        Graph(2, labels={5: "bad"})
