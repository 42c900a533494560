"""Test greedy Steiner tree approximation."""

import pytest

from steiner_approx.core.exceptions import InvalidArgumentError, TargetUnreachableError
from steiner_approx.core.graph import Graph
from steiner_approx.core.pair import VertexPair
from steiner_approx.solver.shortest_paths import ShortestPathEngine
from steiner_approx.solver.steiner_tree import SteinerTreeApproximator, approximate_steiner_tree


def test_cycle_example(cycle_graph):
    """Targets on opposite corners of a unit 4-cycle: weight 2, one arc marked."""
    total = approximate_steiner_tree(cycle_graph, [0, 2])
    assert total == 2

    marked = {edge.key for edge in cycle_graph.marked_edges()}
    assert len(marked) == 2
    assert marked in (
        {VertexPair(0, 1), VertexPair(1, 2)},
        {VertexPair(0, 3), VertexPair(2, 3)},
    )


def test_approximate_does_not_mark(cycle_graph):
    tree = SteinerTreeApproximator().approximate(cycle_graph, [0, 2])
    assert tree.total_weight == 2
    assert tree.edges == frozenset({VertexPair(0, 1), VertexPair(1, 2)})
    assert tree.vertices == frozenset({0, 1, 2})
    assert tree.paths == ((0, 1, 2),)
    assert cycle_graph.marked_edges() == []


def test_single_target(cycle_graph):
    tree = SteinerTreeApproximator().approximate(cycle_graph, [3])
    assert tree.total_weight == 0
    assert tree.edges == frozenset()
    assert tree.vertices == frozenset({3})


def test_duplicate_targets(cycle_graph):
    assert approximate_steiner_tree(cycle_graph, [1, 1, 1]) == 0
    assert cycle_graph.marked_edges() == []


def test_nearest_target_first(path_graph):
    """The closest target is spliced first, then grown from the tree."""
    tree = SteinerTreeApproximator().approximate(path_graph, [0, 3, 1])
    assert tree.paths == ((0, 1), (1, 2, 3))
    assert tree.total_weight == 3
    assert len(tree.edges) == 3


def test_tie_break_lowest_target_id():
    """Equally close targets are connected in ascending id order."""
    graph = Graph.from_edges(3, [(0, 1, 2), (0, 2, 2)])
    tree = SteinerTreeApproximator().approximate(graph, [0, 2, 1])
    assert tree.paths == ((0, 1), (0, 2))
    assert tree.total_weight == 4


def test_tie_break_lowest_tree_vertex():
    """Target 3 is 1 away from both 1 and 2; the lower tree vertex wins."""
    graph = Graph.from_edges(4, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1)])
    tree = SteinerTreeApproximator().approximate(graph, [0, 1, 2, 3])
    assert tree.paths == ((0, 1), (0, 2), (1, 3))
    assert tree.total_weight == 3


def test_weight_truncated_per_path():
    graph = Graph.from_edges(3, [(0, 1, 1.5), (1, 2, 1.5)])
    tree = SteinerTreeApproximator().approximate(graph, [0, 1, 2])
    assert tree.total_weight == 2


def test_shared_engine(random_graph):
    engine = ShortestPathEngine(random_graph)
    approximator = SteinerTreeApproximator()
    assert approximator.approximate(random_graph, [0, 5, 9], engine=engine) == \
        approximator.approximate(random_graph, [0, 5, 9])


def test_engine_size_mismatch(cycle_graph):
    engine = ShortestPathEngine(Graph(2))
    with pytest.raises(InvalidArgumentError):
        SteinerTreeApproximator().approximate(cycle_graph, [0, 2], engine=engine)


def test_empty_targets(cycle_graph):
    with pytest.raises(InvalidArgumentError):
        approximate_steiner_tree(cycle_graph, [])


@pytest.mark.parametrize("targets", [[0, 4], [-1], [0, "1"]])
def test_unknown_targets(cycle_graph, targets):
    with pytest.raises(InvalidArgumentError):
        approximate_steiner_tree(cycle_graph, targets)


def test_unreachable_target(disconnected_graph):
    """A target in another component raises and leaves the graph unmarked."""
    with pytest.raises(TargetUnreachableError) as exc_info:
        approximate_steiner_tree(disconnected_graph, [0, 1, 3])
    assert exc_info.value.targets == [3]
    assert exc_info.value.connected == [0, 1]
    assert disconnected_graph.marked_edges() == []


def test_rerun_after_reset(random_graph):
    first = approximate_steiner_tree(random_graph, [2, 7, 11, 14])
    first_marks = {edge.key for edge in random_graph.marked_edges()}

    random_graph.reset_marks()
    second = approximate_steiner_tree(random_graph, [2, 7, 11, 14])
    assert second == first
    assert {edge.key for edge in random_graph.marked_edges()} == first_marks
