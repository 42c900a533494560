"""Test vertex pairs."""

from steiner_approx.core.pair import VertexPair


def test_edge_key_is_canonical():
    """Edge keys put the lower id first."""
    assert VertexPair.edge_key(3, 1) == VertexPair(1, 3)
    assert VertexPair.edge_key(1, 3) == VertexPair(1, 3)


def test_pair_is_hashable_and_ordered():
    pairs = {VertexPair(2, 3), VertexPair(0, 1), VertexPair(2, 3)}
    assert sorted(pairs) == [VertexPair(0, 1), VertexPair(2, 3)]


def test_unpacking():
    first, second = VertexPair(4, 7)
    assert (first, second) == (4, 7)
