"""Shortest-path and Steiner tree solvers."""

from .shortest_paths import ShortestPathEngine, compute_shortest_paths
from .steiner_tree import SteinerTree, SteinerTreeApproximator, approximate_steiner_tree

__all__ = [
    "ShortestPathEngine",
    "compute_shortest_paths",
    "SteinerTree",
    "SteinerTreeApproximator",
    "approximate_steiner_tree",
]
