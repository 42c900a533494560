"""Greedy Steiner tree approximation over all-pairs shortest paths.

Components:
- core/ - Graph container, vertex pairs, exceptions, YAML/networkx I/O
- solver/ - Floyd-Warshall shortest paths, nearest-target Steiner heuristic
- config, cli - YAML run configuration and command-line driver
"""

__version__ = "0.1.0"

from .core.exceptions import (
    SteinerError,
    InvalidArgumentError,
    TargetUnreachableError,
    PathReconstructionError,
    GraphFormatError,
    ConfigurationError,
)
from .core.graph import Graph, Edge
from .core.pair import VertexPair
from .solver.shortest_paths import ShortestPathEngine, compute_shortest_paths
from .solver.steiner_tree import (
    SteinerTree,
    SteinerTreeApproximator,
    approximate_steiner_tree,
)

__all__ = [
    "Graph",
    "Edge",
    "VertexPair",
    "ShortestPathEngine",
    "compute_shortest_paths",
    "SteinerTree",
    "SteinerTreeApproximator",
    "approximate_steiner_tree",
    "solve_file",
    "SteinerError",
    "InvalidArgumentError",
    "TargetUnreachableError",
    "PathReconstructionError",
    "GraphFormatError",
    "ConfigurationError",
]


def solve_file(graph_path: str, targets=None):
    """High-level API: load a YAML graph and approximate its Steiner tree.

    Args:
        graph_path: Path to a YAML graph document
        targets: Target ids (defaults to the document's targets)

    Returns:
        (graph, tree): Loaded graph with the tree's edges marked, and the tree
    """
    from .core.graph_io import load_graph

    document = load_graph(graph_path)
    tree = SteinerTreeApproximator().approximate(
        document.graph,
        targets if targets is not None else document.targets
    )
    document.graph.mark_edges(tree.edges)
    return document.graph, tree
