"""Greedy Steiner tree approximation over all-pairs shortest paths.

Starting from the first target, repeatedly splice in the shortest path from
the partial tree to the closest remaining target. This is a heuristic, not an
exact Steiner tree.

Tie-break contract: candidate (target, tree vertex) pairs are scanned with
targets in ascending id order and tree vertices in ascending id order, and only
a strictly lighter pair replaces the current best. Among equally close pairs
the lowest target id wins, then the lowest tree vertex id.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Set, Tuple

from ..core.exceptions import (
    InvalidArgumentError,
    PathReconstructionError,
    TargetUnreachableError,
)
from ..core.graph import Graph, VertexId
from ..core.pair import VertexPair
from .shortest_paths import ShortestPathEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SteinerTree:
    """Result of one approximation.

    ``total_weight`` sums each spliced path weight truncated toward zero.
    """
    targets: Tuple[VertexId, ...]
    total_weight: int
    edges: FrozenSet[VertexPair] = frozenset()
    vertices: FrozenSet[VertexId] = frozenset()
    paths: Tuple[Tuple[VertexId, ...], ...] = field(default_factory=tuple)

    def sorted_edges(self) -> List[VertexPair]:
        return sorted(self.edges)

    def __repr__(self) -> str:
        return (
            f"SteinerTree(targets={len(self.targets)}, weight={self.total_weight}, "
            f"edges={len(self.edges)})"
        )


class SteinerTreeApproximator:
    """Greedy nearest-target Steiner tree heuristic.

    Keeps no state between calls.
    """

    def approximate(
        self,
        graph: Graph,
        targets: Sequence[VertexId],
        engine: Optional[ShortestPathEngine] = None
    ) -> SteinerTree:
        """Approximate a Steiner tree connecting ``targets``.

        The graph is only read; edge marks are left untouched.

        Args:
            graph: Graph to build the tree on
            targets: Vertices the tree must contain; the first seeds the tree
            engine: Precomputed shortest paths for ``graph`` (built if None)

        Returns:
            SteinerTree: Chosen edges, vertices and total weight

        Raises:
            InvalidArgumentError: ``targets`` is empty or names unknown vertices
            TargetUnreachableError: Some target lies in another component
        """
        targets = self._validate_targets(graph, targets)
        if engine is None:
            engine = ShortestPathEngine(graph)
        elif engine.num_vertices != graph.num_vertices():
            raise InvalidArgumentError(
                f"Engine covers {engine.num_vertices} vertices, graph has "
                f"{graph.num_vertices()}"
            )

        selected: Set[VertexId] = {targets[0]}
        remaining: Set[VertexId] = set(targets[1:]) - selected
        edges: Set[VertexPair] = set()
        paths: List[Tuple[VertexId, ...]] = []
        total_weight = 0

        while remaining:
            closest = self._closest_pair(remaining, selected, engine)
            if closest is None:
                raise TargetUnreachableError(remaining, selected)
            target, tree_vertex = closest

            path = engine.path(tree_vertex, target)
            weight = engine.path_weight(tree_vertex, target)
            edges.update(self._path_edges(graph, path))

            selected.update(path)
            total_weight += int(weight)
            remaining.discard(target)
            paths.append(tuple(path))
            logger.debug(
                f"Connected target {target} via {tree_vertex} "
                f"(weight={weight}, hops={len(path) - 1})"
            )

        tree = SteinerTree(
            targets=tuple(targets),
            total_weight=total_weight,
            edges=frozenset(edges),
            vertices=frozenset(selected),
            paths=tuple(paths),
        )
        logger.info(f"Approximated {tree!r}")
        return tree

    @staticmethod
    def _validate_targets(graph: Graph, targets: Sequence[VertexId]) -> List[VertexId]:
        targets = list(targets)
        if not targets:
            raise InvalidArgumentError("At least one target is required")
        for target in targets:
            if not graph.has_vertex(target):
                raise InvalidArgumentError(
                    f"Target {target!r} is not a vertex of {graph!r}"
                )
        return [int(target) for target in targets]

    @staticmethod
    def _closest_pair(
        remaining: Set[VertexId],
        selected: Set[VertexId],
        engine: ShortestPathEngine
    ) -> Optional[VertexPair]:
        """Closest (target, tree vertex) pair, or None if nothing is reachable.

        O(T * S) for T remaining targets and S tree vertices.
        """
        best: Optional[VertexPair] = None
        best_weight = math.inf
        tree_vertices = sorted(selected)
        for target in sorted(remaining):
            for tree_vertex in tree_vertices:
                weight = engine.path_weight(tree_vertex, target)
                if weight < best_weight:
                    best_weight = weight
                    best = VertexPair(target, tree_vertex)
        return best

    @staticmethod
    def _path_edges(graph: Graph, path: Sequence[VertexId]) -> List[VertexPair]:
        """Edge keys along consecutive path vertices. O(len(path) * degree)."""
        keys = []
        for v1, v2 in zip(path, path[1:]):
            edge = graph.find_edge(v1, v2)
            if edge is None:
                raise PathReconstructionError(f"Path step {v1}->{v2} has no edge")
            keys.append(edge.key)
        return keys


def approximate_steiner_tree(graph: Graph, targets: Sequence[VertexId]) -> int:
    """Approximate a Steiner tree and mark its edges on ``graph``.

    Existing marks are not cleared; call ``graph.reset_marks()`` first for a
    clean rerun.

    Returns:
        Total tree weight (each spliced path weight truncated toward zero)
    """
    tree = SteinerTreeApproximator().approximate(graph, targets)
    graph.mark_edges(tree.edges)
    return tree.total_weight
