"""All-pairs shortest paths (Floyd-Warshall) with path reconstruction."""

import logging
from typing import List, Optional

import numpy as np

from ..core.exceptions import InvalidArgumentError, PathReconstructionError
from ..core.graph import Graph, VertexId

logger = logging.getLogger(__name__)

NO_HOP = -1


class ShortestPathEngine:
    """Shortest path weights and paths between every ordered vertex pair.

    Construction is O(V^3). Afterwards ``path_weight`` is O(1) and ``path`` is
    O(path length). The matrices are read-only once built.
    """

    def __init__(self, graph: Graph):
        """Compute all shortest paths of ``graph``.

        Args:
            graph: Graph whose edge set stays fixed while this engine is used
        """
        self._num_vertices = graph.num_vertices()
        self._weights, self._next_hops = self._initialize_matrices(graph)
        self._relax()
        self._weights.setflags(write=False)
        self._next_hops.setflags(write=False)
        logger.debug(f"Computed shortest paths for {graph!r}")

    @staticmethod
    def _initialize_matrices(graph: Graph):
        """Direct-edge weights and next hops.

        Pairs without a direct edge start at +inf with no next hop. Average cost
        is O(D * V^2) for average degree D.
        """
        n = graph.num_vertices()
        weights = np.full((n, n), np.inf, dtype=np.float64)
        next_hops = np.full((n, n), NO_HOP, dtype=np.int64)

        for v1 in graph.vertex_iterator():
            for v2 in graph.vertex_iterator():
                if v1 == v2:
                    weights[v1, v2] = 0.0
                    next_hops[v1, v2] = v2
                    continue
                edge = graph.find_edge(v1, v2)
                if edge is not None:
                    weights[v1, v2] = edge.weight
                    next_hops[v1, v2] = v2

        return weights, next_hops

    def _relax(self) -> None:
        """Floyd-Warshall relaxation, k outermost.

        Sweep k updates every (i, j) at once. Row k and column k cannot change
        during sweep k with non-negative weights, so this matches the scalar
        k, i, j loop exactly, including which path wins a tie.
        """
        weights = self._weights
        next_hops = self._next_hops
        for k in range(self._num_vertices):
            candidates = weights[:, k, np.newaxis] + weights[k, :]
            # Strict: ties keep the earlier path
            update_mask = candidates < weights
            if not update_mask.any():
                continue
            weights[update_mask] = candidates[update_mask]
            via_k = np.broadcast_to(next_hops[:, k, np.newaxis], next_hops.shape)
            next_hops[update_mask] = via_k[update_mask]

    def _check_vertex(self, vertex: VertexId) -> int:
        if not 0 <= vertex < self._num_vertices:
            raise InvalidArgumentError(
                f"Vertex {vertex} out of range [0, {self._num_vertices})"
            )
        return int(vertex)

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def weight_matrix(self) -> np.ndarray:
        """Read-only V x V shortest path weights (+inf when unreachable)."""
        return self._weights

    @property
    def next_hop_matrix(self) -> np.ndarray:
        """Read-only V x V next hops (-1 when unreachable)."""
        return self._next_hops

    def path_weight(self, u: VertexId, v: VertexId) -> float:
        """Weight of the shortest path from ``u`` to ``v`` (+inf if none)."""
        return float(self._weights[self._check_vertex(u), self._check_vertex(v)])

    def next_hop(self, u: VertexId, v: VertexId) -> Optional[VertexId]:
        """Vertex after ``u`` on a shortest path to ``v``, or None."""
        hop = int(self._next_hops[self._check_vertex(u), self._check_vertex(v)])
        return None if hop == NO_HOP else hop

    def is_reachable(self, u: VertexId, v: VertexId) -> bool:
        return self.next_hop(u, v) is not None

    def path(self, u: VertexId, v: VertexId) -> List[VertexId]:
        """Vertices of the shortest path from ``u`` to ``v``.

        Args:
            u: Start vertex
            v: End vertex

        Returns:
            ``[u, ..., v]``; ``[u]`` when ``u == v``; empty if unreachable

        Raises:
            PathReconstructionError: The next-hop walk does not reach ``v``
                within V steps
        """
        u = self._check_vertex(u)
        v = self._check_vertex(v)
        if u == v:
            return [u]
        if self._next_hops[u, v] == NO_HOP:
            return []

        path = [u]
        current = u
        for _ in range(self._num_vertices):
            current = int(self._next_hops[current, v])
            if current == NO_HOP:
                raise PathReconstructionError(
                    f"Next hop toward {v} missing after {path}"
                )
            path.append(current)
            if current == v:
                return path

        raise PathReconstructionError(
            f"Path {u}->{v} did not terminate within {self._num_vertices} steps"
        )

    def __repr__(self) -> str:
        return f"ShortestPathEngine(vertices={self._num_vertices})"


def compute_shortest_paths(graph: Graph) -> ShortestPathEngine:
    """Compute all-pairs shortest paths for ``graph``."""
    return ShortestPathEngine(graph)
