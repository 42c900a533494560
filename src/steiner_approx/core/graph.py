"""Undirected weighted graph with dense integer vertex ids.

Vertices are the integers ``0..V-1``. Edges carry a non-negative weight and a
``mark`` flag (0/1) recording membership in a solution.
"""

import math
import numbers
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from .exceptions import InvalidArgumentError
from .pair import VertexPair

VertexId = int


@dataclass
class Edge:
    """Undirected edge between ``u`` and ``v``."""
    u: VertexId
    v: VertexId
    weight: float
    mark: int = 0

    @property
    def key(self) -> VertexPair:
        """Canonical (low id, high id) key."""
        return VertexPair.edge_key(self.u, self.v)

    def other(self, vertex: VertexId) -> VertexId:
        """Get the endpoint opposite ``vertex``."""
        if vertex == self.u:
            return self.v
        if vertex == self.v:
            return self.u
        raise InvalidArgumentError(f"Vertex {vertex} is not an endpoint of {self!r}")

    def get_weight(self) -> float:
        return self.weight

    def set_mark(self, flag: int) -> None:
        self.mark = 1 if flag else 0

    def __repr__(self) -> str:
        return f"Edge({self.u}-{self.v}, w={self.weight}, mark={self.mark})"


@dataclass(eq=False)
class Graph:
    """Undirected weighted graph over vertices ``0..num_vertices-1``.

    Adjacency is kept as a per-vertex edge list, so ``find_edge`` costs
    O(degree(u)).
    """
    vertex_count: int
    labels: Dict[VertexId, str] = field(default_factory=dict)
    _adjacency: List[List[Edge]] = field(default_factory=list, init=False, repr=False)
    _edges: List[Edge] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        """Validate vertex count and labels."""
        if self.vertex_count < 0:
            raise InvalidArgumentError("Vertex count must be non-negative")
        self._adjacency = [[] for _ in range(self.vertex_count)]
        for vertex in self.labels:
            self._check_vertex(vertex)

    @classmethod
    def from_edges(
        cls,
        num_vertices: int,
        edges: Iterable,
        labels: Optional[Dict[VertexId, str]] = None
    ) -> "Graph":
        """Build a graph from ``(u, v, weight)`` triples."""
        graph = cls(num_vertices, labels=dict(labels or {}))
        for u, v, weight in edges:
            graph.add_edge(u, v, weight)
        return graph

    def _check_vertex(self, vertex: VertexId) -> None:
        if isinstance(vertex, bool) or not isinstance(vertex, numbers.Integral):
            raise InvalidArgumentError(f"Vertex id must be an int, got {vertex!r}")
        if not 0 <= vertex < self.vertex_count:
            raise InvalidArgumentError(
                f"Vertex {vertex} out of range [0, {self.vertex_count})"
            )

    def has_vertex(self, vertex: VertexId) -> bool:
        """Check if ``vertex`` is a valid id in this graph."""
        try:
            self._check_vertex(vertex)
        except InvalidArgumentError:
            return False
        return True

    def add_edge(self, u: VertexId, v: VertexId, weight: float = 1.0) -> Edge:
        """Add an undirected edge and return it."""
        self._check_vertex(u)
        self._check_vertex(v)
        if u == v:
            raise InvalidArgumentError(f"Self-loop on vertex {u} not allowed")
        weight = float(weight)
        if math.isnan(weight) or math.isinf(weight) or weight < 0:
            raise InvalidArgumentError(
                f"Edge {u}-{v} weight must be finite and non-negative, got {weight}"
            )
        if self.find_edge(u, v) is not None:
            raise InvalidArgumentError(f"Duplicate edge {u}-{v}")

        edge = Edge(u, v, weight)
        self._adjacency[u].append(edge)
        self._adjacency[v].append(edge)
        self._edges.append(edge)
        return edge

    def num_vertices(self) -> int:
        return self.vertex_count

    def num_edges(self) -> int:
        return len(self._edges)

    def vertex_iterator(self) -> Iterator[VertexId]:
        """Fresh iterator over vertex ids in ascending order."""
        return iter(range(self.vertex_count))

    def edges(self) -> List[Edge]:
        """Get edges in insertion order."""
        return list(self._edges)

    def neighbors(self, vertex: VertexId) -> List[VertexId]:
        """Get adjacent vertices in edge insertion order."""
        self._check_vertex(vertex)
        return [edge.other(vertex) for edge in self._adjacency[vertex]]

    def find_edge(self, u: VertexId, v: VertexId) -> Optional[Edge]:
        """Get the edge connecting ``u`` and ``v``, or None."""
        self._check_vertex(u)
        self._check_vertex(v)
        for edge in self._adjacency[u]:
            if edge.other(u) == v:
                return edge
        return None

    def label(self, vertex: VertexId) -> str:
        """Get the vertex label (defaults to the id)."""
        self._check_vertex(vertex)
        return self.labels.get(vertex, str(vertex))

    def mark_edges(self, keys: Iterable[VertexPair], flag: int = 1) -> int:
        """Set the mark on each edge named by ``keys``.

        Returns:
            Number of edges whose mark was written
        """
        count = 0
        for key in keys:
            edge = self.find_edge(key.first, key.second)
            if edge is None:
                raise InvalidArgumentError(f"No edge {key.first}-{key.second} to mark")
            edge.set_mark(flag)
            count += 1
        return count

    def reset_marks(self) -> None:
        for edge in self._edges:
            edge.mark = 0

    def marked_edges(self) -> List[Edge]:
        return [edge for edge in self._edges if edge.mark]

    def marked_weight(self) -> float:
        """Sum of weights over marked edges."""
        return sum(edge.weight for edge in self._edges if edge.mark)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={len(self._edges)})"
