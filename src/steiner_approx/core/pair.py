"""Vertex pair representation."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class VertexPair:
    """Ordered pair of vertex ids.

    Used both for (target, selected) candidates and canonical edge keys.
    """
    first: int
    second: int

    @classmethod
    def edge_key(cls, u: int, v: int) -> "VertexPair":
        """Canonical undirected key with the lower id first."""
        return cls(u, v) if u <= v else cls(v, u)

    def __iter__(self):
        yield self.first
        yield self.second

    def __repr__(self) -> str:
        return f"VertexPair({self.first}, {self.second})"
