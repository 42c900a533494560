"""Graph container and shared types."""

from .graph import Graph, Edge, VertexId
from .pair import VertexPair

__all__ = ["Graph", "Edge", "VertexId", "VertexPair"]
