"""Graph I/O: YAML graph documents and networkx conversion.

YAML layout::

    num_vertices: 4
    labels: {0: a, 2: c}
    edges:
      - [0, 1, 1.0]
      - {u: 1, v: 2, weight: 2.5}
    targets: [0, 2]
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Hashable, List, Optional, Tuple, TYPE_CHECKING

import networkx as nx
import yaml

from .exceptions import GraphFormatError, InvalidArgumentError
from .graph import Graph, VertexId

if TYPE_CHECKING:
    from ..solver.steiner_tree import SteinerTree

logger = logging.getLogger(__name__)


@dataclass
class GraphDocument:
    """Graph plus the optional target list stored alongside it."""
    graph: Graph
    targets: List[VertexId] = field(default_factory=list)


def _as_int(value: Any, what: str) -> int:
    """Integer field of a graph document; fractional values and bools are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphFormatError(f"{what} must be an integer, got {value!r}")
    return value


def _parse_edge(raw: Any, index: int) -> Tuple[int, int, float]:
    if isinstance(raw, dict):
        try:
            return (
                _as_int(raw["u"], f"Edge #{index} u"),
                _as_int(raw["v"], f"Edge #{index} v"),
                float(raw.get("weight", 1.0)),
            )
        except KeyError as e:
            raise GraphFormatError(f"Edge #{index} missing key {e}") from e
        except (TypeError, ValueError) as e:
            raise GraphFormatError(f"Edge #{index} is malformed: {raw!r}") from e
    if isinstance(raw, (list, tuple)) and len(raw) in (2, 3):
        try:
            weight = float(raw[2]) if len(raw) == 3 else 1.0
            return (
                _as_int(raw[0], f"Edge #{index} u"),
                _as_int(raw[1], f"Edge #{index} v"),
                weight,
            )
        except (TypeError, ValueError) as e:
            raise GraphFormatError(f"Edge #{index} is malformed: {raw!r}") from e
    raise GraphFormatError(f"Edge #{index} must be [u, v, weight] or a mapping: {raw!r}")


def parse_graph(data: Any) -> GraphDocument:
    """Build a GraphDocument from an already-parsed YAML mapping."""
    if not isinstance(data, dict):
        raise GraphFormatError("Graph document must be a mapping")
    if "num_vertices" not in data:
        raise GraphFormatError("Graph document missing 'num_vertices'")

    try:
        num_vertices = _as_int(data["num_vertices"], "num_vertices")
        labels = {_as_int(k, "Label key"): str(v) for k, v in (data.get("labels") or {}).items()}
        targets = [_as_int(t, "Target") for t in (data.get("targets") or [])]
    except (TypeError, ValueError, AttributeError) as e:
        raise GraphFormatError(f"Malformed graph document: {e}") from e

    raw_edges = data.get("edges") or []
    if not isinstance(raw_edges, list):
        raise GraphFormatError("'edges' must be a list")

    try:
        graph = Graph(num_vertices, labels=labels)
        for index, raw in enumerate(raw_edges):
            graph.add_edge(*_parse_edge(raw, index))
        for target in targets:
            if not graph.has_vertex(target):
                raise InvalidArgumentError(f"Target {target} is not a vertex")
    except InvalidArgumentError as e:
        raise GraphFormatError(str(e)) from e

    return GraphDocument(graph=graph, targets=targets)


def load_graph(path: str) -> GraphDocument:
    """Load a graph document from a YAML file."""
    with open(path, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise GraphFormatError(f"Invalid YAML in {path}: {e}") from e
    document = parse_graph(data)
    logger.info(f"Loaded {document.graph!r} from {path}")
    return document


def graph_to_dict(graph: Graph, targets: Optional[List[VertexId]] = None) -> Dict[str, Any]:
    data: Dict[str, Any] = {"num_vertices": graph.num_vertices()}
    if graph.labels:
        data["labels"] = dict(sorted(graph.labels.items()))
    data["edges"] = [[edge.u, edge.v, edge.weight] for edge in graph.edges()]
    if targets:
        data["targets"] = [int(t) for t in targets]
    return data


def save_graph(path: str, graph: Graph, targets: Optional[List[VertexId]] = None) -> None:
    """Write ``graph`` (and optional targets) as a YAML graph document."""
    output_file = Path(path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, 'w') as f:
        yaml.safe_dump(graph_to_dict(graph, targets), f, sort_keys=False)


def tree_to_dict(tree: "SteinerTree", graph: Graph) -> Dict[str, Any]:
    """Serializable summary of a Steiner tree."""
    edges = []
    for key in tree.sorted_edges():
        edge = graph.find_edge(key.first, key.second)
        edges.append([key.first, key.second, edge.weight if edge is not None else None])
    return {
        "targets": list(tree.targets),
        "total_weight": tree.total_weight,
        "vertices": sorted(tree.vertices),
        "edges": edges,
        "paths": [list(path) for path in tree.paths],
    }


def dump_result(path: str, tree: "SteinerTree", graph: Graph) -> None:
    """Write a Steiner tree summary as YAML."""
    output_file = Path(path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, 'w') as f:
        yaml.safe_dump(tree_to_dict(tree, graph), f, sort_keys=False)


def from_networkx(
    nx_graph: nx.Graph,
    weight: str = "weight",
    default_weight: float = 1.0
) -> Tuple[Graph, Dict[Hashable, VertexId]]:
    """Convert an undirected networkx graph to a Graph with dense ids.

    Nodes are numbered in sorted order when their labels sort, in insertion
    order otherwise.

    Returns:
        (graph, mapping): Converted graph and original node -> vertex id
    """
    if nx_graph.is_directed():
        raise InvalidArgumentError("Only undirected graphs are supported")
    if nx_graph.is_multigraph():
        raise InvalidArgumentError("Multigraphs are not supported")

    nodes = list(nx_graph.nodes())
    try:
        nodes = sorted(nodes)
    except TypeError:
        pass
    mapping = {node: index for index, node in enumerate(nodes)}

    graph = Graph(len(nodes), labels={index: str(node) for node, index in mapping.items()})
    for a, b, data in nx_graph.edges(data=True):
        graph.add_edge(mapping[a], mapping[b], data.get(weight, default_weight))
    return graph, mapping


def to_networkx(graph: Graph, marked_only: bool = False) -> nx.Graph:
    """Convert to an ``nx.Graph`` with ``weight`` and ``mark`` edge attributes.

    With ``marked_only`` only marked edges (and their endpoints) are kept.
    """
    nx_graph = nx.Graph()
    if not marked_only:
        nx_graph.add_nodes_from(graph.vertex_iterator())
    for edge in graph.edges():
        if marked_only and not edge.mark:
            continue
        nx_graph.add_edge(edge.u, edge.v, weight=edge.weight, mark=edge.mark)
    return nx_graph
