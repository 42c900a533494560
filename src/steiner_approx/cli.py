"""Command-line driver: load a YAML graph, approximate a Steiner tree, report.

Usage:
    python scripts/run_steiner.py graphs/cycle.yaml --targets 0 2
    python scripts/run_steiner.py graphs/cycle.yaml --config configs/default.yaml --format yaml
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .config import LOG_LEVELS, OUTPUT_FORMATS, SteinerConfig, load_config
from .core.exceptions import SteinerError
from .core.graph import Graph
from .core.graph_io import dump_result, load_graph, tree_to_dict
from .solver.steiner_tree import SteinerTree, SteinerTreeApproximator
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Approximate a Steiner tree over a weighted graph"
    )
    parser.add_argument("graph", type=str, help="YAML graph file")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML config file")
    parser.add_argument("--targets", type=int, nargs="+", default=None,
                        help="Target vertex ids (overrides targets in the graph file)")
    parser.add_argument("--output", type=str, default=None,
                        help="Write the result to this file")
    parser.add_argument("--format", type=str, choices=OUTPUT_FORMATS, default=None,
                        help="Output format")
    parser.add_argument("--log-level", type=str, choices=LOG_LEVELS, default=None,
                        help="Logging level")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Also log to this file")
    parser.add_argument("--show-paths", action="store_true",
                        help="Print each spliced path")
    return parser


def apply_overrides(config: SteinerConfig, args: argparse.Namespace) -> SteinerConfig:
    """Apply command-line flags on top of the loaded config."""
    if args.log_level:
        config.logging.level = args.log_level
    if args.log_file:
        config.logging.file = args.log_file
    if args.format:
        config.output.format = args.format
    if args.output:
        config.output.path = args.output
    if args.show_paths:
        config.output.show_paths = True
    return config


def format_text(tree: SteinerTree, graph: Graph, show_paths: bool = False) -> str:
    lines = [
        f"Targets: {', '.join(graph.label(t) for t in tree.targets)}",
        f"Total weight: {tree.total_weight}",
        f"Edges ({len(tree.edges)}):",
    ]
    for key in tree.sorted_edges():
        edge = graph.find_edge(key.first, key.second)
        lines.append(f"  {graph.label(key.first)} - {graph.label(key.second)} (w={edge.weight:g})")
    if show_paths:
        lines.append("Paths:")
        for path in tree.paths:
            lines.append("  " + " -> ".join(graph.label(v) for v in path))
    return "\n".join(lines)


def run(config: SteinerConfig, graph_path: str, targets: Optional[List[int]] = None) -> SteinerTree:
    """Load the graph, solve, and mark the tree's edges per ``config``."""
    document = load_graph(graph_path)
    graph = document.graph
    targets = targets if targets is not None else document.targets

    tree = SteinerTreeApproximator().approximate(graph, targets)

    if config.solver.write_marks:
        if config.solver.reset_marks:
            graph.reset_marks()
        graph.mark_edges(tree.edges)
        logger.debug(f"Marked {len(graph.marked_edges())} edges")

    if config.output.format == "yaml":
        if config.output.path:
            dump_result(config.output.path, tree, graph)
        else:
            print(yaml.safe_dump(tree_to_dict(tree, graph), sort_keys=False), end="")
    else:
        text = format_text(tree, graph, config.output.show_paths)
        if config.output.path:
            output_file = Path(config.output.path)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with open(output_file, 'w') as f:
                f.write(text + "\n")
        else:
            print(text)

    return tree


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except (SteinerError, OSError) as e:
        parser.error(str(e))

    # Keep stdout parseable when the YAML result is printed there
    yaml_to_stdout = config.output.format == "yaml" and not config.output.path
    setup_logging(
        config.logging.level,
        config.logging.file,
        stream=sys.stderr if yaml_to_stdout else sys.stdout
    )

    try:
        tree = run(config, args.graph, args.targets)
    except (SteinerError, OSError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    logger.info(f"Steiner tree weight {tree.total_weight} over {len(tree.edges)} edges")
    return 0


if __name__ == "__main__":
    sys.exit(main())
