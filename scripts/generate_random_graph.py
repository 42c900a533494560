#!/usr/bin/env python3
"""Create a random connected weighted graph YAML file for testing."""

import argparse
import random
import sys
from pathlib import Path

import networkx as nx

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from steiner_approx.core.graph_io import from_networkx, save_graph


def create_random_graph(
    output_path: str,
    num_vertices: int = 20,
    edge_probability: float = 0.2,
    max_weight: int = 10,
    num_targets: int = 4,
    seed: int = 42
):
    """Create a random connected graph in YAML graph format.

    Args:
        output_path: Path to save the YAML file
        num_vertices: Number of vertices
        edge_probability: Erdos-Renyi edge probability
        max_weight: Integer edge weights are drawn from [1, max_weight]
        num_targets: Number of target vertices
        seed: Random seed
    """
    rng = random.Random(seed)

    # Resample until connected so every target is reachable
    attempt = 0
    while True:
        nx_graph = nx.gnp_random_graph(num_vertices, edge_probability, seed=seed + attempt)
        if nx.is_connected(nx_graph):
            break
        attempt += 1

    for a, b in nx_graph.edges():
        nx_graph[a][b]["weight"] = rng.randint(1, max_weight)

    graph, _ = from_networkx(nx_graph)
    targets = rng.sample(range(num_vertices), min(num_targets, num_vertices))
    save_graph(output_path, graph, targets)

    print(f"Created random graph: {output_path}")
    print(f"  Vertices: {graph.num_vertices()}")
    print(f"  Edges: {graph.num_edges()}")
    print(f"  Targets: {targets}")


def main():
    parser = argparse.ArgumentParser(description="Create a random YAML graph")
    parser.add_argument("output", type=str, help="Output YAML file")
    parser.add_argument("--num_vertices", type=int, default=20)
    parser.add_argument("--edge_probability", type=float, default=0.2)
    parser.add_argument("--max_weight", type=int, default=10)
    parser.add_argument("--num_targets", type=int, default=4)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    create_random_graph(
        args.output,
        num_vertices=args.num_vertices,
        edge_probability=args.edge_probability,
        max_weight=args.max_weight,
        num_targets=args.num_targets,
        seed=args.seed
    )


if __name__ == "__main__":
    main()
