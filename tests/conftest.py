"""Pytest fixtures for testing."""

import random

import pytest

from steiner_approx.core.graph import Graph

from .factories import make_random_graph


@pytest.fixture
def seed():
    """Set random seed for reproducibility."""
    seed_value = 42
    random.seed(seed_value)
    return seed_value


@pytest.fixture
def cycle_graph():
    """4-vertex cycle 0-1-2-3-0 with unit weights."""
    return Graph.from_edges(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 0, 1)])


@pytest.fixture
def path_graph():
    """Line 0-1-2-3 with weights 1, 1, 1."""
    return Graph.from_edges(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1)])


@pytest.fixture
def disconnected_graph():
    """Two components: {0, 1} and {2, 3}."""
    return Graph.from_edges(4, [(0, 1, 1), (2, 3, 1)])


@pytest.fixture
def random_graph(seed):
    """Connected 15-vertex random graph."""
    return make_random_graph(15, 0.25, seed)


@pytest.fixture
def cycle_yaml(tmp_path):
    """Cycle graph document on disk with targets [0, 2]."""
    path = tmp_path / "cycle.yaml"
    path.write_text(
        "num_vertices: 4\n"
        "labels: {0: a, 1: b, 2: c, 3: d}\n"
        "edges:\n"
        "  - [0, 1, 1]\n"
        "  - [1, 2, 1]\n"
        "  - [2, 3, 1]\n"
        "  - [3, 0, 1]\n"
        "targets: [0, 2]\n"
    )
    return str(path)
