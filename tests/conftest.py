import os

os.environ.setdefault("MPLCONFIGDIR", "/tmp/mplconfig")

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from separation_graph import build_adjacency


@pytest.fixture
def path_adjacency():
    # node 0 isolated, 1 - 2 - 3 a path
    return build_adjacency(4, [1, 2], [2, 3])


@pytest.fixture
def raw_columns():
    # edges (10,878), (878,42), (5,5), (10,3)
    return np.array([10, 878, 5, 10]), np.array([878, 42, 5, 3])


@pytest.fixture
def random_edges():
    rng = np.random.default_rng(7)
    n_nodes = 30
    nodes = rng.integers(0, n_nodes, size=40)
    edges = rng.integers(0, n_nodes, size=40)
    # force a self-loop and a parallel edge into the sample
    nodes[:3] = [4, 5, 5]
    edges[:3] = [4, 6, 6]
    return n_nodes, nodes, edges
