"""Shared test configuration for dsatoolkit."""

import os
import sys
import pytest


def load_python_impl():
    """Load the package from the py/ source directory."""
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    py_dir = os.path.join(base_dir, "py")
    if py_dir not in sys.path:
        sys.path.insert(0, py_dir)
    import dsatoolkit
    return dsatoolkit


@pytest.fixture(scope="session")
def lib():
    """The dsatoolkit module under test."""
    return load_python_impl()


@pytest.fixture
def undirected(lib):
    """Undirected graph: 1-2, 1-3, 2-4, 3-4, 4-5."""
    g = lib.Graph(directed=False)
    for u, v in [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)]:
        g.add_edge(u, v)
    return g


@pytest.fixture
def directed(lib):
    """Directed graph: 0->1, 0->2, 1->3, 2->1, 2->4, 3->4."""
    g = lib.Graph(directed=True)
    for u, v in [(0, 1), (0, 2), (1, 3), (2, 1), (2, 4), (3, 4)]:
        g.add_edge(u, v)
    return g
