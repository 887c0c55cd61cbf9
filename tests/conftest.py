"""Pytest configuration and shared fixtures for graphengine tests.

This module provides:
- Deterministic RNG fixtures for numpy
- Small canonical graphs used across the algorithm tests
"""

import os

import numpy as np
import pytest

from graphengine import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set the global numpy seed for reproducibility."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))


@pytest.fixture
def triangle() -> Graph:
    """Undirected triangle A-B-C."""
    G = Graph()
    G.add_edge("A", "B")
    G.add_edge("B", "C")
    G.add_edge("C", "A")
    return G


@pytest.fixture
def path4() -> Graph:
    """Undirected path 0-1-2-3."""
    G = Graph()
    for u, v in [(0, 1), (1, 2), (2, 3)]:
        G.add_edge(u, v)
    return G


@pytest.fixture
def k4() -> Graph:
    """Complete graph on nodes 0..3."""
    G = Graph()
    for u in range(4):
        for v in range(u + 1, 4):
            G.add_edge(u, v)
    return G


@pytest.fixture
def barbell() -> Graph:
    """Two triangles {1,2,3} and {4,5,6} joined by the bridge 3-4."""
    G = Graph()
    for u, v in [(1, 2), (2, 3), (1, 3), (4, 5), (5, 6), (4, 6), (3, 4)]:
        G.add_edge(u, v)
    return G


def _random_graph(rng: np.random.Generator, n: int, p: float, directed: bool = False, weighted: bool = False) -> Graph:
    """Erdos-Renyi style graph on nodes 0..n-1 drawn from ``rng``."""
    G = Graph(directed=directed)
    for node in range(n):
        G.add_node(node)
    for u in range(n):
        for v in range(n):
            if u == v or (not directed and v < u):
                continue
            if rng.random() < p:
                weight = float(rng.integers(1, 10)) if weighted else 1.0
                G.add_edge(u, v, weight)
    return G


@pytest.fixture
def make_random_graph(rng):
    """Factory ``make_random_graph(n, p, directed=False, weighted=False)`` bound to the test RNG."""

    def make(n: int, p: float, directed: bool = False, weighted: bool = False) -> Graph:
        return _random_graph(rng, n, p, directed=directed, weighted=weighted)

    return make
