"""
Pytest configuration and shared fixtures.

Vertex ids double as letters in the comments: 0 = A, 1 = B, 2 = C, 3 = D.
"""

import random

import pytest

from graph import Graph


@pytest.fixture
def cycle4() -> Graph:
    """A–B–C–D–A, every weight 1."""
    return Graph.from_edges(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 0, 1)])


@pytest.fixture
def small_dag() -> Graph:
    """A→C, B→C, C→D."""
    return Graph.from_edges(4, [(0, 2), (1, 2), (2, 3)], directed=True)


@pytest.fixture
def triangle() -> Graph:
    return Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def rng() -> random.Random:
    """Seeded so property loops are reproducible."""
    return random.Random(1234)


def random_graph(rng: random.Random, n: int, p: float = 0.5, max_weight: int = 9) -> Graph:
    """Undirected weighted G(n, p) used by the brute-force cross-checks."""
    g = Graph(directed=False, weighted=True)
    for _ in range(n):
        g.add_node()
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < p:
                g.add_edge(i, j, weight=rng.randint(0, max_weight))
    return g


def simple_paths(graph: Graph, source: int, target: int):
    """Every simple path source → target (exponential; small graphs only)."""
    stack = [(source, [source])]
    while stack:
        node, path = stack.pop()
        if node == target:
            yield path
            continue
        for nbr in graph.neighbour_ids(node):
            if nbr not in path:
                stack.append((nbr, path + [nbr]))
