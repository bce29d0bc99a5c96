"""Unit tests for structural predicates, coloring and network measures."""

from algorithms.coloring import (
    chromatic_upper_bound,
    colors_used,
    greedy_coloring,
    is_complete_coloring,
    is_valid_coloring,
)
from algorithms.network import average_clustering, diameter, eccentricities
from algorithms.predicates import (
    connected_components,
    degree_sequence,
    has_cycle,
    is_bipartite,
    is_connected,
    is_reachable,
    path_weight,
    same_degree_sequence,
    two_coloring,
)
from graph import Graph


def path_graph(n: int) -> Graph:
    return Graph.from_edges(n, [(i, i + 1) for i in range(n - 1)])


class TestConnectivity:
    def test_cycle_is_connected(self, cycle4):
        assert is_connected(cycle4)

    def test_components(self):
        g = Graph.from_edges(5, [(3, 1), (0, 4)])
        assert connected_components(g) == [[0, 4], [1, 3], [2]]
        assert not is_connected(g)

    def test_empty_graph_counts_as_connected(self):
        assert is_connected(Graph())

    def test_directed_connectivity_ignores_direction(self, small_dag):
        assert is_connected(small_dag)

    def test_reachability_follows_direction(self, small_dag):
        assert is_reachable(small_dag, 0, 3)
        assert not is_reachable(small_dag, 3, 0)
        assert not is_reachable(small_dag, 0, 1)
        assert not is_reachable(small_dag, 0, 99)


class TestCycles:
    def test_undirected(self, cycle4, triangle):
        assert has_cycle(cycle4)
        assert has_cycle(triangle)
        assert not has_cycle(path_graph(5))

    def test_forest_has_no_cycle(self):
        g = Graph.from_edges(6, [(0, 1), (0, 2), (3, 4)])
        assert not has_cycle(g)

    def test_directed(self, small_dag):
        assert not has_cycle(small_dag)
        back = Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)], directed=True)
        assert has_cycle(back)


class TestBipartite:
    def test_even_cycle(self, cycle4):
        assert is_bipartite(cycle4)
        assert two_coloring(cycle4) == [0, 1, 0, 1]

    def test_odd_cycle(self, triangle):
        assert not is_bipartite(triangle)
        assert two_coloring(triangle) is None

    def test_each_component_starts_at_zero(self):
        g = Graph.from_edges(4, [(0, 1), (2, 3)])
        assert two_coloring(g) == [0, 1, 0, 1]


class TestDegrees:
    def test_degree_sequence(self):
        star = Graph.from_edges(4, [(0, 1), (0, 2), (0, 3)])
        assert degree_sequence(star) == [3, 1, 1, 1]

    def test_same_shape_ignores_labels(self):
        a = Graph.from_edges(4, [(0, 1), (1, 2), (2, 3)])
        b = Graph.from_edges(4, [(3, 0), (0, 2), (2, 1)])
        assert same_degree_sequence(a, b)
        assert not same_degree_sequence(a, Graph.from_edges(4, [(0, 1), (0, 2), (0, 3)]))


class TestPathWeight:
    def test_valid_path(self):
        g = Graph.from_edges(3, [(0, 1, 4), (1, 2, 6)])
        assert path_weight(g, [0, 1, 2]) == 10
        assert path_weight(g, [2]) == 0

    def test_broken_path(self):
        g = Graph.from_edges(3, [(0, 1, 4), (1, 2, 6)])
        assert path_weight(g, [0, 2]) is None


class TestColoring:
    def test_greedy_on_even_cycle(self, cycle4):
        assert greedy_coloring(cycle4) == [0, 1, 0, 1]
        assert chromatic_upper_bound(cycle4) == 2

    def test_greedy_on_triangle(self, triangle):
        assert chromatic_upper_bound(triangle) == 3

    def test_greedy_is_always_valid(self, rng):
        from conftest import random_graph

        for _ in range(20):
            g = random_graph(rng, 8, p=0.5)
            colors = greedy_coloring(g)
            assert is_complete_coloring(g, colors)

    def test_partial_coloring(self, cycle4):
        assert is_valid_coloring(cycle4, [0, None, None, 1])
        assert not is_valid_coloring(cycle4, [0, 0, None, None])
        assert not is_complete_coloring(cycle4, [0, 1, None, 1])
        assert not is_valid_coloring(cycle4, [0, 1])

    def test_colors_used(self):
        assert colors_used([0, 2, None, 2]) == 2


class TestNetwork:
    def test_diameter(self, cycle4):
        assert eccentricities(cycle4) == [2, 2, 2, 2]
        assert diameter(cycle4) == 2
        assert diameter(path_graph(5)) == 4
        assert diameter(Graph()) == 0

    def test_clustering(self, triangle, cycle4):
        assert average_clustering(triangle) == 1.0
        assert average_clustering(cycle4) == 0.0
        assert average_clustering(path_graph(3)) == 0.0
