"""Unit tests for Kruskal and the cycle checks built on union-find."""

from itertools import combinations

from algorithms.kruskal import creates_cycle, kruskal, would_create_cycle
from algorithms.predicates import is_connected
from algorithms.union_find import UnionFind
from graph import Graph

from conftest import random_graph


def brute_force_mst_weight(g: Graph) -> int:
    n = g.node_count()
    best = None
    for subset in combinations(g.edges(), n - 1):
        if creates_cycle(n, [e.endpoints for e in subset]):
            continue
        w = sum(e.weight for e in subset)
        best = w if best is None else min(best, w)
    return best


class TestKruskal:
    def test_cycle_takes_three_of_four(self, cycle4):
        tree = kruskal(cycle4)
        assert len(tree.edges) == 3
        assert tree.total_weight == 3
        assert tree.is_spanning

    def test_equal_weights_keep_insertion_order(self, cycle4):
        tree = kruskal(cycle4)
        assert [e.key() for e in tree.edges] == [(0, 1), (1, 2), (2, 3)]

    def test_picks_cheapest_edges(self):
        g = Graph.from_edges(4, [(0, 1, 5), (1, 2, 1), (2, 3, 2), (0, 3, 1), (0, 2, 9)])
        tree = kruskal(g)
        assert tree.total_weight == 4
        assert sorted(e.key() for e in tree.edges) == [(0, 3), (1, 2), (2, 3)]

    def test_disconnected_gives_forest(self):
        g = Graph.from_edges(4, [(0, 1, 1), (2, 3, 1)])
        tree = kruskal(g)
        assert len(tree.edges) == 2
        assert not tree.is_spanning

    def test_matches_brute_force(self, rng):
        checked = 0
        while checked < 25:
            g = random_graph(rng, rng.randint(2, 6), p=0.6)
            if not is_connected(g):
                continue
            assert kruskal(g).total_weight == brute_force_mst_weight(g)
            checked += 1


class TestCycleChecks:
    def test_would_create_cycle(self):
        uf = UnionFind.make_set(3)
        uf.union(0, 1)
        uf.union(1, 2)
        assert would_create_cycle(uf, 0, 2)
        assert not would_create_cycle(UnionFind.make_set(3), 0, 2)

    def test_creates_cycle_on_selection(self):
        assert creates_cycle(4, [(0, 1), (1, 2), (2, 0)])
        assert not creates_cycle(4, [(0, 1), (1, 2), (2, 3)])
        assert not creates_cycle(4, [])
