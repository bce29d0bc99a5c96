"""Unit tests for the disjoint-set forest."""

from algorithms.union_find import UnionFind


class TestUnionFind:
    def test_make_set_gives_singletons(self):
        uf = UnionFind.make_set(4)
        assert [uf.find(x) for x in range(4)] == [0, 1, 2, 3]
        assert uf.set_count == 4

    def test_union_reports_merge(self):
        uf = UnionFind.make_set(3)
        assert uf.union(0, 1) is True
        assert uf.union(1, 0) is False
        assert uf.connected(0, 1)
        assert not uf.connected(0, 2)

    def test_self_union_is_noop(self):
        uf = UnionFind.make_set(3)
        assert uf.union(2, 2) is False
        assert uf.set_count == 3

    def test_find_is_stable_without_union(self, rng):
        uf = UnionFind.make_set(20)
        for _ in range(15):
            uf.union(rng.randrange(20), rng.randrange(20))
        first = [uf.find(x) for x in range(20)]
        assert [uf.find(x) for x in range(20)] == first

    def test_path_compression_points_at_root(self):
        uf = UnionFind.make_set(6)
        for x in range(5):
            uf.union(x, x + 1)
        root = uf.find(5)
        for x in range(6):
            uf.find(x)
        assert all(uf.parent[x] == root for x in range(6))

    def test_groups(self):
        uf = UnionFind.make_set(5)
        uf.union(0, 3)
        uf.union(1, 4)
        groups = sorted(uf.groups().values())
        assert groups == [[0, 3], [1, 4], [2]]
        assert uf.set_count == 3
