"""
union_find.py — Disjoint-Set Forest
===================================
Tracks a partition of 0..n-1 into disjoint sets.

    find(x)      : representative of x's set, compressing the path walked
    union(x, y)  : merge two sets; False when they were already one set
    connected    : find(x) == find(y), the "would this edge close a cycle" test

Union by rank keeps trees shallow; with path compression both operations
are amortised near-constant.  Indices must be in range; callers own
that precondition.
"""

from typing import Dict, List


class UnionFind:
    """
    Attributes:
        parent : parent[x] is x's parent in the forest (roots point at themselves).
        rank   : upper bound on the height of each root's tree.
    """

    def __init__(self, n: int):
        self.parent: List[int] = list(range(n))
        self.rank:   List[int] = [0] * n
        self._sets:  int       = n

    @classmethod
    def make_set(cls, n: int) -> "UnionFind":
        """n singleton sets."""
        return cls(n)

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        # path compression: point every node on the walk straight at the root
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        if self.rank[root_x] == self.rank[root_y]:
            self.rank[root_x] += 1
        self._sets -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    @property
    def set_count(self) -> int:
        return self._sets

    def groups(self) -> Dict[int, List[int]]:
        """{representative: [members in ascending order]}"""
        out: Dict[int, List[int]] = {}
        for x in range(len(self.parent)):
            out.setdefault(self.find(x), []).append(x)
        return out

    def __len__(self) -> int:
        return len(self.parent)

    def __repr__(self) -> str:
        return f"UnionFind(size={len(self.parent)}, sets={self._sets})"
