"""
kruskal.py — Minimum Spanning Tree (Kruskal)
=============================================
Edges are sorted ascending by weight with Python's stable sort, so equal
weights keep the graph's insertion order.  Each edge is accepted iff
union() merges two components; the loop stops at |V| - 1 edges.

A disconnected input yields a minimum spanning forest (fewer than
|V| - 1 edges).  That is a normal result: check `is_spanning`.

The interactive MST game also asks "does the player's selection close a
cycle?": `creates_cycle` answers for a whole selection and
`would_create_cycle` for a single candidate edge.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from graph import Edge, Graph
from algorithms.union_find import UnionFind


PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",                             # 0
    "    edges ← sort(E, by weight, stable)",          # 1
    "    uf ← make_set(|V|)",                          # 2
    "    for (u, v, w) in edges:",                     # 3
    "        if uf.union(u, v):",                      # 4
    "            tree.add((u, v, w))",                 # 5
    "            if |tree| == |V| - 1: break",         # 6
    "    return tree",                                 # 7
]


@dataclass(frozen=True)
class SpanningTree:
    edges:        Tuple[Edge, ...] = ()
    total_weight: int              = 0
    vertex_count: int              = 0

    @property
    def is_spanning(self) -> bool:
        """True when the result is a tree, not just a forest."""
        return len(self.edges) == max(self.vertex_count - 1, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "edges":        [e.to_dict() for e in self.edges],
            "total_weight": self.total_weight,
            "is_spanning":  self.is_spanning,
        }


def kruskal(graph: Graph) -> SpanningTree:
    n = graph.node_count()
    uf = UnionFind.make_set(n)
    accepted: List[Edge] = []

    for edge in sorted(graph.edges(), key=lambda e: e.weight):
        if len(accepted) >= n - 1:
            break
        if uf.union(edge.source, edge.target):
            accepted.append(edge)

    return SpanningTree(
        edges=tuple(accepted),
        total_weight=sum(e.weight for e in accepted),
        vertex_count=n,
    )


def would_create_cycle(uf: UnionFind, a: int, b: int) -> bool:
    return uf.find(a) == uf.find(b)


def creates_cycle(vertex_count: int, edges: Iterable[Tuple[int, int]]) -> bool:
    """True if the (u, v) selection contains a cycle."""
    uf = UnionFind.make_set(vertex_count)
    for u, v in edges:
        if not uf.union(u, v):
            return True
    return False
