"""
topological.py — Topological Order (Kahn)
=========================================
Batch helpers around Kahn's in-degree algorithm.  The interactive,
player-driven version lives in engine.topo_session.TopologicalSession;
these functions give the reference order used for hints and the check
applied to any order the player produced.
"""

from typing import List, Sequence

from graph import Graph


PSEUDOCODE: List[str] = [
    "def Kahn(dag):",                                  # 0
    "    indeg ← in-degree of every vertex",           # 1
    "    available ← {v : indeg[v] == 0}",             # 2
    "    while available is not empty:",               # 3
    "        u ← choose any v in available",           # 4
    "        order.append(u); processed.add(u)",       # 5
    "        for v in successors(u):",                 # 6
    "            indeg[v] ← indeg[v] - 1",             # 7
    "            if indeg[v] == 0: available.add(v)",  # 8
    "    return order",                                # 9
]


def topological_order(graph: Graph) -> List[int]:
    """
    Kahn's algorithm, always taking the lowest available id.

    On a graph with a cycle the returned list is shorter than |V|; the
    vertices on or behind the cycle never become available.
    """
    in_degree = graph.in_degrees()
    processed = [False] * graph.node_count()
    order: List[int] = []

    while True:
        available = [v for v in graph.node_ids() if in_degree[v] == 0 and not processed[v]]
        if not available:
            break
        u = available[0]
        processed[u] = True
        order.append(u)
        for v in graph.neighbour_ids(u):
            in_degree[v] -= 1
    return order


def is_topological_order(graph: Graph, order: Sequence[int]) -> bool:
    """Every vertex exactly once and every edge u→v has u before v."""
    if sorted(order) != graph.node_ids():
        return False
    position = {v: i for i, v in enumerate(order)}
    return all(position[e.source] < position[e.target] for e in graph.edges())


def is_acyclic(graph: Graph) -> bool:
    """A directed graph is a DAG iff Kahn's algorithm processes every vertex."""
    return len(topological_order(graph)) == graph.node_count()
