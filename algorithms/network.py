"""
network.py — Social-Network Measures
====================================
Whole-graph numbers shown in the social-network game.
"""

from collections import deque
from typing import List

from graph import Graph


def eccentricities(graph: Graph) -> List[int]:
    """Largest hop distance from each vertex to anything it can reach."""
    out: List[int] = []
    for source in graph.node_ids():
        hops = {source: 0}
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for v in graph.neighbour_ids(u):
                if v not in hops:
                    hops[v] = hops[u] + 1
                    queue.append(v)
        out.append(max(hops.values()))
    return out


def diameter(graph: Graph) -> int:
    """Longest shortest hop path over reachable pairs (0 for an empty graph)."""
    return max(eccentricities(graph), default=0)


def local_clustering(graph: Graph, v: int) -> float:
    nbrs = graph.neighbour_ids(v)
    k = len(nbrs)
    if k < 2:
        return 0.0
    links = sum(
        1
        for i in range(k)
        for j in range(i + 1, k)
        if graph.has_edge(nbrs[i], nbrs[j])
    )
    return links / (k * (k - 1) / 2)


def average_clustering(graph: Graph) -> float:
    n = graph.node_count()
    if n == 0:
        return 0.0
    return sum(local_clustering(graph, v) for v in graph.node_ids()) / n
