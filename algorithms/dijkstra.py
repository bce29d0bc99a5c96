"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Single-source shortest distances on a non-negatively weighted graph.

Each round scans the unvisited vertices linearly and picks the one with
the smallest tentative distance, lowest id on ties.  Vertex counts in
the games are tiny, so the O(V²) scan costs nothing and makes the
tie-break obvious.  The picked vertex is finalised, a TraceStep is
recorded, then every edge to an unvisited neighbour is relaxed.

The run stops once every vertex is visited or the closest unvisited
vertex is at infinity.  Negative weights are a precondition violation
(the Graph refuses them at construction time).
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from graph import Graph
from algorithms.step import StepBuilder, TraceStep, reconstruct_path


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source, target):",            # 0
    "    dist ← {v: ∞ for v in V}; dist[source] ← 0",  # 1
    "    while some unvisited v has dist[v] < ∞:",     # 2
    "        u ← unvisited v with min dist (low id)",  # 3
    "        visited.add(u)",                          # 4
    "        for (v, w) in adj(u), v unvisited:",      # 5
    "            if dist[u] + w < dist[v]:",           # 6
    "                dist[v] ← dist[u] + w",           # 7
    "                parent[v] ← u",                   # 8
    "    return dist, path(parent, target)",           # 9
]


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Attributes:
        distances : Shortest distance per vertex id (math.inf if unreachable).
        path      : Source → target route, () if no target or unreachable.
        steps     : One TraceStep per finalised vertex.
        accepted  : False only for an out-of-range source / target.
    """

    distances: Tuple[float, ...]     = ()
    path:      Tuple[int, ...]       = ()
    steps:     Tuple[TraceStep, ...] = ()
    accepted:  bool                  = True

    @property
    def found(self) -> bool:
        return bool(self.path)

    def distance_to(self, vertex: int) -> float:
        return self.distances[vertex]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accepted":  self.accepted,
            "distances": [None if math.isinf(d) else d for d in self.distances],
            "path":      list(self.path),
            "steps":     [s.to_dict() for s in self.steps],
        }


def dijkstra(graph: Graph, source: int, target: Optional[int] = None) -> ShortestPathResult:
    if not graph.has_node(source) or (target is not None and not graph.has_node(target)):
        return ShortestPathResult(accepted=False)

    n = graph.node_count()
    sb = StepBuilder(n, track_distance=True)
    dist = sb.distance
    dist[source] = 0

    while True:
        # linear scan; strict < keeps the lowest id on ties
        current, best = -1, math.inf
        for v in range(n):
            if not sb.visited[v] and dist[v] < best:
                current, best = v, dist[v]
        if current == -1:
            break

        sb.visit(current)
        sb.frontier = [v for v in range(n) if not sb.visited[v] and dist[v] < math.inf]
        sb.explanation = (
            f"'{graph.label(current)}' has the smallest tentative distance ({best}). "
            f"It is now final; relax its edges."
        )
        sb.snapshot(current=current, pseudocode_line=4)

        for nbr, weight in graph.neighbours(current):
            if sb.visited[nbr]:
                continue
            candidate = dist[current] + weight
            if candidate < dist[nbr]:
                dist[nbr] = candidate
                sb.predecessor[nbr] = current

    path: List[int] = []
    if target is not None and dist[target] < math.inf:
        path = reconstruct_path(sb.predecessor, source, target)

    return ShortestPathResult(
        distances=tuple(dist),
        path=tuple(path),
        steps=tuple(sb.steps),
    )
