"""
predicates.py — Structural Predicates
=====================================
Yes/no questions about a graph's shape.  Generators use them to
guarantee well-formed puzzles; games use them as win conditions for
graphs the player built.

All traversals here are iterative.
"""

from collections import deque
from typing import List, Optional, Sequence

from graph import Graph
from algorithms.topological import is_acyclic


def connected_components(graph: Graph) -> List[List[int]]:
    """Components as ascending id lists, ordered by their smallest id."""
    seen = [False] * graph.node_count()
    components: List[List[int]] = []
    for start in graph.node_ids():
        if seen[start]:
            continue
        seen[start] = True
        component, queue = [], deque([start])
        while queue:
            u = queue.popleft()
            component.append(u)
            for v in _undirected_neighbours(graph, u):
                if not seen[v]:
                    seen[v] = True
                    queue.append(v)
        components.append(sorted(component))
    return components


def is_connected(graph: Graph) -> bool:
    """Every vertex reachable from vertex 0 (ignoring direction).  Empty graphs count as connected."""
    return len(connected_components(graph)) <= 1


def is_reachable(graph: Graph, source: int, target: int) -> bool:
    """BFS along edge direction: can target be reached from source?"""
    if not (graph.has_node(source) and graph.has_node(target)):
        return False
    seen = {source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        if u == target:
            return True
        for v in graph.neighbour_ids(u):
            if v not in seen:
                seen.add(v)
                queue.append(v)
    return False


def has_cycle(graph: Graph) -> bool:
    """
    Undirected: DFS remembering the tree parent; meeting an already-seen
    vertex that is not the parent means a second route, i.e. a cycle.
    Directed: defer to Kahn (a DAG is exactly what Kahn fully drains).
    """
    if graph.directed:
        return not is_acyclic(graph)

    seen = [False] * graph.node_count()
    for start in graph.node_ids():
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, -1)]
        while stack:
            u, parent = stack.pop()
            for v in graph.neighbour_ids(u):
                if v == parent:
                    continue
                if seen[v]:
                    return True
                seen[v] = True
                stack.append((v, u))
    return False


def two_coloring(graph: Graph) -> Optional[List[int]]:
    """
    BFS 2-coloring, component by component, each source colored 0.
    Returns the color per vertex, or None on the first conflict.
    """
    color: List[Optional[int]] = [None] * graph.node_count()
    for start in graph.node_ids():
        if color[start] is not None:
            continue
        color[start] = 0
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in _undirected_neighbours(graph, u):
                if color[v] is None:
                    color[v] = 1 - color[u]
                    queue.append(v)
                elif color[v] == color[u]:
                    return None
    return list(color)


def is_bipartite(graph: Graph) -> bool:
    return two_coloring(graph) is not None


def degree_sequence(graph: Graph) -> List[int]:
    """Incident-edge count per vertex, sorted descending."""
    return sorted((graph.degree(v) for v in graph.node_ids()), reverse=True)


def same_degree_sequence(a: Graph, b: Graph) -> bool:
    """
    The drawing games' "same shape" test.  Isomorphic graphs always pass;
    some non-isomorphic ones pass too, which is accepted.
    """
    return a.node_count() == b.node_count() and degree_sequence(a) == degree_sequence(b)


def path_weight(graph: Graph, path: Sequence[int]) -> Optional[int]:
    """Total weight of a player's path, or None if two consecutive vertices aren't joined."""
    total = 0
    for u, v in zip(path, path[1:]):
        edge = graph.edge_between(u, v)
        if edge is None:
            return None
        total += edge.weight
    return total


def _undirected_neighbours(graph: Graph, u: int) -> List[int]:
    if not graph.directed:
        return graph.neighbour_ids(u)
    return graph.neighbour_ids(u) + [e.source for e in graph.edges() if e.target == u]
