"""
coloring.py — Vertex Coloring
=============================
Greedy coloring gives the coloring game its target: vertices in id order
each take the smallest color not used by an already-colored neighbour.
The color count is an upper bound on the chromatic number, not the
number itself.
"""

from typing import List, Optional, Sequence

from graph import Graph


def greedy_coloring(graph: Graph) -> List[int]:
    colors: List[Optional[int]] = [None] * graph.node_count()
    for v in graph.node_ids():
        taken = {colors[u] for u in graph.neighbour_ids(v) if colors[u] is not None}
        c = 0
        while c in taken:
            c += 1
        colors[v] = c
    return list(colors)


def chromatic_upper_bound(graph: Graph) -> int:
    colors = greedy_coloring(graph)
    return max(colors) + 1 if colors else 0


def is_valid_coloring(graph: Graph, colors: Sequence[Optional[int]]) -> bool:
    """No edge joins two vertices of the same color.  None means uncolored and never conflicts."""
    if len(colors) != graph.node_count():
        return False
    for e in graph.edges():
        a, b = colors[e.source], colors[e.target]
        if a is not None and a == b:
            return False
    return True


def is_complete_coloring(graph: Graph, colors: Sequence[Optional[int]]) -> bool:
    return is_valid_coloring(graph, colors) and all(c is not None for c in colors)


def colors_used(colors: Sequence[Optional[int]]) -> int:
    return len({c for c in colors if c is not None})
