"""
bfs.py — Breadth-First Search
==============================
FIFO traversal from a source towards a target.  One TraceStep is
recorded each time a not-yet-visited vertex is dequeued, before its
neighbours are examined.  Neighbours are enqueued in ascending id order
so the trace is reproducible for a given graph.

Exploration stops right after the target's step is recorded; the path
is rebuilt from the predecessor recorded when each vertex was first
discovered, which makes it a minimum-hop path.
"""

from collections import deque
from typing import List, Optional

from graph import Graph
from algorithms.step import StepBuilder, TraversalResult, reconstruct_path


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, source, target):",          # 0
    "    queue ← [source]",                     # 1
    "    discovered ← {source}",                # 2
    "    while queue is not empty:",            # 3
    "        node ← queue.dequeue()",           # 4
    "        visited.add(node)",                # 5
    "        if node == target: break",         # 6
    "        for nbr in sorted(adj(node)):",    # 7
    "            if nbr not discovered:",       # 8
    "                parent[nbr] ← node",       # 9
    "                queue.enqueue(nbr)",       # 10
    "    return path(parent, target)",          # 11
]


def bfs(graph: Graph, source: int, target: Optional[int] = None) -> TraversalResult:
    """
    Args:
        graph  : The graph to search.
        source : Starting vertex id.
        target : Goal vertex id; None explores the whole component.

    Returns:
        TraversalResult – trace (one step per dequeued vertex) and path.
    """
    if not graph.has_node(source) or (target is not None and not graph.has_node(target)):
        return TraversalResult(accepted=False)

    sb = StepBuilder(graph.node_count())
    queue = deque([source])
    discovered = {source}

    while queue:
        node = queue.popleft()
        sb.visit(node)
        sb.frontier = list(queue)
        sb.explanation = (
            f"Dequeue '{graph.label(node)}': it was discovered earliest (FIFO). "
            f"Mark it visited and look at its neighbours."
        )
        if node == target:
            sb.explanation = f"Target '{graph.label(node)}' dequeued, stop exploring."
            sb.snapshot(current=node, pseudocode_line=6)
            break
        sb.snapshot(current=node, pseudocode_line=4)

        for nbr in sorted(graph.neighbour_ids(node)):
            if nbr not in discovered:
                discovered.add(nbr)
                sb.predecessor[nbr] = node
                queue.append(nbr)

    path = reconstruct_path(sb.predecessor, source, target) if target is not None and sb.visited[target] else []
    return TraversalResult(steps=tuple(sb.steps), path=tuple(path))
