"""
dfs.py — Depth-First Search
=============================
LIFO traversal using an explicit stack (no Python recursion limit issues).

A vertex can sit on the stack more than once; it is marked visited when
popped for the first time and later copies are skipped without a step.
Neighbours are pushed in descending id order, so the lowest id ends up
on top and is explored first.  A vertex keeps the predecessor from its
first push.
"""

from typing import List, Optional

from graph import Graph
from algorithms.step import StepBuilder, TraversalResult, reconstruct_path


PSEUDOCODE: List[str] = [
    "def DFS(graph, source, target):",                  # 0
    "    stack ← [source]",                             # 1
    "    while stack is not empty:",                    # 2
    "        node ← stack.pop()",                       # 3
    "        if node in visited: continue",             # 4
    "        visited.add(node)",                        # 5
    "        if node == target: break",                 # 6
    "        for nbr in sorted(adj(node), reverse):",   # 7
    "            if nbr not visited:",                  # 8
    "                parent.setdefault(nbr, node)",     # 9
    "                stack.push(nbr)",                  # 10
    "    return path(parent, target)",                  # 11
]


def dfs(graph: Graph, source: int, target: Optional[int] = None) -> TraversalResult:
    """Iterative DFS with first-push parent tracking for path reconstruction."""
    if not graph.has_node(source) or (target is not None and not graph.has_node(target)):
        return TraversalResult(accepted=False)

    sb = StepBuilder(graph.node_count())
    stack = [source]
    pushed = {source}

    while stack:
        node = stack.pop()
        if sb.visited[node]:
            continue

        sb.visit(node)
        sb.frontier = [n for n in reversed(stack) if not sb.visited[n]]
        if node == target:
            sb.explanation = f"Target '{graph.label(node)}' popped, stop exploring."
            sb.snapshot(current=node, pseudocode_line=6)
            break
        sb.explanation = (
            f"Pop '{graph.label(node)}' from the stack and mark it visited. "
            f"DFS dives into its neighbours before coming back."
        )
        sb.snapshot(current=node, pseudocode_line=5)

        for nbr in sorted(graph.neighbour_ids(node), reverse=True):
            if not sb.visited[nbr]:
                if nbr not in pushed:
                    pushed.add(nbr)
                    sb.predecessor[nbr] = node
                stack.append(nbr)

    path = reconstruct_path(sb.predecessor, source, target) if target is not None and sb.visited[target] else []
    return TraversalResult(steps=tuple(sb.steps), path=tuple(path))
