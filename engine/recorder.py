"""
recorder.py — Run Analytics
============================
Turns a finished BFS / DFS / Dijkstra result into the numbers the
analytics card shows, and compares two runs on the same graph (the
"BFS vs DFS" demo).

Usage:
    result  = run_algorithm("bfs", g, 0, 5)
    metrics = summarize(result, g, algo_key="bfs", source=0, target=5)

Comparison Mode:
    compare(graph, ["bfs", "dfs"], source, target) → ComparisonResult
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Sequence

from graph import Graph
from algorithms import get_algorithm, run_algorithm
from algorithms.predicates import path_weight


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str = ""
    algo_label:    str = ""
    source:        int = -1
    target:        int = -1
    nodes_visited: int = 0      # vertices visited by the final step
    path_length:   int = 0      # number of edges on the final path
    path_cost:     int = 0      # total weight of the final path
    total_steps:   int = 0      # number of TraceSteps recorded
    path_found:    bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_nodes: str = ""   # which algo visited fewer vertices
    winner_path:  str = ""   # which algo found the cheaper path

    def to_dict(self) -> Dict[str, Any]:
        return {
            "left":         self.left.to_dict(),
            "right":        self.right.to_dict(),
            "winner_nodes": self.winner_nodes,
            "winner_path":  self.winner_path,
        }


def summarize(
    result,
    graph: Graph,
    algo_key: str = "",
    source: int = -1,
    target: Optional[int] = None,
) -> RunMetrics:
    """Metrics for a TraversalResult or ShortestPathResult."""
    info = get_algorithm(algo_key)
    last = result.steps[-1] if result.steps else None
    path = list(result.path)

    return RunMetrics(
        algo_key=algo_key,
        algo_label=info.label if info else "",
        source=source,
        target=-1 if target is None else target,
        nodes_visited=len(last.visited_set) if last else 0,
        path_length=max(len(path) - 1, 0),
        path_cost=path_weight(graph, path) or 0,
        total_steps=len(result.steps),
        path_found=bool(path),
    )


def compare(
    graph: Graph,
    algos: Sequence[str],
    source: int,
    target: Optional[int] = None,
) -> ComparisonResult:
    """Run two traceable algorithms on the same graph and pick winners."""
    if len(algos) != 2:
        raise ValueError("compare needs exactly two algorithm keys")

    left_key, right_key = algos
    l = summarize(run_algorithm(left_key, graph, source, target), graph, left_key, source, target)
    r = summarize(run_algorithm(right_key, graph, source, target), graph, right_key, source, target)

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    # a run without a path cannot win on cost
    if l.path_found and r.path_found:
        winner_path = winner(l.path_cost, r.path_cost)
    elif l.path_found or r.path_found:
        winner_path = l.algo_label if l.path_found else r.algo_label
    else:
        winner_path = "tie"

    return ComparisonResult(
        left=l,
        right=r,
        winner_nodes=winner(l.nodes_visited, r.nodes_visited),
        winner_path=winner_path,
    )
