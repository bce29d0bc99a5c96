"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the game hub exposes.

    from algorithms import REGISTRY, get_algorithm, run_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, pseudocode, tags, traceable, …),
        …
    }

Traceable entries (BFS, DFS, Dijkstra) take (graph, source, target) and
return a result carrying a trace; the others are listed for their
metadata only and are called directly by their games.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from graph import Graph

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bfs         import bfs              as _bfs,      PSEUDOCODE as _bfs_pc
from algorithms.dfs         import dfs              as _dfs,      PSEUDOCODE as _dfs_pc
from algorithms.dijkstra    import dijkstra         as _dijkstra, PSEUDOCODE as _dij_pc
from algorithms.kruskal     import kruskal          as _kruskal,  PSEUDOCODE as _kru_pc
from algorithms.topological import topological_order as _topo,    PSEUDOCODE as _topo_pc
from algorithms.matching    import greedy_matching  as _greedy_matching


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bfs"
    label:            str                    # human label, e.g. "Breadth-First Search"
    fn:               Callable               # the algorithm function
    pseudocode:       List[str] = field(default_factory=list)
    tags:             List[str] = field(default_factory=list)   # e.g. ["unweighted", "traversal"]
    traceable:        bool      = False      # fn(graph, source, target) returns a trace
    complexity_time:  str       = ""         # e.g. "O(V + E)"
    complexity_space: str       = ""         # e.g. "O(V)"
    description:      str       = ""         # one-liner for the game card

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":              self.key,
            "label":            self.label,
            "pseudocode":       list(self.pseudocode),
            "tags":             list(self.tags),
            "traceable":        self.traceable,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        tags=["unweighted", "shortest-path", "traversal"], traceable=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer. Finds the path with the fewest hops.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        tags=["unweighted", "traversal"], traceable=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee the shortest path.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path"], traceable=True,
        complexity_time="O(V²)", complexity_space="O(V)",
        description="Finalises the closest vertex each round. Optimal for non-negative weights.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's MST", fn=_kruskal, pseudocode=_kru_pc,
        tags=["weighted", "spanning-tree"],
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Cheapest edge first, skipping any that would close a cycle.",
    ),

    "topological": AlgoInfo(
        key="topological", label="Topological Sort (Kahn)", fn=_topo, pseudocode=_topo_pc,
        tags=["dag", "ordering"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Repeatedly process a vertex with no unprocessed prerequisites.",
    ),

    "greedy_matching": AlgoInfo(
        key="greedy_matching", label="Greedy Bipartite Matching", fn=_greedy_matching,
        tags=["weighted", "bipartite", "approximation"],
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Heaviest free edge first. Plausible, not always maximum.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


def run_algorithm(key: str, graph: Graph, source: int, target: Optional[int] = None):
    """Run a traceable algorithm by key.  Unknown or non-traceable keys raise ValueError."""
    info = get_algorithm(key)
    if info is None or not info.traceable:
        raise ValueError(f"Unknown traceable algorithm: {key}")
    return info.fn(graph, source, target)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "run_algorithm",
]
