"""
step.py — Trace Step Snapshot
=============================
Traversal and shortest-path runs record one TraceStep per processed
vertex.  A TraceStep is a frozen-in-time picture of every vertex:

    • visited / current flags
    • tentative distance (Dijkstra; None for BFS / DFS)
    • predecessor on the best-known route
    • the frontier (queue, stack or finite-distance set) at that moment
    • which pseudocode line ran and a plain-English "why"

Design decisions:
  - TraceStep and VertexState are frozen dataclasses holding tuples, so a
    UI scrubbing backwards through old steps can never observe a later
    write.  The algorithm is the only writer and it writes to a scratch
    StepBuilder, never to the snapshot.
  - A finished run returns a fully materialised tuple of steps; replay
    pacing belongs to the caller.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class VertexState:
    id:          int
    visited:     bool            = False
    current:     bool            = False
    distance:    Optional[float] = None
    predecessor: Optional[int]   = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":          self.id,
            "visited":     self.visited,
            "current":     self.current,
            "distance":    _json_distance(self.distance),
            "predecessor": self.predecessor,
        }


@dataclass(frozen=True)
class TraceStep:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        current         : Id of the vertex processed in this step.
        vertices        : One VertexState per vertex, indexed by id.
        frontier        : Vertices waiting to be processed, in frontier order.
        pseudocode_line : 0-based index into the algorithm's PSEUDOCODE.
        explanation     : Human-readable "why" text for learning mode.
    """

    step_number:     int
    current:         int
    vertices:        Tuple[VertexState, ...]
    frontier:        Tuple[int, ...]          = field(default_factory=tuple)
    pseudocode_line: int                      = 0
    explanation:     str                      = ""

    @property
    def visited_set(self) -> Tuple[int, ...]:
        return tuple(v.id for v in self.vertices if v.visited)

    def state_of(self, vertex: int) -> VertexState:
        return self.vertices[vertex]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":     self.step_number,
            "current":         self.current,
            "vertices":        [v.to_dict() for v in self.vertices],
            "frontier":        list(self.frontier),
            "pseudocode_line": self.pseudocode_line,
            "explanation":     self.explanation,
        }


# ---------------------------------------------------------------------------
# Scratch-pad the algorithms write to between snapshots
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable per-run state that is frozen into a TraceStep on demand.

    Usage inside an algorithm:
        sb = StepBuilder(graph.node_count())
        sb.visit(3)
        sb.frontier = [4, 5]
        sb.explanation = "Vertex 3 was dequeued first (FIFO)."
        sb.snapshot(current=3, pseudocode_line=5)
        ...
        steps = sb.steps
    """

    def __init__(self, vertex_count: int, track_distance: bool = False):
        self.visited:        List[bool]              = [False] * vertex_count
        self.predecessor:    List[Optional[int]]     = [None] * vertex_count
        self.distance:       Optional[List[float]]   = [math.inf] * vertex_count if track_distance else None
        self.frontier:       Sequence[int]           = ()
        self.explanation:    str                     = ""
        self.steps:          List[TraceStep]         = []

    def visit(self, vertex: int) -> None:
        self.visited[vertex] = True

    def snapshot(self, current: int, pseudocode_line: int = 0) -> TraceStep:
        vertices = tuple(
            VertexState(
                id=v,
                visited=self.visited[v],
                current=(v == current),
                distance=self.distance[v] if self.distance is not None else None,
                predecessor=self.predecessor[v],
            )
            for v in range(len(self.visited))
        )
        step = TraceStep(
            step_number=len(self.steps),
            current=current,
            vertices=vertices,
            frontier=tuple(self.frontier),
            pseudocode_line=pseudocode_line,
            explanation=self.explanation,
        )
        self.steps.append(step)
        return step


@dataclass(frozen=True)
class TraversalResult:
    """
    What BFS / DFS hand back.

    `accepted` is False only when source or target is not a vertex of the
    graph; an unreachable target is a normal result with an empty path.
    """

    steps:    Tuple[TraceStep, ...] = ()
    path:     Tuple[int, ...]       = ()
    accepted: bool                  = True

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def hops(self) -> int:
        return max(len(self.path) - 1, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accepted": self.accepted,
            "path":     list(self.path),
            "steps":    [s.to_dict() for s in self.steps],
        }


def reconstruct_path(predecessor: Sequence[Optional[int]], source: int, target: int) -> List[int]:
    """Follow predecessors back from target; [] if the chain never reaches source."""
    path: List[int] = []
    cur: Optional[int] = target
    seen = set()
    while cur is not None and cur not in seen:
        seen.add(cur)
        path.append(cur)
        if cur == source:
            path.reverse()
            return path
        cur = predecessor[cur]
    return []


def _json_distance(value: Optional[float]):
    if value is None or math.isinf(value):
        return None
    return value
