"""
topo_session.py — Interactive Topological Sort
===============================================
Kahn's algorithm as an externally driven state machine.  The player
picks which available vertex to process next; any available choice is
valid, and on a DAG some vertex is always available until every vertex
has been processed.

    session = TopologicalSession(dag)
    session.available()          # in-degree 0, not yet processed
    session.process_next(v)      # False if v is not available
    session.is_complete

A session is fully determined by its graph and the order processed so
far, so it can be rebuilt with `TopologicalSession.replay(graph, order)`
(the API keeps only the order in the cookie session).
"""

from typing import Any, Dict, List, Sequence

from graph import Graph


class TopologicalSession:
    """
    Attributes:
        graph     : The DAG being sorted (not modified).
        in_degree : Remaining in-degree per vertex, decremented as
                    predecessors are processed.
        processed : processed[v] is True once v has been taken.
        order     : Vertices in the order they were processed.
    """

    def __init__(self, graph: Graph):
        self.graph:     Graph      = graph
        self.in_degree: List[int]  = graph.in_degrees()
        self.processed: List[bool] = [False] * graph.node_count()
        self.order:     List[int]  = []

    @classmethod
    def replay(cls, graph: Graph, order: Sequence[int]) -> "TopologicalSession":
        """Rebuild a session by re-processing `order`.  Raises ValueError if a step is rejected."""
        session = cls(graph)
        for v in order:
            if not session.process_next(v):
                raise ValueError(f"Vertex {v} was not available when replaying {list(order)}")
        return session

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    def is_available(self, vertex) -> bool:
        return (
            self.graph.has_node(vertex)
            and not self.processed[vertex]
            and self.in_degree[vertex] == 0
        )

    def available(self) -> List[int]:
        """Ascending ids of the vertices that may be processed now."""
        return [v for v in self.graph.node_ids() if self.is_available(v)]

    @property
    def is_complete(self) -> bool:
        return len(self.order) == self.graph.node_count()

    @property
    def is_stuck(self) -> bool:
        """Unprocessed vertices remain but none is available: only possible with a cycle."""
        return not self.is_complete and not self.available()

    # ------------------------------------------------------------------
    # Transition
    # ------------------------------------------------------------------
    def process_next(self, vertex) -> bool:
        """
        Process `vertex` if it is available.  Successors whose in-degree
        drops to zero become available.  Returns False (and changes
        nothing) for unknown, processed or still-blocked vertices.
        """
        if not self.is_available(vertex):
            return False
        self.processed[vertex] = True
        self.order.append(vertex)
        for succ in self.graph.neighbour_ids(vertex):
            self.in_degree[succ] -= 1
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "order":     list(self.order),
            "available": self.available(),
            "in_degree": list(self.in_degree),
            "complete":  self.is_complete,
        }

    def __repr__(self) -> str:
        return f"TopologicalSession(processed={len(self.order)}/{self.graph.node_count()})"
