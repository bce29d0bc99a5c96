"""
edge.py — Graph Edge
====================
A pair of vertex ids plus a non-negative integer weight.

Design decisions:
  - Edges are immutable value objects: source, target and weight never
    change after construction, so results (spanning trees, matchings)
    can hand out the very Edge objects stored in the Graph.
  - Weight defaults to 1 for unweighted graphs; algorithms that ignore
    weights simply never read it.
  - `directed` travels with the edge so serialisation is self-contained.
"""

from typing import Optional, Tuple

from graph.convert import as_int


class Edge:
    """
    Attributes:
        source   : Tail vertex id.
        target   : Head vertex id.
        weight   : Non-negative integer cost (default 1).
        directed : If False, the edge is traversable both ways.
    """

    __slots__ = ("source", "target", "weight", "directed")

    def __init__(
        self,
        source: int,
        target: int,
        weight: int = 1,
        directed: bool = False,
    ):
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "target", target)
        object.__setattr__(self, "weight", weight)
        object.__setattr__(self, "directed", directed)

    def __setattr__(self, name, value):
        raise AttributeError(f"Edge is immutable (tried to set '{name}')")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def endpoints(self) -> Tuple[int, int]:
        return self.source, self.target

    def key(self) -> Tuple[int, int]:
        """Identity of the connection: ordered for directed, sorted otherwise."""
        if self.directed:
            return self.source, self.target
        return min(self.source, self.target), max(self.source, self.target)

    def other_end(self, node_id: int) -> Optional[int]:
        """Given one endpoint, return the other. None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target and not self.directed:
            return self.source
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "source":   self.source,
            "target":   self.target,
            "weight":   self.weight,
            "directed": self.directed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=as_int(data["source"], "source"),
            target=as_int(data["target"], "target"),
            weight=as_int(data.get("weight", 1), "weight"),
            directed=bool(data.get("directed", False)),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        arrow = "->" if self.directed else "--"
        return f"Edge({self.source}{arrow}{self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and self.key() == other.key()
            and self.weight == other.weight
            and self.directed == other.directed
        )

    def __hash__(self) -> int:
        return hash((self.key(), self.weight, self.directed))
