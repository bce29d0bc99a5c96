"""
node.py — Graph Vertex
======================
A vertex is an integer id, unique inside one Graph, plus an optional
display position and label.

Design decisions:
  - Algorithm state (visited / current / distance / predecessor) is NOT
    stored on the node.  Every run records its own immutable TraceSteps,
    so two UI panels reading old steps never see each other's writes.
  - x / y are the generation-time layout.  Generators use them for the
    "nearest vertex" repair pass; algorithms ignore them.
  - Nodes are immutable like Edges, so Graph.nodes can hand out the
    stored instances.
"""

from typing import Optional

from graph.convert import as_float, as_int


class Node:
    """
    Attributes:
        id    : Integer id, 0-based and dense inside a generated Graph.
        label : Human-readable name (A, B, C … by default).
        x, y  : Layout position (pixels; caller decides the frame).
    """

    __slots__ = ("id", "label", "x", "y")

    def __init__(
        self,
        node_id: int,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
    ):
        object.__setattr__(self, "id", node_id)
        object.__setattr__(self, "label", label if label is not None else default_label(node_id))
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __setattr__(self, name, value):
        raise AttributeError(f"Node is immutable (tried to set '{name}')")

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def distance_to(self, other: "Node") -> float:
        """Euclidean distance, used by the nearest-vertex repair pass."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":    self.id,
            "label": self.label,
            "x":     round(self.x, 2),
            "y":     round(self.y, 2),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        label = data.get("label")
        return cls(
            node_id=as_int(data["id"], "id"),
            x=as_float(data.get("x", 0.0), "x"),
            y=as_float(data.get("y", 0.0), "y"),
            label=None if label is None else str(label),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def default_label(node_id: int) -> str:
    """0 → 'A', 25 → 'Z', 26 → 'A1' … matches the games' lettering."""
    letter = chr(65 + node_id % 26)
    lap    = node_id // 26
    return letter if lap == 0 else f"{letter}{lap}"
