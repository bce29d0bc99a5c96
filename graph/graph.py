"""
graph.py — Graph Container
==========================
Single source of truth for one puzzle instance.  Generators write it,
algorithms and the API only read it.

Responsibilities:
  1. Vertex / edge construction             (add_node / add_edge)
  2. Adjacency queries                      (neighbours, edges, degree, in-degree)
  3. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Vertex ids are dense integers 0..n-1 handed out by add_node, so
    algorithms can keep per-vertex state in plain lists.
  - `_adj[u] → [(v, weight), …]` is maintained incrementally.  Undirected
    edges are stored in both endpoints' lists with the same weight;
    directed edges only in the source's list, with `_in_degree[v]`
    tracked alongside.
  - `_edges` keeps every edge exactly once in insertion order; Kruskal's
    stable tie-break depends on it.
  - Self-loops and duplicate edges are refused at construction time;
    algorithms do not re-check.
"""

from typing import Dict, List, Optional, Tuple

from graph.node import Node, default_label
from graph.edge import Edge


class Graph:
    """
    Attributes:
        directed   : bool – graph-level directedness
        weighted   : bool – whether weights are meaningful to the game
        _nodes     : [Node] indexed by id
        _edges     : [Edge] in insertion order
        _adj       : [[(neighbour_id, weight), …]] indexed by id
        _in_degree : [int] indexed by id (directed graphs)
        _index     : {edge.key(): Edge} for O(1) has_edge
    """

    def __init__(self, directed: bool = False, weighted: bool = True):
        self.directed:   bool                         = directed
        self.weighted:   bool                         = weighted
        self._nodes:     List[Node]                   = []
        self._edges:     List[Edge]                   = []
        self._adj:       List[List[Tuple[int, int]]]  = []
        self._in_degree: List[int]                    = []
        self._index:     Dict[Tuple[int, int], Edge]  = {}

    # ==================================================================
    # CONSTRUCTION
    # ==================================================================
    def add_node(self, x: float = 0.0, y: float = 0.0, label: Optional[str] = None) -> Node:
        node = Node(node_id=len(self._nodes), x=x, y=y, label=label)
        self._nodes.append(node)
        self._adj.append([])
        self._in_degree.append(0)
        return node

    def add_edge(self, source: int, target: int, weight: int = 1) -> Edge:
        if not (self.has_node(source) and self.has_node(target)):
            raise ValueError(f"Edge {source}-{target} references an unknown vertex")
        if source == target:
            raise ValueError(f"Self-loop on vertex {source} is not allowed")
        if weight < 0:
            raise ValueError(f"Edge {source}-{target} has negative weight {weight}")

        edge = Edge(source=source, target=target, weight=weight, directed=self.directed)
        if edge.key() in self._index:
            raise ValueError(f"Duplicate edge {source}-{target}")

        self._edges.append(edge)
        self._index[edge.key()] = edge
        self._adj[source].append((target, weight))
        if self.directed:
            self._in_degree[target] += 1
        else:
            self._adj[target].append((source, weight))
        return edge

    # ==================================================================
    # VERTEX QUERIES
    # ==================================================================
    def has_node(self, node_id) -> bool:
        return isinstance(node_id, int) and 0 <= node_id < len(self._nodes)

    def get_node(self, node_id: int) -> Optional[Node]:
        return self._nodes[node_id] if self.has_node(node_id) else None

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes)

    def node_ids(self) -> List[int]:
        return list(range(len(self._nodes)))

    def node_count(self) -> int:
        return len(self._nodes)

    def label(self, node_id: int) -> str:
        node = self.get_node(node_id)
        return node.label if node else default_label(node_id)

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: int) -> List[Tuple[int, int]]:
        """Return [(neighbour_id, weight)] in insertion order (outgoing for directed)."""
        return list(self._adj[node_id])

    def neighbour_ids(self, node_id: int) -> List[int]:
        return [v for v, _ in self._adj[node_id]]

    def edges(self) -> List[Edge]:
        """Every edge exactly once, in insertion order."""
        return list(self._edges)

    def edge_count(self) -> int:
        return len(self._edges)

    def has_edge(self, a: int, b: int) -> bool:
        return self.edge_between(a, b) is not None

    def edge_between(self, a: int, b: int) -> Optional[Edge]:
        """Edge connecting a and b (direction-aware)."""
        key = (a, b) if self.directed else (min(a, b), max(a, b))
        return self._index.get(key)

    def degree(self, node_id: int) -> int:
        """Incident edge count (in + out for directed graphs)."""
        if self.directed:
            return len(self._adj[node_id]) + self._in_degree[node_id]
        return len(self._adj[node_id])

    def in_degree(self, node_id: int) -> int:
        if self.directed:
            return self._in_degree[node_id]
        return len(self._adj[node_id])

    def in_degrees(self) -> List[int]:
        return [self.in_degree(v) for v in range(len(self._nodes))]

    def total_weight(self) -> int:
        return sum(e.weight for e in self._edges)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "weighted": self.weighted,
            "nodes":    [n.to_dict() for n in self._nodes],
            "edges":    [e.to_dict() for e in self._edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """
        Rebuild a Graph from its to_dict() form.

        Raises ValueError when node ids are not 0..n-1 or an edge is
        malformed; this is the only place untrusted structure enters.
        """
        g = cls(directed=bool(data.get("directed", False)), weighted=bool(data.get("weighted", True)))
        nodes = sorted((Node.from_dict(nd) for nd in data.get("nodes", [])), key=lambda n: n.id)
        for expected, node in enumerate(nodes):
            if node.id != expected:
                raise ValueError(f"Vertex ids must be 0..n-1, found {node.id} at position {expected}")
            g.add_node(node.x, node.y, label=node.label)
        for ed in data.get("edges", []):
            e = Edge.from_dict(ed)
            g.add_edge(e.source, e.target, weight=e.weight)
        return g

    @classmethod
    def from_edges(
        cls,
        node_count: int,
        edges: List[Tuple[int, ...]],
        directed: bool = False,
    ) -> "Graph":
        """Convenience: n bare vertices plus (u, v) or (u, v, w) tuples."""
        g = cls(directed=directed, weighted=any(len(e) > 2 for e in edges))
        for _ in range(node_count):
            g.add_node()
        for e in edges:
            g.add_edge(e[0], e[1], weight=e[2] if len(e) > 2 else 1)
        return g

    # ==================================================================
    # DUNDER
    # ==================================================================
    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()}, directed={self.directed})"
