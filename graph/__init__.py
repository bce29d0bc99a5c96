"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
"""

from graph.node  import Node, default_label
from graph.edge  import Edge
from graph.graph import Graph

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "default_label",
]
