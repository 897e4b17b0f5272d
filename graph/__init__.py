"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import GraphSnapshot, NodeRef, EdgeRef
"""

from graph.node     import Node
from graph.edge     import Edge
from graph.snapshot import GraphSnapshot, NodeRef, EdgeRef
from graph.graph    import Graph
from graph.utils    import has_cycle, find_cycles, make_acyclic, find_next_available_label

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "GraphSnapshot", "NodeRef", "EdgeRef",
    "has_cycle", "find_cycles", "make_acyclic", "find_next_available_label",
]
