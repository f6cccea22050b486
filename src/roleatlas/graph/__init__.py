"""
Pipeline graph model.

Roles reference nodes of an external pipeline graph by id. This package
gives that graph a typed shape so role views can be computed against it.
"""

from .ir import GraphData, GraphLink, GraphNode, LinkType, NodeType
from .loader import load_graph

__all__ = [
    "GraphData",
    "GraphLink",
    "GraphNode",
    "LinkType",
    "NodeType",
    "load_graph",
]
