"""Core graph model for causalid."""

from causalid.core.edges import CausalEdge, create_edge, edges_from_pairs
from causalid.core.graph import CausalGraph, CyclicGraphError, get_children, get_parents, make_graph

__all__ = [
    "CausalEdge",
    "create_edge",
    "edges_from_pairs",
    "CausalGraph",
    "CyclicGraphError",
    "get_children",
    "get_parents",
    "make_graph",
]
