"""
Causal graph implementation.

This module provides the CausalGraph class which wraps NetworkX and
exposes the parent/child adjacency that the identification algorithms
walk over, plus the edge-deleted graph used for backdoor analysis.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

import networkx as nx

from causalid.core.edges import CausalEdge, edges_from_pairs


class CyclicGraphError(ValueError):
    """Raised when acyclicity validation is requested and the graph has a cycle."""


class CausalGraph:
    """A directed graph of causal relationships between decision factors.

    The graph is stored as a NetworkX DiGraph, whose predecessor and
    successor maps are the ``parents`` and ``children`` mappings: an edge
    ``(u, v)`` means ``v`` is a child of ``u`` and ``u`` is a parent of ``v``.
    Every node mentioned by an edge is registered, so lookups for known
    nodes never need an existence check. Unknown nodes behave as if they
    had no parents and no children.

    The graph is assumed to be acyclic. Nothing here enforces it unless
    ``make_graph(..., validate=True)`` is used.

    Example:
        >>> graph = CausalGraph.from_edges([("U", "X"), ("U", "Y"), ("X", "Y")])
        >>> sorted(graph.get_parents("Y"))
        ['U', 'X']
        >>> graph.get_children("missing")
        set()
    """

    def __init__(self) -> None:
        self._graph: nx.DiGraph = nx.DiGraph()

    @classmethod
    def from_edges(cls, edges: Iterable[Any]) -> CausalGraph:
        """Build a graph from ``(source, target)`` pairs or CausalEdges."""
        graph = cls()
        for edge in edges_from_pairs(edges):
            graph.add_edge(edge)
        return graph

    # --- Node Operations ---

    def add_node(self, node_id: str) -> None:
        """Register a node with no edges. Re-adding is a no-op."""
        self._graph.add_node(node_id)

    def has_node(self, node_id: str) -> bool:
        """Check if a node exists in the graph."""
        return node_id in self._graph

    @property
    def nodes(self) -> list[str]:
        """All node IDs, in insertion order."""
        return list(self._graph.nodes)

    @property
    def node_count(self) -> int:
        """Get the number of nodes in the graph."""
        return self._graph.number_of_nodes()

    # --- Edge Operations ---

    def add_edge(self, edge: CausalEdge) -> None:
        """Add an edge, registering both endpoints.

        Duplicate edges are idempotent.
        """
        self._graph.add_edge(edge.source_id, edge.target_id)

    def has_edge(self, source_id: str, target_id: str) -> bool:
        """Check if an edge exists between two nodes."""
        return self._graph.has_edge(source_id, target_id)

    @property
    def edges(self) -> list[CausalEdge]:
        """All edges as CausalEdge objects."""
        return [CausalEdge(source_id=u, target_id=v) for u, v in self._graph.edges]

    @property
    def edge_count(self) -> int:
        """Get the number of edges in the graph."""
        return self._graph.number_of_edges()

    def get_parents(self, node_id: str) -> set[str]:
        """Get IDs of all parent nodes, or an empty set for unknown nodes."""
        if node_id not in self._graph:
            return set()
        return set(self._graph.predecessors(node_id))

    def get_children(self, node_id: str) -> set[str]:
        """Get IDs of all child nodes, or an empty set for unknown nodes."""
        if node_id not in self._graph:
            return set()
        return set(self._graph.successors(node_id))

    # --- Causal Graph Properties ---

    def get_ancestors(self, node_id: str) -> set[str]:
        """Get all ancestors of a node (recursive parents)."""
        if node_id not in self._graph:
            return set()
        return nx.ancestors(self._graph, node_id)

    def get_descendants(self, node_id: str) -> set[str]:
        """Get all descendants of a node (recursive children)."""
        if node_id not in self._graph:
            return set()
        return nx.descendants(self._graph, node_id)

    def is_valid_dag(self) -> bool:
        """Check if graph is a valid DAG (no cycles)."""
        return nx.is_directed_acyclic_graph(self._graph)

    def find_cycle(self) -> list[tuple[str, str]] | None:
        """Return the edges of one cycle, or None if the graph is acyclic."""
        try:
            return list(nx.find_cycle(self._graph))
        except nx.NetworkXNoCycle:
            return None

    # --- Graph Surgery ---

    def without_outgoing(self, node_ids: Iterable[str]) -> CausalGraph:
        """Create G_A̲ - graph with outgoing edges from ``node_ids`` removed.

        Paths in this graph that touch a node of ``node_ids`` can only do so
        through an incoming edge, which is what makes them backdoor paths.
        All nodes are kept, including ones that end up isolated.

        Args:
            node_ids: Nodes whose outgoing edges to remove

        Returns:
            A new CausalGraph; this graph is left untouched
        """
        edge_deleted = CausalGraph()
        edge_deleted._graph = self._graph.copy()

        for node_id in node_ids:
            if node_id in edge_deleted._graph:
                children = list(edge_deleted._graph.successors(node_id))
                for child in children:
                    edge_deleted._graph.remove_edge(node_id, child)

        return edge_deleted

    # --- Serialization ---

    def to_networkx(self) -> nx.DiGraph:
        """Get a copy of the underlying NetworkX graph."""
        return self._graph.copy()

    def to_dict(self) -> dict[str, Any]:
        """Serialize the graph to a dictionary."""
        return {
            "nodes": self.nodes,
            "edges": [list(edge.as_pair()) for edge in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CausalGraph:
        """Create a CausalGraph from a dictionary produced by ``to_dict``."""
        graph = cls.from_edges(data.get("edges", []))
        for node_id in data.get("nodes", []):
            graph.add_node(node_id)
        return graph

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return self.node_count

    def __contains__(self, node_id: object) -> bool:
        """Check if a node is in the graph."""
        return node_id in self._graph

    def __iter__(self) -> Iterator[str]:
        """Iterate over node IDs in insertion order."""
        return iter(self._graph.nodes)

    def __repr__(self) -> str:
        """String representation of the graph."""
        return f"CausalGraph(nodes={self.node_count}, edges={self.edge_count})"


def make_graph(edges: Iterable[Any], validate: bool = False) -> CausalGraph:
    """Build a CausalGraph from an edge list.

    Args:
        edges: ``(source, target)`` pairs or CausalEdges
        validate: If True, reject graphs that contain a cycle

    Returns:
        The constructed graph

    Raises:
        CyclicGraphError: If ``validate`` is set and the graph has a cycle
    """
    graph = CausalGraph.from_edges(edges)
    if validate:
        cycle = graph.find_cycle()
        if cycle is not None:
            path = " -> ".join([u for u, _ in cycle] + [cycle[-1][1]])
            raise CyclicGraphError(f"Graph contains a cycle: {path}")
    return graph


def get_parents(graph: CausalGraph, node_id: str) -> set[str]:
    """Parents of ``node_id``; empty for unknown nodes."""
    return graph.get_parents(node_id)


def get_children(graph: CausalGraph, node_id: str) -> set[str]:
    """Children of ``node_id``; empty for unknown nodes."""
    return graph.get_children(node_id)
