"""Ancestor and descendant closures over sets of nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph


def ancestors_of(graph: CausalGraph, nodes: Iterable[str]) -> set[str]:
    """Get all strict ancestors of ``nodes`` (recursive parents).

    The result is the union of each node's ancestors, so a node of
    ``nodes`` appears only when it is an ancestor of another one.

    Args:
        graph: The graph to walk
        nodes: Seed nodes; unknown nodes contribute nothing

    Returns:
        Set of ancestor node IDs
    """
    return set().union(*(graph.get_ancestors(node) for node in nodes))


def descendants_of(graph: CausalGraph, nodes: Iterable[str]) -> set[str]:
    """Get all strict descendants of ``nodes`` (recursive children)."""
    return set().union(*(graph.get_descendants(node) for node in nodes))
