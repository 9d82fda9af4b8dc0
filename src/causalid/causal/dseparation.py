"""
D-separation algorithms for conditional independence testing.

D-separation (directed separation) is a criterion for determining
conditional independence relationships in directed acyclic graphs.
It is fundamental to Pearl's causal inference framework.

Both tests here use the Bayes-ball traversal: a ball is passed along
edges, and whether it may continue through a node depends on the
direction it arrived from and on whether the node is conditioned on.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Iterable

from causalid.causal.reachability import ancestors_of

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph


class Direction(str, Enum):
    """Which way the ball was travelling when it arrived at a node.

    - UP: arrived from a child, moving against the edge
    - DOWN: arrived from a parent, moving along the edge
    """

    UP = "up"
    DOWN = "down"


def _ball_reaches(
    graph: CausalGraph,
    sources: set[str],
    targets: set[str],
    conditioning: set[str],
    upward_only: bool = False,
) -> bool:
    """Check whether a Bayes ball released at ``sources`` reaches ``targets``.

    A node can be visited once per direction. Distinguishing the two is what
    lets a collider be entered from one parent and left towards another.

    Transitions at a visited node ``n``:

    - UP, ``n`` not conditioned: pass to parents (UP) and children (DOWN).
    - UP, ``n`` conditioned: blocked (conditioned chain or fork).
    - DOWN, ``n`` not conditioned: pass to children (DOWN).
    - DOWN, ``n`` conditioned or an ancestor of a conditioned node: the
      collider is open, bounce to parents (UP).

    Args:
        graph: Graph to traverse
        sources: Nodes the ball is released from
        targets: Nodes whose arrival means an active trail exists
        conditioning: Observed nodes (Z)
        upward_only: Release the ball only through incoming edges of sources

    Returns:
        True if some target outside ``sources`` is reached
    """
    # Fixed for the whole traversal.
    opened = ancestors_of(graph, conditioning)

    frontier: deque[tuple[str, Direction]] = deque()
    for source in sources:
        frontier.extend((parent, Direction.UP) for parent in graph.get_parents(source))
        if not upward_only:
            frontier.extend((child, Direction.DOWN) for child in graph.get_children(source))

    visited: set[tuple[str, Direction]] = set()

    while frontier:
        node, direction = frontier.popleft()
        if (node, direction) in visited:
            continue
        visited.add((node, direction))

        if node in targets and node not in sources:
            return True

        if direction is Direction.UP:
            if node in conditioning:
                continue
            frontier.extend((parent, Direction.UP) for parent in graph.get_parents(node))
            frontier.extend((child, Direction.DOWN) for child in graph.get_children(node))
        else:
            if node not in conditioning:
                frontier.extend((child, Direction.DOWN) for child in graph.get_children(node))
            if node in conditioning or node in opened:
                frontier.extend((parent, Direction.UP) for parent in graph.get_parents(node))

    return False


def is_d_separated(
    graph: CausalGraph,
    x: Iterable[str],
    y: Iterable[str],
    z: Iterable[str] = (),
) -> bool:
    """Test if X and Y are d-separated given Z.

    Two sets of nodes X and Y are d-separated by Z if every path
    between any node in X and any node in Y is blocked by Z. A path is
    blocked if it contains:

    1. A chain (A→B→C) where B is in Z
    2. A fork (A←B→C) where B is in Z
    3. A collider (A→B←C) where B is NOT in Z and no descendant of B is in Z

    The test is symmetric in X and Y. Unknown nodes are treated as
    isolated, so they are d-separated from everything.

    Args:
        graph: The graph to analyze
        x: Source node set
        y: Target node set
        z: Conditioning set (defaults to empty)

    Returns:
        True if X and Y are d-separated given Z

    Example:
        >>> chain = make_graph([("A", "B"), ("B", "C")])
        >>> is_d_separated(chain, {"A"}, {"C"}, {"B"})
        True
        >>> is_d_separated(chain, {"A"}, {"C"})
        False
    """
    return not _ball_reaches(graph, set(x), set(y), set(z))


def is_d_connected(
    graph: CausalGraph,
    x: Iterable[str],
    y: Iterable[str],
    z: Iterable[str] = (),
) -> bool:
    """Test if X and Y are d-connected given Z (the negation of d-separation)."""
    return not is_d_separated(graph, x, y, z)


def exists_open_backdoor_path(
    graph: CausalGraph,
    a: Iterable[str],
    b: Iterable[str],
    z: Iterable[str] = (),
) -> bool:
    """Check whether an unblocked backdoor path runs from A to B given Z.

    A backdoor path is a path from A to B that starts with an arrow INTO A
    (i.e., ← from A). These are the confounding paths that need to be
    blocked for causal identification.

    The search runs on G_A̲ (outgoing edges of A removed) and the ball
    leaves A only through incoming edges, so directed paths out of A are
    never counted, including ones that loop back through A.

    Args:
        graph: The graph to analyze
        a: Source set (typically the treatment)
        b: Target set
        z: Conditioning set

    Returns:
        True if some node of B not in A is reached by an active backdoor trail
    """
    sources = set(a)
    backdoor_graph = graph.without_outgoing(sources)
    return _ball_reaches(backdoor_graph, sources, set(b), set(z), upward_only=True)
