"""
Graphical identification criteria.

Validators for Pearl's backdoor and frontdoor criteria, and the
parents-of-treatment fallback used for the global g-formula.

Reference: Pearl, J. (2009). Causality (2nd ed.). Section 3.3.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from causalid.causal.dseparation import exists_open_backdoor_path
from causalid.causal.reachability import descendants_of

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph


def backdoor_ok(
    graph: CausalGraph,
    treatment: str,
    outcome: str,
    adjustment_set: Iterable[str],
) -> bool:
    """Check if a set satisfies the backdoor criterion.

    An adjustment set Z is valid if:
    1. Z does not include any descendant of treatment
    2. Z blocks all backdoor paths from treatment to outcome

    Args:
        graph: The graph to analyze
        treatment: The treatment node X
        outcome: The outcome node Y
        adjustment_set: The proposed adjustment set Z

    Returns:
        True if the adjustment set satisfies the backdoor criterion
    """
    z = set(adjustment_set)

    if z & descendants_of(graph, {treatment}):
        return False

    return not exists_open_backdoor_path(graph, {treatment}, {outcome}, z)


def intercepts_all_directed(
    graph: CausalGraph,
    treatment: str,
    outcome: str,
    mediators: Iterable[str],
) -> bool:
    """Check that every directed path from treatment to outcome hits a mediator.

    Depth-first search along children from the treatment. A mediator ends
    the branch it lies on; reaching the outcome on a branch that never hit
    a mediator means the interception fails.

    Returns:
        True if no directed treatment → outcome path avoids ``mediators``
    """
    z = set(mediators)
    stack = list(graph.get_children(treatment))
    seen: set[str] = set()

    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        if node in z:
            continue
        if node == outcome:
            return False
        stack.extend(graph.get_children(node))

    return True


def frontdoor_ok(
    graph: CausalGraph,
    treatment: str,
    outcome: str,
    mediators: Iterable[str],
) -> bool:
    """Check if a mediator set satisfies the frontdoor criterion.

    A set Z satisfies the frontdoor criterion relative to (X, Y) if:
    1. Z intercepts all directed paths from X to Y
    2. There is no unblocked backdoor path from X to Z
    3. All backdoor paths from Z to Y are blocked by X

    Condition 2 is checked with Z itself observed; condition 3 with
    Z ∪ {X} observed.

    Args:
        graph: The graph to analyze
        treatment: The treatment node X
        outcome: The outcome node Y
        mediators: The proposed mediator set Z

    Returns:
        True if all three conditions hold
    """
    z = set(mediators)

    if not intercepts_all_directed(graph, treatment, outcome, z):
        return False

    if exists_open_backdoor_path(graph, {treatment}, z, z):
        return False

    return not exists_open_backdoor_path(graph, z, {outcome}, z | {treatment})


def global_adjust_ok(
    graph: CausalGraph,
    treatment: str,
    outcome: str,
) -> tuple[bool, frozenset[str]]:
    """Test the parents of the treatment as a default adjustment set.

    Returns:
        ``(True, parents)`` if the parents satisfy the backdoor criterion,
        otherwise ``(False, frozenset())``
    """
    parents = frozenset(graph.get_parents(treatment))
    if backdoor_ok(graph, treatment, outcome, parents):
        return True, parents
    return False, frozenset()
