"""
Deterministic adjustment-set selection and candidate generation.

The selection functions never enumerate subsets themselves: they filter
whatever candidates the caller supplies. Candidate generators are plain
callables with the signature ``(graph, treatment, outcome) -> iterable of
sets`` so the enumeration policy stays pluggable.
"""

from __future__ import annotations

from itertools import chain, combinations
from typing import TYPE_CHECKING, Callable, Iterable

from causalid.causal.criteria import backdoor_ok, frontdoor_ok

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph

CandidateGenerator = Callable[["CausalGraph", str, str], Iterable[frozenset[str]]]
Validator = Callable[["CausalGraph", str, str, Iterable[str]], bool]


def set_sort_key(nodes: Iterable[str]) -> str:
    """Tie-break key: members sorted, then joined with commas.

    Only used to make the pick reproducible; it does not prefer smaller
    sets or carry any statistical meaning.
    """
    return ",".join(sorted(nodes))


def _pick_deterministic(
    validator: Validator,
    graph: CausalGraph,
    treatment: str,
    outcome: str,
    candidates: Iterable[Iterable[str]],
) -> frozenset[str] | None:
    valid = [
        frozenset(candidate)
        for candidate in candidates
        if validator(graph, treatment, outcome, candidate)
    ]
    if not valid:
        return None
    # Member tuple breaks ties between keys that collide on commas in node IDs.
    return min(valid, key=lambda s: (set_sort_key(s), tuple(sorted(s))))


def pick_deterministic_backdoor(
    graph: CausalGraph,
    treatment: str,
    outcome: str,
    candidates: Iterable[Iterable[str]],
) -> frozenset[str] | None:
    """Pick the first valid backdoor set in tie-break order.

    Args:
        graph: The graph to analyze
        treatment: The treatment node X
        outcome: The outcome node Y
        candidates: Candidate conditioning sets, in any order

    Returns:
        The selected adjustment set, or None if no candidate is valid
    """
    return _pick_deterministic(backdoor_ok, graph, treatment, outcome, candidates)


def pick_deterministic_frontdoor(
    graph: CausalGraph,
    treatment: str,
    outcome: str,
    candidates: Iterable[Iterable[str]],
) -> frozenset[str] | None:
    """Pick the first valid frontdoor mediator set in tie-break order."""
    return _pick_deterministic(frontdoor_ok, graph, treatment, outcome, candidates)


# --- Candidate Generators ---


def _subsets(nodes: Iterable[str], max_size: int) -> Iterable[frozenset[str]]:
    """All subsets of ``nodes`` up to ``max_size`` members, smallest first."""
    ordered = sorted(set(nodes))
    sizes = range(min(max_size, len(ordered)) + 1)
    return (frozenset(subset) for subset in chain.from_iterable(combinations(ordered, k) for k in sizes))


def parent_subsets(graph: CausalGraph, treatment: str, outcome: str) -> Iterable[frozenset[str]]:
    """Every subset of the treatment's parents, including the empty set."""
    parents = graph.get_parents(treatment) - {outcome}
    return _subsets(parents, len(parents))


def bounded_subsets(max_size: int) -> CandidateGenerator:
    """Build a generator over all subsets of up to ``max_size`` nodes.

    Every node other than the treatment and outcome is eligible, including
    descendants of the treatment, so mediator sets are proposed for the
    frontdoor check as well.

    Args:
        max_size: Largest candidate set to produce

    Returns:
        A candidate generator

    Raises:
        ValueError: If ``max_size`` is negative
    """
    if max_size < 0:
        raise ValueError(f"max_size must be non-negative, got {max_size}")

    def generate(graph: CausalGraph, treatment: str, outcome: str) -> Iterable[frozenset[str]]:
        eligible = set(graph.nodes) - {treatment, outcome}
        return _subsets(eligible, max_size)

    return generate
