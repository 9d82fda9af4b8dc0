"""
Identification of causal effects.

Decides whether the effect of a treatment X on an outcome Y is
identifiable from observational data given a causal DAG, and by which
method. The methods are tried in a fixed order, with no backtracking
once one succeeds:

1. Backdoor adjustment over a supplied candidate set
2. Frontdoor adjustment over a supplied mediator set
3. Global g-formula adjusting for the parents of X
4. Otherwise unidentifiable; only Manski bounds are available

Reference: Pearl, J. (2009). Causality (2nd ed.). Chapter 3.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable

from pydantic import BaseModel, ConfigDict, Field

from causalid.causal.criteria import backdoor_ok, frontdoor_ok, global_adjust_ok
from causalid.causal.selection import (
    CandidateGenerator,
    bounded_subsets,
    pick_deterministic_backdoor,
    pick_deterministic_frontdoor,
)
from causalid.core.graph import CyclicGraphError

if TYPE_CHECKING:
    from causalid.core.graph import CausalGraph

logger = logging.getLogger(__name__)

MANSKI_NOTE = "bounds: manski"


class IdentificationMethod(str, Enum):
    """How a causal effect was identified."""

    BACKDOOR = "backdoor"
    FRONTDOOR = "frontdoor"
    G_FORMULA = "g-formula"
    UNIDENTIFIABLE = "unidentifiable"


class IdentificationResult(BaseModel):
    """Outcome of an identifiability query.

    ``UNIDENTIFIABLE`` is a normal result, not an error: it means the
    effect cannot be recovered by adjustment.

    Attributes:
        method: The identification method that succeeded
        adjustment_set: The adjustment (or mediator) set used
        notes: Free-form notes for display, e.g. which bounds apply
    """

    model_config = ConfigDict(frozen=True)

    method: IdentificationMethod
    adjustment_set: frozenset[str] = Field(default_factory=frozenset)
    notes: tuple[str, ...] = ()

    @property
    def is_identifiable(self) -> bool:
        return self.method is not IdentificationMethod.UNIDENTIFIABLE

    def to_dict(self) -> dict[str, Any]:
        """Convert to a display-friendly dictionary with a sorted set."""
        return {
            "method": self.method.value,
            "adjustment_set": sorted(self.adjustment_set),
            "notes": list(self.notes),
        }

    def __str__(self) -> str:
        members = ", ".join(sorted(self.adjustment_set))
        text = f"{self.method.value} {{{members}}}"
        if self.notes:
            text += f" ({'; '.join(self.notes)})"
        return text


def choose_method(
    graph: CausalGraph,
    treatment: str,
    outcome: str,
    candidates: Iterable[Iterable[str]],
    unidentifiable_note: str = MANSKI_NOTE,
) -> IdentificationResult:
    """Choose how to identify the effect of ``treatment`` on ``outcome``.

    Args:
        graph: The causal DAG
        treatment: The treatment node X
        outcome: The outcome node Y
        candidates: Candidate conditioning sets, tried as backdoor sets and
            then as frontdoor mediator sets
        unidentifiable_note: Note attached to an unidentifiable result

    Returns:
        IdentificationResult for the first method that succeeds
    """
    # Both picks read the candidates, so a one-shot iterator must be materialised.
    candidate_sets = [frozenset(candidate) for candidate in candidates]

    z = pick_deterministic_backdoor(graph, treatment, outcome, candidate_sets)
    if z is not None and backdoor_ok(graph, treatment, outcome, z):
        logger.debug("backdoor adjustment for %s -> %s via %s", treatment, outcome, sorted(z))
        return IdentificationResult(method=IdentificationMethod.BACKDOOR, adjustment_set=z)

    z = pick_deterministic_frontdoor(graph, treatment, outcome, candidate_sets)
    if z is not None and frontdoor_ok(graph, treatment, outcome, z):
        logger.debug("frontdoor adjustment for %s -> %s via %s", treatment, outcome, sorted(z))
        return IdentificationResult(method=IdentificationMethod.FRONTDOOR, adjustment_set=z)

    ok, z = global_adjust_ok(graph, treatment, outcome)
    if ok:
        logger.debug("g-formula for %s -> %s over parents %s", treatment, outcome, sorted(z))
        return IdentificationResult(method=IdentificationMethod.G_FORMULA, adjustment_set=z)

    logger.debug("%s -> %s is not identifiable by adjustment", treatment, outcome)
    return IdentificationResult(
        method=IdentificationMethod.UNIDENTIFIABLE,
        notes=(unidentifiable_note,),
    )


@dataclass
class IdentificationConfig:
    """Configuration for an IdentificationEngine."""

    max_candidate_size: int = 2
    validate_acyclic: bool = False
    unidentifiable_note: str = MANSKI_NOTE


class IdentificationEngine:
    """Answers identifiability queries against a single causal graph.

    The engine owns the candidate-generation policy: by default every
    subset of up to ``config.max_candidate_size`` nodes is proposed, but
    any CandidateGenerator can be injected. No state is kept between
    queries.

    Example:
        >>> graph = make_graph([("U", "X"), ("U", "Y"), ("X", "Y")])
        >>> engine = IdentificationEngine(graph)
        >>> engine.identify("X", "Y").method
        <IdentificationMethod.BACKDOOR: 'backdoor'>
    """

    def __init__(
        self,
        graph: CausalGraph,
        config: IdentificationConfig | None = None,
        candidate_generator: CandidateGenerator | None = None,
    ):
        """Initialize the engine with a graph.

        Args:
            graph: The causal DAG to analyze
            config: Engine configuration (defaults to IdentificationConfig())
            candidate_generator: Candidate policy; defaults to bounded subsets

        Raises:
            CyclicGraphError: If ``config.validate_acyclic`` is set and the
                graph has a cycle
        """
        self.graph = graph
        self.config = config or IdentificationConfig()
        self.candidate_generator = candidate_generator or bounded_subsets(
            self.config.max_candidate_size
        )

        if self.config.validate_acyclic and not graph.is_valid_dag():
            raise CyclicGraphError("Graph contains a cycle")

    def candidates(self, treatment: str, outcome: str) -> list[frozenset[str]]:
        """Candidate sets the engine would try for a query."""
        return [frozenset(c) for c in self.candidate_generator(self.graph, treatment, outcome)]

    def identify(self, treatment: str, outcome: str) -> IdentificationResult:
        """Identify the effect of ``treatment`` on ``outcome``."""
        candidates = self.candidates(treatment, outcome)
        result = choose_method(
            self.graph,
            treatment,
            outcome,
            candidates,
            unidentifiable_note=self.config.unidentifiable_note,
        )
        logger.info(
            "identified %s -> %s: %s (%d candidates)",
            treatment,
            outcome,
            result.method.value,
            len(candidates),
        )
        return result

    def identify_many(
        self,
        queries: Iterable[tuple[str, str]],
    ) -> dict[tuple[str, str], IdentificationResult]:
        """Answer several ``(treatment, outcome)`` queries on the same graph."""
        return {(x, y): self.identify(x, y) for x, y in queries}
