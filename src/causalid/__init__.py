"""
causalid: graphical identification of causal effects.

Given a causal DAG of decision factors, decides whether the effect of a
treatment on an outcome can be identified from observational data by
backdoor adjustment, frontdoor adjustment, or the g-formula, using
Bayes-ball d-separation rather than statistical estimation.
"""

__version__ = "0.1.0"

from causalid.core.edges import CausalEdge
from causalid.core.graph import CausalGraph, CyclicGraphError, make_graph
from causalid.causal.identification import (
    IdentificationEngine,
    IdentificationMethod,
    IdentificationResult,
    choose_method,
)

__all__ = [
    "CausalEdge",
    "CausalGraph",
    "CyclicGraphError",
    "make_graph",
    "IdentificationEngine",
    "IdentificationMethod",
    "IdentificationResult",
    "choose_method",
]
