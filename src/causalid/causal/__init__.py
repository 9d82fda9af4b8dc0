"""Causal identification engine: d-separation, criteria and method selection."""

from causalid.causal.reachability import ancestors_of, descendants_of
from causalid.causal.dseparation import exists_open_backdoor_path, is_d_connected, is_d_separated
from causalid.causal.criteria import backdoor_ok, frontdoor_ok, global_adjust_ok, intercepts_all_directed
from causalid.causal.selection import (
    bounded_subsets,
    parent_subsets,
    pick_deterministic_backdoor,
    pick_deterministic_frontdoor,
    set_sort_key,
)
from causalid.causal.identification import (
    IdentificationConfig,
    IdentificationEngine,
    IdentificationMethod,
    IdentificationResult,
    choose_method,
)

__all__ = [
    "ancestors_of",
    "descendants_of",
    "exists_open_backdoor_path",
    "is_d_connected",
    "is_d_separated",
    "backdoor_ok",
    "frontdoor_ok",
    "global_adjust_ok",
    "intercepts_all_directed",
    "bounded_subsets",
    "parent_subsets",
    "pick_deterministic_backdoor",
    "pick_deterministic_frontdoor",
    "set_sort_key",
    "IdentificationConfig",
    "IdentificationEngine",
    "IdentificationMethod",
    "IdentificationResult",
    "choose_method",
]
