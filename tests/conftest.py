"""Pytest configuration and fixtures for causalid tests."""

import pytest

from causalid.core.graph import CausalGraph, make_graph


@pytest.fixture
def empty_graph():
    """Create an empty CausalGraph."""
    return CausalGraph()


@pytest.fixture
def chain_graph():
    """Create a simple chain: A → B → C.

    This is useful for testing basic d-separation in chains.
    """
    return make_graph([("A", "B"), ("B", "C")])


@pytest.fixture
def fork_graph():
    """Create a fork: A ← B → C.

    This is useful for testing d-separation with common causes.
    """
    return make_graph([("B", "A"), ("B", "C")])


@pytest.fixture
def collider_graph():
    """Create a collider: A → B ← C.

    This is useful for testing the 'explaining away' phenomenon.
    """
    return make_graph([("A", "B"), ("C", "B")])


@pytest.fixture
def confounding_graph():
    """Create a confounding DAG: U → X, U → Y, X → Y.

    The classic scenario where U confounds the treatment X and
    outcome Y relationship.
    """
    return make_graph([("U", "X"), ("U", "Y"), ("X", "Y")])


@pytest.fixture
def frontdoor_graph():
    """Create a front-door DAG: U → X → M → Y, U → Y.

    U confounds X and Y, and the whole effect of X flows through M.
    """
    return make_graph([("U", "X"), ("U", "Y"), ("X", "M"), ("M", "Y")])


@pytest.fixture
def m_bias_graph():
    """Create an M-bias DAG: A → X, A → C, B → C, B → Y, X → Y.

    C is a collider on the only backdoor path, so adjusting for it
    opens a path that is otherwise blocked.
    """
    return make_graph([("A", "X"), ("A", "C"), ("B", "C"), ("B", "Y"), ("X", "Y")])
