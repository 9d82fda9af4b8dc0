"""Unit tests for d-separation and the open-backdoor-path test.

These tests use classic causal inference examples to verify
the correctness of the Bayes-ball traversal.
"""

from itertools import combinations

import pytest
from networkx.algorithms.d_separation import is_d_separator

from causalid.core.graph import make_graph
from causalid.causal.dseparation import (
    exists_open_backdoor_path,
    is_d_connected,
    is_d_separated,
)


def create_diamond_graph():
    """Create a graph mixing chains, forks and colliders.

    A → B → D ← C ← A, D → E, F → C, F → E
    """
    return make_graph([
        ("A", "B"),
        ("B", "D"),
        ("A", "C"),
        ("C", "D"),
        ("D", "E"),
        ("F", "C"),
        ("F", "E"),
    ])


class TestDSeparationBasics:
    """D-separation on the three elementary structures."""

    def test_chain_blocked_by_mediator(self, chain_graph):
        """In a chain, conditioning on the mediator blocks the path."""
        assert is_d_separated(chain_graph, {"A"}, {"C"}, {"B"}) is True

    def test_chain_open_without_conditioning(self, chain_graph):
        """In a chain, the unconditioned path is open."""
        assert is_d_separated(chain_graph, {"A"}, {"C"}, set()) is False

    def test_fork_blocked_by_common_cause(self, fork_graph):
        """In a fork, conditioning on the common cause blocks the path."""
        assert is_d_separated(fork_graph, {"A"}, {"C"}, {"B"}) is True

    def test_fork_open_without_conditioning(self, fork_graph):
        """In a fork, the unconditioned path is open."""
        assert is_d_separated(fork_graph, {"A"}, {"C"}) is False

    def test_collider_blocked_without_conditioning(self, collider_graph):
        """A collider blocks the path when nothing is observed."""
        assert is_d_separated(collider_graph, {"A"}, {"C"}, set()) is True

    def test_collider_opened_by_conditioning(self, collider_graph):
        """Conditioning on the collider opens the path (explaining away)."""
        assert is_d_separated(collider_graph, {"A"}, {"C"}, {"B"}) is False

    def test_collider_opened_by_descendant(self):
        """Conditioning on a descendant of the collider also opens it."""
        graph = make_graph([("A", "B"), ("C", "B"), ("B", "D")])

        assert is_d_separated(graph, {"A"}, {"C"}, {"D"}) is False
        assert is_d_separated(graph, {"A"}, {"C"}) is True

    def test_d_connected_is_negation(self, chain_graph):
        """is_d_connected is the negation of is_d_separated."""
        assert is_d_connected(chain_graph, {"A"}, {"C"}) is True
        assert is_d_connected(chain_graph, {"A"}, {"C"}, {"B"}) is False


class TestDSeparationEdgeCases:
    """Edge cases of the traversal."""

    def test_unknown_nodes_are_separated(self, chain_graph):
        """Nodes missing from the graph are isolated."""
        assert is_d_separated(chain_graph, {"missing"}, {"C"}) is True
        assert is_d_separated(chain_graph, {"A"}, {"missing"}) is True

    def test_set_valued_arguments(self, fork_graph):
        """X and Y may contain several nodes."""
        assert is_d_separated(fork_graph, {"A", "missing"}, {"C"}) is False

    def test_empty_sets_are_separated(self, chain_graph):
        """An empty source set cannot reach anything."""
        assert is_d_separated(chain_graph, set(), {"C"}) is True

    def test_accepts_any_iterable(self, chain_graph):
        """Lists and tuples work as well as sets."""
        assert is_d_separated(chain_graph, ["A"], ("C",), ["B"]) is True

    def test_terminates_on_cycle(self):
        """Visited guards stop the traversal on cyclic input."""
        graph = make_graph([("A", "B"), ("B", "A"), ("C", "D")])

        assert is_d_separated(graph, {"A"}, {"C"}) is True

    def test_collider_with_two_descendant_paths(self):
        """A collider opened through a longer descendant chain."""
        graph = make_graph([("A", "B"), ("C", "B"), ("B", "D"), ("D", "E")])

        assert is_d_separated(graph, {"A"}, {"C"}, {"E"}) is False
        assert is_d_separated(graph, {"A"}, {"C"}, {"D"}) is False


class TestDSeparationProperties:
    """Properties checked over every small query on a mixed graph."""

    @staticmethod
    def queries(graph, max_z=2):
        nodes = sorted(graph.nodes)
        for x, y in combinations(nodes, 2):
            rest = [n for n in nodes if n not in (x, y)]
            for size in range(max_z + 1):
                for z in combinations(rest, size):
                    yield x, y, set(z)

    @pytest.mark.parametrize(
        "graph",
        [
            create_diamond_graph(),
            make_graph([("A", "X"), ("A", "C"), ("B", "C"), ("B", "Y"), ("X", "Y")]),
            make_graph([("U", "X"), ("U", "Y"), ("X", "M"), ("M", "Y")]),
        ],
    )
    def test_symmetry(self, graph):
        """d-separation is symmetric in its first two arguments."""
        for x, y, z in self.queries(graph):
            assert is_d_separated(graph, {x}, {y}, z) == is_d_separated(graph, {y}, {x}, z), (x, y, z)

    @pytest.mark.parametrize(
        "graph",
        [
            create_diamond_graph(),
            make_graph([("A", "X"), ("A", "C"), ("B", "C"), ("B", "Y"), ("X", "Y")]),
        ],
    )
    def test_agrees_with_networkx(self, graph):
        """Results match NetworkX's d-separation on disjoint queries."""
        nx_graph = graph.to_networkx()
        for x, y, z in self.queries(graph):
            expected = is_d_separator(nx_graph, {x}, {y}, z)
            assert is_d_separated(graph, {x}, {y}, z) == expected, (x, y, z)


class TestOpenBackdoorPath:
    """Tests for the directional backdoor test."""

    def test_confounder_opens_backdoor(self, confounding_graph):
        """X ← U → Y is an open backdoor path when U is unobserved."""
        assert exists_open_backdoor_path(confounding_graph, {"X"}, {"Y"}, set()) is True

    def test_confounder_blocked(self, confounding_graph):
        """Observing U blocks the backdoor path."""
        assert exists_open_backdoor_path(confounding_graph, {"X"}, {"Y"}, {"U"}) is False

    def test_directed_path_is_not_backdoor(self, chain_graph):
        """A → B → C leaves A through an outgoing edge, so it is ignored."""
        assert exists_open_backdoor_path(chain_graph, {"A"}, {"C"}, set()) is False

    def test_no_parents_no_backdoor(self):
        """A treatment without parents has no backdoor paths."""
        graph = make_graph([("X", "Y")])

        assert exists_open_backdoor_path(graph, {"X"}, {"Y"}) is False

    def test_collider_on_backdoor_path(self, m_bias_graph):
        """M-bias: the backdoor path is closed until C is observed."""
        assert exists_open_backdoor_path(m_bias_graph, {"X"}, {"Y"}, set()) is False
        assert exists_open_backdoor_path(m_bias_graph, {"X"}, {"Y"}, {"C"}) is True
        assert exists_open_backdoor_path(m_bias_graph, {"X"}, {"Y"}, {"C", "A"}) is False

    def test_cannot_reenter_and_leave_source(self):
        """A path that comes back into X cannot continue along X's outgoing edge."""
        graph = make_graph([("U", "X"), ("X", "Y")])

        assert exists_open_backdoor_path(graph, {"X"}, {"Y"}, set()) is False

    def test_parent_outcome_is_reached(self):
        """When Y is a parent of X the backdoor reaches Y immediately."""
        graph = make_graph([("Y", "X")])

        assert exists_open_backdoor_path(graph, {"X"}, {"Y"}, {"Y"}) is True

    def test_target_inside_source_is_ignored(self, confounding_graph):
        """Targets that are also sources do not count as reached."""
        assert exists_open_backdoor_path(confounding_graph, {"X"}, {"X"}, set()) is False

    def test_conditioning_on_mediator_frontdoor(self, frontdoor_graph):
        """No open backdoor from X to M when M is observed."""
        assert exists_open_backdoor_path(frontdoor_graph, {"X"}, {"M"}, {"M"}) is False

    def test_mediator_backdoor_blocked_by_treatment(self, frontdoor_graph):
        """M ← X ← U → Y is blocked once X is observed."""
        assert exists_open_backdoor_path(frontdoor_graph, {"M"}, {"Y"}, {"M"}) is True
        assert exists_open_backdoor_path(frontdoor_graph, {"M"}, {"Y"}, {"M", "X"}) is False

    @pytest.mark.parametrize("z", [set(), {"A"}, {"C"}, {"A", "C"}, {"B", "C"}])
    def test_agrees_with_proper_backdoor_graph(self, m_bias_graph, z):
        """Matches d-separation in the graph with X's outgoing edges removed."""
        backdoor_graph = m_bias_graph.without_outgoing({"X"}).to_networkx()
        expected_open = not is_d_separator(backdoor_graph, {"X"}, {"Y"}, z)

        assert exists_open_backdoor_path(m_bias_graph, {"X"}, {"Y"}, z) == expected_open
