"""
Causal edge model.

This module defines the edge type used to describe a directed causal
relationship between two decision factors, plus helpers for turning
user-authored edge lists into edges.
"""

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict


class CausalEdge(BaseModel):
    """A directed edge ``source_id → target_id`` in a causal graph.

    Attributes:
        source_id: Identifier of the cause node
        target_id: Identifier of the effect node

    Example:
        >>> edge = CausalEdge(source_id="U", target_id="X")
        >>> edge.as_pair()
        ('U', 'X')
    """

    model_config = ConfigDict(frozen=True)

    source_id: str
    target_id: str

    def as_pair(self) -> tuple[str, str]:
        """Return the edge as a ``(source, target)`` tuple."""
        return self.source_id, self.target_id

    def reversed(self) -> "CausalEdge":
        """Create a copy of this edge pointing the other way."""
        return CausalEdge(source_id=self.target_id, target_id=self.source_id)

    def __hash__(self) -> int:
        """Hash based on source and target for set/dict usage."""
        return hash((self.source_id, self.target_id))

    def __eq__(self, other: object) -> bool:
        """Equality based on source and target IDs."""
        if not isinstance(other, CausalEdge):
            return False
        return self.source_id == other.source_id and self.target_id == other.target_id

    def __str__(self) -> str:
        return f"{self.source_id} -> {self.target_id}"


def create_edge(source_id: str, target_id: str) -> CausalEdge:
    """Factory function to create a causal edge."""
    return CausalEdge(source_id=source_id, target_id=target_id)


def edges_from_pairs(pairs: Iterable[Any]) -> list[CausalEdge]:
    """Normalise an edge list into CausalEdge objects.

    Accepts ``CausalEdge`` instances and two-element sequences such as
    ``["U", "X"]`` or ``("U", "X")``, which is how the canvas hands edges over.

    Args:
        pairs: Iterable of edges or ``(source, target)`` pairs

    Returns:
        List of CausalEdges in input order

    Raises:
        ValueError: If an entry is not a two-element pair
    """
    edges: list[CausalEdge] = []
    for pair in pairs:
        if isinstance(pair, CausalEdge):
            edges.append(pair)
            continue
        if isinstance(pair, (str, bytes)):
            raise ValueError(f"Edge must be a (source, target) pair, got {pair!r}")
        try:
            source, target = pair
        except (TypeError, ValueError) as e:
            raise ValueError(f"Edge must be a (source, target) pair, got {pair!r}") from e
        edges.append(create_edge(str(source), str(target)))
    return edges
