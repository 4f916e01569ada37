"""A graph adaptor that reverses the direction of every edge."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from graphwalk.visit import Direction


@dataclass(frozen=True)
class ReversedEdgeReference:
    """An edge reference with source and target swapped."""

    edge: Any

    @property
    def source(self) -> Any:
        return self.edge.target

    @property
    def target(self) -> Any:
        return self.edge.source

    @property
    def weight(self) -> Any:
        return self.edge.weight

    @property
    def id(self) -> Any:
        return self.edge.id


class Reversed:
    """View of ``graph`` in which all edges have the opposite direction."""

    __slots__ = ("graph",)

    def __init__(self, graph: Any) -> None:
        self.graph = graph

    def __repr__(self) -> str:
        return f"Reversed({self.graph!r})"

    def neighbors(self, node: Any) -> Iterator[Any]:
        """Neighbors through the underlying graph's incoming edges."""
        return iter(self.graph.neighbors_directed(node, Direction.INCOMING))

    def neighbors_directed(self, node: Any, direction: Direction) -> Iterator[Any]:
        """Neighbors in ``direction`` of the reversed graph."""
        return iter(self.graph.neighbors_directed(node, direction.opposite()))

    def edge_references(self) -> Iterator[ReversedEdgeReference]:
        """All edges, each with source and target swapped."""
        return (ReversedEdgeReference(edge) for edge in self.graph.edge_references())

    def node_identifiers(self) -> Iterator[Any]:
        return iter(self.graph.node_identifiers())

    def node_references(self) -> Iterator[Any]:
        return iter(self.graph.node_references())

    def node_count(self) -> int:
        return self.graph.node_count()

    def node_bound(self) -> int:
        return self.graph.node_bound()

    def to_index(self, node: Any) -> int:
        return self.graph.to_index(node)

    def from_index(self, index: int) -> Any:
        return self.graph.from_index(index)

    def is_directed(self) -> bool:
        return self.graph.is_directed()

    def visit_map(self) -> Any:
        return self.graph.visit_map()

    def reset_map(self, visit_map: Any) -> None:
        self.graph.reset_map(visit_map)