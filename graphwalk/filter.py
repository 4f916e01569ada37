"""Graph adaptors that hide nodes or edges of an underlying graph."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from graphwalk.visit import Direction


class NodeFiltered:
    """View of ``graph`` restricted to the nodes accepted by ``predicate``.

    ``predicate`` is either a callable taking a node identifier and returning
    a truth value, or a container (a set, a ``VisitMap``) whose members are
    the included nodes. Edges are kept only when both endpoints are included.
    """

    __slots__ = ("graph", "predicate")

    def __init__(self, graph: Any, predicate: Any) -> None:
        self.graph = graph
        self.predicate = predicate

    @classmethod
    def from_fn(cls, graph: Any, predicate: Any) -> NodeFiltered:
        """Create the adaptor from a node predicate."""
        return cls(graph, predicate)

    def __repr__(self) -> str:
        return f"NodeFiltered({self.graph!r}, {self.predicate!r})"

    def include_node(self, node: Any) -> bool:
        """Return True if ``node`` is part of the filtered graph."""
        if callable(self.predicate):
            return bool(self.predicate(node))
        return node in self.predicate

    def _kept(self, node: Any, candidates: Any) -> Iterator[Any]:
        if not self.include_node(node):
            return iter(())
        return (target for target in candidates if self.include_node(target))

    def neighbors(self, node: Any) -> Iterator[Any]:
        """Included neighbors of ``node``; none if ``node`` itself is excluded."""
        return self._kept(node, self.graph.neighbors(node))

    def neighbors_directed(self, node: Any, direction: Direction) -> Iterator[Any]:
        """Included neighbors of ``node`` in ``direction``."""
        return self._kept(node, self.graph.neighbors_directed(node, direction))

    def node_identifiers(self) -> Iterator[Any]:
        """Identifiers of the included nodes."""
        return (node for node in self.graph.node_identifiers() if self.include_node(node))

    def node_references(self) -> Iterator[Any]:
        """References to the included nodes."""
        return (ref for ref in self.graph.node_references() if self.include_node(ref.id))

    def edge_references(self) -> Iterator[Any]:
        """Edges whose source and target are both included."""
        return (
            edge
            for edge in self.graph.edge_references()
            if self.include_node(edge.source) and self.include_node(edge.target)
        )

    def edges(self, node: Any) -> Iterator[Any]:
        """Edges of ``node`` leading to included nodes."""
        if not self.include_node(node):
            return iter(())
        return (edge for edge in self.graph.edges(node) if self.include_node(edge.target))

    def node_weight(self, node: Any) -> Any:
        """Weight of ``node``, or None if it is excluded."""
        if self.include_node(node):
            return self.graph.node_weight(node)
        return None

    def edge_weight(self, edge: Any) -> Any:
        """Weight of ``edge`` in the underlying graph."""
        return self.graph.edge_weight(edge)

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


class EdgeFiltered:
    """View of ``graph`` keeping only the edges accepted by ``predicate``.

    ``predicate`` receives an edge reference and may look at its source,
    target, identifier and weight. All nodes remain part of the graph.
    """

    __slots__ = ("graph", "predicate")

    def __init__(self, graph: Any, predicate: Any) -> None:
        self.graph = graph
        self.predicate = predicate

    @classmethod
    def from_fn(cls, graph: Any, predicate: Any) -> EdgeFiltered:
        """Create the adaptor from an edge predicate."""
        return cls(graph, predicate)

    def __repr__(self) -> str:
        return f"EdgeFiltered({self.graph!r}, {self.predicate!r})"

    def include_edge(self, edge: Any) -> bool:
        """Return True if ``edge`` is part of the filtered graph."""
        return bool(self.predicate(edge))

    def neighbors(self, node: Any) -> Iterator[Any]:
        """Targets of the included edges of ``node``."""
        return (edge.target for edge in self.graph.edges(node) if self.include_edge(edge))

    def neighbors_directed(self, node: Any, direction: Direction) -> Iterator[Any]:
        """Other endpoints of the included edges of ``node`` in ``direction``."""
        for edge in self.graph.edges_directed(node, direction):
            if self.include_edge(edge):
                yield edge.source if edge.source != node else edge.target

    def edge_references(self) -> Iterator[Any]:
        """All included edges."""
        return (edge for edge in self.graph.edge_references() if self.include_edge(edge))

    def edges(self, node: Any) -> Iterator[Any]:
        """Included edges of ``node``."""
        return (edge for edge in self.graph.edges(node) if self.include_edge(edge))

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