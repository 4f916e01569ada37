"""Adjacency matrices computed from a graph's edges."""

from __future__ import annotations

from typing import Any


def adjacency_matrix(graph: Any) -> frozenset[int]:
    """Return the set bits of the graph's adjacency matrix.

    The matrix is ``node_bound() * node_bound()`` cells, laid out row by row:
    an edge from ``a`` to ``b`` sets cell ``a * n + b``. Undirected edges set
    both ``a * n + b`` and ``b * n + a``.
    """
    n = graph.node_bound()
    directed = graph.is_directed()
    cells: set[int] = set()
    for edge in graph.edge_references():
        source = graph.to_index(edge.source)
        target = graph.to_index(edge.target)
        cells.add(source * n + target)
        if not directed:
            cells.add(source + n * target)
    return frozenset(cells)


def is_adjacent(graph: Any, matrix: frozenset[int], a: Any, b: Any) -> bool:
    """Return True if ``matrix`` records an edge from ``a`` to ``b``."""
    n = graph.node_bound()
    return n * graph.to_index(a) + graph.to_index(b) in matrix