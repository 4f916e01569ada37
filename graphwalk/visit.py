"""Core vocabulary shared by the graph traversals and graph adaptors."""

from __future__ import annotations

import enum
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


class Direction(enum.Enum):
    """Edge direction relative to a node: outgoing or incoming."""

    OUTGOING = 0
    INCOMING = 1

    def opposite(self) -> Direction:
        """Return the other direction."""
        if self is Direction.OUTGOING:
            return Direction.INCOMING
        return Direction.OUTGOING


@dataclass(frozen=True)
class EdgeReference:
    """An edge seen from the outside: its endpoints, weight and identifier.

    When no identifier is given, the pair ``(source, target)`` is used.
    """

    source: Any
    target: Any
    weight: Any = None
    id: Any = field(default=None)

    def __post_init__(self) -> None:
        if self.id is None:
            object.__setattr__(self, "id", (self.source, self.target))


@dataclass(frozen=True)
class NodeReference:
    """A node seen from the outside: its identifier and weight."""

    id: Any
    weight: Any = None


class VisitMap:
    """Records which nodes have been visited."""

    __slots__ = ("_visited",)

    def __init__(self, nodes: Iterable[Hashable] = ()) -> None:
        self._visited: set[Hashable] = set(nodes)

    def visit(self, node: Hashable) -> bool:
        """Mark ``node`` as visited; return True if this is the first visit."""
        if node in self._visited:
            return False
        self._visited.add(node)
        return True

    def is_visited(self, node: Hashable) -> bool:
        """Return whether ``node`` has been visited before."""
        return node in self._visited

    def clear(self) -> None:
        """Forget every visit."""
        self._visited.clear()

    def __contains__(self, node: object) -> bool:
        return node in self._visited

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._visited)

    def __len__(self) -> int:
        return len(self._visited)

    def __repr__(self) -> str:
        return f"VisitMap({sorted(self._visited, key=repr)!r})"