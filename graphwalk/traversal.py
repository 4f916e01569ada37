"""Walker-style graph traversals: depth first, post order, breadth first, topological.

The walkers do not hold on to the graph between steps; the graph is passed
to every ``next`` call, so it may be changed between steps.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

from graphwalk.reversed import Reversed
from graphwalk.visit import Direction

_DONE = object()


def _walk(step: Any) -> Iterator[Any]:
    while (node := step()) is not _DONE:
        yield node


class Dfs:
    """Depth-first search emitting nodes in preorder (when first discovered).

    Only nodes reachable from the start node are visited. The search is not
    recursive. It may not behave correctly if nodes are removed during the
    traversal, and may not see nodes or edges added during it.
    """

    __slots__ = ("stack", "discovered")

    def __init__(self, graph: Any, start: Any) -> None:
        self.stack: list[Any] = []
        self.discovered = graph.visit_map()
        self.move_to(start)

    @classmethod
    def from_parts(cls, stack: Iterable[Any], discovered: Any) -> Dfs:
        """Create a search from an existing stack and visit map."""
        dfs = cls.__new__(cls)
        dfs.stack = list(stack)
        dfs.discovered = discovered
        return dfs

    @classmethod
    def empty(cls, graph: Any) -> Dfs:
        """Create a search with the graph's visit map and an empty stack."""
        return cls.from_parts([], graph.visit_map())

    def __repr__(self) -> str:
        return f"Dfs(stack={self.stack!r}, discovered={self.discovered!r})"

    def reset(self, graph: Any) -> None:
        """Clear the visit state."""
        graph.reset_map(self.discovered)
        self.stack.clear()

    def move_to(self, start: Any) -> None:
        """Keep the discovered nodes but restart the search from ``start``."""
        self.discovered.visit(start)
        self.stack.clear()
        self.stack.append(start)

    def _step(self, graph: Any) -> Any:
        if not self.stack:
            return _DONE
        node = self.stack.pop()
        for succ in graph.neighbors(node):
            if self.discovered.visit(succ):
                self.stack.append(succ)
        return node

    def next(self, graph: Any) -> Any:
        """Return the next node, or None when the traversal is done."""
        node = self._step(graph)
        return None if node is _DONE else node

    def iter(self, graph: Any) -> Iterator[Any]:
        """Iterate over the remaining nodes of the traversal on ``graph``."""
        return _walk(lambda: self._step(graph))


class DfsPostOrder:
    """Depth-first search emitting each node after all its descendants.

    Only nodes reachable from the start node are visited. The search is not
    recursive.
    """

    __slots__ = ("stack", "discovered", "finished")

    def __init__(self, graph: Any, start: Any) -> None:
        self.stack: list[Any] = []
        self.discovered = graph.visit_map()
        self.finished = graph.visit_map()
        self.move_to(start)

    @classmethod
    def empty(cls, graph: Any) -> DfsPostOrder:
        """Create a search with the graph's visit maps and an empty stack."""
        dfs = cls.__new__(cls)
        dfs.stack = []
        dfs.discovered = graph.visit_map()
        dfs.finished = graph.visit_map()
        return dfs

    def __repr__(self) -> str:
        return (
            f"DfsPostOrder(stack={self.stack!r}, discovered={self.discovered!r}, "
            f"finished={self.finished!r})"
        )

    def reset(self, graph: Any) -> None:
        """Clear the visit state."""
        graph.reset_map(self.discovered)
        graph.reset_map(self.finished)
        self.stack.clear()

    def move_to(self, start: Any) -> None:
        """Keep the discovered and finished nodes but restart from ``start``."""
        self.stack.clear()
        self.stack.append(start)

    def _step(self, graph: Any) -> Any:
        while self.stack:
            nx = self.stack[-1]
            if self.discovered.visit(nx):
                for succ in graph.neighbors(nx):
                    if not self.discovered.is_visited(succ):
                        self.stack.append(succ)
            else:
                self.stack.pop()
                if self.finished.visit(nx):
                    return nx
        return _DONE

    def next(self, graph: Any) -> Any:
        """Return the next node, or None when the traversal is done."""
        node = self._step(graph)
        return None if node is _DONE else node

    def iter(self, graph: Any) -> Iterator[Any]:
        """Iterate over the remaining nodes of the traversal on ``graph``."""
        return _walk(lambda: self._step(graph))


class Bfs:
    """Breadth-first search over the nodes reachable from a start node."""

    __slots__ = ("stack", "discovered")

    def __init__(self, graph: Any, start: Any) -> None:
        self.discovered = graph.visit_map()
        self.discovered.visit(start)
        self.stack: deque[Any] = deque([start])

    def __repr__(self) -> str:
        return f"Bfs(stack={list(self.stack)!r}, discovered={self.discovered!r})"

    def _step(self, graph: Any) -> Any:
        if not self.stack:
            return _DONE
        node = self.stack.popleft()
        for succ in graph.neighbors(node):
            if self.discovered.visit(succ):
                self.stack.append(succ)
        return node

    def next(self, graph: Any) -> Any:
        """Return the next node, or None when the traversal is done."""
        node = self._step(graph)
        return None if node is _DONE else node

    def iter(self, graph: Any) -> Iterator[Any]:
        """Iterate over the remaining nodes of the traversal on ``graph``."""
        return _walk(lambda: self._step(graph))


class Topo:
    """Topological order traversal.

    Only nodes that are not part of cycles are visited; run the whole
    traversal and compare against the node count to learn whether the graph
    had a complete topological order.
    """

    __slots__ = ("_tovisit", "_ordered")

    def __init__(self, graph: Any) -> None:
        self._ordered = graph.visit_map()
        self._tovisit: list[Any] = []
        self._extend_with_initials(graph)

    def __repr__(self) -> str:
        return f"Topo(tovisit={self._tovisit!r}, ordered={self._ordered!r})"

    def _extend_with_initials(self, graph: Any) -> None:
        self._tovisit.extend(
            node
            for node in graph.node_identifiers()
            if not any(True for _ in graph.neighbors_directed(node, Direction.INCOMING))
        )

    def reset(self, graph: Any) -> None:
        """Clear the visit state and start over from the initial nodes."""
        graph.reset_map(self._ordered)
        self._tovisit.clear()
        self._extend_with_initials(graph)

    def _step(self, graph: Any) -> Any:
        incoming = Reversed(graph)
        while self._tovisit:
            nix = self._tovisit.pop()
            if self._ordered.is_visited(nix):
                continue
            self._ordered.visit(nix)
            for neigh in graph.neighbors(nix):
                if all(self._ordered.is_visited(b) for b in incoming.neighbors(neigh)):
                    self._tovisit.append(neigh)
            return nix
        return _DONE

    def next(self, graph: Any) -> Any:
        """Return the next node in topological order, or None at the end."""
        node = self._step(graph)
        return None if node is _DONE else node

    def iter(self, graph: Any) -> Iterator[Any]:
        """Iterate over the remaining nodes of the traversal on ``graph``."""
        return _walk(lambda: self._step(graph))