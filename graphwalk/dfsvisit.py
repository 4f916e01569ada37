"""Callback-driven depth-first search with edge classification."""

from __future__ import annotations

import enum
import itertools
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, order=True)
class Time:
    """Strictly increasing event time of a depth-first search."""

    value: int = 0


@dataclass(frozen=True)
class Discover:
    """A node is reached for the first time."""

    node: Any
    time: Time


@dataclass(frozen=True)
class TreeEdge:
    """An edge of the tree formed by the traversal."""

    source: Any
    target: Any


@dataclass(frozen=True)
class BackEdge:
    """An edge to a node that is discovered but not yet finished."""

    source: Any
    target: Any


@dataclass(frozen=True)
class CrossForwardEdge:
    """A cross or forward edge, to a node that is already finished."""

    source: Any
    target: Any


@dataclass(frozen=True)
class Finish:
    """All edges from a node have been reported."""

    node: Any
    time: Time


DfsEvent = Union[Discover, TreeEdge, BackEdge, CrossForwardEdge, Finish]


class Control(enum.Enum):
    """Flow control answers a visitor may give besides ``None``."""

    CONTINUE = "continue"
    PRUNE = "prune"


@dataclass(frozen=True)
class Break:
    """Stop the search and hand ``value`` back to the caller."""

    value: Any = None


def break_value(result: Any) -> Any:
    """Return the value carried by a ``Break`` result, else None."""
    return result.value if isinstance(result, Break) else None


def _successors(graph: Any, node: Any, outcome: Any) -> Iterator[Any]:
    if outcome is Control.PRUNE:
        return iter(())
    return iter(graph.neighbors(node))


def _visit_from(
    graph: Any,
    start: Any,
    visitor: Callable[[DfsEvent], Any],
    discovered: Any,
    finished: Any,
    clock: Iterator[int],
) -> Break | None:
    if not discovered.visit(start):
        return None
    outcome = visitor(Discover(start, Time(next(clock))))
    if isinstance(outcome, Break):
        return outcome
    stack = [(start, _successors(graph, start, outcome))]
    while stack:
        u, successors = stack[-1]
        for v in successors:
            if not discovered.is_visited(v):
                outcome = visitor(TreeEdge(u, v))
                if isinstance(outcome, Break):
                    return outcome
                if outcome is Control.PRUNE:
                    continue
                discovered.visit(v)
                outcome = visitor(Discover(v, Time(next(clock))))
                if isinstance(outcome, Break):
                    return outcome
                stack.append((v, _successors(graph, v, outcome)))
                break
            if finished.is_visited(v):
                outcome = visitor(CrossForwardEdge(u, v))
            else:
                outcome = visitor(BackEdge(u, v))
            if isinstance(outcome, Break):
                return outcome
        else:
            stack.pop()
            finished.visit(u)
            outcome = visitor(Finish(u, Time(next(clock))))
            if isinstance(outcome, Break):
                return outcome
            if outcome is Control.PRUNE:
                raise ValueError("pruning on a Finish event is not supported")
    return None


def depth_first_search(
    graph: Any, starts: Iterable[Any], visitor: Callable[[DfsEvent], Any]
) -> Break | None:
    """Run a depth-first search from each node of ``starts`` in turn.

    ``visitor`` is called for every event. It may return None or
    ``Control.CONTINUE`` to go on, ``Control.PRUNE`` to skip the remaining
    edges of the current node (or, on a tree edge, to not descend), or a
    ``Break`` to stop; that ``Break`` is then returned. Returns None when the
    search runs to completion. Pruning on ``Finish`` raises ValueError.
    Exceptions raised by the visitor propagate and end the search.
    """
    discovered = graph.visit_map()
    finished = graph.visit_map()
    clock = itertools.count()
    for start in starts:
        outcome = _visit_from(graph, start, visitor, discovered, finished, clock)
        if outcome is not None:
            return outcome
    return None