# graphwalk

Graph traversals and graph adaptors that work on any graph object offering
a few plain methods. The package has no graph container of its own. You bring
the graph, and graphwalk walks it, filters it or reverses it.

## The graph you pass in

Each tool calls only the methods it needs:

| Method | Used by |
| --- | --- |
| `neighbors(node)` | `Dfs`, `DfsPostOrder`, `Bfs`, `Topo`, `depth_first_search`, `NodeFiltered` |
| `neighbors_directed(node, direction)` | `Topo`, `Reversed`, `NodeFiltered` |
| `edges(node)` | `EdgeFiltered`, `NodeFiltered.edges` |
| `edges_directed(node, direction)` | `EdgeFiltered.neighbors_directed` |
| `edge_references()` | `adjacency_matrix`, the adaptors |
| `node_identifiers()` | `Topo`, the adaptors |
| `visit_map()`, `reset_map(map)` | every walker and `depth_first_search` |
| `node_bound()`, `to_index(node)`, `is_directed()` | `adjacency_matrix`, `is_adjacent` |

Edges are objects with `source`, `target`, `weight` and `id` attributes.
`graphwalk.visit.EdgeReference` is a ready-made one. `visit_map()` usually
returns a fresh `graphwalk.visit.VisitMap()`, and `reset_map(m)` usually calls
`m.clear()`.

## Modules

- `graphwalk.visit`: the shared pieces.
  - `Direction` has the members `OUTGOING` and `INCOMING`, and `opposite()`.
  - `EdgeReference(source, target, weight=None, id=None)` is an edge. Its `id`
    defaults to `(source, target)`.
  - `NodeReference(id, weight=None)` is a node.
  - `VisitMap` is a set of visited nodes with `visit(node)`, `is_visited(node)`
    and `clear()`. `visit` returns True only on the first visit.
- `graphwalk.traversal`: the walkers `Dfs`, `DfsPostOrder`, `Bfs` and `Topo`.
  They keep their own state and take the graph on every `next(graph)` call, so
  the graph may change between steps. `next` returns `None` when the walk is
  done, and `iter(graph)` gives a plain iterator.
  - `Dfs` also has `from_parts(stack, discovered)`, `empty(graph)`,
    `reset(graph)` and `move_to(start)`. Its `stack` and `discovered`
    attributes are public.
  - `DfsPostOrder` also has `empty`, `reset` and `move_to`, and a `finished`
    map.
  - `Topo(graph)` starts from the nodes that have no incoming edges. It visits
    only the nodes that are not on a cycle.
- `graphwalk.dfsvisit`: `depth_first_search(graph, starts, visitor)`, a
  callback-based depth-first search.
  - It sends `Discover(node, time)`, `TreeEdge(source, target)`,
    `BackEdge(...)`, `CrossForwardEdge(...)` and `Finish(node, time)` to the
    visitor. Times are `Time(value)` objects that count up from 0.
  - The visitor returns `None` or `Control.CONTINUE` to go on.
  - It returns `Control.PRUNE` to skip a node's remaining edges, or, on a tree
    edge, to not descend. Pruning on `Finish` raises `ValueError`.
  - It returns `Break(value)` to stop. That `Break` is then what
    `depth_first_search` returns, and `break_value(result)` gets the value out.
    A search that runs to completion returns `None`.
- `graphwalk.reversed`: `Reversed(graph)` is a view in which every edge points
  the other way. Its edge references are `ReversedEdgeReference` objects.
- `graphwalk.filter`: graph views that hide parts of a graph.
  - `NodeFiltered(graph, predicate)` hides nodes. `predicate` is a callable, or
    a container such as a set or a `VisitMap`. An edge stays only when both of
    its ends are included.
  - `EdgeFiltered(graph, predicate)` hides the edges that the predicate
    rejects. The predicate is given an edge reference.
  - Both have a `from_fn` constructor.
- `graphwalk.adjacency`: `adjacency_matrix(graph)` returns the set cells of an
  `n * n` matrix as a frozenset of `a * n + b` indices. Undirected graphs get
  both directions. `is_adjacent(graph, matrix, a, b)` looks up one cell.
- `graphwalk.unionfind`: `UnionFind(n)` is a disjoint-set structure over
  `0..n-1`, with union by rank and path compression. It has `find`,
  `find_mut`, `union` and `into_labeling`. Out-of-range elements raise
  `IndexError`.

## Example

```python
from graphwalk.visit import Direction, EdgeReference, VisitMap
from graphwalk.traversal import Dfs, Topo
from graphwalk.reversed import Reversed


class DiGraph:
    def __init__(self, n, pairs):
        self.n = n
        self.edge_list = [EdgeReference(a, b) for a, b in pairs]

    def node_identifiers(self):
        return iter(range(self.n))

    def neighbors(self, node):
        return (e.target for e in self.edge_list if e.source == node)

    def neighbors_directed(self, node, direction):
        if direction is Direction.OUTGOING:
            return self.neighbors(node)
        return (e.source for e in self.edge_list if e.target == node)

    def visit_map(self):
        return VisitMap()

    def reset_map(self, visit_map):
        visit_map.clear()


g = DiGraph(4, [(0, 1), (1, 2), (0, 3)])
print(list(Dfs(g, 0).iter(g)))           # preorder from 0
print(list(Dfs(g, 2).iter(Reversed(g)))) # nodes that can reach 2
print(list(Topo(g).iter(g)))             # a topological order
```

Union-find:

```python
from graphwalk.unionfind import UnionFind

uf = UnionFind(5)
uf.union(0, 1)
uf.union(3, 4)
assert uf.find(1) == uf.find(0)
print(uf.into_labeling())
```

## What it does not do

- graphwalk has no graph container: there is nothing to add or remove nodes
  and edges with.
- It has no graph algorithms beyond the traversals above. There are no
  shortest paths, spanning trees, strongly connected components or
  isomorphism tests.
- It has no command-line program.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```