from graphwalk.dfsvisit import Discover, depth_first_search
from graphwalk.reversed import Reversed, ReversedEdgeReference
from graphwalk.visit import Direction, EdgeReference, NodeReference, VisitMap


class _Graph:
    def __init__(self, names, edges, directed=True):
        self.names = list(names)
        self.edges = list(edges)
        self.directed = directed

    def neighbors(self, node):
        return self.neighbors_directed(node, Direction.OUTGOING)

    def neighbors_directed(self, node, direction):
        for source, target, _ in reversed(self.edges):
            if not self.directed:
                if source == node:
                    yield target
                elif target == node:
                    yield source
            elif direction is Direction.OUTGOING and source == node:
                yield target
            elif direction is Direction.INCOMING and target == node:
                yield source

    def edge_references(self):
        for index, (source, target, weight) in enumerate(self.edges):
            yield EdgeReference(source, target, weight, index)

    def node_identifiers(self):
        return iter(range(len(self.names)))

    def node_references(self):
        return (NodeReference(i, name) for i, name in enumerate(self.names))

    def node_count(self):
        return len(self.names)

    def node_bound(self):
        return len(self.names)

    def to_index(self, node):
        return node

    def from_index(self, index):
        return index

    def is_directed(self):
        return self.directed

    def visit_map(self):
        return VisitMap()

    def reset_map(self, visit_map):
        visit_map.clear()


def _sample():
    h, i, j, k = 0, 1, 2, 3
    return _Graph(
        ["H", "I", "J", "K", "Z"],
        [(h, i, 1.0), (h, j, 3.0), (i, j, 1.0), (i, k, 2.0)],
    )


def _reachable(graph, start):
    found = []
    depth_first_search(
        graph, [start], lambda e: found.append(e.node) if isinstance(e, Discover) else None
    )
    return found


def test_dfs_counts_forward_and_reversed():
    gr = _sample()
    h, i, k = 0, 1, 3
    assert len(_reachable(gr, h)) == 4
    assert len(_reachable(Reversed(gr), h)) == 1
    assert len(_reachable(Reversed(gr), k)) == 3
    assert len(_reachable(gr, i)) == 3
    assert set(_reachable(Reversed(gr), k)) == {k, i, h}


def test_neighbors_follow_incoming_edges():
    gr = _sample()
    rev = Reversed(gr)
    assert sorted(rev.neighbors(2)) == [0, 1]
    assert list(rev.neighbors(0)) == []
    assert sorted(rev.neighbors_directed(2, Direction.INCOMING)) == []
    assert sorted(rev.neighbors_directed(0, Direction.INCOMING)) == [1, 2]
    assert sorted(rev.neighbors_directed(1, Direction.OUTGOING)) == [0]


def test_double_reverse_restores_neighbors():
    gr = _sample()
    twice = Reversed(Reversed(gr))
    for node in range(gr.node_count()):
        assert list(twice.neighbors(node)) == list(gr.neighbors(node))


def test_edge_references_are_swapped():
    gr = _sample()
    reversed_edges = list(Reversed(gr).edge_references())
    original = list(gr.edge_references())
    assert len(reversed_edges) == len(original)
    for rev, edge in zip(reversed_edges, original):
        assert isinstance(rev, ReversedEdgeReference)
        assert (rev.source, rev.target) == (edge.target, edge.source)
        assert rev.weight == edge.weight
        assert rev.id == edge.id


def test_node_access_is_delegated():
    gr = _sample()
    rev = Reversed(gr)
    assert list(rev.node_identifiers()) == [0, 1, 2, 3, 4]
    assert [n.weight for n in rev.node_references()] == ["H", "I", "J", "K", "Z"]
    assert rev.node_count() == 5
    assert rev.node_bound() == 5
    assert rev.to_index(3) == 3
    assert rev.from_index(2) == 2
    assert rev.is_directed() is True


def test_visit_map_is_delegated():
    rev = Reversed(_sample())
    visited = rev.visit_map()
    assert visited.visit(1) is True
    assert visited.visit(1) is False
    rev.reset_map(visited)
    assert not visited.is_visited(1)


def test_undirected_reversal_keeps_neighbors():
    gr = _Graph(["a", "b", "c"], [(0, 1, None), (2, 0, None)], directed=False)
    rev = Reversed(gr)
    assert sorted(rev.neighbors(0)) == sorted(gr.neighbors(0))
    assert rev.is_directed() is False