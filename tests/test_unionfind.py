import pytest

from graphwalk.unionfind import UnionFind


def test_new_elements_are_their_own_representatives():
    uf = UnionFind(5)
    assert [uf.find(i) for i in range(5)] == list(range(5))
    assert uf.into_labeling() == list(range(5))


def test_union_reports_whether_sets_changed():
    uf = UnionFind(4)
    assert uf.union(0, 1) is True
    assert uf.union(1, 0) is False
    assert uf.union(2, 2) is False
    assert uf.union(1, 2) is True
    assert uf.union(0, 2) is False


def test_equal_rank_puts_second_below_first():
    uf = UnionFind(2)
    uf.union(0, 1)
    assert uf.find(1) == 0
    assert uf.find_mut(1) == 0


def test_find_and_find_mut_agree():
    uf = UnionFind(8)
    for a, b in [(0, 1), (2, 3), (1, 3), (4, 5), (6, 5), (7, 7)]:
        uf.union(a, b)
    for x in range(8):
        assert uf.find(x) == uf.find_mut(x)


def test_labeling_groups_connected_elements():
    uf = UnionFind(7)
    for a, b in [(0, 1), (1, 2), (3, 4), (5, 4)]:
        uf.union(a, b)
    labels = uf.into_labeling()
    assert labels[0] == labels[1] == labels[2]
    assert labels[3] == labels[4] == labels[5]
    assert labels[0] != labels[3]
    assert labels[6] == 6
    assert all(labels[label] == label for label in labels)


def test_out_of_bounds_raises():
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.find(3)
    with pytest.raises(IndexError):
        uf.find_mut(-1)
    with pytest.raises(IndexError):
        uf.union(0, 5)