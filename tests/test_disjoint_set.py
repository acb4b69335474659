import pytest

from algosolve.disjoint_set import DisjointSet


def test_initial_state_is_singletons():
    ds = DisjointSet(5)
    assert ds.set_count() == 5
    assert [ds.find(i) for i in range(5)] == [0, 1, 2, 3, 4]
    assert all(ds.set_size(i) == 1 for i in range(5))


def test_union_joins_sets():
    ds = DisjointSet(4)
    assert ds.union(0, 1) is True
    assert ds.is_same_set(0, 1)
    assert not ds.is_same_set(0, 2)
    assert ds.set_count() == 3
    assert ds.set_size(0) == ds.set_size(1) == 2


def test_union_is_transitive():
    ds = DisjointSet(6)
    ds.union(0, 1)
    ds.union(1, 2)
    ds.union(3, 4)
    assert ds.is_same_set(0, 2)
    assert ds.find(0) == ds.find(2)
    assert not ds.is_same_set(2, 3)
    assert ds.set_size(2) == 3
    assert ds.set_count() == 3


def test_union_of_same_set_changes_nothing():
    ds = DisjointSet(3)
    ds.union(0, 1)
    assert ds.union(1, 0) is False
    assert ds.set_count() == 2
    assert ds.set_size(0) == 2


def test_sizes_sum_to_total():
    ds = DisjointSet(10)
    for a, b in [(0, 1), (2, 3), (1, 3), (5, 6), (7, 8), (8, 9)]:
        ds.union(a, b)
    roots = {ds.find(i) for i in range(10)}
    assert len(roots) == ds.set_count()
    assert sum(ds.set_size(r) for r in roots) == 10


def test_out_of_range_raises():
    ds = DisjointSet(2)
    with pytest.raises(IndexError):
        ds.find(2)
    with pytest.raises(IndexError):
        ds.union(-1, 0)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        DisjointSet(-1)