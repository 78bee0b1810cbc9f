"""Tests for the disjoint-set structure."""

from contractgraph.utils.disjoint_set import DisjointSet, DisjointSetSet


def test_unseen_elements_are_singletons() -> None:
    """find() registers unseen elements as their own representative."""
    groups: DisjointSet[str] = DisjointSet()

    handle = groups.find("a")

    assert handle == DisjointSetSet("a")
    assert handle.representative == "a"
    assert "a" in groups
    assert "b" not in groups
    assert list(groups.elements(handle)) == ["a"]


def test_union_joins_classes() -> None:
    """Elements share a handle iff they were united."""
    groups: DisjointSet[str] = DisjointSet()

    merged = groups.union(groups.find("a"), groups.find("b"))

    assert merged.representative in {"a", "b"}
    assert groups.find("a") == groups.find("b") == merged
    assert groups.find("c") != merged
    assert groups.set_count() == 2


def test_union_of_same_class_is_noop() -> None:
    """Unioning a class with itself leaves the partition untouched."""
    groups: DisjointSet[int] = DisjointSet()
    groups.union(groups.find(1), groups.find(2))

    handle = groups.find(1)
    again = groups.union(handle, groups.find(2))

    assert again == handle
    assert sorted(groups.elements(again)) == [1, 2]


def test_elements_after_chained_unions() -> None:
    """Member enumeration covers every element exactly once."""
    groups: DisjointSet[int] = DisjointSet()
    for left, right in [(1, 2), (3, 4), (2, 4), (5, 6), (6, 1)]:
        groups.union(groups.find(left), groups.find(right))
    groups.find(7)

    members = list(groups.elements(groups.find(3)))

    assert sorted(members) == [1, 2, 3, 4, 5, 6]
    assert list(groups.elements(groups.find(7))) == [7]
    assert len(groups) == 7
    assert groups.set_count() == 2


def test_where_is_alias() -> None:
    """where_is is the same lookup as find."""
    groups: DisjointSet[str] = DisjointSet()
    groups.union(groups.find("x"), groups.find("y"))

    assert groups.where_is("y") == groups.find("x")


def test_long_chain_is_compressed() -> None:
    """Finds stay correct on long union chains."""
    groups: DisjointSet[int] = DisjointSet()
    for value in range(1, 500):
        groups.union(groups.find(value), groups.find(value - 1))

    root = groups.find(0)

    assert all(groups.find(value) == root for value in range(500))
    assert sorted(groups.elements(root)) == list(range(500))


def test_clear_restores_singletons() -> None:
    """clear() forgets every union."""
    groups: DisjointSet[str] = DisjointSet()
    groups.union(groups.find("a"), groups.find("b"))

    groups.clear()

    assert len(groups) == 0
    assert groups.find("a") != groups.find("b")
    assert groups.find("b").representative == "b"
