"""Disjoint-set (union-find) structure over hashable elements.

Elements are stored in an arena: every element gets a compact index into
parallel ``parent``/``rank`` lists. Finds use path compression and unions use
union by rank. Each class additionally threads its members on a circular
``next`` list so that enumerating a class costs O(class size) and a union only
splices two rings together.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Hashable, Iterator, List, TypeVar

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class DisjointSetSet(Generic[T]):
    """Handle of one class of a DisjointSet.

    Handles compare equal iff they name the same class at the time they were
    obtained. A handle goes stale once its class takes part in a union.

    Attributes:
        representative: The element standing for the whole class.
    """

    representative: T


class DisjointSet(Generic[T]):
    """Partition of elements into disjoint classes.

    Elements that have never been seen are implicitly singletons; looking them
    up registers them.
    """

    def __init__(self) -> None:
        self._index: Dict[T, int] = {}
        self._elements: List[T] = []
        self._parent: List[int] = []
        self._rank: List[int] = []
        self._next: List[int] = []

    def __contains__(self, element: object) -> bool:
        return element in self._index

    def __len__(self) -> int:
        return len(self._elements)

    def _slot(self, element: T) -> int:
        index = self._index.get(element)
        if index is None:
            index = len(self._elements)
            self._index[element] = index
            self._elements.append(element)
            self._parent.append(index)
            self._rank.append(0)
            self._next.append(index)
        return index

    def _root(self, index: int) -> int:
        root = index
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression.
        while self._parent[index] != root:
            self._parent[index], index = root, self._parent[index]

        return root

    def find(self, element: T) -> DisjointSetSet[T]:
        """Return the class containing ``element``.

        Args:
            element: Any hashable element; unseen elements become singletons.

        Returns:
            DisjointSetSet: Handle of the class.
        """
        root = self._root(self._slot(element))
        return DisjointSetSet(self._elements[root])

    where_is = find

    def union(self, a: DisjointSetSet[T], b: DisjointSetSet[T]) -> DisjointSetSet[T]:
        """Merge two classes.

        The representative of the result is the representative of either
        ``a`` or ``b``; callers must not rely on which one.

        Args:
            a: Handle of the first class.
            b: Handle of the second class.

        Returns:
            DisjointSetSet: Handle of the merged class.
        """
        x = self._root(self._slot(a.representative))
        y = self._root(self._slot(b.representative))
        if x == y:
            return DisjointSetSet(self._elements[x])

        if self._rank[x] < self._rank[y]:
            x, y = y, x
        self._parent[y] = x
        if self._rank[x] == self._rank[y]:
            self._rank[x] += 1

        # Splice the two member rings into one.
        self._next[x], self._next[y] = self._next[y], self._next[x]

        return DisjointSetSet(self._elements[x])

    def elements(self, handle: DisjointSetSet[T]) -> Iterator[T]:
        """Yield every element of a class, in unspecified order.

        Merging while the iterator is being consumed is undefined.
        """
        start = self._root(self._slot(handle.representative))
        index = start
        while True:
            yield self._elements[index]
            index = self._next[index]
            if index == start:
                break

    def set_count(self) -> int:
        """Number of classes among the elements seen so far."""
        return sum(1 for index, parent in enumerate(self._parent) if index == parent)

    def clear(self) -> None:
        """Forget every union; all elements are singletons again."""
        self._index.clear()
        self._elements.clear()
        self._parent.clear()
        self._rank.clear()
        self._next.clear()
