"""Union-find structure with path compression and set sizes."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the elements ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._size = [1] * size
        self._count = size

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} is out of range")

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        self._check(i)
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def is_same_set(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)

    def union(self, i: int, j: int) -> bool:
        """Join the sets of ``i`` and ``j``; return False if they were already one."""
        i_root = self.find(i)
        j_root = self.find(j)
        if i_root == j_root:
            return False
        self._parent[i_root] = j_root
        self._size[j_root] += self._size[i_root]
        self._count -= 1
        return True

    def set_count(self) -> int:
        """Number of disjoint sets."""
        return self._count

    def set_size(self, i: int) -> int:
        """Number of elements in the set holding ``i``."""
        return self._size[self.find(i)]