"""Union-find structure over a fixed universe of integer indices."""

from __future__ import annotations

import operator


class InvalidArgumentError(ValueError):
    """Raised when a structure is requested with a negative element count."""


class IndexOutOfRangeError(IndexError):
    """Raised when an index falls outside ``0..size-1``."""


class DisjointSet:
    """Union-find with union by rank and full path compression.

    Every element starts as its own singleton group. Groups are merged with
    :meth:`union` and their size is read with :meth:`connectedness`. Both
    calls may rewrite parent links, so a ``DisjointSet`` shared between
    threads needs an external lock even for queries.
    """

    def __init__(self, size: int) -> None:
        self._size = self._group_count = 0
        size = operator.index(size)
        if size < 0:
            raise InvalidArgumentError(f"size must be non-negative, got {size}")
        self._size = size
        self._parent = list(range(size))
        self._rank = [0] * size
        # Only the entry of a current root is accurate.
        self._sizes = [1] * size
        self._group_count = size

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DisjointSet(size={self._size}, groups={self._group_count})"

    @property
    def size(self) -> int:
        """Number of elements in the universe."""
        return self._size

    @property
    def group_count(self) -> int:
        """Number of distinct groups currently in the structure."""
        return self._group_count

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < self._size:
            raise IndexOutOfRangeError(f"index {index} out of range for size {self._size}")
        return index

    def _find_root(self, index: int) -> int:
        parent = self._parent
        root = index
        while parent[root] != root:
            root = parent[root]
        while parent[index] != root:
            parent[index], index = root, parent[index]
        return root

    def union(self, left: int, right: int) -> bool:
        """Merge the groups of `left` and `right`.

        Returns ``False`` when both already share a group, in which case
        nothing changes.
        """

        left = self._check_index(left)
        right = self._check_index(right)
        root_left = self._find_root(left)
        root_right = self._find_root(right)
        if root_left == root_right:
            return False

        if self._rank[root_left] < self._rank[root_right]:
            root_left, root_right = root_right, root_left
        elif self._rank[root_left] == self._rank[root_right]:
            self._rank[root_left] += 1

        self._parent[root_right] = root_left
        self._sizes[root_left] += self._sizes[root_right]
        self._group_count -= 1
        return True

    def connectedness(self, index: int) -> int:
        """Return the number of elements in the group containing `index`."""

        index = self._check_index(index)
        return self._sizes[self._find_root(index)]
