"""A disjoint-set (union-find) structure over the integers ``0..n-1``."""

from __future__ import annotations


class UnionFind:
    """Tracks set membership of ``n`` elements indexed from 0 to ``n - 1``.

    Uses union by rank and path compression, giving amortised near-constant
    time per operation.
    """

    __slots__ = ("_parent", "_rank")

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def __repr__(self) -> str:
        return f"UnionFind(parent={self._parent!r})"

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of bounds for {len(self._parent)} elements")

    def find(self, x: int) -> int:
        """Return the representative for ``x`` without changing the structure.

        Raises IndexError if ``x`` is out of bounds.
        """
        self._check(x)
        parent = self._parent
        while parent[x] != x:
            x = parent[x]
        return x

    def find_mut(self, x: int) -> int:
        """Return the representative for ``x``, compressing the path to it.

        Raises IndexError if ``x`` is out of bounds.
        """
        self._check(x)
        return self._compress(x)

    def _compress(self, x: int) -> int:
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Unify the sets containing ``x`` and ``y``.

        Return False if they were already the same set, True if they were
        joined. Raises IndexError if ``x`` or ``y`` is out of bounds.
        """
        if x == y:
            return False
        xrep = self.find_mut(x)
        yrep = self.find_mut(y)
        if xrep == yrep:
            return False
        xrank = self._rank[xrep]
        yrank = self._rank[yrep]
        if xrank < yrank:
            self._parent[xrep] = yrep
        elif xrank > yrank:
            self._parent[yrep] = xrep
        else:
            self._parent[yrep] = xrep
            self._rank[xrep] += 1
        return True

    def into_labeling(self) -> list[int]:
        """Return a list mapping each element to its representative."""
        return [self._compress(ix) for ix in range(len(self._parent))]