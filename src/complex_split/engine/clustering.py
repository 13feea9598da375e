"""Union-Find (disjoint set) engines over a fixed universe of cluster ids.

Two interchangeable strategies share one contract:

- ``UnionFind`` keeps a flat representative array. ``find`` is a direct
  lookup and ``union`` relabels the whole losing component, O(N) per merge.
- ``CompressedUnionFind`` uses path halving and union by rank, amortized
  near O(1). Memberships match ``UnionFind`` exactly; representative
  labels may differ.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from complex_split.errors import InvalidSizeError, OutOfRangeError

logger = logging.getLogger(__name__)

Pair = tuple[int, int]

STRATEGIES: tuple[str, ...] = ("relabel", "compressed")


def _is_item(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@runtime_checkable
class DisjointSet(Protocol):
    """Structural contract shared by both engines."""

    @property
    def size(self) -> int: ...

    def find(self, item: int) -> int: ...

    def union(self, p: int, q: int) -> bool: ...

    def union_all(self, pairs: Iterable[Pair]) -> int: ...

    def component_count(self) -> int: ...

    def connected(self, p: int, q: int) -> bool: ...

    def groups(self) -> dict[int, list[int]]: ...


class _BaseUnionFind(ABC):
    """Shared validation and bookkeeping for the concrete engines."""

    __slots__ = ("_parent", "_count")

    def __init__(self, n: int) -> None:
        if not _is_item(n) or n < 0:
            raise InvalidSizeError(n)
        self._parent = list(range(n))
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def size(self) -> int:
        """Number of items in the universe."""
        return len(self._parent)

    def _check(self, item: int) -> None:
        if not _is_item(item) or not 0 <= item < len(self._parent):
            raise OutOfRangeError(item, len(self._parent))

    @abstractmethod
    def find(self, item: int) -> int:
        """Representative of the component containing item."""

    @abstractmethod
    def union(self, p: int, q: int) -> bool:
        """Merge the components of p and q; return True if they were distinct."""

    def union_all(self, pairs: Iterable[Pair]) -> int:
        """Apply ``union`` to each pair in input order.

        Returns the number of unions that merged two distinct components.
        """
        merges = 0
        seen = 0
        for p, q in pairs:
            seen += 1
            if self.union(p, q):
                merges += 1
        logger.debug(
            "Applied %d pairs: %d merges, %d components remain", seen, merges, self._count
        )
        return merges

    def component_count(self) -> int:
        """Number of distinct components currently."""
        return self._count

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def groups(self) -> dict[int, list[int]]:
        """Return all groups as representative -> member items."""
        result: dict[int, list[int]] = {}
        for i in range(len(self._parent)):
            result.setdefault(self.find(i), []).append(i)
        return result


class UnionFind(_BaseUnionFind):
    """Union-Find with flat-array relabeling.

    ``union(p, q)`` moves every member of p's component onto q's
    representative, so the second argument's label always survives.
    """

    __slots__ = ()

    def find(self, item: int) -> int:
        """Return the representative of ``item`` (pure lookup)."""
        self._check(item)
        return self._parent[item]

    def union(self, p: int, q: int) -> bool:
        """Merge the components of p and q; return False if already joined."""
        rp, rq = self.find(p), self.find(q)
        if rp == rq:
            return False
        parent = self._parent
        for i in range(len(parent)):
            if parent[i] == rp:
                parent[i] = rq
        self._count -= 1
        return True


class CompressedUnionFind(_BaseUnionFind):
    """Union-Find with path halving and union by rank."""

    __slots__ = ("_rank",)

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self._rank = [0] * n

    def find(self, item: int) -> int:
        """Find root with path compression (halving)."""
        self._check(item)
        parent = self._parent
        while parent[item] != item:
            parent[item] = parent[parent[item]]
            item = parent[item]
        return item

    def union(self, p: int, q: int) -> bool:
        """Merge sets containing p and q; equal ranks attach p's root under q's."""
        rp, rq = self.find(p), self.find(q)
        if rp == rq:
            return False
        if self._rank[rp] > self._rank[rq]:
            rp, rq = rq, rp
        self._parent[rp] = rq
        if self._rank[rp] == self._rank[rq]:
            self._rank[rq] += 1
        self._count -= 1
        return True


def make_union_find(n: int, strategy: str = "relabel") -> UnionFind | CompressedUnionFind:
    """Construct the engine named by ``strategy`` over ``n`` items."""
    if strategy == "relabel":
        return UnionFind(n)
    if strategy == "compressed":
        return CompressedUnionFind(n)
    raise ValueError(f"strategy must be one of {STRATEGIES}, got '{strategy}'")
