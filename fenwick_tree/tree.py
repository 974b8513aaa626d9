# fenwick_tree/tree.py

from __future__ import annotations

import operator
from typing import Generic, Iterable, List, Tuple, Union, overload

from fenwick_tree.bits import next_index, query_path, update_path
from fenwick_tree.common.constants import DEFAULT_ZERO
from fenwick_tree.common.verbose import log
from fenwick_tree.errors import IndexOutOfBounds, RangeOutOfBounds
from fenwick_tree.numeric import T
from fenwick_tree.ranges import FULL, RangeArg, resolve_range


class FenwickTree(Generic[T]):
    """
    Fenwick (binary indexed) tree over ``size`` logical elements supporting
    point updates and range-sum queries in O(log n).

    Slots are one-based: ``self._slots[p]`` holds the sum of logical elements
    ``[p - lowbit(p), p)`` and slot 0 stays at the identity.

    Allocating a tree for a pathological ``size`` may raise ``MemoryError``;
    it is deliberately left to propagate rather than being reported as a
    tree error.
    """

    def __init__(self, size: int, zero: T = DEFAULT_ZERO) -> None:  # type: ignore[assignment]
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._size = size
        self._zero = zero
        self._slots: List[T] = [zero] * (size + 1)
        log(f"FenwickTree: allocated {size} elements (zero={zero!r})")

    @classmethod
    def with_len(cls, size: int, zero: T = DEFAULT_ZERO) -> "FenwickTree[T]":  # type: ignore[assignment]
        """Tree of ``size`` elements, all equal to ``zero``."""
        return cls(size, zero)

    @classmethod
    def from_iterable(cls, values: Iterable[T], zero: T = DEFAULT_ZERO) -> "FenwickTree[T]":  # type: ignore[assignment]
        """Build a tree holding ``values`` in O(n).

        Each slot is seeded with its own element and then pushed once into
        the next covering slot, which yields the same slots as adding the
        elements one by one.
        """
        items = list(values)
        tree = cls(len(items), zero)
        slots = tree._slots
        n = tree._size
        for p, value in enumerate(items, start=1):
            slots[p] = slots[p] + value
            q = next_index(p)
            if q <= n:
                slots[q] = slots[q] + slots[p]
        return tree

    # ------------------------------------------------------------------
    #  Accessors
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self._size

    @property
    def zero(self) -> T:
        return self._zero

    @property
    def slots(self) -> Tuple[T, ...]:
        """Copy of the internal slots, sentinel included."""
        return tuple(self._slots)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, zero={self._zero!r})"

    # ------------------------------------------------------------------
    #  Update
    # ------------------------------------------------------------------
    def add(self, index: int, delta: T) -> None:
        """Add ``delta`` to the element at ``index``."""
        index = operator.index(index)
        if not 0 <= index < self._size:
            log(f"add rejected: index {index} outside [0, {self._size})")
            raise IndexOutOfBounds(index, self._size)

        slots = self._slots
        for p in update_path(index + 1, self._size):
            slots[p] = slots[p] + delta

    # ------------------------------------------------------------------
    #  Queries
    # ------------------------------------------------------------------
    def _prefix(self, k: int) -> T:
        acc = self._zero
        slots = self._slots
        for p in query_path(k):
            acc = acc + slots[p]
        return acc

    def prefix(self, k: int) -> T:
        """Sum of the first ``k`` elements, ``0 <= k <= size``."""
        k = operator.index(k)
        if not 0 <= k <= self._size:
            log(f"prefix rejected: {k} outside [0, {self._size}]")
            if k < 0:
                raise RangeOutOfBounds(0, k, self._size, reason="has a negative bound")
            raise RangeOutOfBounds(0, k, self._size)
        return self._prefix(k)

    def sum(self, rng: RangeArg = FULL) -> T:
        """Sum of the elements in ``rng``.

        ``rng`` may be any :mod:`fenwick_tree.ranges` form, a ``slice``, a
        step-1 ``range`` or ``None`` for the whole tree. An empty range
        yields ``zero``.
        """
        try:
            start, end = resolve_range(rng, self._size)
        except RangeOutOfBounds as exc:
            log(f"sum rejected: {exc}")
            raise

        if start == end:
            return self._zero
        if start == 0:
            return self._prefix(end)
        return self._prefix(end) - self._prefix(start)

    @overload
    def __getitem__(self, key: int) -> T:
        ...

    @overload
    def __getitem__(self, key: slice) -> T:
        ...

    def __getitem__(self, key: Union[int, slice]) -> T:
        """``tree[i]`` is the element at ``i``; ``tree[a:b]`` is ``sum(a..b)``."""
        if isinstance(key, slice):
            return self.sum(key)
        index = operator.index(key)
        if not 0 <= index < self._size:
            log(f"getitem rejected: index {index} outside [0, {self._size})")
            raise IndexOutOfBounds(index, self._size)
        return self._prefix(index + 1) - self._prefix(index)


__all__ = ["FenwickTree"]
