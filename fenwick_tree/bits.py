# fenwick_tree/bits.py
"""Lowest-set-bit arithmetic shared by the update and query traversals.

All helpers work on one-based tree positions. Slot ``p`` covers the
``lowbit(p)`` logical elements ending at position ``p``:

* ``p = 4 = 100``  covers ``[1, 4]``
* ``p = 3 = 011``  covers ``[3, 3]``
* ``p = 2 = 010``  covers ``[1, 2]``
* ``p = 1 = 001``  covers ``[1, 1]``

In two's complement ``-p == ~p + 1``, so ``p`` and ``-p`` share only the
lowest set bit and ``p & -p`` isolates it.
"""

from __future__ import annotations

from typing import Iterator


def lowbit(p: int) -> int:
    """Size of the range covered by slot ``p``."""
    return p & -p


def parent(p: int) -> int:
    """Next slot to visit while reading a prefix (clears the lowest set bit)."""
    return p - (p & -p)


def next_index(p: int) -> int:
    """Next slot to visit while propagating an update."""
    return p + (p & -p)


def update_path(p: int, n: int) -> Iterator[int]:
    """Yield every slot covering position ``p`` in a tree of ``n`` slots."""
    while p <= n:
        yield p
        p = next_index(p)


def query_path(p: int) -> Iterator[int]:
    """Yield the disjoint slots whose ranges make up the prefix ``[1, p]``."""
    while p > 0:
        yield p
        p = parent(p)


__all__ = ["lowbit", "parent", "next_index", "update_path", "query_path"]
