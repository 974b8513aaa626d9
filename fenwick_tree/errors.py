# fenwick_tree/errors.py
from __future__ import annotations

from typing import Any, Tuple


class FenwickError(Exception):
    """Base class for errors raised by :class:`fenwick_tree.FenwickTree`."""

    def _key(self) -> Tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class IndexOutOfBounds(FenwickError, IndexError):
    """``add`` targeted an index outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index `{index}` is out of bounds for size `{size}`")

    def _key(self) -> Tuple[Any, ...]:
        return (self.index, self.size)


class RangeOutOfBounds(FenwickError, ValueError):
    """``sum`` received a range that is decreasing, negative or past ``size``."""

    def __init__(self, start: int, end: int, size: int, reason: str = "") -> None:
        self.start = start
        self.end = end
        self.size = size
        if not reason:
            if start > end:
                reason = "is decreasing"
            elif end > size:
                reason = f"ends beyond the size `{size}`"
            else:
                reason = "is malformed"
        self.reason = reason
        super().__init__(f"Range ({start}..{end}) {reason}")

    def _key(self) -> Tuple[Any, ...]:
        return (self.start, self.end, self.size)


__all__ = ["FenwickError", "IndexOutOfBounds", "RangeOutOfBounds"]
