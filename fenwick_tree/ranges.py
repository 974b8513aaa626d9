# fenwick_tree/ranges.py
"""Range forms accepted by :meth:`FenwickTree.sum`.

Every form knows how to ``resolve`` itself against the logical length of a
tree into a half-open ``(start, end)`` pair. Validation happens once, in
:func:`resolve_range`, so the tree only ever sees explicit bounds.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple, Union, runtime_checkable

from fenwick_tree.errors import RangeOutOfBounds

Bounds = Tuple[int, int]


@runtime_checkable
class RangeLike(Protocol):
    def resolve(self, length: int) -> Bounds:
        ...


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)``."""

    start: int
    end: int

    def resolve(self, length: int) -> Bounds:
        return self.start, self.end


@dataclass(frozen=True)
class InclusiveSpan:
    """Closed ``[start, last]``."""

    start: int
    last: int

    def resolve(self, length: int) -> Bounds:
        last = operator.index(self.last)
        # A negative last would otherwise shift to a valid-looking end of 0.
        if last < 0:
            raise RangeOutOfBounds(
                self.start, last + 1, length, reason="has a negative bound"
            )
        return self.start, last + 1


@dataclass(frozen=True)
class SpanFrom:
    """``[start, length)``."""

    start: int

    def resolve(self, length: int) -> Bounds:
        return self.start, length


@dataclass(frozen=True)
class SpanTo:
    """``[0, end)``."""

    end: int

    def resolve(self, length: int) -> Bounds:
        return 0, self.end


@dataclass(frozen=True)
class Full:
    """``[0, length)``."""

    def resolve(self, length: int) -> Bounds:
        return 0, length


FULL = Full()

RangeArg = Union[RangeLike, slice, range, None]


def _bound(value: Optional[object]) -> Optional[int]:
    # Accepts numpy integers too; floats and strings raise TypeError.
    return None if value is None else operator.index(value)


def _from_slice(rng: slice, length: int) -> RangeLike:
    start, stop = _bound(rng.start), _bound(rng.stop)
    step = _bound(rng.step)
    if step not in (None, 1):
        raise RangeOutOfBounds(
            start if start is not None else 0,
            stop if stop is not None else length,
            length,
            reason=f"has unsupported step `{step}`",
        )
    if start is None and stop is None:
        return FULL
    if start is None:
        return SpanTo(stop)
    if stop is None:
        return SpanFrom(start)
    return Span(start, stop)


def _from_range(rng: range, length: int) -> RangeLike:
    if rng.step != 1:
        raise RangeOutOfBounds(
            rng.start, rng.stop, length, reason=f"has unsupported step `{rng.step}`"
        )
    return Span(rng.start, rng.stop)


def as_range(rng: RangeArg, length: int) -> RangeLike:
    """Lift built-in range spellings into a :class:`RangeLike`."""
    if rng is None:
        return FULL
    if isinstance(rng, slice):
        return _from_slice(rng, length)
    if isinstance(rng, range):
        return _from_range(rng, length)
    if isinstance(rng, RangeLike):
        return rng
    raise TypeError(f"expected a range, slice or RangeLike, got {type(rng).__name__}")


def resolve_range(rng: RangeArg, length: int) -> Bounds:
    """Normalize ``rng`` to ``(start, end)`` with ``0 <= start <= end <= length``.

    Raises :class:`RangeOutOfBounds` instead of clamping.
    """
    start, end = as_range(rng, length).resolve(length)
    start, end = _bound(start), _bound(end)
    if start < 0 or end < 0:
        raise RangeOutOfBounds(start, end, length, reason="has a negative bound")
    if start > end or end > length:
        raise RangeOutOfBounds(start, end, length)
    return start, end


__all__ = [
    "Bounds",
    "RangeLike",
    "RangeArg",
    "Span",
    "InclusiveSpan",
    "SpanFrom",
    "SpanTo",
    "Full",
    "FULL",
    "as_range",
    "resolve_range",
]
