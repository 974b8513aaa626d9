# Core tree
from .tree import FenwickTree

# Numeric capability & range forms
from .numeric import AdditiveGroup, ModularInt
from .ranges import (
    FULL,
    InclusiveSpan,
    RangeLike,
    Span,
    SpanFrom,
    SpanTo,
    resolve_range,
)

# Errors
from .errors import FenwickError, IndexOutOfBounds, RangeOutOfBounds

__all__ = [
    # tree
    "FenwickTree",
    # numeric
    "AdditiveGroup",
    "ModularInt",
    # ranges
    "FULL",
    "InclusiveSpan",
    "RangeLike",
    "Span",
    "SpanFrom",
    "SpanTo",
    "resolve_range",
    # errors
    "FenwickError",
    "IndexOutOfBounds",
    "RangeOutOfBounds",
]
