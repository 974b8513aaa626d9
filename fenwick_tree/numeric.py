# fenwick_tree/numeric.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class AdditiveGroup(Protocol):
    """Values the tree can store.

    Elements must form a commutative group under ``+``: addition and
    subtraction of two elements yield another element, and the identity is
    handed to the tree explicitly as ``zero``. ``int``, ``float``,
    ``fractions.Fraction``, numpy scalars and :class:`ModularInt` qualify.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...


T = TypeVar("T", bound=AdditiveGroup)


@dataclass(frozen=True)
class ModularInt:
    """Integer modulo ``modulus``; behaves like a wrapping machine integer
    when ``modulus`` is a power of two."""

    value: int
    modulus: int

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError(f"modulus must be positive, got {self.modulus}")
        object.__setattr__(self, "value", self.value % self.modulus)

    @classmethod
    def zero(cls, modulus: int) -> "ModularInt":
        return cls(0, modulus)

    @classmethod
    def wrapping(cls, value: int, bits: int) -> "ModularInt":
        return cls(value, 1 << bits)

    def _coerce(self, other: Any) -> Optional[int]:
        if isinstance(other, ModularInt):
            if other.modulus != self.modulus:
                raise ValueError(
                    f"modulus mismatch: {self.modulus} vs {other.modulus}"
                )
            return other.value
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other: Any) -> "ModularInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ModularInt(self.value + rhs, self.modulus)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "ModularInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ModularInt(self.value - rhs, self.modulus)

    def __rsub__(self, other: Any) -> "ModularInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return ModularInt(lhs - self.value, self.modulus)

    def __neg__(self) -> "ModularInt":
        return ModularInt(-self.value, self.modulus)

    def __int__(self) -> int:
        return self.value


__all__ = ["AdditiveGroup", "ModularInt", "T"]
