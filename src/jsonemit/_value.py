"""
The JSON value tree.

A value is exactly one of six immutable variants. Containers store tuples,
so a tree cannot change while it is being encoded.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

NON_FINITE_MESSAGE = "Out of range float values are not JSON compliant"


class JSONEncodeError(ValueError):
    """Raised when a number has no JSON representation (NaN or infinity)."""


@dataclass(frozen=True, slots=True)
class Null:
    """The JSON ``null`` literal."""


@dataclass(frozen=True, slots=True)
class Bool:
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError("Bool value must be a bool")


@dataclass(frozen=True, slots=True)
class Number:
    """
    Arbitrary precision decimal ``coefficient * 10**exponent``.

    Different coefficient/exponent pairs with the same magnitude are
    distinct values and may render differently (``Number(10, -1)`` is
    ``1.0`` while ``Number(1)`` is ``1``).
    """

    coefficient: int
    exponent: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.coefficient, bool) or not isinstance(
            self.coefficient, int
        ):
            raise TypeError("coefficient must be an int")
        if isinstance(self.exponent, bool) or not isinstance(
            self.exponent, int
        ):
            raise TypeError("exponent must be an int")

    @classmethod
    def from_int(cls, n: int) -> Number:
        return cls(n, 0)

    @classmethod
    def from_decimal(cls, d: Decimal) -> Number:
        """Converts a finite Decimal exactly, keeping its exponent."""
        if not d.is_finite():
            raise JSONEncodeError(NON_FINITE_MESSAGE)
        sign, digits, exponent = d.as_tuple()
        # Built from the digit tuple without a capped int(str) round trip
        coefficient = int(Decimal((0, digits, 0)))
        return cls(-coefficient if sign else coefficient, int(exponent))

    @classmethod
    def from_float(cls, f: float) -> Number:
        """
        Converts a finite float through its shortest round-trip repr.

        ``0.1`` becomes ``Number(1, -1)`` rather than the exact binary
        expansion of the double.
        """
        if math.isnan(f) or math.isinf(f):
            raise JSONEncodeError(NON_FINITE_MESSAGE)
        return cls.from_decimal(Decimal(repr(f)))


@dataclass(frozen=True, slots=True)
class String:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("String value must be a str")


@dataclass(frozen=True, slots=True)
class Array:
    """Ordered sequence of values; accepts any iterable."""

    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True)
class Object:
    """
    Key/value pairs in iteration order.

    Built from a mapping (insertion order) or an iterable of pairs. Pairs
    are kept as given, including repeated keys.
    """

    pairs: tuple[tuple[str, Value], ...] = ()

    def __post_init__(self) -> None:
        pairs: Iterable[tuple[str, Value]]
        if isinstance(self.pairs, Mapping):
            pairs = self.pairs.items()
        else:
            pairs = self.pairs
        normalized = tuple((key, value) for key, value in pairs)
        for key, _ in normalized:
            if not isinstance(key, str):
                msg = f"keys must be strings, not {type(key).__name__}"
                raise TypeError(msg)
        object.__setattr__(self, "pairs", normalized)

    def keys(self) -> list[str]:
        return [key for key, _ in self.pairs]


Value = Null | Bool | Number | String | Array | Object

VALUE_TYPES = (Null, Bool, Number, String, Array, Object)

NULL = Null()
TRUE = Bool(True)
FALSE = Bool(False)
