"""Exact rational numbers over Python's unbounded integers.

Rationals are stored as irreducible fractions with a positive denominator,
so two equal values always share the same (numerator, denominator) pair and
equality, hashing and ordering can work on that pair directly.
"""

from __future__ import annotations

from functools import total_ordering
from math import gcd
from typing import Any, Union

import sympy as sp
from sympy.ntheory import multiplicity

# Chunk size for int <-> decimal text conversion, kept below the
# interpreter's int_max_str_digits limit
_DIGIT_CHUNK = 1000
_CHUNK_BASE = 10**_DIGIT_CHUNK


def int_from_digits(digits: str) -> int:
    """Value of a string of ASCII decimal digits of any length."""
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start : start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_digits(value: int) -> str:
    """Decimal text of ``value`` however many digits it has."""
    if value < 0:
        return "-" + int_to_digits(-value)
    chunks = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(str(low).rjust(_DIGIT_CHUNK, "0"))
    chunks.append(str(value))
    return "".join(reversed(chunks))


@total_ordering
class Rational:
    """Immutable unbounded rational number."""

    __slots__ = ("_num", "_den")

    def __init__(self, numerator: int = 0, denominator: int = 1):
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError(
                f"Rational expects integers, got {type(numerator).__name__} "
                f"and {type(denominator).__name__}"
            )
        if denominator == 0:
            raise ZeroDivisionError("Zero denominator")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        d = gcd(numerator, denominator)
        object.__setattr__(self, "_num", numerator // d)
        object.__setattr__(self, "_den", denominator // d)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Rational is immutable")

    def __reduce__(self):
        return (Rational, (self._num, self._den))

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    @classmethod
    def from_sympy(cls, value: sp.Rational) -> Rational:
        """Convert a SymPy rational (or integer) to a Rational."""
        value = sp.sympify(value)
        if not value.is_Rational:
            raise TypeError(f"Not a rational value: {value}")
        return cls(int(value.p), int(value.q))

    def to_sympy(self) -> sp.Rational:
        return sp.Rational(self._num, self._den)

    def is_zero(self) -> bool:
        return self._num == 0

    def __bool__(self) -> bool:
        return self._num != 0

    def __abs__(self) -> Rational:
        return Rational(abs(self._num), self._den)

    def __neg__(self) -> Rational:
        return Rational(-self._num, self._den)

    def __add__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Rational(
            self._num * other._den + other._num * self._den,
            self._den * other._den,
        )

    __radd__ = __add__

    def __sub__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Rational(self._num * other._num, self._den * other._den)

    __rmul__ = __mul__

    def inv(self) -> Rational:
        """Multiplicative inverse. Raises ZeroDivisionError for zero."""
        return Rational(self._den, self._num)

    def __truediv__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self * other.inv()

    def __rtruediv__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self.inv()

    def compare(self, other: RationalLike) -> int:
        """Sign of ``self - other``: -1, 0 or 1.

        Raises:
            TypeError: If ``other`` is not a Rational or int
        """
        other_value = _coerce(other)
        if other_value is NotImplemented:
            raise TypeError(f"Cannot compare Rational with {type(other).__name__}")
        diff = self - other_value
        return (diff._num > 0) - (diff._num < 0)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rational):
            return self._num == other._num and self._den == other._den
        if isinstance(other, int) and not isinstance(other, bool):
            return self._den == 1 and self._num == other
        return NotImplemented

    def __lt__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        # Integral values hash like the equal int
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    def __repr__(self) -> str:
        if self._den == 1:
            return f"Rational({int_to_digits(self._num)})"
        return f"Rational({int_to_digits(self._num)}, {int_to_digits(self._den)})"

    def __str__(self) -> str:
        decimal = self._to_decimal()
        if decimal is not None:
            return decimal
        return f"{int_to_digits(self._num)}/{int_to_digits(self._den)}"

    def _to_decimal(self) -> str | None:
        """Render as a terminating decimal, or None if the expansion repeats."""
        twos = multiplicity(2, self._den)
        fives = multiplicity(5, self._den)
        if self._den != 2**twos * 5**fives:
            return None

        digits = abs(self._num)
        if twos < fives:
            digits *= 2 ** (fives - twos)
        elif fives < twos:
            digits *= 5 ** (twos - fives)
        tens = max(twos, fives)

        text = int_to_digits(digits).rjust(tens + 1, "0")
        if tens > 0:
            text = f"{text[:-tens]}.{text[-tens:]}"
        if self._num < 0:
            text = "-" + text
        return text


RationalLike = Union[Rational, int]


def _coerce(value: Any) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    return NotImplemented


Rational.ZERO = Rational(0)  # type: ignore[attr-defined]
Rational.ONE = Rational(1)  # type: ignore[attr-defined]
