"""Linear equations ``a1*x1 + a2*x2 + ... + an*xn + c = 0``."""

from __future__ import annotations

from typing import Iterator

from .rational import Rational, RationalLike
from .types import ValidationError


def is_name_start(char: str) -> bool:
    return char.isalpha()


def is_name_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def is_valid_name(name: str) -> bool:
    """A letter followed by letters, digits or underscores, as the parser reads names."""
    return is_name_start(name[:1]) and all(is_name_char(c) for c in name)


def _as_rational(value: RationalLike) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    raise TypeError(f"Coefficients must be Rational or int, got {type(value).__name__}")


class Equation:
    """Sparse linear equation.

    Only variables with a non-zero coefficient are stored, so ``size()`` and
    iteration reflect the effective variables. A new equation has every
    coefficient and the constant equal to zero. Setters return ``self`` to
    allow chaining::

        Equation().set("x", Rational(2)).set("y", Rational(-1)).set_const(Rational(3))
    """

    __slots__ = ("_coefficients", "_constant")

    def __init__(self) -> None:
        self._coefficients: dict[str, Rational] = {}
        self._constant = Rational.ZERO

    @classmethod
    def parse(cls, text: str) -> Equation:
        """Parse an equation such as ``"2x + 3/4 y = 1"``."""
        from .parser import parse_equation

        return parse_equation(text)

    def get(self, name: str) -> Rational:
        """Coefficient of ``name``; zero for variables not in the equation."""
        return self._coefficients.get(name, Rational.ZERO)

    def set(self, name: str, value: RationalLike) -> Equation:
        """Set the coefficient of ``name``; a zero coefficient removes it."""
        if not is_valid_name(name):
            raise ValidationError(f"Invalid variable name: {name!r}", "INVALID_NAME")
        value = _as_rational(value)
        if value.is_zero():
            self._coefficients.pop(name, None)
        else:
            self._coefficients[name] = value
        return self

    @property
    def constant(self) -> Rational:
        return self._constant

    def set_const(self, value: RationalLike) -> Equation:
        self._constant = _as_rational(value)
        return self

    def size(self) -> int:
        """Number of variables with a non-zero coefficient."""
        return len(self._coefficients)

    def __len__(self) -> int:
        return len(self._coefficients)

    def variables(self) -> list[str]:
        return list(self._coefficients)

    def items(self) -> Iterator[tuple[str, Rational]]:
        return iter(list(self._coefficients.items()))

    def __iter__(self) -> Iterator[tuple[str, Rational]]:
        return self.items()

    def __contains__(self, name: object) -> bool:
        return name in self._coefficients

    def copy(self) -> Equation:
        other = Equation()
        other._coefficients = dict(self._coefficients)
        other._constant = self._constant
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Equation):
            return NotImplemented
        return (
            self._coefficients == other._coefficients
            and self._constant == other._constant
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Equation({str(self)!r})"

    def __str__(self) -> str:
        parts: list[str] = []
        for name, value in self._coefficients.items():
            if value < 0:
                parts.append("-")
            elif parts:
                parts.append("+")
            magnitude = abs(value)
            parts.append(name if magnitude == Rational.ONE else f"{magnitude}{name}")
        if self._constant < 0:
            parts.append("-")
        elif parts:
            parts.append("+")
        parts.append(str(abs(self._constant)))
        return " ".join(parts) + " = 0"
