"""Ordered collections of linear equations."""

from __future__ import annotations

from typing import Iterable, Iterator

from .config import MAX_EQUATIONS
from .equation import Equation
from .logging_config import get_logger
from .matrix import Matrix, solve
from .parser import parse_equation
from .rational import Rational
from .solution import Solution
from .types import ValidationError

logger = get_logger("system")


class EquationSystem:
    """An ordered collection of equations. New systems are empty.

    Order only matters for indexing and display; the solution does not
    depend on it.
    """

    def __init__(self, equations: Iterable[Equation] = ()):
        self._equations: list[Equation] = []
        for eq in equations:
            self.add(eq)

    @classmethod
    def parse(cls, texts: Iterable[str]) -> EquationSystem:
        """Build a system from equation strings, one equation per string."""
        return cls(parse_equation(text) for text in texts)

    def _check_capacity(self) -> None:
        if len(self._equations) >= MAX_EQUATIONS:
            raise ValidationError(
                f"Too many equations (limit is {MAX_EQUATIONS})", "TOO_MANY_EQUATIONS"
            )

    def add(self, eq: Equation) -> EquationSystem:
        """Append an equation to the end of the system."""
        self._check_capacity()
        self._equations.append(eq)
        return self

    append = add

    def insert(self, i: int, eq: Equation) -> EquationSystem:
        """Insert an equation at the given index."""
        self._check_capacity()
        self._equations.insert(i, eq)
        return self

    def remove(self, i: int) -> Equation:
        """Remove and return the i-th equation."""
        return self._equations.pop(i)

    def __delitem__(self, i: int) -> None:
        del self._equations[i]

    def __getitem__(self, i: int) -> Equation:
        return self._equations[i]

    def __len__(self) -> int:
        return len(self._equations)

    def size(self) -> int:
        return len(self._equations)

    def __iter__(self) -> Iterator[Equation]:
        return iter(self._equations)

    def __repr__(self) -> str:
        return f"EquationSystem({[str(eq) for eq in self._equations]!r})"

    def __str__(self) -> str:
        return "\n".join(str(eq) for eq in self._equations)

    def variables(self) -> list[str]:
        """Names with a non-zero coefficient in any equation, sorted."""
        names: set[str] = set()
        for eq in self._equations:
            names.update(eq.variables())
        return sorted(names)

    def coefficient_matrix(self) -> tuple[Matrix, Matrix, list[str]]:
        """Build ``A`` and ``y`` with ``A x = y`` equivalent to the system.

        Equations are stored as ``sum(a_i x_i) + c = 0``, so the right-hand
        side holds the negated constants.

        Returns:
            Tuple (A, y, names) where column j of A belongs to names[j]
        """
        names = self.variables()
        a = Matrix.from_function(
            len(self), len(names), lambda i, j: self[i].get(names[j])
        )
        y = Matrix.from_function(len(self), 1, lambda i, j: -self[i].constant)
        return a, y, names

    def solve(self) -> Solution[dict[str, Rational]]:
        """Solve the system, mapping a unique solution to ``{name: value}``."""
        a, y, names = self.coefficient_matrix()
        logger.debug(
            "Solving %d equation(s) in %d variable(s): %s", len(self), len(names), names
        )
        solution = solve(a, y)
        logger.info("System of %d equation(s) classified as %s", len(self), solution.kind)
        return solution.map(
            lambda x: {name: x[i, 0] for i, name in enumerate(names)}
        )
