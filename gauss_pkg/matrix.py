"""Dense matrices of rational numbers and exact Gauss-Jordan elimination.

``solve`` classifies ``A x = y`` by rank:
- rows left without a pivot must have a zero right-hand side, otherwise
  the system is inconsistent (no solution)
- a column left without a pivot is a free variable (infinitely many)
- full column rank gives the unique solution

All arithmetic is exact, so pivots are tested against zero by equality.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

import sympy as sp

from .logging_config import get_logger
from .rational import Rational, RationalLike
from .solution import InfiniteSolutions, NoSolution, Solution, UniqueSolution
from .types import SolverError

logger = get_logger("matrix")


def _as_rational(value: RationalLike) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    raise TypeError(f"Matrix entries must be Rational or int, got {type(value).__name__}")


class Matrix:
    """Mutable H x W grid of Rationals addressed as ``m[row, col]``."""

    def __init__(self, rows: Iterable[Iterable[RationalLike]] = (), width: int | None = None):
        """Build a matrix from consecutive rows.

        Args:
            rows: Iterable of rows, each an iterable of Rational or int
            width: Column count; required only when there are no rows
        """
        self._rows: list[list[Rational]] = [
            [_as_rational(v) for v in row] for row in rows
        ]
        if self._rows:
            widths = {len(row) for row in self._rows}
            if len(widths) != 1:
                raise ValueError("All matrix rows must have the same length")
            (row_width,) = widths
            if width is not None and width != row_width:
                raise ValueError(f"Rows have width {row_width}, expected {width}")
            self._width = row_width
        else:
            self._width = width or 0

    @classmethod
    def from_function(
        cls, height: int, width: int, seed: Callable[[int, int], RationalLike]
    ) -> Matrix:
        """Build a matrix whose cell (i, j) is ``seed(i, j)``."""
        return cls(
            ([seed(i, j) for j in range(width)] for i in range(height)), width=width
        )

    @classmethod
    def from_flat(cls, height: int, width: int, data: Sequence[RationalLike]) -> Matrix:
        """Build a matrix from ``height * width`` values in row-major order."""
        if len(data) != height * width:
            raise ValueError(
                f"Expected {height * width} values for a {height}x{width} matrix, got {len(data)}"
            )
        return cls.from_function(height, width, lambda i, j: data[i * width + j])

    @classmethod
    def zeros(cls, height: int, width: int) -> Matrix:
        return cls.from_function(height, width, lambda i, j: Rational.ZERO)

    @classmethod
    def from_sympy(cls, matrix: sp.MatrixBase) -> Matrix:
        rows, cols = matrix.shape
        return cls.from_function(rows, cols, lambda i, j: Rational.from_sympy(matrix[i, j]))

    def to_sympy(self) -> sp.Matrix:
        return sp.Matrix(self.height, self.width, lambda i, j: self[i, j].to_sympy())

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return self._width

    @property
    def shape(self) -> tuple[int, int]:
        return self.height, self.width

    def __getitem__(self, index: tuple[int, int]) -> Rational:
        row, col = index
        return self._rows[row][col]

    def __setitem__(self, index: tuple[int, int], value: RationalLike) -> None:
        row, col = index
        self._rows[row][col] = _as_rational(value)

    def copy(self) -> Matrix:
        return Matrix(self._rows, width=self._width)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({[[str(v) for v in row] for row in self._rows]!r})"

    def __str__(self) -> str:
        return "".join(
            "\t".join(str(v) for v in row) + "\n" for row in self._rows
        )

    # Elementary row operations used by elimination

    def _swap_rows(self, a: int, b: int) -> None:
        if a != b:
            self._rows[a], self._rows[b] = self._rows[b], self._rows[a]

    def _subtract_row(self, target: int, source: int, ratio: Rational) -> None:
        """row[target] -= ratio * row[source]"""
        src = self._rows[source]
        self._rows[target] = [
            value - src_value * ratio
            for value, src_value in zip(self._rows[target], src)
        ]

    def _scale_row(self, target: int, ratio: Rational) -> None:
        self._rows[target] = [value * ratio for value in self._rows[target]]

    def augment(self, other: Matrix) -> Matrix:
        """Return ``[self | other]`` as a new matrix."""
        if self.height != other.height:
            raise SolverError("Matrix heights don't match", "DIMENSION_MISMATCH")
        return Matrix(
            (left + right for left, right in zip(self._rows, other._rows)),
            width=self.width + other.width,
        )

    def solve(self, y: Matrix) -> Solution[Matrix]:
        """Find x in ``self * x = y``. See :func:`solve`."""
        return solve(self, y)


def solve(a: Matrix, y: Matrix) -> Solution[Matrix]:
    """Solve ``a * x = y`` by Gauss-Jordan elimination with partial pivoting.

    Neither input is modified; elimination runs on a private augmented copy.

    Args:
        a: H x W coefficient matrix
        y: H x K right-hand side

    Returns:
        NoSolution, InfiniteSolutions, or UniqueSolution holding the W x K
        matrix x

    Raises:
        SolverError: If the heights of ``a`` and ``y`` differ
    """
    if a.height != y.height:
        raise SolverError(
            f"Matrix heights don't match ({a.height} vs {y.height})",
            "DIMENSION_MISMATCH",
        )
    n = a.width
    aug = a.augment(y)
    height = aug.height

    rank = 0
    for k in range(n):
        if rank >= height:
            break
        pivot = rank
        for i in range(rank + 1, height):
            if abs(aug[i, k]) > abs(aug[pivot, k]):
                pivot = i
        if aug[pivot, k].is_zero():
            # free column
            continue
        aug._swap_rows(pivot, rank)
        for i in range(height):
            if i == rank or aug[i, k].is_zero():
                continue
            aug._subtract_row(i, rank, aug[i, k] / aug[rank, k])
        rank += 1

    logger.debug("Eliminated %dx%d system with %d rhs column(s): rank %d", height, n, y.width, rank)

    for i in range(rank, height):
        if any(not aug[i, j].is_zero() for j in range(n, aug.width)):
            logger.debug("Row %d reduces to 0 = non-zero: no solution", i)
            return NoSolution()

    if rank < n:
        logger.debug("%d free column(s): infinitely many solutions", n - rank)
        return InfiniteSolutions()

    # Full column rank: pivot k sits at (k, k)
    for k in range(n):
        aug._scale_row(k, aug[k, k].inv())
    result = Matrix.from_function(n, y.width, lambda i, j: aug[i, n + j])
    logger.debug("Unique solution found")
    return UniqueSolution(result)
