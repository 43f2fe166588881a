"""Gauss package: exact rational arithmetic, equation parsing and Gauss-Jordan solving."""

from .equation import Equation
from .matrix import Matrix, solve
from .rational import Rational
from .solution import InfiniteSolutions, NoSolution, Solution, UniqueSolution
from .system import EquationSystem

__all__ = [
    "config",
    "rational",
    "matrix",
    "solution",
    "equation",
    "parser",
    "system",
    "verify",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "solve_system",
    "solve_equation",
    "validate_equation",
]

__core_exports__ = [
    "Rational",
    "Matrix",
    "solve",
    "Solution",
    "NoSolution",
    "InfiniteSolutions",
    "UniqueSolution",
    "Equation",
    "EquationSystem",
]
