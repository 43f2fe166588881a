"""Public API for Gauss - returns structured objects without side effects."""

from __future__ import annotations

from typing import Sequence

from .config import VERIFY_WITH_SYMPY
from .logging_config import get_logger
from .parser import parse_equation, split_equations
from .solution import InfiniteSolutions, NoSolution, UniqueSolution
from .system import EquationSystem
from .types import ParseError, SolveResult, SolverError, ValidationError
from .verify import check_solution

logger = get_logger("api")


def solve_system(
    equations: str | Sequence[str], verify: bool = VERIFY_WITH_SYMPY
) -> SolveResult:
    """Solve a system of linear equations.

    Args:
        equations: Either a sequence of equation strings or a single string
            with equations separated by commas, semicolons or newlines
        verify: Cross-check the outcome with SymPy

    Returns:
        SolveResult with the outcome kind and, when unique, the values
        rendered as strings

    Example:
        >>> from gauss_pkg.api import solve_system
        >>> result = solve_system("x + y = 3, x - y = 1")
        >>> result.solutions
        {'x': '2', 'y': '1'}
        >>> solve_system(["2x + 3y + 4 = 0", "2x + 3y + 2 = 0"]).result_type
        'none'
    """
    try:
        texts = split_equations(equations) if isinstance(equations, str) else list(equations)
        system = EquationSystem.parse(texts)
        solution = system.solve()
    except (ParseError, ValidationError, SolverError) as e:
        logger.info("Rejected input: %s", e)
        return SolveResult(ok=False, error=str(e), error_code=e.code)

    verified = check_solution(system, solution) if verify else None

    match solution:
        case UniqueSolution(value=values):
            return SolveResult(
                ok=True,
                result_type="unique",
                solutions={name: str(values[name]) for name in sorted(values)},
                verified=verified,
            )
        case InfiniteSolutions():
            return SolveResult(ok=True, result_type="infinite", verified=verified)
        case NoSolution():
            return SolveResult(ok=True, result_type="none", verified=verified)


def solve_equation(equation: str, verify: bool = VERIFY_WITH_SYMPY) -> SolveResult:
    """Solve a single linear equation as a one-equation system.

    Example:
        >>> from gauss_pkg.api import solve_equation
        >>> solve_equation("2x = 1").solutions
        {'x': '0.5'}
    """
    return solve_system([equation], verify=verify)


def validate_equation(equation: str) -> tuple[bool, str | None]:
    """Check that an equation parses, without solving it.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from gauss_pkg.api import validate_equation
        >>> validate_equation("x + 1 = 2")
        (True, None)
        >>> validate_equation("x + = 2")
        (False, 'Unexpected `=` at the start of a natural number, expecting a digit')
    """
    try:
        parse_equation(equation)
        return True, None
    except (ParseError, ValidationError) as e:
        return False, str(e)
