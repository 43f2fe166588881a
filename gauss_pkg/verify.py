"""Independent cross-check of solutions with SymPy.

The classification uses the Rouche-Capelli theorem on SymPy's exact ranks,
so it shares no code with the elimination in ``matrix.solve``.
"""

from __future__ import annotations

import sympy as sp

from .logging_config import get_logger
from .rational import Rational
from .solution import Solution, UniqueSolution
from .system import EquationSystem

logger = get_logger("verify")


def classify_with_sympy(system: EquationSystem) -> str:
    """Classify a system as "none", "infinite" or "unique" using SymPy ranks."""
    a, y, names = system.coefficient_matrix()
    if a.height == 0:
        return "unique"
    sym_y = y.to_sympy()
    if names:
        sym_a = a.to_sympy()
        rank_a = sym_a.rank()
        rank_aug = sym_a.row_join(sym_y).rank()
    else:
        # No unknowns: every equation reads "0 = y[i]"
        rank_a = 0
        rank_aug = sym_y.rank()
    if rank_a < rank_aug:
        return "none"
    if rank_a < len(names):
        return "infinite"
    return "unique"


def satisfies(system: EquationSystem, values: dict[str, Rational]) -> bool:
    """Check that ``values`` make every equation hold exactly."""
    symbols = {name: sp.Symbol(name) for name in system.variables()}
    substitutions = {symbols[name]: value.to_sympy() for name, value in values.items()}
    for eq in system:
        expr = sum(
            (value.to_sympy() * symbols[name] for name, value in eq),
            eq.constant.to_sympy(),
        )
        if sp.simplify(sp.sympify(expr).subs(substitutions)) != 0:
            logger.debug("Equation %s does not hold for %s", eq, values)
            return False
    return True


def check_solution(
    system: EquationSystem, solution: Solution[dict[str, Rational]]
) -> bool:
    """Confirm a solution's classification, and its values when unique."""
    expected = classify_with_sympy(system)
    if expected != solution.kind:
        logger.warning(
            "SymPy classifies the system as %s but elimination found %s",
            expected,
            solution.kind,
        )
        return False
    match solution:
        case UniqueSolution(value=values):
            if set(values) != set(system.variables()):
                return False
            return satisfies(system, values)
        case _:
            return True
