"""Tests for EquationSystem solving and the Solution type."""

import unittest

from gauss_pkg.equation import Equation
from gauss_pkg.rational import Rational
from gauss_pkg.solution import InfiniteSolutions, NoSolution, UniqueSolution
from gauss_pkg.system import EquationSystem
from gauss_pkg.types import ValidationError


def describe(solution):
    match solution:
        case UniqueSolution(value=values):
            return f"unique {len(values)}"
        case InfiniteSolutions():
            return "infinite"
        case NoSolution():
            return "none"


class TestSolutionType(unittest.TestCase):
    """Test the three-way solution type."""

    def test_map_transforms_unique(self):
        sol = UniqueSolution(3).map(lambda v: v * 2)
        self.assertEqual(sol, UniqueSolution(6))

    def test_map_keeps_other_variants(self):
        self.assertEqual(NoSolution().map(lambda v: v * 2), NoSolution())
        self.assertEqual(InfiniteSolutions().map(lambda v: v * 2), InfiniteSolutions())

    def test_kinds(self):
        self.assertEqual(NoSolution().kind, "none")
        self.assertTrue(InfiniteSolutions().is_infinite)
        self.assertTrue(UniqueSolution(1).is_unique)
        self.assertFalse(UniqueSolution(1).is_none)

    def test_pattern_matching(self):
        self.assertEqual(describe(UniqueSolution({"x": 1})), "unique 1")
        self.assertEqual(describe(InfiniteSolutions()), "infinite")
        self.assertEqual(describe(NoSolution()), "none")


class TestEquationSystem(unittest.TestCase):
    """Test solving whole systems."""

    def test_solve_unique(self):
        system = EquationSystem()
        system.add(Equation.parse("-2*x1 + 3*x2 + x3 = -1"))
        system.add(Equation.parse("-4*x1 + 5*x2 + 4*x3 = -7"))
        system.add(Equation.parse("4*x1 - 9*x2 + 2*x3 = -9"))
        sol = system.solve()
        self.assertIsInstance(sol, UniqueSolution)
        self.assertEqual(
            sol.value, {"x1": Rational(1), "x2": Rational(1), "x3": Rational(-2)}
        )

    def test_solve_none(self):
        system = EquationSystem.parse(["2x + 3y + 4 = 0", "2x + 3y + 2 = 0"])
        self.assertIsInstance(system.solve(), NoSolution)

    def test_solve_infinite(self):
        system = EquationSystem.parse(["x + 3y + 4z = -1", "-2x + 2y + z = 3"])
        self.assertIsInstance(system.solve(), InfiniteSolutions)

    def test_fractional_solution(self):
        system = EquationSystem.parse(["3x + y = 1", "x - y = 0"])
        sol = system.solve()
        self.assertEqual(sol.value, {"x": Rational(1, 4), "y": Rational(1, 4)})

    def test_order_of_equations_does_not_matter(self):
        texts = ["a + b + c = 6", "a - b = -1", "2c - a = 5"]
        forward = EquationSystem.parse(texts).solve()
        backward = EquationSystem.parse(reversed(texts)).solve()
        self.assertEqual(forward, backward)
        self.assertEqual(
            forward.value, {"a": Rational(1), "b": Rational(2), "c": Rational(3)}
        )

    def test_empty_system(self):
        self.assertEqual(EquationSystem().solve(), UniqueSolution({}))

    def test_identity_and_contradiction(self):
        self.assertEqual(EquationSystem.parse(["1 = 1"]).solve(), UniqueSolution({}))
        self.assertIsInstance(EquationSystem.parse(["1 = 2"]).solve(), NoSolution)

    def test_variables_sorted_union(self):
        system = EquationSystem.parse(["z + a = 1", "m = 2", "0*q + a = 1"])
        self.assertEqual(system.variables(), ["a", "m", "z"])

    def test_coefficient_matrix_negates_constants(self):
        system = EquationSystem.parse(["2x + 3 = 0", "y = 4"])
        a, y, names = system.coefficient_matrix()
        self.assertEqual(names, ["x", "y"])
        self.assertEqual(a[0, 0], Rational(2))
        self.assertEqual(a[0, 1], Rational(0))
        self.assertEqual(y[0, 0], Rational(-3))
        self.assertEqual(y[1, 0], Rational(4))

    def test_sequence_operations(self):
        system = EquationSystem()
        first = Equation.parse("x = 1")
        second = Equation.parse("y = 2")
        system.append(second)
        system.insert(0, first)
        self.assertEqual(len(system), 2)
        self.assertIs(system[0], first)
        self.assertEqual(list(system), [first, second])
        self.assertIs(system.remove(1), second)
        del system[0]
        self.assertEqual(system.size(), 0)

    def test_capacity_limit(self):
        from gauss_pkg import system as system_module

        original = system_module.MAX_EQUATIONS
        system_module.MAX_EQUATIONS = 2
        try:
            system = EquationSystem.parse(["x = 1", "y = 2"])
            with self.assertRaises(ValidationError) as ctx:
                system.add(Equation.parse("z = 3"))
            self.assertEqual(ctx.exception.code, "TOO_MANY_EQUATIONS")
        finally:
            system_module.MAX_EQUATIONS = original


if __name__ == "__main__":
    unittest.main()
