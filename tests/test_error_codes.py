"""Test error codes raised and returned by various functions."""

import unittest

from gauss_pkg.api import solve_system
from gauss_pkg.equation import Equation
from gauss_pkg.matrix import Matrix, solve
from gauss_pkg.parser import parse_equation
from gauss_pkg.rational import Rational
from gauss_pkg.types import ParseError, SolverError, ValidationError


class TestErrorCodes(unittest.TestCase):
    """Test that failures carry appropriate error codes."""

    def test_parse_error_code(self):
        with self.assertRaises(ParseError) as ctx:
            parse_equation("0 + + 2y = 3")
        self.assertEqual(ctx.exception.code, "PARSE_ERROR")

    def test_zero_denominator_code(self):
        result = solve_system("x / 1 = 2, 3/0 y = 1")
        self.assertFalse(result.ok)
        self.assertEqual(result.error_code, "PARSE_ERROR")
        result = solve_system("3/0 y = 1")
        self.assertEqual(result.error_code, "ZERO_DENOMINATOR")

    def test_too_long_code(self):
        result = solve_system("x" * 10001 + " = 1")
        self.assertFalse(result.ok)
        self.assertEqual(result.error_code, "TOO_LONG")
        self.assertIn("too long", result.error.lower())

    def test_invalid_name_code(self):
        with self.assertRaises(ValidationError) as ctx:
            Equation().set("2x", Rational(1))
        self.assertEqual(ctx.exception.code, "INVALID_NAME")

    def test_dimension_mismatch_code(self):
        with self.assertRaises(SolverError) as ctx:
            solve(Matrix([[1, 2], [3, 4]]), Matrix([[1]]))
        self.assertEqual(ctx.exception.code, "DIMENSION_MISMATCH")
        self.assertIn("heights", str(ctx.exception))

    def test_zero_denominator_in_rational(self):
        with self.assertRaises(ZeroDivisionError):
            Rational(3, 0)

    def test_outcomes_are_not_errors(self):
        for text in ("x = 1, x = 2", "x + y = 1"):
            result = solve_system(text)
            self.assertTrue(result.ok)
            self.assertIsNone(result.error)


if __name__ == "__main__":
    unittest.main()
