"""Unit tests for the Equation type."""

import unittest

from gauss_pkg.equation import Equation
from gauss_pkg.parser import parse_equation
from gauss_pkg.rational import Rational
from gauss_pkg.types import ValidationError


class TestCoefficients(unittest.TestCase):
    """Test the sparse coefficient mapping."""

    def test_get_set(self):
        eq = Equation().set("x", Rational(2)).set("y", Rational(3)).set_const(Rational(-5))
        eq.set("x", Rational(0))
        eq.set("z", Rational(1))
        self.assertEqual(eq.size(), 2)
        self.assertEqual(eq.get("x"), Rational(0))
        self.assertEqual(eq.get("y"), Rational(3))
        self.assertEqual(eq.get("z"), Rational(1))
        self.assertEqual(eq.get("a"), Rational(0))
        self.assertEqual(eq.constant, Rational(-5))

    def test_new_equation_is_empty(self):
        eq = Equation()
        self.assertEqual(len(eq), 0)
        self.assertEqual(eq.constant, Rational.ZERO)
        self.assertEqual(list(eq), [])

    def test_sparsity_after_many_sets(self):
        eq = Equation()
        final = {}
        for i, value in enumerate([3, 0, -1, 0, 0, 5, 2, 0]):
            name = "v" + str(i % 3)
            eq.set(name, Rational(value))
            final[name] = value
        self.assertEqual(eq.size(), sum(1 for v in final.values() if v != 0))
        self.assertNotIn("v1", eq)

    def test_iterate(self):
        eq = (
            Equation()
            .set("x", Rational(2))
            .set("y", Rational(3))
            .set("z", Rational(1))
            .set("a", Rational(0))
        )
        self.assertEqual(
            dict(eq), {"x": Rational(2), "y": Rational(3), "z": Rational(1)}
        )
        self.assertEqual(sorted(eq.variables()), ["x", "y", "z"])

    def test_accepts_int_coefficients(self):
        eq = Equation().set("x", 4).set_const(-1)
        self.assertEqual(eq.get("x"), Rational(4))
        self.assertEqual(eq.constant, Rational(-1))

    def test_invalid_name(self):
        for name in ("", "1x", "_x", "x-y", "x y", "x\n", "x\t", "²a", "½", "a.b"):
            with self.assertRaises(ValidationError) as ctx:
                Equation().set(name, Rational(1))
            self.assertEqual(ctx.exception.code, "INVALID_NAME")

    def test_unicode_names_parse_back(self):
        for name in ("x²", "αβ", "x_1", "ñ"):
            eq = Equation().set(name, Rational(2)).set_const(1)
            self.assertEqual(parse_equation(str(eq)), eq, name)


class TestEquality(unittest.TestCase):
    """Test structural equality."""

    def test_equal_regardless_of_order(self):
        a = Equation().set("x", 1).set("y", 2).set_const(3)
        b = Equation().set("y", 2).set("x", 1).set_const(3)
        self.assertEqual(a, b)

    def test_differs_by_constant(self):
        a = Equation().set("x", 1)
        b = Equation().set("x", 1).set_const(1)
        self.assertNotEqual(a, b)

    def test_zero_coefficient_equals_missing(self):
        a = Equation().set("x", 1).set("y", 0)
        b = Equation().set("x", 1)
        self.assertEqual(a, b)

    def test_copy_is_independent(self):
        a = Equation().set("x", 1)
        b = a.copy()
        b.set("x", 2)
        self.assertEqual(a.get("x"), Rational(1))


class TestToString(unittest.TestCase):
    """Test rendering."""

    def test_to_string(self):
        eq = (
            Equation()
            .set("x", Rational(1))
            .set("y", Rational(-2))
            .set("z", Rational(3))
            .set_const(Rational(-4))
        )
        self.assertEqual(str(eq), "x - 2y + 3z - 4 = 0")

    def test_leading_negative_and_fractions(self):
        eq = Equation().set("a", Rational(-1)).set("b", Rational(2, 3)).set_const(Rational(1, 4))
        self.assertEqual(str(eq), "- a + 2/3b + 0.25 = 0")

    def test_empty_equation(self):
        self.assertEqual(str(Equation()), "0 = 0")
        self.assertEqual(str(Equation().set_const(-7)), "- 7 = 0")


if __name__ == "__main__":
    unittest.main()
