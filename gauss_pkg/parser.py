"""Equation text parsing.

This module handles:
- Input validation (length limits)
- Recursive-descent parsing of linear equations into ``Equation`` objects
- Parsing of single rational literals (integers, decimals, fractions)
- Splitting a string holding several equations

Grammar::

    equation := expr '=' expr EOF
    expr     := ['+' | '-'] term (('+' | '-') term)*
    term     := name | literal [['*'] name]
    literal  := natural ['.' natural] | natural '/' natural
    name     := letter (letter | digit | '_')*

Whitespace may appear between tokens, but not between the integer part of
a decimal and its point.
"""

from __future__ import annotations

from typing import NoReturn

from .config import EQUATION_SEPARATOR_RE, MAX_INPUT_LENGTH
from .equation import Equation, is_name_char, is_name_start
from .logging_config import get_logger
from .rational import Rational, int_from_digits
from .types import ParseError, ValidationError

logger = get_logger("parser")

DIGITS = "0123456789"


def _validate_length(text: str) -> None:
    if len(text) > MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long ({len(text)} > {MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )


class _Parser:
    def __init__(self, text: str):
        self.text = text
        self.cursor = 0

    def eof(self) -> bool:
        return self.cursor >= len(self.text)

    def peek(self) -> str:
        if self.eof():
            return ""
        return self.text[self.cursor]

    def next(self) -> None:
        if not self.eof():
            self.cursor += 1

    def skip_spaces(self) -> None:
        while self.peek().isspace():
            self.next()

    def fail(self, context: str, expected: str, code: str = "PARSE_ERROR") -> NoReturn:
        found = "EOF" if self.eof() else f"`{self.peek()}`"
        raise ParseError(
            f"Unexpected {found} {context}, expecting {expected}",
            code,
            found=found,
            expected=expected,
            position=self.cursor,
        )

    def parse_natural(self) -> tuple[int, int]:
        """Return the value of a run of digits and the number of digits read."""
        start = self.cursor
        if self.peek() == "" or self.peek() not in DIGITS:
            self.fail("at the start of a natural number", "a digit")
        while self.peek() != "" and self.peek() in DIGITS:
            self.next()
        return int_from_digits(self.text[start : self.cursor]), self.cursor - start

    def parse_rational(self) -> Rational:
        whole, _ = self.parse_natural()
        if self.peek() == ".":
            self.next()
            fraction, length = self.parse_natural()
            return Rational(whole) + Rational(fraction, 10**length)
        self.skip_spaces()
        if self.peek() == "/":
            self.next()
            self.skip_spaces()
            denominator_at = self.cursor
            denominator, _ = self.parse_natural()
            if denominator == 0:
                self.cursor = denominator_at
                self.fail("as a denominator", "a non-zero natural number", "ZERO_DENOMINATOR")
            return Rational(whole, denominator)
        return Rational(whole)

    def parse_name(self) -> str:
        start = self.cursor
        if not is_name_start(self.peek()):
            self.fail("at the start of a name", "a letter")
        while is_name_char(self.peek()):
            self.next()
        return self.text[start : self.cursor]

    def parse_expr(self) -> Equation:
        result = Equation()
        sign = 1
        self.skip_spaces()
        if self.peek() == "+":
            self.next()
        elif self.peek() == "-":
            self.next()
            sign = -1
        while True:
            self.skip_spaces()
            if is_name_start(self.peek()):
                # lone variable
                name = self.parse_name()
                result.set(name, result.get(name) + sign)
            else:
                number = self.parse_rational() * sign
                self.skip_spaces()
                if self.peek() == "*" or is_name_start(self.peek()):
                    # coefficient followed by a variable
                    if self.peek() == "*":
                        self.next()
                        self.skip_spaces()
                    name = self.parse_name()
                    result.set(name, result.get(name) + number)
                else:
                    result.set_const(result.constant + number)
            self.skip_spaces()
            if self.peek() == "+":
                self.next()
                sign = 1
            elif self.peek() == "-":
                self.next()
                sign = -1
            else:
                break
        return result

    def parse_equation(self) -> Equation:
        lhs = self.parse_expr()
        self.skip_spaces()
        if self.peek() != "=":
            self.fail("in equation", "`=`")
        self.next()
        rhs = self.parse_expr()
        if not self.eof():
            self.fail("in equation", "EOF")
        for name, value in rhs:
            lhs.set(name, lhs.get(name) - value)
        return lhs.set_const(lhs.constant - rhs.constant)

    def parse_signed_rational(self) -> Rational:
        self.skip_spaces()
        sign = 1
        if self.peek() == "+":
            self.next()
        elif self.peek() == "-":
            self.next()
            sign = -1
        self.skip_spaces()
        value = self.parse_rational() * sign
        self.skip_spaces()
        if not self.eof():
            self.fail("after number", "EOF")
        return value


def parse_equation(text: str) -> Equation:
    """Parse a linear equation into the normalized form ``lhs - rhs = 0``.

    Args:
        text: Equation string (e.g., "-2*x1 + 3*x2 + x3 = -1")

    Returns:
        Equation holding the coefficients of ``lhs - rhs``

    Raises:
        ParseError: If the text does not follow the equation grammar
        ValidationError: If the text exceeds MAX_INPUT_LENGTH
    """
    _validate_length(text)
    try:
        return _Parser(text).parse_equation()
    except ParseError as e:
        logger.debug("Failed to parse %r: %s", text, e)
        raise


def parse_rational(text: str) -> Rational:
    """Parse a single signed literal such as ``"-0.0013"`` or ``"12/13"``."""
    _validate_length(text)
    return _Parser(text).parse_signed_rational()


def split_equations(text: str) -> list[str]:
    """Split a comma-, semicolon- or newline-separated list of equations.

    Empty pieces are dropped, so trailing separators are harmless.
    """
    _validate_length(text)
    return [part.strip() for part in EQUATION_SEPARATOR_RE.split(text) if part.strip()]
