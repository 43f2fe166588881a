"""Type definitions, result dataclasses and exceptions for a consistent API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class SolveResult:
    """Result of solving a system of linear equations."""

    ok: bool
    result_type: str | None = None  # "none", "infinite", "unique"
    solutions: dict[str, str] | None = None
    error: str | None = None
    error_code: str | None = None
    verified: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result_type is not None:
            result_dict["type"] = self.result_type
        if self.solutions is not None:
            result_dict["solutions"] = self.solutions
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        if self.verified is not None:
            result_dict["verified"] = self.verified
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"SolveResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}", f"result_type={self.result_type!r}"]
        if self.solutions is not None:
            parts.append(f"solutions={self.solutions!r}")
        if self.verified is not None:
            parts.append(f"verified={self.verified!r}")
        return f"SolveResult({', '.join(parts)})"


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ParseError(Exception):
    """Raised when equation text does not follow the grammar.

    ``found`` is the offending character in backticks (or ``EOF``),
    ``expected`` names the token class the parser wanted and ``position``
    is the cursor index in the input.
    """

    def __init__(
        self,
        message: str,
        code: str = "PARSE_ERROR",
        found: str | None = None,
        expected: str | None = None,
        position: int | None = None,
    ):
        self.message = message
        self.code = code
        self.found = found
        self.expected = expected
        self.position = position
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class SolverError(Exception):
    """Raised when a solve precondition is violated."""

    def __init__(self, message: str, code: str = "SOLVER_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
