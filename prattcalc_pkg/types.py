"""Type definitions, result dataclasses and the error hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EvalResult:
    """Result of parsing and evaluating an expression."""

    ok: bool
    parsed: str | None = None
    folded: str | None = None
    result: str | None = None
    free_symbols: list[str] | None = None
    bound: bool | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.parsed is not None:
            result_dict["parsed"] = self.parsed
        if self.folded is not None:
            result_dict["folded"] = self.folded
        if self.result is not None:
            result_dict["result"] = self.result
        if self.free_symbols is not None:
            result_dict["free_symbols"] = self.free_symbols
        if self.bound is not None:
            result_dict["bound"] = self.bound
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}"]
        if self.parsed is not None:
            parts.append(f"parsed={self.parsed!r}")
        if self.folded is not None:
            parts.append(f"folded={self.folded!r}")
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        if self.free_symbols is not None:
            parts.append(f"free_symbols={self.free_symbols!r}")
        if self.bound is not None:
            parts.append(f"bound={self.bound!r}")
        return f"EvalResult({', '.join(parts)})"


@dataclass
class SampleResult:
    """Result of sampling an expression over a range of one variable."""

    ok: bool
    variable: str | None = None
    xs: list[float] | None = None
    ys: list[float | None] | None = None
    plot: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.variable is not None:
            result_dict["variable"] = self.variable
        if self.xs is not None:
            result_dict["xs"] = self.xs
        if self.ys is not None:
            result_dict["ys"] = self.ys
        if self.plot is not None:
            result_dict["plot"] = self.plot
        if self.error is not None:
            result_dict["error"] = self.error
        return result_dict


class CalculatorError(Exception):
    """Base class for every error raised by the calculator core."""

    default_code = "CALCULATOR_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ParseError(CalculatorError):
    """Raised when tokenizing or parsing fails."""

    default_code = "PARSE_ERROR"


class InvalidTokenError(ParseError):
    """Raised when a numeric literal is malformed."""

    default_code = "INVALID_TOKEN"

    def __init__(self, text: str, message: str | None = None):
        self.text = text
        super().__init__(message or f"Invalid token: {text!r}")


class InvalidOperatorError(ParseError):
    """Raised when an operator symbol is not in the operator table."""

    default_code = "INVALID_OPERATOR"

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid operator: {text!r}")


class UnmatchedParenthesisError(ParseError):
    """Raised when a parenthesis has no partner."""

    default_code = "UNMATCHED_PAREN"


class UnexpectedTokenError(ParseError):
    """Raised when a token is not valid in its grammar position."""

    default_code = "UNEXPECTED_TOKEN"

    def __init__(self, text: str, message: str | None = None):
        self.text = text
        super().__init__(message or f"Unexpected token: {text!r}")


class ValidationError(CalculatorError):
    """Raised when input validation fails."""

    default_code = "VALIDATION_ERROR"


class EvaluationError(CalculatorError):
    """Raised when arithmetic on a tree fails."""

    default_code = "EVAL_ERROR"


class UnboundVariableError(EvaluationError):
    """Raised by strict evaluation when a symbol has no value."""

    default_code = "UNBOUND_VARIABLE"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable '{name}' has no assigned value")


class UnsupportedOperationError(CalculatorError, TypeError):
    """Raised when a token does not support the requested operation."""

    default_code = "UNSUPPORTED_OPERATION"


class InvalidOperationError(CalculatorError, TypeError):
    """Raised when a token kind cannot be invoked at all."""

    default_code = "INVALID_OPERATION"
