"""Token model shared by the lexer, parser and expression tree.

Four token kinds exist: numeric atoms, operators, symbolic atoms (free
variables) and the end marker. Atoms may be merged in place while the lexer
assembles multi-character literals and names; once parsing starts only a
symbolic atom's bound value ever changes.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from . import operators
from .types import (
    InvalidOperationError,
    InvalidOperatorError,
    InvalidTokenError,
    UnsupportedOperationError,
)

# Decimal literals as produced by the lexer, plus whatever repr() gives for
# computed floats (exponent form, inf, nan).
NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|nan)", re.IGNORECASE
)


class TokenType(Enum):
    NUMERIC = "numeric"
    OPERATOR = "operator"
    SYMBOLIC = "symbolic"
    END = "end"


class Token:
    """Common behaviour of every token kind."""

    token_type: TokenType

    def type_of(self) -> TokenType:
        return self.token_type

    def check_valid(self) -> None:
        """Raise if the token's invariant does not hold."""

    def expr(self) -> str:
        raise NotImplementedError

    def eval(self, *operands: Any) -> float:
        raise UnsupportedOperationError(f"Token {self.expr()!r} cannot be applied to operands")

    def value(self) -> float:
        raise UnsupportedOperationError(f"Token {self.expr()!r} has no value")

    def invoke(self, *operands: Any) -> float:
        """Value of an atom, or result of applying an operator to ``operands``."""
        if self.token_type in (TokenType.NUMERIC, TokenType.SYMBOLIC):
            return self.value()
        if self.token_type is TokenType.OPERATOR:
            return self.eval(*operands)
        raise InvalidOperationError(f"Token kind '{self.token_type.value}' cannot be invoked")

    def is_atom(self) -> bool:
        return self.token_type in (TokenType.NUMERIC, TokenType.SYMBOLIC)

    def __str__(self) -> str:
        return self.expr()

    def __format__(self, format_spec: str) -> str:
        return format(self.expr(), format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.expr()!r})"


class NumericAtom(Token):
    """A numeric literal whose text always parses as a float."""

    token_type = TokenType.NUMERIC

    def __init__(self, source: str | float | int):
        if isinstance(source, str):
            self._text = source
        else:
            self._text = repr(float(source))
        self.check_valid()

    def check_valid(self) -> None:
        if not NUMBER_RE.fullmatch(self._text):
            raise InvalidTokenError(self._text)

    def expr(self) -> str:
        return self._text

    def value(self) -> float:
        return float(self._text)

    def merge_with(self, other: NumericAtom) -> NumericAtom:
        """Append the digits of ``other``; the result must still be a number."""
        self._text += other.expr()
        self.check_valid()
        return self

    def dot_point(self, other: NumericAtom) -> NumericAtom:
        """Join ``self`` and ``other`` around a decimal point."""
        self._text = f"{self._text}.{other.expr()}"
        self.check_valid()
        return self


class Operator(Token):
    """An operator symbol from the fixed operator table."""

    token_type = TokenType.OPERATOR

    def __init__(self, symbol: str):
        self._symbol = symbol
        self.check_valid()

    @property
    def symbol(self) -> str:
        return self._symbol

    def check_valid(self) -> None:
        if not operators.is_operator(self._symbol):
            raise InvalidOperatorError(self._symbol)

    def expr(self) -> str:
        return self._symbol

    def eval(self, *operands: Any) -> float:
        """Apply this operator to atom tokens or plain numbers."""
        values = [o.value() if isinstance(o, Token) else float(o) for o in operands]
        return operators.apply(self._symbol, values)

    def is_prefix(self) -> bool:
        return operators.is_prefix(self._symbol)

    def is_postfix(self) -> bool:
        return operators.is_postfix(self._symbol)

    def fixity(self) -> operators.Fixity:
        return operators.fixity(self._symbol)

    def binding_power(self) -> tuple[float, float]:
        return operators.binding_power(self._symbol)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Operator):
            return self._symbol == other._symbol
        if isinstance(other, str):
            return self._symbol == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._symbol)


class SymbolicAtom(Token):
    """A free variable. Unbound symbols read as 0.0."""

    token_type = TokenType.SYMBOLIC

    def __init__(self, name: str):
        self._name = name
        self._value: float | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_bound(self) -> bool:
        return self._value is not None

    def expr(self) -> str:
        return self._name

    def value(self) -> float:
        return 0.0 if self._value is None else self._value

    def merge_with(self, other: SymbolicAtom | NumericAtom) -> SymbolicAtom:
        self._name += other.expr()
        return self

    def assign(self, value: float) -> None:
        self._value = float(value)


class EndMarker(Token):
    token_type = TokenType.END

    def expr(self) -> str:
        return "<Eof>"
