"""Operator table: validity, fixity, binding powers and semantic functions.

Everything in this module is read-only data plus pure lookups. Operators are
identified by their symbol text so the table can be consulted before a token
exists (the lexer needs that) as well as from ``tokens.Operator`` methods.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable

from .types import EvaluationError, UnexpectedTokenError

VALID_OPERATORS = frozenset(
    {"+", "-", "*", "/", "(", ")", "sin", "cos", "tan", "^", "sqrt", ".", "!"}
)
PREFIX_OPERATORS = frozenset({"-", "sin", "cos", "tan", "sqrt"})
POSTFIX_OPERATORS = frozenset({"!"})

# (left, right) binding powers of operators in infix position.
# Left < right makes an operator left-associative, left > right right-associative.
INFIX_POWERS: dict[str, tuple[float, float]] = {
    "+": (1.0, 1.1),
    "-": (1.0, 1.1),
    "*": (2.0, 2.1),
    "/": (2.0, 2.1),
    "^": (3.1, 3.0),
    "sqrt": (3.1, 3.0),
}
PREFIX_POWER = (0.0, 100.0)
POSTFIX_POWER = (100.0, 0.0)


class Fixity(Enum):
    PREFIX = "prefix"
    INFIX = "infix"
    POSTFIX = "postfix"


def is_operator(text: str) -> bool:
    return text in VALID_OPERATORS


def is_prefix(symbol: str) -> bool:
    return symbol in PREFIX_OPERATORS


def is_postfix(symbol: str) -> bool:
    return symbol in POSTFIX_OPERATORS


def fixity(symbol: str) -> Fixity:
    """Return the fixity an operator has when it starts an operand.

    ``-`` and ``sqrt`` also have infix forms; the parser picks those by
    position, this only reports the primary classification.
    """
    if is_prefix(symbol):
        return Fixity.PREFIX
    if is_postfix(symbol):
        return Fixity.POSTFIX
    return Fixity.INFIX


def plus(a: float, b: float) -> float:
    return a + b


def minus(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    return a / b


def negative(a: float) -> float:
    return -a


def power(a: float, b: float) -> float:
    return math.pow(a, b)


def root(a: float, b: float) -> float:
    """Return the b-th root of a (infix ``sqrt``)."""
    return math.pow(a, 1.0 / b)


def factorial(n: float) -> float:
    """Factorial with the base cases 0 -> 0 and 1 -> 1.

    For n >= 1 this agrees with the usual n!; 0! is 0 by definition of this
    calculator. Only non-negative whole numbers are accepted.
    """
    if n < 0 or not float(n).is_integer():
        raise ValueError(f"factorial is only defined for non-negative integers, got {n}")
    if n == 0:
        return 0.0
    if n > 170:
        # beyond the float range
        return math.inf
    result = 1.0
    k = 2.0
    while k <= n:
        result *= k
        k += 1.0
    return result


SEMANTICS: dict[tuple[str, int], Callable[..., float]] = {
    ("+", 2): plus,
    ("-", 1): negative,
    ("-", 2): minus,
    ("*", 2): multiply,
    ("/", 2): divide,
    ("^", 2): power,
    ("sqrt", 1): math.sqrt,
    ("sqrt", 2): root,
    ("sin", 1): math.sin,
    ("cos", 1): math.cos,
    ("tan", 1): math.tan,
    ("!", 1): factorial,
}


def semantic_function(symbol: str, arity: int) -> Callable[..., float]:
    """Resolve the function implementing ``symbol`` applied to ``arity`` operands.

    Raises:
        UnexpectedTokenError: If the operator has no meaning for that arity
    """
    try:
        return SEMANTICS[(symbol, arity)]
    except KeyError:
        raise UnexpectedTokenError(
            symbol, f"Operator '{symbol}' cannot take {arity} operand(s)"
        ) from None


def apply(symbol: str, values: list[float]) -> float:
    """Apply the semantic function of ``symbol`` to already-evaluated operands.

    Arithmetic failures (division by zero, domain errors, overflow) are
    reported as EvaluationError.
    """
    func = semantic_function(symbol, len(values))
    try:
        return float(func(*values))
    except ZeroDivisionError:
        raise EvaluationError(f"Division by zero in '{symbol}'") from None
    except (ValueError, OverflowError) as e:
        raise EvaluationError(f"Math error in '{symbol}': {e}") from e


def binding_power(symbol: str) -> tuple[float, float]:
    """Return the (left, right) binding power of an operator after an operand.

    Raises:
        UnexpectedTokenError: If the operator cannot follow an operand
    """
    if symbol in INFIX_POWERS:
        return INFIX_POWERS[symbol]
    if is_postfix(symbol):
        return POSTFIX_POWER
    if is_prefix(symbol):
        return PREFIX_POWER
    raise UnexpectedTokenError(symbol)


def prefix_power(symbol: str) -> tuple[float, float]:
    if not is_prefix(symbol):
        raise UnexpectedTokenError(symbol, f"'{symbol}' is not a prefix operator")
    return PREFIX_POWER
