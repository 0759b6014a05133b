"""Precedence-climbing parser and input helpers.

This module handles:
- Input validation (length, nesting depth)
- Parsing a token stream into an expression tree
- Balancing checks for parentheses
- Number formatting for display
"""

from __future__ import annotations

from typing import Any

from . import config, operators
from .expression import AtomExpr, Expression, OperationExpr
from .lexer import Lexer
from .logging_config import get_logger
from .tokens import Operator, TokenType
from .types import (
    ParseError,
    UnexpectedTokenError,
    UnmatchedParenthesisError,
    ValidationError,
)

logger = get_logger("parser")


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value with the given number of significant digits.

    Args:
        val: Numeric value to format
        precision: Significant digits (default: OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    try:
        fmt = "{:." + str(int(precision)) + "g}"
        return fmt.format(float(val))
    except (ValueError, TypeError, OverflowError):
        return str(val)


def is_balanced(input_str: str) -> tuple[bool, int | None]:
    """Check if parentheses are balanced. Returns (is_balanced, error_position)."""
    stack: list[int] = []
    for i, char in enumerate(input_str):
        if char == "(":
            stack.append(i)
        elif char == ")":
            if not stack:
                return False, i
            stack.pop()
    if stack:
        return False, stack[0]
    return True, None


def check_input(source: str) -> None:
    """Reject input the parser should not attempt.

    Raises:
        ValidationError: If the input exceeds MAX_INPUT_LENGTH
    """
    if len(source) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long ({len(source)} > {config.MAX_INPUT_LENGTH} characters)",
            "TOO_LONG",
        )


def _check_depth(depth: int) -> None:
    if depth > config.MAX_EXPRESSION_DEPTH:
        raise ValidationError(
            f"Expression too deeply nested (>{config.MAX_EXPRESSION_DEPTH} levels)",
            "TOO_DEEP",
        )


def _build(op: Operator, children: list[Expression]) -> Expression:
    node = OperationExpr(op, children)
    _check_depth(node.depth())
    return node


def _parse_operand(lexer: Lexer, depth: int) -> Expression:
    token = lexer.next()
    kind = token.type_of()
    if kind in (TokenType.NUMERIC, TokenType.SYMBOLIC):
        return AtomExpr(token)
    if kind is TokenType.END:
        raise UnexpectedTokenError(token.expr(), "Unexpected end of input")
    if token.expr() == "(":
        inner = parse_expression(lexer, 0.0, depth + 1)
        closing = lexer.next()
        if closing.expr() != ")":
            raise UnmatchedParenthesisError("Missing closing ')'")
        return inner
    if isinstance(token, Operator) and token.is_prefix():
        _, right = operators.prefix_power(token.symbol)
        operand = parse_expression(lexer, right, depth + 1)
        return _build(token, [operand])
    raise UnexpectedTokenError(token.expr(), f"Unexpected token {token.expr()!r}")


def parse_expression(lexer: Lexer, minimum_power: float = 0.0, depth: int = 0) -> Expression:
    """Parse one expression whose operators bind at least as tightly as ``minimum_power``.

    Args:
        lexer: Token stream positioned at the start of the expression
        minimum_power: Left binding power an infix operator needs to be consumed
        depth: Current nesting depth

    Returns:
        Expression tree

    Raises:
        UnexpectedTokenError: On a token that is invalid in its position
        UnmatchedParenthesisError: On a missing ')'
        ValidationError: If nesting exceeds MAX_EXPRESSION_DEPTH
    """
    _check_depth(depth)

    seed = lexer.peek()
    lhs = _parse_operand(lexer, depth)
    if seed.expr() == "(" and lexer.at_end():
        return lhs

    while True:
        token = lexer.next()
        if token.type_of() is TokenType.END or token.expr() == ")":
            lexer.roll_back(token)
            break
        if not isinstance(token, Operator):
            raise UnexpectedTokenError(
                token.expr(), f"Expected an operator, got {token.expr()!r}"
            )

        if token.is_postfix():
            lhs = _build(token, [lhs])
            continue

        left, right = token.binding_power()
        if left < minimum_power:
            lexer.roll_back(token)
            break

        rhs = parse_expression(lexer, right, depth + 1)
        lhs = _build(token, [lhs, rhs])

    return lhs


def parse(source: str) -> Expression:
    """Parse ``source`` into an expression tree.

    Example:
        >>> parse("2+3*4").expr()
        '(+ 2 (* 3 4))'

    Raises:
        ParseError: If the input cannot be tokenized or parsed
        ValidationError: If the input is too long or too deeply nested
    """
    check_input(source)
    try:
        lexer = Lexer(source)
        tree = parse_expression(lexer, 0.0)
        if not lexer.at_end():
            stray = lexer.peek()
            if stray.expr() == ")":
                raise UnmatchedParenthesisError("Unmatched ')'")
            raise UnexpectedTokenError(stray.expr())
    except ParseError as e:
        logger.debug("Failed to parse %r: %s", source, e)
        raise
    return tree
