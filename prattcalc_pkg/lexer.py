"""Lexer: turns a source string into a stream of tokens.

Tokenizing happens in passes over a list of tokens:
- scan characters into one-character tokens
- merge runs of digits into numeric atoms
- merge ``<number> . <number>`` into decimal literals
- merge runs of letters into symbolic names
- re-type symbolic names that spell an operator (``sin``, ``sqrt``, ...)

Every pass returns a new list. The finished sequence is exposed through
``Lexer``, a pull stream with single-token pushback.
"""

from __future__ import annotations

import string
from typing import Callable, Iterator, TypeVar

from . import operators
from .logging_config import get_logger
from .tokens import (
    EndMarker,
    NumericAtom,
    Operator,
    SymbolicAtom,
    Token,
    TokenType,
)
from .types import UnexpectedTokenError

logger = get_logger("lexer")

T = TypeVar("T", bound=Token)


def scan(source: str) -> list[Token]:
    """Classify each non-space character as an operator, digit or symbol."""
    items: list[Token] = []
    for char in source:
        if char.isspace():
            continue
        if operators.is_operator(char):
            items.append(Operator(char))
        elif char in string.digits:
            items.append(NumericAtom(char))
        else:
            items.append(SymbolicAtom(char))
    return items


def _merge_adjacent(
    items: list[Token], kind: TokenType, merge: Callable[[T, T], T]
) -> list[Token]:
    merged: list[Token] = []
    for item in items:
        if merged and merged[-1].type_of() is kind and item.type_of() is kind:
            merge(merged[-1], item)  # type: ignore[arg-type]
        else:
            merged.append(item)
    return merged


def merge_numeric_atoms(items: list[Token]) -> list[Token]:
    return _merge_adjacent(items, TokenType.NUMERIC, NumericAtom.merge_with)


def merge_decimal_points(items: list[Token]) -> list[Token]:
    """Join ``NumericAtom '.' NumericAtom`` triples into one decimal literal."""
    merged: list[Token] = []
    for item in items:
        if (
            item.type_of() is TokenType.NUMERIC
            and len(merged) >= 2
            and merged[-1].type_of() is TokenType.OPERATOR
            and merged[-1].expr() == "."
            and merged[-2].type_of() is TokenType.NUMERIC
        ):
            merged.pop()
            merged[-1].dot_point(item)  # type: ignore[attr-defined]
        else:
            merged.append(item)
    return merged


def merge_symbolic_atoms(items: list[Token]) -> list[Token]:
    """Merge letter runs into names, then let names absorb trailing digits.

    ``x0`` becomes one symbol; ``sin2`` stays ``sin`` followed by ``2`` so the
    operator can still be recognized.
    """
    merged = _merge_adjacent(items, TokenType.SYMBOLIC, SymbolicAtom.merge_with)
    result: list[Token] = []
    for item in merged:
        if (
            item.type_of() is TokenType.NUMERIC
            and item.expr().isdigit()
            and result
            and result[-1].type_of() is TokenType.SYMBOLIC
            and not operators.is_operator(result[-1].expr())
        ):
            result[-1].merge_with(item)  # type: ignore[attr-defined]
        else:
            result.append(item)
    return result


def reclassify_operators(items: list[Token]) -> list[Token]:
    """Replace symbolic atoms that spell an operator with Operator tokens."""
    return [
        Operator(item.expr())
        if item.type_of() is TokenType.SYMBOLIC and operators.is_operator(item.expr())
        else item
        for item in items
    ]


def tokenize(source: str) -> list[Token]:
    """Return the tokens of ``source`` in reading order, ending with an EndMarker."""
    items = scan(source)
    items = merge_numeric_atoms(items)
    items = merge_decimal_points(items)
    items = merge_symbolic_atoms(items)
    items = reclassify_operators(items)
    items.append(EndMarker())
    logger.debug("Tokenized %r into %d tokens", source, len(items))
    return items


class Lexer:
    """Pull stream over the tokens of a source string.

    Tokens are kept on a stack whose top is the next token to read, so any
    token can be pushed back with ``roll_back``.
    """

    def __init__(self, source: str):
        self._tokens: list[Token] = tokenize(source)
        self._tokens.reverse()

    def next(self) -> Token:
        if not self._tokens:
            raise UnexpectedTokenError("<Eof>", "Unexpected end of input")
        return self._tokens.pop()

    def peek(self) -> Token:
        if not self._tokens:
            raise UnexpectedTokenError("<Eof>", "Unexpected end of input")
        return self._tokens[-1]

    def roll_back(self, token: Token) -> None:
        self._tokens.append(token)

    def at_end(self) -> bool:
        return not self._tokens or self._tokens[-1].type_of() is TokenType.END

    def to_list(self) -> list[Token]:
        """Remaining tokens in reading order."""
        return list(reversed(self._tokens))

    def expr(self) -> str:
        return "\n".join(token.expr() for token in self.to_list())

    def __iter__(self) -> Iterator[Token]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self._tokens)
