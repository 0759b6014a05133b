"""Expression tree built by the parser.

A tree is made of ``AtomExpr`` leaves (numeric or symbolic atoms) and
``OperationExpr`` nodes holding one operator and one or two children.
Nodes are never modified after construction; folding returns new trees.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Mapping, Sequence

from . import config, operators
from .algebra import assign_algebra
from .logging_config import get_logger
from .tokens import NumericAtom, Operator, SymbolicAtom, Token, TokenType
from .types import UnboundVariableError, UnexpectedTokenError

logger = get_logger("expression")


class ExpressionType(Enum):
    ATOM = "atom"
    OPERATION = "operation"


class Expression:
    """Interface shared by leaves and operation nodes."""

    def type_of(self) -> ExpressionType:
        raise NotImplementedError

    def expr(self) -> str:
        """Canonical prefix rendering, e.g. ``(+ 2 (* 3 4))``."""
        raise NotImplementedError

    def eval(self) -> Expression:
        """Fold one level of constant sub-expressions into atoms."""
        raise NotImplementedError

    def value(self, strict: bool | None = None) -> float:
        """Evaluate to a float.

        Unbound symbols read as 0.0 unless ``strict`` (or the
        PRATTCALC_STRICT_SYMBOLS setting) is on, in which case
        UnboundVariableError is raised.
        """
        raise NotImplementedError

    def atoms(self) -> Iterator[Token]:
        """Yield the atom tokens of all leaves, left to right."""
        raise NotImplementedError

    def is_atom(self) -> bool:
        return self.type_of() is ExpressionType.ATOM

    def is_constant(self) -> bool:
        """True if no leaf is an unbound symbol."""
        return not any(
            isinstance(atom, SymbolicAtom) and not atom.is_bound for atom in self.atoms()
        )

    def symbols(self) -> list[str]:
        """Names of unbound symbols, in order of first appearance."""
        names: list[str] = []
        for atom in self.atoms():
            if isinstance(atom, SymbolicAtom) and not atom.is_bound and atom.name not in names:
                names.append(atom.name)
        return names

    def bind(self, mapping: Mapping[str, float]) -> bool:
        """Assign values to symbols; True if every symbol was in ``mapping``."""
        return assign_algebra(self, mapping)

    def fold_fully(self) -> Expression:
        """Apply ``eval`` until the rendering stops changing."""
        current = self
        while True:
            folded = current.eval()
            if folded.expr() == current.expr():
                return folded
            current = folded

    def depth(self) -> int:
        raise NotImplementedError

    def node_count(self) -> int:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.expr()


class AtomExpr(Expression):
    """Leaf wrapping a numeric or symbolic atom."""

    def __init__(self, atom: Token | str | float):
        if isinstance(atom, (str, int, float)):
            atom = NumericAtom(atom)
        if not atom.is_atom():
            raise UnexpectedTokenError(atom.expr(), f"Expected an atom, got {atom.expr()!r}")
        self._atom = atom

    @property
    def token(self) -> Token:
        return self._atom

    def type_of(self) -> ExpressionType:
        return ExpressionType.ATOM

    def expr(self) -> str:
        return self._atom.expr()

    def value(self, strict: bool | None = None) -> float:
        if strict is None:
            strict = config.STRICT_SYMBOLS
        if isinstance(self._atom, SymbolicAtom) and not self._atom.is_bound:
            if strict:
                raise UnboundVariableError(self._atom.name)
            logger.debug("Unbound symbol %r evaluated as 0.0", self._atom.name)
        return self._atom.value()

    def eval(self) -> Expression:
        return self

    def atoms(self) -> Iterator[Token]:
        yield self._atom

    def depth(self) -> int:
        return 1

    def node_count(self) -> int:
        return 1

    def __repr__(self) -> str:
        return f"AtomExpr({self._atom!r})"


class OperationExpr(Expression):
    """Operator applied to one or two sub-expressions."""

    def __init__(self, op: Operator, children: Sequence[Expression]):
        if op.type_of() is not TokenType.OPERATOR:
            raise UnexpectedTokenError(op.expr(), f"Expected an operator, got {op.expr()!r}")
        # resolves now so a tree can never hold an operator/arity pair without meaning
        operators.semantic_function(op.symbol, len(children))
        self._op = op
        self._children = tuple(children)
        self._depth = 1 + max(child.depth() for child in self._children)
        self._node_count = 1 + sum(child.node_count() for child in self._children)

    @property
    def operator(self) -> Operator:
        return self._op

    @property
    def children(self) -> tuple[Expression, ...]:
        return self._children

    def type_of(self) -> ExpressionType:
        return ExpressionType.OPERATION

    def all_atoms(self) -> bool:
        return all(child.is_atom() for child in self._children)

    def expr(self) -> str:
        rendered = " ".join(child.expr() for child in self._children)
        return f"({self._op.expr()} {rendered})"

    def value(self, strict: bool | None = None) -> float:
        values = [child.value(strict) for child in self._children]
        return operators.apply(self._op.symbol, values)

    def eval(self) -> Expression:
        if self.all_atoms() and self.is_constant():
            return AtomExpr(NumericAtom(self.value()))
        return OperationExpr(self._op, [child.eval() for child in self._children])

    def atoms(self) -> Iterator[Token]:
        for child in self._children:
            yield from child.atoms()

    def depth(self) -> int:
        return self._depth

    def node_count(self) -> int:
        return self._node_count

    def __repr__(self) -> str:
        return f"OperationExpr({self._op.expr()!r}, {list(self._children)!r})"
