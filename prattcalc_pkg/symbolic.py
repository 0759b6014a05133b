"""SymPy bridge for parsed expression trees.

Converts a tree into a SymPy expression so symbolic results (terms that
still contain unbound symbols) can be simplified and inspected.
"""

from __future__ import annotations

import operator

import sympy as sp

from .expression import AtomExpr, Expression, OperationExpr
from .tokens import NumericAtom, SymbolicAtom


class recursive_factorial(sp.Function):
    """Factorial with 0 -> 0, matching the numeric evaluator."""

    @classmethod
    def eval(cls, n):
        if n.is_Integer and n.is_nonnegative:
            if n.is_zero:
                return sp.Integer(0)
            return sp.factorial(n)
        return None


def _root(a, b):
    return a ** (sp.Integer(1) / b)


_UNARY = {
    "-": operator.neg,
    "sin": sp.sin,
    "cos": sp.cos,
    "tan": sp.tan,
    "sqrt": sp.sqrt,
    "!": recursive_factorial,
}

_BINARY = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": operator.pow,
    "sqrt": _root,
}


def _number(value: float) -> sp.Expr:
    if value == value and abs(value) != float("inf") and value.is_integer():
        return sp.Integer(int(value))
    return sp.Float(value)


def to_sympy(tree: Expression) -> sp.Expr:
    """Convert an expression tree into a SymPy expression.

    Numeric atoms become Integer/Float, bound symbols become their value and
    unbound symbols become ``sp.Symbol``.
    """
    if isinstance(tree, AtomExpr):
        atom = tree.token
        if isinstance(atom, SymbolicAtom):
            if atom.is_bound:
                return _number(atom.value())
            return sp.Symbol(atom.name)
        if isinstance(atom, NumericAtom):
            return _number(atom.value())
        raise TypeError(f"Unsupported atom {atom!r}")
    if isinstance(tree, OperationExpr):
        args = [to_sympy(child) for child in tree.children]
        table = _UNARY if len(args) == 1 else _BINARY
        return table[tree.operator.symbol](*args)
    raise TypeError(f"Unsupported expression node {tree!r}")


def simplify_tree(tree: Expression) -> sp.Expr:
    """Return ``sp.simplify`` of the tree's SymPy form."""
    return sp.simplify(to_sympy(tree))


def free_symbol_names(tree: Expression) -> list[str]:
    """Sorted names of the symbols the SymPy form still depends on.

    Unlike ``Expression.symbols`` this drops symbols that cancel, e.g. ``a-a``.
    """
    return sorted(str(symbol) for symbol in simplify_tree(tree).free_symbols)
