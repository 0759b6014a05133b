"""Algebra binding: assign numeric values to symbols of a parsed tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from .logging_config import get_logger
from .tokens import SymbolicAtom

if TYPE_CHECKING:
    from .expression import Expression

logger = get_logger("algebra")


def assign_algebra(tree: Expression, mapping: Mapping[str, float]) -> bool:
    """Bind every symbolic atom of ``tree`` whose name appears in ``mapping``.

    Args:
        tree: Parsed expression tree
        mapping: Symbol name -> numeric value

    Returns:
        True if every symbol was found in ``mapping``. Assignments made before
        a missing name is seen are kept.
    """
    resolved = True
    for atom in tree.atoms():
        if not isinstance(atom, SymbolicAtom):
            continue
        if atom.name in mapping:
            atom.assign(mapping[atom.name])
        else:
            logger.debug("No value for symbol %r", atom.name)
            resolved = False
    return resolved


def make_assignment_map(*pairs: Any) -> dict[str, float]:
    """Build a mapping from alternating names and values.

    Example:
        >>> make_assignment_map("a", 3, "b", 2)
        {'a': 3.0, 'b': 2.0}
    """
    if len(pairs) % 2:
        raise ValueError("make_assignment_map expects name/value pairs")
    mapping: dict[str, float] = {}
    for name, value in zip(pairs[::2], pairs[1::2]):
        if not isinstance(name, str):
            raise ValueError(f"Symbol name must be a string, got {name!r}")
        mapping[name] = float(value)
    return mapping
