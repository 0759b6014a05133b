"""Sample an expression over a range of one variable and draw it as ASCII."""

from __future__ import annotations

import numpy as np

from . import config
from .expression import Expression
from .tokens import SymbolicAtom
from .types import EvaluationError


def sample(
    tree: Expression,
    variable: str,
    x_min: float,
    x_max: float,
    points: int | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Evaluate ``tree`` at evenly spaced values of ``variable``.

    The symbol is re-bound for every point; other symbols keep whatever
    value they already have. Points where evaluation fails are NaN.

    Args:
        tree: Parsed expression tree
        variable: Symbol to vary
        x_min: First sample
        x_max: Last sample
        points: Number of samples (default: SAMPLE_POINTS)

    Returns:
        Tuple of (xs, ys) numpy arrays
    """
    if points is None:
        points = config.SAMPLE_POINTS
    if points < 2:
        raise ValueError("At least two sample points are required")
    if x_max <= x_min:
        raise ValueError("x_max must be greater than x_min")

    targets = [
        atom
        for atom in tree.atoms()
        if isinstance(atom, SymbolicAtom) and atom.name == variable
    ]
    xs = np.linspace(x_min, x_max, points)
    ys = np.full(points, np.nan)
    for i, x in enumerate(xs):
        for atom in targets:
            atom.assign(float(x))
        try:
            ys[i] = tree.value()
        except EvaluationError:
            # domain gap, left as NaN
            continue
    return xs, ys


def ascii_plot(
    xs: np.ndarray,
    ys: np.ndarray,
    rows: int | None = None,
    cols: int | None = None,
) -> str:
    """Render sampled points as a character grid with axes.

    Raises:
        EvaluationError: If no sample has a finite value
    """
    rows = rows or config.PLOT_ROWS
    cols = cols or config.PLOT_COLS

    finite = np.isfinite(ys) & (np.abs(ys) < 1e10)
    if not finite.any():
        raise EvaluationError("Cannot plot: function values out of range")

    x_min, x_max = float(xs[0]), float(xs[-1])
    y_min, y_max = float(ys[finite].min()), float(ys[finite].max())
    y_range = y_max - y_min if y_max != y_min else 1.0

    grid = [[" " for _ in range(cols)] for _ in range(rows)]
    for x, y in zip(xs[finite], ys[finite]):
        col = int((x - x_min) / (x_max - x_min) * (cols - 1))
        row = int((y - y_min) / y_range * (rows - 1))
        grid[max(0, min(rows - 1, row))][max(0, min(cols - 1, col))] = "*"

    x_axis_row = int((0 - y_min) / y_range * (rows - 1)) if y_min <= 0 <= y_max else -1
    y_axis_col = (
        int((0 - x_min) / (x_max - x_min) * (cols - 1)) if x_min <= 0 <= x_max else -1
    )

    lines = []
    # row 0 of the grid is the lowest y, so draw top-down
    for r in range(rows - 1, -1, -1):
        line = []
        for c in range(cols):
            if grid[r][c] == "*":
                line.append("*")
            elif r == x_axis_row and c == y_axis_col:
                line.append("+")
            elif r == x_axis_row:
                line.append("-")
            elif c == y_axis_col:
                line.append("|")
            else:
                line.append(" ")
        lines.append("".join(line))
    return "\n".join(lines)
