"""Public API for PrattCalc - returns structured objects without side effects."""

from __future__ import annotations

from typing import Mapping

from .logging_config import get_logger
from .parser import format_number, parse
from .sampling import ascii_plot, sample
from .symbolic import simplify_tree
from .types import CalculatorError, EvalResult, SampleResult

logger = get_logger("api")


def evaluate(
    expression: str,
    bindings: Mapping[str, float] | None = None,
    strict: bool | None = None,
) -> EvalResult:
    """Parse, optionally bind, fold and evaluate an expression.

    Args:
        expression: Expression string (e.g., "2+3*4", "a^2 + b")
        bindings: Optional symbol values (e.g., {"a": 3, "b": 2})
        strict: Raise on unbound symbols instead of reading them as 0.0

    Returns:
        EvalResult with the prefix rendering, the folded tree and the value

    Example:
        >>> from prattcalc_pkg.api import evaluate
        >>> result = evaluate("2+3*4")
        >>> print(result.parsed, result.result)
        (+ 2 (* 3 4)) 14
        >>> evaluate("a+b", {"a": 3, "b": 2}).result
        '5'
    """
    try:
        tree = parse(expression)
        bound = tree.bind(bindings) if bindings else None
        folded = tree.fold_fully()
        return EvalResult(
            ok=True,
            parsed=tree.expr(),
            folded=folded.expr(),
            result=format_number(tree.value(strict)),
            free_symbols=tree.symbols(),
            bound=bound,
        )
    except CalculatorError as e:
        return EvalResult(ok=False, error=str(e), error_code=e.code)
    except Exception as e:
        logger.error(f"Unexpected evaluation error: {e}", exc_info=True)
        return EvalResult(ok=False, error="Evaluation failed unexpectedly", error_code="INTERNAL")


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Validate an expression without evaluating it.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from prattcalc_pkg.api import validate_expression
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("(2+3")
        (False, "Missing closing ')'")
    """
    try:
        parse(expression)
        return True, None
    except CalculatorError as e:
        return False, str(e)


def simplify(expression: str, bindings: Mapping[str, float] | None = None) -> EvalResult:
    """Simplify an expression symbolically with SymPy.

    Example:
        >>> from prattcalc_pkg.api import simplify
        >>> simplify("a*a + 2*a*a").result
        '3*a**2'
    """
    try:
        tree = parse(expression)
        if bindings:
            tree.bind(bindings)
        simplified = simplify_tree(tree)
        return EvalResult(
            ok=True,
            parsed=tree.expr(),
            result=str(simplified),
            free_symbols=sorted(str(s) for s in simplified.free_symbols),
        )
    except CalculatorError as e:
        return EvalResult(ok=False, error=str(e), error_code=e.code)
    except (TypeError, ValueError, AttributeError) as e:
        logger.warning(f"Simplification failed for {expression!r}: {e}", exc_info=True)
        return EvalResult(ok=False, error=f"Simplification error: {e}", error_code="SIMPLIFY_ERROR")


def tabulate(
    expression: str,
    variable: str = "x",
    x_min: float = -10,
    x_max: float = 10,
    points: int | None = None,
    plot: bool = True,
    bindings: Mapping[str, float] | None = None,
) -> SampleResult:
    """Sample an expression over a range of one variable.

    Args:
        expression: Expression containing ``variable``
        variable: Symbol to vary
        x_min: Start of the range
        x_max: End of the range
        points: Number of samples
        plot: Also render an ASCII plot
        bindings: Values for the other symbols

    Returns:
        SampleResult with x values, y values (None where undefined) and plot
    """
    try:
        tree = parse(expression)
        if bindings:
            tree.bind(bindings)
        xs, ys = sample(tree, variable, x_min, x_max, points)
        plot_text = ascii_plot(xs, ys) if plot else None
        return SampleResult(
            ok=True,
            variable=variable,
            xs=[float(x) for x in xs],
            ys=[float(y) if y == y else None for y in ys],
            plot=plot_text,
        )
    except CalculatorError as e:
        return SampleResult(ok=False, variable=variable, error=str(e))
    except ValueError as e:
        return SampleResult(ok=False, variable=variable, error=f"Sampling error: {e}")
