from __future__ import annotations

import argparse
import json
import logging
import sys

from . import config
from .api import evaluate, simplify, tabulate
from .parser import format_number, is_balanced, parse
from .types import CalculatorError, EvalResult, SampleResult

logger = logging.getLogger(__name__)


def print_help_text() -> None:
    print("PrattCalc - precedence-climbing expression calculator")
    print()
    print("Enter an expression to see its parse tree and value:")
    print("  2+3*4          ->  (+ 2 (* 3 4))  = 14")
    print("  2^3^2          ->  right-associative power = 512")
    print("  -5, 10+-5      ->  unary minus")
    print("  sin(0), cos(0), tan(0), sqrt(16), 27 sqrt 3 (n-th root)")
    print("  5!             ->  factorial (0! is 0 in this calculator)")
    print()
    print("Commands:")
    print("  let a = 3      bind a symbol for the rest of the session")
    print("  vars           list bound symbols")
    print("  help           show this text")
    print("  q, quit, exit  leave")


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running PrattCalc health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    try:
        import numpy

        print(f"[OK] NumPy {numpy.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] NumPy import failed: {e}")
        checks_failed += 1

    try:
        value = parse("2+3*4").value()
        if value == 14.0:
            print("[OK] Basic parsing works")
            checks_passed += 1
        else:
            print(f"[FAIL] Basic parsing failed: expected 14, got {value}")
            checks_failed += 1
    except CalculatorError as e:
        print(f"[FAIL] Parsing check failed: {e}")
        checks_failed += 1

    result = simplify("a+a")
    if result.ok and result.result == "2*a":
        print("[OK] Symbolic simplification works")
        checks_passed += 1
    else:
        print(f"[FAIL] Simplification check failed: {result}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(res: EvalResult | SampleResult, output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Result object
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print("Error:", res.error)
        return
    if isinstance(res, SampleResult):
        if res.plot:
            print(res.plot)
        for x, y in zip(res.xs or [], res.ys or []):
            shown = "undefined" if y is None else format_number(y)
            print(f"{res.variable} = {format_number(x)}: {shown}")
        return
    if res.parsed:
        print(f"Parse: {res.parsed}")
    if res.free_symbols and res.folded:
        print(f"Folded: {res.folded}")
    if res.free_symbols:
        print(f"Free symbols: {', '.join(res.free_symbols)}")
    if res.bound is False:
        print("Warning: not every symbol was bound")
    print(res.result)


def _describe_error(line: str, error: CalculatorError) -> str:
    message = f"[Error] {error}"
    balanced, position = is_balanced(line)
    if not balanced and position is not None:
        message += f"\n        {line}\n        {' ' * position}^"
    return message


def handle_line(line: str, session: dict[str, float]) -> str:
    """Process one REPL line and return the text to show.

    ``let name = expr`` stores a binding in ``session``; anything else is
    parsed, bound against ``session`` and echoed with its tree and value.
    """
    line = line.strip()
    if line == "vars":
        if not session:
            return "No variables bound."
        return "\n".join(f"{name} = {format_number(v)}" for name, v in sorted(session.items()))

    let_match = config.LET_RE.match(line)
    try:
        if let_match:
            name, source = let_match.groups()
            tree = parse(source)
            tree.bind(session)
            session[name] = tree.value(strict=True)
            return f"{name} = {format_number(session[name])}"

        tree = parse(line)
        tree.bind(session)
        return f"[Echo] {line}\n[Parse] {tree.expr()}\n[Eval] {format_number(tree.value())}"
    except CalculatorError as e:
        logger.debug("REPL input %r failed: %s", line, e)
        return _describe_error(line, e)


def repl_loop(output_format: str = "human", bindings: dict[str, float] | None = None) -> None:
    """Interactive REPL loop."""
    try:
        import readline  # noqa: F401
    except (ImportError, ModuleNotFoundError):
        # readline not available on Windows - that's fine
        pass

    session: dict[str, float] = dict(bindings or {})
    print("PrattCalc - type 'help' for commands, 'quit' to exit.")
    while True:
        try:
            raw = input(config.REPL_PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not raw:
            continue
        if raw.lower() in config.QUIT_COMMANDS:
            print("Goodbye.")
            break
        if raw == "help":
            print_help_text()
            continue
        if output_format == "json" and not config.LET_RE.match(raw) and raw != "vars":
            print_result_pretty(evaluate(raw, session), output_format)
            continue
        print(handle_line(raw, session))


def _parse_bindings(pairs: list[str]) -> dict[str, float]:
    bindings: dict[str, float] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        name = name.strip()
        if not sep or not config.VAR_NAME_RE.match(name):
            raise ValueError(f"Invalid binding {pair!r}, expected NAME=VALUE")
        bindings[name] = float(value)
    return bindings


def _parse_range(text: str) -> tuple[str, float, float, int | None]:
    parts = text.split(":")
    if len(parts) not in (3, 4):
        raise ValueError(f"Invalid range {text!r}, expected VAR:MIN:MAX[:POINTS]")
    points = int(parts[3]) if len(parts) == 4 else None
    return parts[0], float(parts[1]), float(parts[2]), points


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for PrattCalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="prattcalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "-b",
        "--bind",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Bind a symbol before evaluating (repeatable)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unbound symbols instead of reading them as 0",
    )
    parser.add_argument(
        "--simplify",
        action="store_true",
        help="Simplify the expression symbolically instead of evaluating it",
    )
    parser.add_argument(
        "--tabulate",
        type=str,
        metavar="VAR:MIN:MAX[:POINTS]",
        help="Sample the expression over a range and draw an ASCII plot",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)
    if args.strict:
        config.STRICT_SYMBOLS = True

    if args.version:
        print(config.VERSION)
        return 0
    if args.health_check:
        return _health_check()

    try:
        bindings = _parse_bindings(args.bind)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if args.eval_expr is None:
        repl_loop(args.format, bindings)
        return 0

    expr = args.eval_expr.strip()
    if not expr:
        print("Error: Empty input. Please enter a valid expression.")
        return 1

    result: EvalResult | SampleResult
    if args.tabulate:
        try:
            variable, x_min, x_max, points = _parse_range(args.tabulate)
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        result = tabulate(expr, variable, x_min, x_max, points, bindings=bindings)
    elif args.simplify:
        result = simplify(expr, bindings)
    else:
        result = evaluate(expr, bindings)

    print_result_pretty(result, args.format)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main_entry())
