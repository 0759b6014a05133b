"""Fuzzing tests for the lexer, parser and evaluator with random inputs."""

import random
import string
import unittest

from prattcalc_pkg.api import evaluate
from prattcalc_pkg.parser import parse
from prattcalc_pkg.types import CalculatorError, EvaluationError


def random_expression(rng, depth=0):
    """Fully parenthesized expression over + - * / on small integers."""
    if depth > 3 or rng.random() < 0.3:
        return str(rng.randint(0, 9))
    op = rng.choice("+-*/")
    return f"({random_expression(rng, depth + 1)}{op}{random_expression(rng, depth + 1)})"


class TestParserFuzzing(unittest.TestCase):
    """Fuzz test parser with random inputs."""

    def test_random_strings(self):
        """Random garbage either parses or raises a CalculatorError."""
        rng = random.Random(1234)
        for _ in range(300):
            length = rng.randint(1, 100)
            random_str = "".join(rng.choices(string.printable, k=length))
            try:
                parse(random_str).value()
            except CalculatorError:
                pass

    def test_random_operator_soup(self):
        rng = random.Random(99)
        alphabet = list("0123456789+-*/^!(). x") + ["sin", "cos", "tan", "sqrt"]
        for _ in range(300):
            source = "".join(rng.choices(alphabet, k=rng.randint(1, 30)))
            try:
                parse(source).value()
            except CalculatorError:
                pass

    def test_malformed_expressions(self):
        """Test parser rejects malformed expressions."""
        malformed = ["(((", ")))", "x+*y", "2^", "*/x", "", "   ", "()", "1..2"]
        for expr in malformed:
            with self.subTest(expr=expr):
                with self.assertRaises(CalculatorError):
                    parse(expr)

    def test_random_arithmetic_matches_python(self):
        rng = random.Random(7)
        for _ in range(200):
            source = random_expression(rng)
            try:
                expected = eval(source)  # noqa: S307 - digits and operators only
            except ZeroDivisionError:
                with self.assertRaises(EvaluationError):
                    parse(source).value()
                continue
            with self.subTest(source=source):
                self.assertAlmostEqual(parse(source).value(), expected, places=9)


class TestEvaluateFuzzing(unittest.TestCase):
    """Fuzz test evaluate() with edge-case inputs."""

    def test_edge_case_expressions(self):
        edge_cases = ["0", "1", "-1", "x", "-x", "x+1", "x*0", "x/1", "x^0", "x^1", "--1", "1!"]
        for expr in edge_cases:
            with self.subTest(expr=expr):
                result = evaluate(expr)
                self.assertTrue(result.ok, result.error)


if __name__ == "__main__":
    unittest.main()
