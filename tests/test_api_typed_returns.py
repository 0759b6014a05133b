"""Test that API functions return typed dataclasses."""

import json

from prattcalc_pkg.api import evaluate, simplify, tabulate, validate_expression
from prattcalc_pkg.types import EvalResult, SampleResult


class TestAPITypedReturns:
    """Test that all API functions return typed dataclasses."""

    def test_evaluate_returns_eval_result(self):
        """Test that evaluate() returns EvalResult."""
        result = evaluate("2+3*4")
        assert isinstance(result, EvalResult)
        assert result.ok is True
        assert result.parsed == "(+ 2 (* 3 4))"
        assert result.folded == "14.0"
        assert result.result == "14"
        assert result.free_symbols == []

    def test_evaluate_error_returns_eval_result(self):
        """Test that evaluate() errors return EvalResult."""
        result = evaluate("(2+3")
        assert isinstance(result, EvalResult)
        assert result.ok is False
        assert result.error is not None
        assert result.error_code == "UNMATCHED_PAREN"

    def test_evaluate_with_bindings(self):
        result = evaluate("a+b", {"a": 3, "b": 2})
        assert result.ok is True
        assert result.result == "5"
        assert result.bound is True
        assert result.free_symbols == []

    def test_evaluate_partial_bindings(self):
        result = evaluate("a+b", {"a": 3})
        assert result.ok is True
        assert result.bound is False
        assert result.free_symbols == ["b"]
        assert result.folded == "(+ a b)"
        assert result.result == "3"

    def test_evaluate_strict(self):
        result = evaluate("a+1", strict=True)
        assert result.ok is False
        assert result.error_code == "UNBOUND_VARIABLE"

    def test_simplify_returns_eval_result(self):
        result = simplify("a+a")
        assert isinstance(result, EvalResult)
        assert result.ok is True
        assert result.result == "2*a"
        assert result.free_symbols == ["a"]

    def test_simplify_with_bindings(self):
        result = simplify("a*b", {"a": 2})
        assert result.result == "2*b"

    def test_simplify_error(self):
        result = simplify("2+")
        assert result.ok is False
        assert result.error_code == "UNEXPECTED_TOKEN"

    def test_tabulate_returns_sample_result(self):
        result = tabulate("1/x", "x", -1, 1, points=3, plot=False)
        assert isinstance(result, SampleResult)
        assert result.ok is True
        assert result.xs == [-1.0, 0.0, 1.0]
        assert result.ys == [-1.0, None, 1.0]
        assert result.plot is None

    def test_tabulate_plot(self):
        result = tabulate("x^2", points=21)
        assert result.ok is True
        assert "*" in result.plot

    def test_tabulate_bad_range(self):
        result = tabulate("x", "x", 5, 1)
        assert result.ok is False
        assert "Sampling error" in result.error

    def test_validate_expression(self):
        assert validate_expression("2 + 2") == (True, None)
        ok, message = validate_expression("(2+3")
        assert ok is False
        assert message == "Missing closing ')'"

    def test_to_dict_is_json_serializable(self):
        for result in (evaluate("a*2", {"a": 1}), evaluate(")"), tabulate("x", points=5)):
            json.dumps(result.to_dict())

    def test_to_dict_omits_unset_fields(self):
        data = evaluate("1/0").to_dict()
        assert data["ok"] is False
        assert "parsed" not in data
        assert data["error_code"] == "EVAL_ERROR"
