"""Tests for sampling and ASCII plots."""

import numpy as np
import pytest

from prattcalc_pkg.parser import parse
from prattcalc_pkg.sampling import ascii_plot, sample
from prattcalc_pkg.types import EvaluationError


class TestSample:
    """Test evaluating a tree over a range."""

    def test_linear(self):
        xs, ys = sample(parse("2*x+1"), "x", 0, 4, points=5)
        np.testing.assert_allclose(xs, [0, 1, 2, 3, 4])
        np.testing.assert_allclose(ys, [1, 3, 5, 7, 9])

    def test_domain_gaps_are_nan(self):
        xs, ys = sample(parse("1/x"), "x", -1, 1, points=3)
        assert np.isnan(ys[1])
        assert ys[0] == -1.0
        assert ys[2] == 1.0

    def test_other_symbols_keep_their_binding(self):
        tree = parse("a*x")
        tree.bind({"a": 10})
        _, ys = sample(tree, "x", 0, 1, points=2)
        np.testing.assert_allclose(ys, [0, 10])

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            sample(parse("x"), "x", 1, 0)
        with pytest.raises(ValueError):
            sample(parse("x"), "x", 0, 1, points=1)


class TestAsciiPlot:
    """Test ASCII rendering."""

    def test_dimensions(self):
        xs, ys = sample(parse("x^2"), "x", -5, 5, points=50)
        plot = ascii_plot(xs, ys, rows=10, cols=30)
        lines = plot.split("\n")
        assert len(lines) == 10
        assert all(len(line) == 30 for line in lines)
        assert "*" in plot

    def test_all_undefined(self):
        xs = np.linspace(0, 1, 5)
        ys = np.full(5, np.nan)
        with pytest.raises(EvaluationError):
            ascii_plot(xs, ys)
