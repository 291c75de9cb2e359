"""Tests for the secant root finder."""

import math

import pytest

from tabfluid.core.rootfind import secant_root


class TestSecantRoot:
    def test_sqrt_two(self):
        result = secant_root(lambda x: x * x - 2.0, 1.0)
        assert result.converged
        assert result.root == pytest.approx(math.sqrt(2.0), rel=1e-9)
        assert result.iterations < 20

    def test_linear_function(self):
        result = secant_root(lambda x: 4.0 * x - 10.0, 1.0)
        assert result.converged
        assert result.root == pytest.approx(2.5, rel=1e-12)

    def test_residual_reported(self):
        result = secant_root(lambda x: x**3 - 8.0, 1.5)
        assert result.residual == pytest.approx(result.root**3 - 8.0, abs=1e-12)

    def test_function_calls(self):
        result = secant_root(lambda x: x * x - 2.0, 1.0)
        assert result.function_calls == result.iterations + 1

    def test_iteration_cap(self):
        result = secant_root(lambda x: x * x - 2.0, 1.0, max_iter=2)
        assert result.iterations == 2
        assert not result.converged

    def test_no_real_root(self):
        result = secant_root(lambda x: x * x + 1.0, 1.0)
        assert not result.converged
        assert result.iterations <= 20

    def test_flat_function_stops(self):
        result = secant_root(lambda x: 1.0, 3.0)
        assert not result.converged
        assert result.iterations == 1
        assert math.isfinite(result.root)

    def test_zero_seed(self):
        result = secant_root(lambda x: x - 3.0, 0.0)
        assert result.converged
        assert result.root == pytest.approx(3.0)

    def test_nan_function(self):
        result = secant_root(lambda x: math.nan, 1.0)
        assert not result.converged

    def test_already_at_root(self):
        result = secant_root(lambda x: x - 2.0, 2.0)
        assert result.converged
        assert result.iterations == 0
        assert result.root == 2.0
