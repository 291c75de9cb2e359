"""Tests for the bilinear table interpolator."""

import math

import numpy as np
import pytest
from scipy.interpolate import RegularGridInterpolator

from tabfluid.utils.interpolation import bilinear_interp_2d


@pytest.fixture
def linear_grid():
    """3x3 grid on [0, 2]² with z(i, j) = i + 2j."""
    i, j = np.meshgrid(np.arange(3.0), np.arange(3.0), indexing="ij")
    return i + 2.0 * j


class TestInterior:
    def test_cell_centre_is_corner_average(self, linear_grid):
        assert bilinear_interp_2d(0.5, 0.5, (0.0, 2.0), (0.0, 2.0), linear_grid) == pytest.approx(1.5)

    def test_grid_nodes_exact(self):
        rng = np.random.default_rng(7)
        z = rng.normal(size=(4, 5))
        for i in range(4):
            for j in range(5):
                value = bilinear_interp_2d(float(i), float(j), (0.0, 3.0), (0.0, 4.0), z)
                assert value == pytest.approx(z[i, j], rel=1e-12, abs=1e-12)

    def test_matches_reference_bilinear(self):
        rng = np.random.default_rng(11)
        x = np.linspace(1.0, 3.0, 6)
        y = np.linspace(-2.0, 5.0, 8)
        z = rng.uniform(0.0, 10.0, size=(6, 8))
        reference = RegularGridInterpolator((x, y), z, method="linear")
        for xi, yi in rng.uniform([1.0, -2.0], [3.0, 5.0], size=(25, 2)):
            expected = float(reference([[xi, yi]])[0])
            assert bilinear_interp_2d(xi, yi, (1.0, 3.0), (-2.0, 5.0), z) == pytest.approx(expected)

    def test_blend_of_four_corners(self):
        z = np.array([[1.0, 4.0], [2.0, 8.0]])
        # Weights (1-tx)(1-ty), (1-tx)ty, tx(1-ty), tx ty with tx=0.25, ty=0.5
        expected = 0.375 * 1.0 + 0.375 * 4.0 + 0.125 * 2.0 + 0.125 * 8.0
        assert bilinear_interp_2d(0.25, 0.5, (0.0, 1.0), (0.0, 1.0), z) == pytest.approx(expected)


class TestExtrapolation:
    @pytest.fixture
    def plane(self):
        x, y = np.meshgrid(np.linspace(0.0, 1.0, 3), np.linspace(0.0, 2.0, 5), indexing="ij")
        return 3.0 * x + 2.0 * y + 1.0

    @pytest.mark.parametrize("xi,yi", [(-1.0, 0.5), (2.5, 1.0), (0.5, -3.0), (0.5, 4.0), (-2.0, 7.0)])
    def test_linear_outside_grid(self, plane, xi, yi):
        value = bilinear_interp_2d(xi, yi, (0.0, 1.0), (0.0, 2.0), plane)
        assert value == pytest.approx(3.0 * xi + 2.0 * yi + 1.0)

    def test_not_clamped(self, plane):
        edge = bilinear_interp_2d(1.0, 1.0, (0.0, 1.0), (0.0, 2.0), plane)
        beyond = bilinear_interp_2d(1.5, 1.0, (0.0, 1.0), (0.0, 2.0), plane)
        assert beyond == pytest.approx(edge + 1.5)

    def test_uses_boundary_cell_gradient(self):
        # Curvature away from the boundary must not leak into extrapolation
        z = np.array([[0.0, 0.0], [1.0, 1.0], [5.0, 5.0]])
        value = bilinear_interp_2d(-1.0, 0.0, (0.0, 2.0), (0.0, 1.0), z)
        assert value == pytest.approx(-1.0)

    def test_non_finite_query(self, plane):
        assert math.isnan(bilinear_interp_2d(math.nan, 0.0, (0.0, 1.0), (0.0, 2.0), plane))
