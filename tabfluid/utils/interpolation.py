"""Interpolation helpers for tabfluid."""

from __future__ import annotations

import math

import numpy as np


def bilinear_interp_2d(
    xi: float,
    yi: float,
    x_bounds: tuple[float, float],
    y_bounds: tuple[float, float],
    z: np.ndarray,
) -> float:
    """Bilinear interpolation on a uniformly spaced 2-D grid.

    The grid spans ``x_bounds`` with ``z.shape[0]`` points and ``y_bounds``
    with ``z.shape[1]`` points.  Queries outside the grid are extrapolated
    linearly from the nearest boundary cell rather than clamped.

    Args:
        xi: Query x-coordinate.
        yi: Query y-coordinate.
        x_bounds: (x_min, x_max) of the grid.
        y_bounds: (y_min, y_max) of the grid.
        z: Grid values with shape (Nx, Ny), Nx >= 2 and Ny >= 2.

    Returns:
        Interpolated (or extrapolated) value; NaN for a non-finite query.
    """
    nx, ny = z.shape

    # Fractional indices assuming equal spacing
    ix = (xi - x_bounds[0]) / (x_bounds[1] - x_bounds[0]) * (nx - 1)
    iy = (yi - y_bounds[0]) / (y_bounds[1] - y_bounds[0]) * (ny - 1)
    if not (math.isfinite(ix) and math.isfinite(iy)):
        return math.nan

    # Lower cell corner, clamped so that out-of-range indices extrapolate
    ixl = min(max(0, int(ix)), nx - 2)
    iyl = min(max(0, int(iy)), ny - 2)
    ixr = ixl + 1
    iyr = iyl + 1

    ty = iy - iyl
    z_left = z[ixl, iyl] + ty * (z[ixl, iyr] - z[ixl, iyl])
    z_right = z[ixr, iyl] + ty * (z[ixr, iyr] - z[ixr, iyl])
    return float(z_left + (ix - ixl) * (z_right - z_left))
