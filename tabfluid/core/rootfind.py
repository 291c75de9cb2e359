"""Secant root finder used by every state inversion.

The table is only ever queried through bilinear interpolation, so no
derivative information is available; the secant method needs nothing but
function values and converges superlinearly on the piecewise-bilinear
residuals the evaluators produce.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from tabfluid.utils.constants import (
    SECANT_MAX_ITER,
    SECANT_PERTURBATION,
    SECANT_TOL,
    SECANT_ZERO_STEP,
)

logger = logging.getLogger(__name__)

ScalarFunction = Callable[[float], float]


@dataclass
class RootResult:
    """Outcome of a secant solve.

    ``root`` is the last point at which the function was evaluated and
    ``residual`` the function value there.
    """

    root: float
    residual: float
    iterations: int = 0
    function_calls: int = 0
    converged: bool = False


def secant_root(
    func: ScalarFunction,
    x0: float,
    tol: float = SECANT_TOL,
    max_iter: int = SECANT_MAX_ITER,
    perturbation: float = SECANT_PERTURBATION,
    zero_step: float = SECANT_ZERO_STEP,
) -> RootResult:
    """Find x with func(x) ≈ 0 by the secant method.

    The iteration is seeded at ``x0`` and ``x0 * perturbation`` (or
    ``x0 + zero_step`` when ``x0`` is exactly zero) and stops once
    ``|func(x)| <= tol * |x_next|`` or after ``max_iter`` iterations.
    A zero or non-finite secant slope ends the iteration early.

    Args:
        func: Scalar residual function.
        x0: Initial guess.
        tol: Residual tolerance, relative to the magnitude of the next iterate.
        max_iter: Iteration cap.
        perturbation: Multiplicative offset of the second seed.
        zero_step: Additive offset of the second seed when ``x0 == 0``.

    Returns:
        RootResult; ``converged`` is False when the cap or a degenerate
        step was hit.  Nothing is raised for non-convergence.
    """
    x = x0
    y = func(x)
    calls = 1
    x_next = x0 * perturbation if x0 != 0.0 else x0 + zero_step

    n = 0
    while abs(y) > tol * abs(x_next) and n < max_iter:
        y_next = func(x_next)
        calls += 1
        dy = y - y_next
        dx = x - x_next
        x, y = x_next, y_next
        n += 1

        if dy == 0.0 or not math.isfinite(dy):
            logger.debug("Secant slope degenerate at x=%g (dy=%g)", x, dy)
            break
        x_next = x_next - y_next * dx / dy
        if not math.isfinite(x_next):
            logger.debug("Secant step left the finite range from x=%g", x)
            break

    converged = math.isfinite(y) and abs(y) <= tol * abs(x_next)
    return RootResult(root=x, residual=y, iterations=n, function_calls=calls, converged=converged)
