"""Saturation energy correction.

The lookup table is not indexed by static energy directly but by the offset
of the energy from a saturation-like curve, which straightens the table
along the two-phase boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from tabfluid.core.errors import TableError
from tabfluid.utils.constants import ONE2, ONE3


@dataclass(frozen=True)
class SaturationCurve:
    """Energy offset curve ``esat(rho) = c0 + c1*rho + c2*rho^(1/2) + c3*rho^(1/3)``."""

    c0: float = 0.0
    c1: float = 0.0
    c2: float = 0.0
    c3: float = 0.0

    @classmethod
    def from_coefficients(cls, coefficients: Sequence[float]) -> SaturationCurve:
        """Build from a 4-element coefficient vector.

        Raises:
            TableError: If the vector does not hold exactly four values.
        """
        coefs = np.asarray(coefficients, dtype=float).ravel()
        if coefs.size != 4:
            raise TableError(
                f"Saturation curve needs 4 coefficients, got {coefs.size}"
            )
        return cls(*(float(c) for c in coefs))

    @property
    def coefficients(self) -> tuple[float, float, float, float]:
        return (self.c0, self.c1, self.c2, self.c3)

    def energy(self, rho: float) -> float:
        """Saturation energy offset [J/kg] at density rho [kg/m³].

        Fractional powers of a negative density are undefined and give NaN.
        """
        rho = np.float64(rho)
        with np.errstate(invalid="ignore"):
            offset = self.c0 + self.c1 * rho + self.c2 * rho**ONE2 + self.c3 * rho**ONE3
        return float(offset)
