"""Thermodynamic state record written by the table fluid model."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class FluidState:
    """Current thermodynamic state of a table fluid.

    All properties in SI units.  Partial derivatives follow the
    ``d<X>d<y>_<held>`` naming, e.g. ``dPdrho_e`` is dP/drho at constant e.
    """

    density: float = 0.0  # kg/m³
    static_energy: float = 0.0  # J/kg
    pressure: float = 0.0  # Pa
    temperature: float = 0.0  # K
    sound_speed2: float = 0.0  # m²/s²
    dPdrho_e: float = 0.0
    dPde_rho: float = 0.0
    dTdrho_e: float = 0.0
    dTde_rho: float = 0.0
    cv: float = 0.0  # J/(kg·K)
    cp: float = 0.0  # J/(kg·K)
    entropy: float | None = None  # J/(kg·K), only with entropy evaluation enabled

    @property
    def sound_speed(self) -> float:
        """Speed of sound [m/s]; NaN if the tabulated a² is negative."""
        if self.sound_speed2 < 0.0:
            return math.nan
        return math.sqrt(self.sound_speed2)

    @property
    def gamma(self) -> float:
        """Ratio of specific heats cp/cv."""
        if self.cv == 0.0:
            return math.nan
        return self.cp / self.cv

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["sound_speed"] = self.sound_speed
        data["gamma"] = self.gamma
        return data
