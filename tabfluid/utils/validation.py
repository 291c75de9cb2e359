"""Sanity checks for evaluated fluid states.

The model never raises for extrapolated or degenerate results; callers use
these checks to decide whether a state is usable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tabfluid.core.saturation import SaturationCurve
    from tabfluid.core.state import FluidState
    from tabfluid.core.table import LookupTable


class Severity(Enum):
    """Severity level for validation messages."""

    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str


@dataclass
class ValidationResult:
    """Findings of one state check."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def error(self, parameter: str, message: str) -> None:
        self.messages.append(ValidationMessage(Severity.ERROR, parameter, message))

    def warning(self, parameter: str, message: str) -> None:
        self.messages.append(ValidationMessage(Severity.WARNING, parameter, message))


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is strictly positive."""
    if not value > 0:
        result.error(name, f"{name} must be positive, got {value}")


def validate_state(
    state: FluidState,
    table: LookupTable | None = None,
    saturation: SaturationCurve | None = None,
) -> ValidationResult:
    """Check an evaluated state for values a flow solver cannot use.

    Non-finite values, non-positive density/pressure/temperature and a
    negative squared sound speed are errors.  With a table and saturation
    curve, a state outside the tabulated envelope (i.e. extrapolated) is a
    warning.
    """
    result = ValidationResult()

    for name, value in state.to_dict().items():
        if name in ("sound_speed", "gamma") or value is None:
            continue
        if not math.isfinite(value):
            result.error(name, f"{name} is not finite")

    for name in ("density", "pressure", "temperature"):
        value = getattr(state, name)
        if math.isfinite(value):
            validate_positive(name, value, result)

    if state.sound_speed2 < 0.0:
        result.error(
            "sound_speed2", f"Squared sound speed is negative ({state.sound_speed2:g})"
        )

    if table is not None and saturation is not None and math.isfinite(state.density):
        de = state.static_energy - saturation.energy(state.density)
        if not table.contains(state.density, de):
            result.warning(
                "envelope",
                f"State (rho={state.density:g}, de={de:g}) lies outside the table "
                f"(rho {table.rho_range}, de {table.de_range}); values are extrapolated",
            )

    return result
