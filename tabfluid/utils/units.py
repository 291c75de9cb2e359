"""Unit conversion utilities for tabfluid.

Provides a lightweight unit conversion layer built on top of pint, used by
the command line to accept state variables such as ``"20 bar"`` or
``"300 K"`` alongside plain SI numbers.
"""

from __future__ import annotations

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()

Q_ = _ureg.Quantity

# SI unit of each state variable the evaluator accepts
SI_UNITS = {
    "density": "kg/m**3",
    "energy": "J/kg",
    "pressure": "Pa",
    "temperature": "K",
    "enthalpy": "J/kg",
    "entropy": "J/(kg*K)",
}


def quantity_to_si(text: str, kind: str) -> float:
    """Convert a number or quantity string to the SI unit of *kind*.

    Args:
        text: Plain number (taken as SI) or a quantity such as ``"20 bar"``.
        kind: One of the keys of :data:`SI_UNITS`.

    Returns:
        Magnitude in SI units.

    Raises:
        KeyError: If *kind* is not a known state variable.
        pint.errors.DimensionalityError: If the unit does not match *kind*.
    """
    target = SI_UNITS[kind]
    try:
        return float(text)
    except ValueError:
        pass
    return Q_(text).to(target).magnitude
