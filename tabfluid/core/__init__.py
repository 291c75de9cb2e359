"""Core modules of the table fluid model.

This package contains:
- saturation: Saturation energy correction curve
- table: Immutable lookup table on the (density, energy offset) grid
- rootfind: Secant root finder with convergence reporting
- state: Thermodynamic state record
- model: TableFluid property evaluators, inversions and state setters
- config: Model settings and JSON persistence
- errors: Exception hierarchy
"""

from tabfluid.core.config import ModelConfig
from tabfluid.core.errors import ConvergenceError, TableError, TableFluidError
from tabfluid.core.model import TableFluid
from tabfluid.core.saturation import SaturationCurve
from tabfluid.core.state import FluidState
from tabfluid.core.table import LookupTable

__all__ = [
    "ConvergenceError",
    "FluidState",
    "LookupTable",
    "ModelConfig",
    "SaturationCurve",
    "TableError",
    "TableFluid",
    "TableFluidError",
]
