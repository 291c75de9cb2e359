"""tabfluid — real-fluid state evaluation from a (density, energy) lookup table."""

__app_name__ = "tabfluid"
__version__ = "0.1.0"

from tabfluid.core import (  # noqa: E402
    ConvergenceError,
    FluidState,
    LookupTable,
    ModelConfig,
    SaturationCurve,
    TableError,
    TableFluid,
    TableFluidError,
)

__all__ = [
    "ConvergenceError",
    "FluidState",
    "LookupTable",
    "ModelConfig",
    "SaturationCurve",
    "TableError",
    "TableFluid",
    "TableFluidError",
    "__app_name__",
    "__version__",
]
