"""Lookup table container.

Holds the tabulated fluid fields sampled on a uniform grid of density and
saturation-corrected energy offset.  Tables are produced elsewhere; this
module only wraps the arrays, checks their shapes and freezes them so one
table can be shared by any number of models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

import numpy as np

from tabfluid.core.errors import TableError
from tabfluid.core.saturation import SaturationCurve
from tabfluid.utils.constants import FIELD_NAMES
from tabfluid.utils.interpolation import bilinear_interp_2d


def _axis_bounds(name: str, values: Any) -> tuple[float, float]:
    bounds = np.asarray(values, dtype=float).ravel()
    if bounds.size != 2:
        raise TableError(f"Axis '{name}' needs (min, max), got {bounds.size} values")
    if not bounds[1] > bounds[0]:
        raise TableError(f"Axis '{name}' must be increasing, got {tuple(bounds)}")
    return float(bounds[0]), float(bounds[1])


@dataclass(frozen=True, eq=False)
class LookupTable:
    """Fluid property table on a uniform (density, energy offset) grid.

    Args:
        rho_range: (min, max) of the density axis [kg/m³].
        de_range: (min, max) of the energy-offset axis [J/kg].
        nx: Number of density grid points.
        ny: Number of energy-offset grid points.
        fields: Mapping of field name to a read-only (nx, ny) array.
    """

    rho_range: tuple[float, float]
    de_range: tuple[float, float]
    nx: int
    ny: int
    fields: Mapping[str, np.ndarray] = field(repr=False)

    @classmethod
    def from_arrays(
        cls,
        rho_range: Any,
        de_range: Any,
        fields: Mapping[str, Any],
        shape: tuple[int, int] | None = None,
    ) -> LookupTable:
        """Build a table from raw field arrays.

        Fields may be given as (Nx, Ny) arrays or flattened row-major
        (density index major).  Flattened fields need ``shape`` unless at
        least one field is already two-dimensional.

        Raises:
            TableError: On missing fields, inconsistent shapes or a grid
                smaller than 2x2.
        """
        rho_bounds = _axis_bounds("rho", rho_range)
        de_bounds = _axis_bounds("de", de_range)

        missing = [name for name in FIELD_NAMES if name not in fields]
        if missing:
            raise TableError(f"Table is missing fields: {missing}")

        arrays = {name: np.asarray(fields[name], dtype=float) for name in FIELD_NAMES}
        if shape is None:
            two_d = [a.shape for a in arrays.values() if a.ndim == 2]
            if not two_d:
                raise TableError("Grid shape is required for flattened fields")
            shape = two_d[0]
        nx, ny = int(shape[0]), int(shape[1])
        if nx < 2 or ny < 2:
            raise TableError(f"Grid must be at least 2x2, got {nx}x{ny}")

        frozen: dict[str, np.ndarray] = {}
        for name, arr in arrays.items():
            if arr.size != nx * ny:
                raise TableError(
                    f"Field '{name}' has {arr.size} values, expected {nx}x{ny}"
                )
            grid = arr.reshape(nx, ny).copy()
            grid.setflags(write=False)
            frozen[name] = grid

        return cls(rho_bounds, de_bounds, nx, ny, MappingProxyType(frozen))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> tuple[LookupTable, SaturationCurve]:
        """Build a table and its saturation curve from a keyed archive.

        The mapping holds ``rho`` and ``de`` axis bounds, ``esat`` (four
        saturation coefficients), optionally ``shape``, and one array per
        field name.  An opened ``.npz`` archive works directly.
        """
        for key in ("rho", "de", "esat"):
            if key not in data:
                raise TableError(f"Table archive is missing '{key}'")
        shape = None
        if "shape" in data:
            shape_arr = np.asarray(data["shape"]).ravel()
            shape = (int(shape_arr[0]), int(shape_arr[1]))
        fields = {name: data[name] for name in FIELD_NAMES if name in data}
        table = cls.from_arrays(data["rho"], data["de"], fields, shape=shape)
        return table, SaturationCurve.from_coefficients(data["esat"])

    @property
    def rho_min(self) -> float:
        return self.rho_range[0]

    @property
    def de_min(self) -> float:
        return self.de_range[0]

    def contains(self, rho: float, de: float) -> bool:
        """True if (rho, de) lies inside the tabulated envelope."""
        return (
            self.rho_range[0] <= rho <= self.rho_range[1]
            and self.de_range[0] <= de <= self.de_range[1]
        )

    def interpolate(self, name: str, rho: float, de: float) -> float:
        """Interpolate field *name* at (rho, de), extrapolating outside the grid."""
        return bilinear_interp_2d(rho, de, self.rho_range, self.de_range, self.fields[name])

    def axes(self) -> tuple[np.ndarray, np.ndarray]:
        """Grid coordinates of the density and energy-offset axes."""
        return (
            np.linspace(self.rho_range[0], self.rho_range[1], self.nx),
            np.linspace(self.de_range[0], self.de_range[1], self.ny),
        )
