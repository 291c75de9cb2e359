"""Shared fixtures: an ideal-gas table sampled on the (rho, de) grid.

Every field of the ideal gas is bilinear in (rho, de), so interpolation and
linear extrapolation reproduce it exactly and round trips are well posed.
"""

import numpy as np
import pytest

from tabfluid.core.model import TableFluid
from tabfluid.core.saturation import SaturationCurve
from tabfluid.core.table import LookupTable

GAMMA = 1.4
CV = 718.0
CP = GAMMA * CV
RHO_RANGE = (0.5, 5.0)
DE_RANGE = (1.0e5, 5.0e5)


def ideal_gas_arrays(nx: int = 10, ny: int = 9) -> dict[str, np.ndarray]:
    """Flattened (row-major, density index major) ideal-gas fields."""
    rho = np.linspace(*RHO_RANGE, nx)
    de = np.linspace(*DE_RANGE, ny)
    R, D = np.meshgrid(rho, de, indexing="ij")
    fields = {
        "P": (GAMMA - 1.0) * R * D,
        "T": D / CV,
        "h": GAMMA * D,
        "s": 0.01 * D - 500.0 * R,
        "cv": np.full_like(R, CV),
        "cp": np.full_like(R, CP),
        "a2": GAMMA * (GAMMA - 1.0) * D,
        "dPdrho_e": (GAMMA - 1.0) * D,
        "dPde_rho": (GAMMA - 1.0) * R,
        "dTdrho_e": np.zeros_like(R),
        "dTde_rho": np.full_like(R, 1.0 / CV),
    }
    return {name: values.ravel() for name, values in fields.items()}


@pytest.fixture
def ideal_table():
    return LookupTable.from_arrays(RHO_RANGE, DE_RANGE, ideal_gas_arrays(), shape=(10, 9))


@pytest.fixture
def flat_saturation():
    return SaturationCurve()


@pytest.fixture
def curved_saturation():
    return SaturationCurve(1.0e4, 2.0e3, 3.0e3, 1.0e3)


@pytest.fixture
def fluid(ideal_table, flat_saturation):
    return TableFluid(ideal_table, flat_saturation, compute_entropy=True)


@pytest.fixture
def table_archive(tmp_path):
    """An ideal-gas table written as a .npz archive."""
    path = tmp_path / "ideal_gas.npz"
    np.savez(
        path,
        rho=np.array(RHO_RANGE),
        de=np.array(DE_RANGE),
        esat=np.zeros(4),
        shape=np.array([10, 9]),
        **ideal_gas_arrays(),
    )
    return path
