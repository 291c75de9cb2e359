"""Table archive loading shared by the CLI commands."""

from __future__ import annotations

import numpy as np

from tabfluid.core.saturation import SaturationCurve
from tabfluid.core.table import LookupTable


def load_table_npz(path: str) -> tuple[LookupTable, SaturationCurve]:
    """Open a ``.npz`` table archive and build the table and saturation curve."""
    with np.load(path) as data:
        return LookupTable.from_mapping(data)
