"""Utility modules for tabfluid."""

from tabfluid.utils.interpolation import bilinear_interp_2d
from tabfluid.utils.units import quantity_to_si

__all__ = ["bilinear_interp_2d", "quantity_to_si"]
