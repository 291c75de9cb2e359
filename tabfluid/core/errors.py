"""Exception types raised by tabfluid."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tabfluid.core.rootfind import RootResult


class TableFluidError(Exception):
    """Base class for tabfluid errors."""


class TableError(TableFluidError, ValueError):
    """Raised when lookup table data violates the grid invariants."""


class ConvergenceError(TableFluidError):
    """Raised in strict mode when a state inversion does not converge.

    Attributes:
        result: The RootResult of the failed solve.
    """

    def __init__(self, message: str, result: RootResult):
        super().__init__(message)
        self.result = result
