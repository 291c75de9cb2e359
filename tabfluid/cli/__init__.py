"""tabfluid command-line interface package.

Supports ``python -m tabfluid.cli`` as an alternative to the ``tabfluid`` entry point.
"""

from tabfluid.cli.main import cli, main

__all__ = ["cli", "main"]
