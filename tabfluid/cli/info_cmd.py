"""CLI command for inspecting a lookup table archive."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from tabfluid.cli.tables import load_table_npz
from tabfluid.core.errors import TableError


@click.command("info")
@click.argument("table_path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def info(ctx: click.Context, table_path: str) -> None:
    """Display grid, axes and field ranges of a table archive."""
    console: Console = ctx.obj.get("console", Console())
    try:
        table, saturation = load_table_npz(table_path)
    except TableError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    grid = Table(title=f"Lookup Table — {table.nx} x {table.ny}")
    grid.add_column("Axis", style="cyan")
    grid.add_column("Min", style="green", justify="right")
    grid.add_column("Max", style="green", justify="right")
    grid.add_column("Points", justify="right")
    grid.add_row("rho [kg/m³]", f"{table.rho_range[0]:g}", f"{table.rho_range[1]:g}", str(table.nx))
    grid.add_row("de [J/kg]", f"{table.de_range[0]:g}", f"{table.de_range[1]:g}", str(table.ny))
    console.print(grid)

    fields = Table(title="Fields")
    fields.add_column("Field", style="cyan")
    fields.add_column("Min", style="green", justify="right")
    fields.add_column("Max", style="green", justify="right")
    for name, values in table.fields.items():
        fields.add_row(name, f"{values.min():.6g}", f"{values.max():.6g}")
    console.print(fields)

    coefs = ", ".join(f"{c:g}" for c in saturation.coefficients)
    console.print(f"Saturation coefficients: [{coefs}]")
