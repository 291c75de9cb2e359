"""CLI command for evaluating a fluid state from two known variables."""

from __future__ import annotations

import json
import math
from typing import Any

import click
import pint
from rich.console import Console
from rich.table import Table

from tabfluid.cli.tables import load_table_npz
from tabfluid.core.config import ModelConfig, load_config_json
from tabfluid.core.errors import ConvergenceError, TableFluidError
from tabfluid.core.model import TableFluid
from tabfluid.utils.units import quantity_to_si
from tabfluid.utils.validation import Severity, validate_state

# Input pair -> (setter name, argument order)
_SETTERS = {
    frozenset({"density", "energy"}): ("set_state_rhoe", ("density", "energy")),
    frozenset({"pressure", "density"}): ("set_state_Prho", ("pressure", "density")),
    frozenset({"density", "temperature"}): ("set_state_rhoT", ("density", "temperature")),
    frozenset({"density", "enthalpy"}): ("set_state_rhoh", ("density", "enthalpy")),
    frozenset({"pressure", "temperature"}): ("set_state_PT", ("pressure", "temperature")),
    frozenset({"pressure", "entropy"}): ("set_state_Ps", ("pressure", "entropy")),
    frozenset({"enthalpy", "entropy"}): ("set_state_hs", ("enthalpy", "entropy")),
}

_ROWS = [
    ("Density", "density", "kg/m³"),
    ("Static Energy", "static_energy", "J/kg"),
    ("Pressure", "pressure", "Pa"),
    ("Temperature", "temperature", "K"),
    ("Sound Speed", "sound_speed", "m/s"),
    ("Cv", "cv", "J/(kg·K)"),
    ("Cp", "cp", "J/(kg·K)"),
    ("Gamma", "gamma", "—"),
    ("dP/drho|e", "dPdrho_e", "m²/s²"),
    ("dP/de|rho", "dPde_rho", "kg/m³"),
    ("dT/drho|e", "dTdrho_e", "K·m³/kg"),
    ("dT/de|rho", "dTde_rho", "K·kg/J"),
    ("Entropy", "entropy", "J/(kg·K)"),
]


def _finite_or_none(value: Any) -> Any:
    # NaN and inf have no JSON encoding
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


@click.command("state")
@click.argument("table_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--density", type=str, default=None, help="Density [kg/m³] or quantity string.")
@click.option("--energy", type=str, default=None, help="Static energy [J/kg].")
@click.option("--pressure", type=str, default=None, help="Pressure [Pa], e.g. '20 bar'.")
@click.option("--temperature", type=str, default=None, help="Temperature [K].")
@click.option("--enthalpy", type=str, default=None, help="Enthalpy [J/kg].")
@click.option("--entropy", type=str, default=None, help="Entropy [J/(kg·K)].")
@click.option(
    "--compute-entropy", is_flag=True, default=False, help="Also evaluate the entropy."
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Model configuration file (JSON).",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the state as JSON.")
@click.pass_context
def state(
    ctx: click.Context,
    table_path: str,
    density: str | None,
    energy: str | None,
    pressure: str | None,
    temperature: str | None,
    enthalpy: str | None,
    entropy: str | None,
    compute_entropy: bool,
    config_path: str | None,
    as_json: bool,
) -> None:
    """Evaluate the full state from exactly two known variables."""
    console: Console = ctx.obj.get("console", Console())

    given = {
        name: text
        for name, text in (
            ("density", density),
            ("energy", energy),
            ("pressure", pressure),
            ("temperature", temperature),
            ("enthalpy", enthalpy),
            ("entropy", entropy),
        )
        if text is not None
    }
    setter = _SETTERS.get(frozenset(given))
    if setter is None:
        pairs = ", ".join(sorted("/".join(order) for _, order in _SETTERS.values()))
        console.print(
            f"[red]Error:[/red] Unsupported input pair {sorted(given)}. Supported: {pairs}"
        )
        raise SystemExit(1)

    try:
        values = {name: quantity_to_si(text, name) for name, text in given.items()}
    except (pint.errors.PintError, ValueError) as exc:
        console.print(f"[red]Error:[/red] Cannot parse input: {exc}")
        raise SystemExit(1)

    try:
        config = load_config_json(config_path) if config_path else ModelConfig()
        table, saturation = load_table_npz(table_path)
        fluid = TableFluid(
            table, saturation, config, compute_entropy=compute_entropy or None
        )
        method, order = setter
        getattr(fluid, method)(*(values[name] for name in order))
    except ConvergenceError as exc:
        console.print(
            f"[red]Error:[/red] {exc} (iterations={exc.result.iterations}, "
            f"residual={exc.result.residual:g})"
        )
        raise SystemExit(1)
    except TableFluidError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    result = validate_state(fluid.state, table, saturation)
    data = fluid.state.to_dict()

    if as_json:
        data = {key: _finite_or_none(value) for key, value in data.items()}
        data["converged"] = fluid.converged
        data["messages"] = [
            {"severity": m.severity.value, "parameter": m.parameter, "message": m.message}
            for m in result.messages
        ]
        click.echo(json.dumps(data, indent=2, allow_nan=False))
        return

    console.print(f"\n[bold]tabfluid — State ({method})[/bold]\n")
    out = Table(title="Fluid State")
    out.add_column("Property", style="cyan")
    out.add_column("Value", style="green", justify="right")
    out.add_column("Unit", style="dim")
    for label, key, unit in _ROWS:
        value = data[key]
        if value is None:
            continue
        out.add_row(label, f"{value:.6g}", unit)
    console.print(out)

    if not fluid.converged:
        console.print("[yellow]Warning:[/yellow] state inversion did not converge")
    for msg in result.messages:
        color = "red" if msg.severity == Severity.ERROR else "yellow"
        console.print(f"[{color}]{msg.severity.value.title()}:[/{color}] {msg.message}")
