"""Typer CLI for cabinet cost calculation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cabinet_costing.application import CalculateCostCommand
from cabinet_costing.application.config import ConfigError, load_request
from cabinet_costing.cli.commands import evaluate_command, validate_command
from cabinet_costing.cli.commands.validate import display_load_error
from cabinet_costing.domain import CostingInputError
from cabinet_costing.infrastructure import (
    CostReportFormatter,
    DiagnosticsFormatter,
    JsonExporter,
)

app = typer.Typer(
    name="cabinet-costing",
    help="Price parametric cabinet models for concrete dimensions.",
)

app.command(name="validate")(validate_command)
app.command(name="evaluate")(evaluate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log fail-soft events at DEBUG level"),
    ] = False,
) -> None:
    """Price parametric cabinet models for concrete dimensions."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.command()
def quote(
    request_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON cost request"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
    overhead: Annotated[
        float | None,
        typer.Option("--overhead", help="Overhead percentage, overrides the request"),
    ] = None,
    show_parts: Annotated[
        bool,
        typer.Option("--parts", help="List every part that contributed area"),
    ] = False,
    show_diagnostics: Annotated[
        bool,
        typer.Option("--diagnostics", help="List formula and lookup fallbacks"),
    ] = False,
) -> None:
    """Compute the cost breakdown for a request file.

    Example:
        cabinet-costing quote base-600.json --overhead 20
    """
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use text or json.", err=True)
        raise typer.Exit(code=1)
    if overhead is not None and overhead < 0:
        typer.echo("Overhead percentage cannot be negative.", err=True)
        raise typer.Exit(code=1)

    try:
        request = load_request(request_file)
    except ConfigError as e:
        typer.echo("Unable to price this configuration.", err=True)
        display_load_error(e)
        raise typer.Exit(code=1)

    try:
        result = CalculateCostCommand().execute(request, overhead_percentage=overhead)
    except CostingInputError as e:
        typer.echo(f"Unable to price this configuration: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonExporter().export(result))
        return

    typer.echo(CostReportFormatter(include_parts=show_parts).format(result.breakdown))
    if show_diagnostics:
        typer.echo()
        typer.echo(DiagnosticsFormatter().format(result.diagnostics))
    elif result.has_diagnostics:
        typer.echo()
        typer.echo(
            f"{len(result.diagnostics)} value(s) fell back to zero; "
            "rerun with --diagnostics for details."
        )


if __name__ == "__main__":
    app()
