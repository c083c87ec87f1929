"""Validate command for checking cost request files.

This module provides the `validate` command that checks a JSON request file
for syntax and schema errors without computing a breakdown.
"""

from pathlib import Path
from typing import Annotated

import typer

from cabinet_costing.application.config import ConfigError, load_request


def validate_command(
    request_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON cost request to validate"),
    ],
) -> None:
    """Validate a cost request file.

    Exit codes:
        0 - Request is valid
        1 - Request has errors (cannot be priced)

    Example:
        cabinet-costing validate base-600.json
    """
    typer.echo(f"Validating {request_file}...")
    typer.echo()

    try:
        request = load_request(request_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    model = request.model
    typer.echo(
        f"  {len(model.panels)} panel(s), {len(model.fronts)} front(s), "
        f"{len(model.effective_compartments())} compartment(s), "
        f"{len(model.hardware)} hardware line(s)"
    )
    typer.echo()
    typer.echo("Validation passed.")


def display_load_error(error: ConfigError) -> None:
    """Display a request loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
