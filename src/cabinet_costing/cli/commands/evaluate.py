"""Evaluate command for trying out formulas against a variable table."""

from typing import Annotated

import typer

from cabinet_costing.domain import FormulaError
from cabinet_costing.domain.services.formula import evaluate_formula


def _parse_assignments(assignments: list[str]) -> dict[str, float]:
    variables: dict[str, float] = {}
    for assignment in assignments:
        name, separator, raw = assignment.partition("=")
        name = name.strip()
        if not separator or not name:
            raise typer.BadParameter(
                f"Expected name=value, got {assignment!r}", param_hint="--var"
            )
        try:
            variables[name] = float(raw)
        except ValueError:
            raise typer.BadParameter(
                f"Value of {name!r} is not a number: {raw!r}", param_hint="--var"
            )
    return variables


def evaluate_command(
    expression: Annotated[
        str,
        typer.Argument(help="Formula, e.g. 'width - 2 * body_thickness'"),
    ],
    var: Annotated[
        list[str] | None,
        typer.Option("--var", help="Variable assignment name=value (repeatable)"),
    ] = None,
) -> None:
    """Evaluate a formula the way the engine does.

    Prints the value. When the formula fails, prints 0 (the value the engine
    would use), reports the reason on stderr and exits with code 2.

    Example:
        cabinet-costing evaluate "door_count * 2" --var door_count=3
    """
    variables = _parse_assignments(var or [])
    try:
        value = evaluate_formula(expression, variables)
    except FormulaError as e:
        typer.echo("0")
        typer.echo(f"Formula failed: {e}", err=True)
        raise typer.Exit(code=2)
    typer.echo(f"{value:g}")
