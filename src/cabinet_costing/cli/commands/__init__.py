"""CLI command implementations for the cabinet costing application.

This package contains subcommands for the cabinet-costing CLI, including:
- validate: Validate a cost request file
- evaluate: Evaluate a single formula
"""

from cabinet_costing.cli.commands.evaluate import evaluate_command
from cabinet_costing.cli.commands.validate import validate_command

__all__ = ["evaluate_command", "validate_command"]
