"""Loading of cost request documents.

A request arrives either as a JSON file (CLI) or as an already-parsed
dictionary (REST, tests). Every way it can fail ends in a ``ConfigError``
whose ``error_type`` names the step: ``file_not_found``,
``permission_denied``, ``file_read_error``, ``json_parse`` or ``validation``.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabinet_costing.application.config.schema import CostRequestSchema


class ConfigError(Exception):
    """A cost request could not be read or does not validate.

    Attributes:
        message: Human-readable summary
        error_type: Failing step, see the module docstring
        path: Request file, when loaded from disk
        details: One record per problem; validation records carry ``path``
            (e.g. ``model.panels[0].length``), ``message``, ``value`` and
            ``error_type``
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic location as ``model.panels[0].length``."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _validation_error(error: PydanticValidationError, path: Path | None) -> ConfigError:
    details = [
        {
            "path": _json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]
    lines = ["Cost request validation failed:"]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        value = detail["value"]
        # Missing fields report the whole parent object as input
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return ConfigError("\n".join(lines), "validation", path, details)


def load_request_from_dict(data: Any, path: Path | None = None) -> CostRequestSchema:
    """Validate an already-parsed request document.

    Raises:
        ConfigError: With ``error_type`` ``validation``.
    """
    try:
        return CostRequestSchema.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, path) from e


def load_request(path: Path) -> CostRequestSchema:
    """Read, parse and validate a JSON request file.

    Raises:
        ConfigError: If the file is missing or unreadable, is not JSON, or
            does not validate.
    """
    if not path.exists():
        raise ConfigError(f"Request file not found: {path}", "file_not_found", path)

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading request file: {path}", "permission_denied", path
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading request file: {path}: {e}", "file_read_error", path
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in request file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    return load_request_from_dict(data, path)
