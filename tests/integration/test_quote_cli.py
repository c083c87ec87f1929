"""Integration tests for the cabinet-costing CLI.

These tests verify the quote, validate and evaluate commands end-to-end,
including:
- Text and JSON breakdowns for a valid request
- Diagnostics summary and listing for malformed formulas
- Load errors reported with exit code 1
- Formula evaluation exit codes
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from cabinet_costing.cli.main import app

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestQuoteCommand:
    """Tests for the quote command."""

    def test_text_report(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(app, ["quote", str(fixtures_path / "base_cabinet.json")])

        assert result.exit_code == 0
        assert "COST BREAKDOWN" in result.output
        assert "Handle 128mm" in result.output
        assert "188.39 EUR" in result.output
        assert "fell back" not in result.output

    def test_json_report(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(
            app, ["quote", str(fixtures_path / "base_cabinet.json"), "--format", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["breakdown"]["subtotal"] == 163.81
        assert data["breakdown"]["labor_minutes"] == 95
        assert data["diagnostics"] == []

    def test_overhead_override(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "quote",
                str(fixtures_path / "base_cabinet.json"),
                "-f",
                "json",
                "--overhead",
                "0",
            ],
        )

        data = json.loads(result.output)
        assert data["breakdown"]["total_cost"] == data["breakdown"]["subtotal"]

    def test_malformed_formula_summarized(
        self, runner: CliRunner, fixtures_path: Path
    ) -> None:
        result = runner.invoke(
            app, ["quote", str(fixtures_path / "malformed_formula.json")]
        )

        assert result.exit_code == 0
        assert "48.41 EUR" in result.output
        assert "1 value(s) fell back to zero" in result.output

    def test_malformed_formula_listed(
        self, runner: CliRunner, fixtures_path: Path
    ) -> None:
        result = runner.invoke(
            app,
            ["quote", str(fixtures_path / "malformed_formula.json"), "--diagnostics"],
        )

        assert result.exit_code == 0
        assert "Diagnostics:" in result.output
        assert "panels[0](Broken).length" in result.output

    def test_parts_listing(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(
            app, ["quote", str(fixtures_path / "base_cabinet.json"), "--parts"]
        )

        assert result.exit_code == 0
        assert "Parts" in result.output
        assert "Right side" in result.output

    def test_missing_width(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(app, ["quote", str(fixtures_path / "missing_width.json")])

        assert result.exit_code == 1
        assert "Unable to price this configuration" in result.output
        assert "configuration.width" in result.output

    def test_shadowed_variable(
        self,
        runner: CliRunner,
        tmp_path: Path,
        base_request_data: dict[str, Any],
    ) -> None:
        base_request_data["variables"] = {"depth": 300}
        request_file = tmp_path / "request.json"
        request_file.write_text(json.dumps(base_request_data), encoding="utf-8")

        result = runner.invoke(app, ["quote", str(request_file)])

        assert result.exit_code == 1
        assert "Unable to price this configuration" in result.output

    def test_non_identifier_variable(
        self,
        runner: CliRunner,
        tmp_path: Path,
        base_request_data: dict[str, Any],
    ) -> None:
        base_request_data["variables"] = {"": 5}
        request_file = tmp_path / "request.json"
        request_file.write_text(json.dumps(base_request_data), encoding="utf-8")

        result = runner.invoke(app, ["quote", str(request_file)])

        assert result.exit_code == 1
        assert "identifiers" in result.output

    def test_unknown_format(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(
            app, ["quote", str(fixtures_path / "base_cabinet.json"), "-f", "xml"]
        )
        assert result.exit_code == 1


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_request(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(fixtures_path / "base_cabinet.json")])

        assert result.exit_code == 0
        assert "4 panel(s), 1 front(s), 1 compartment(s)" in result.output
        assert "Validation passed." in result.output

    def test_file_not_found(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(fixtures_path / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(fixtures_path / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed." in result.output

    def test_unknown_field(self, runner: CliRunner, fixtures_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(fixtures_path / "unknown_field.json")])

        assert result.exit_code == 1
        assert "configuration.colour" in result.output


class TestEvaluateCommand:
    """Tests for the evaluate command."""

    def test_evaluates_with_variables(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["evaluate", "width - 2 * body_thickness", "--var", "width=600",
             "--var", "body_thickness=18"],
        )

        assert result.exit_code == 0
        assert result.output.strip() == "564"

    def test_failure_prints_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["evaluate", "width +* 2", "--var", "width=600"])

        assert result.exit_code == 2
        assert result.output.splitlines()[0] == "0"
        assert "Formula failed" in result.output

    def test_bad_assignment(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["evaluate", "1 + 1", "--var", "width"])
        assert result.exit_code == 2
