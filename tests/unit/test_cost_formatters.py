"""Unit tests for cost report formatting and JSON export."""

from __future__ import annotations

import json
import math
from dataclasses import replace

import pytest

from cabinet_costing.domain import (
    CabinetConfiguration,
    CostEngine,
    CostResult,
    Diagnostic,
    Material,
    ModelParameters,
    ParametricPanel,
)
from cabinet_costing.infrastructure import (
    CostReportFormatter,
    DiagnosticsFormatter,
    JsonExporter,
)


@pytest.fixture
def result(
    base_configuration: CabinetConfiguration,
    base_model: ModelParameters,
    materials: dict[str, Material],
) -> CostResult:
    return CostEngine().calculate(base_configuration, base_model, materials)


class TestCostReportFormatter:
    def test_report_lists_costs(self, result: CostResult) -> None:
        report = CostReportFormatter().format(result.breakdown)

        assert report.startswith("COST BREAKDOWN")
        assert "Body:   1.438" in report
        assert "Hinge" in report
        assert "Labor (95 min)" in report
        assert "Overhead (15%)" in report
        assert report.splitlines()[-1].startswith("TOTAL")
        assert "181.03 EUR" in report.splitlines()[-1]

    def test_parts_only_when_requested(self, result: CostResult) -> None:
        assert "Left side" not in CostReportFormatter().format(result.breakdown)

        report = CostReportFormatter(include_parts=True).format(result.breakdown)
        assert "Left side" in report
        assert "(door)" in report

    def test_currency(self, result: CostResult) -> None:
        report = CostReportFormatter(currency="CHF").format(result.breakdown)
        assert "181.03 CHF" in report


class TestDiagnosticsFormatter:
    def test_empty(self) -> None:
        assert DiagnosticsFormatter().format(()) == "No diagnostics."

    def test_lists_locations(self) -> None:
        diagnostics = (
            Diagnostic("panels[0](Broken).length", "formula failed"),
            Diagnostic("materials.door", "material not found"),
        )
        text = DiagnosticsFormatter().format(diagnostics)

        assert text.splitlines() == [
            "Diagnostics:",
            "  panels[0](Broken).length: formula failed",
            "  materials.door: material not found",
        ]


class TestJsonExporter:
    def test_export_round_trips_through_json(self, result: CostResult) -> None:
        data = json.loads(JsonExporter().export(result))

        assert data["breakdown"]["total_cost"] == 181.03
        assert data["breakdown"]["material_areas"]["total"] == 2.169
        assert data["breakdown"]["hardware_items"][0]["quantity"] == 2
        assert data["diagnostics"] == []

    def test_diagnostics_exported(self) -> None:
        result = CostEngine().calculate(
            CabinetConfiguration(width=600, height=720, depth=560)
        )
        broken = CostResult(
            breakdown=result.breakdown,
            diagnostics=(Diagnostic("hardware[0](Hinge).quantity", "bad formula"),),
        )

        data = JsonExporter().to_dict(broken)

        assert data["diagnostics"] == [
            {"location": "hardware[0](Hinge).quantity", "reason": "bad formula"}
        ]

    def test_overflowing_panel_exports_strict_json(
        self,
        base_configuration: CabinetConfiguration,
        base_model: ModelParameters,
        materials: dict[str, Material],
    ) -> None:
        huge = ParametricPanel(name="Huge", length="1e200", width="1e200")
        model = replace(base_model, panels=(*base_model.panels, huge))
        result = CostEngine().calculate(base_configuration, model, materials)

        def reject(constant: str) -> None:
            raise AssertionError(f"non-standard JSON constant {constant}")

        data = json.loads(JsonExporter().export(result), parse_constant=reject)
        assert data["breakdown"]["material_areas"]["total"] == 2.169

    def test_non_finite_amount_not_exported(self, result: CostResult) -> None:
        broken = replace(result, breakdown=replace(result.breakdown, total_cost=math.inf))
        with pytest.raises(ValueError):
            JsonExporter().export(broken)
