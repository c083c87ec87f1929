"""Unit tests for material pricing."""

from __future__ import annotations

import pytest

from cabinet_costing.domain import EngineSettings, Material, MaterialAreas
from cabinet_costing.domain.services.diagnostics import DiagnosticLog
from cabinet_costing.domain.services.material_cost import MaterialCostCalculator

AREAS = MaterialAreas(body=2.0, door=1.0, shelf=0.5)


@pytest.fixture
def calculator() -> MaterialCostCalculator:
    return MaterialCostCalculator()


@pytest.fixture
def board() -> Material:
    return Material(id="board", cost_per_unit=20.0)


class TestMaterialCost:
    """Tests for bucket pricing and edge banding."""

    def test_all_buckets_priced_with_default_waste(
        self, calculator: MaterialCostCalculator, board: Material
    ) -> None:
        door = Material(id="door", cost_per_unit=50.0)
        cost = calculator.price(AREAS, board, door, board)

        expected = 2.0 * 1.1 * 20 + 1.0 * 1.1 * 50 + 0.5 * 1.1 * 20
        banding = 3.5 * 4 * 2
        assert cost == pytest.approx(expected + banding)

    def test_missing_material_contributes_nothing(
        self, calculator: MaterialCostCalculator, board: Material
    ) -> None:
        log = DiagnosticLog()
        cost = calculator.price(AREAS, body_material=board, diagnostics=log)

        assert cost == pytest.approx(2.0 * 1.1 * 20 + 3.5 * 8)
        assert [d.location for d in log] == ["materials.door", "materials.shelf"]

    def test_edge_banding_added_without_materials(
        self, calculator: MaterialCostCalculator
    ) -> None:
        assert calculator.price(AREAS) == pytest.approx(28.0)

    def test_empty_areas_cost_nothing(
        self, calculator: MaterialCostCalculator, board: Material
    ) -> None:
        assert calculator.price(MaterialAreas(), board, board, board) == 0

    def test_material_waste_factor_honored(
        self, calculator: MaterialCostCalculator
    ) -> None:
        wasteful = Material(id="veneer", cost_per_unit=10.0, waste_factor=1.3)
        cost = calculator.price(MaterialAreas(body=1.0), body_material=wasteful)
        assert cost == pytest.approx(1.0 * 1.3 * 10 + 8)

    def test_material_waste_factor_ignored_when_disabled(self) -> None:
        calculator = MaterialCostCalculator(
            EngineSettings(honor_material_waste_factor=False)
        )
        wasteful = Material(id="veneer", cost_per_unit=10.0, waste_factor=1.3)
        cost = calculator.price(MaterialAreas(body=1.0), body_material=wasteful)
        assert cost == pytest.approx(1.0 * 1.1 * 10 + 8)

    def test_edge_banding_settings(self) -> None:
        calculator = MaterialCostCalculator(
            EngineSettings(edge_banding_meters_per_m2=3, edge_banding_cost_per_meter=1.5)
        )
        assert calculator.edge_banding_cost(AREAS) == pytest.approx(3.5 * 3 * 1.5)
