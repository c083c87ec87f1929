"""Unit tests for labor estimation."""

from __future__ import annotations

import pytest

from cabinet_costing.domain import (
    CabinetFront,
    Compartment,
    CompartmentItem,
    LaborConfig,
    LaborLine,
    LaborUnit,
    MaterialAreas,
    ParametricPanel,
)
from cabinet_costing.domain.services.diagnostics import DiagnosticLog
from cabinet_costing.domain.services.labor import LaborEstimator
from cabinet_costing.domain.services.variables import LABOR_LINE_VARIABLES

VARIABLES = {"width": 600.0, "height": 720.0, "depth": 560.0}


@pytest.fixture
def estimator() -> LaborEstimator:
    return LaborEstimator()


@pytest.fixture
def panels() -> list[ParametricPanel]:
    visible = [ParametricPanel(name=f"P{i}", length=100, width=100) for i in range(4)]
    hidden = ParametricPanel(name="Hidden", length=100, width=100, visible=False)
    return [*visible, hidden]


@pytest.fixture
def fronts() -> list[CabinetFront]:
    return [
        CabinetFront(front_type="hinged_door", width=300, height=700, quantity=1),
        CabinetFront(front_type="drawer_front", width=300, height=200, quantity=2),
        CabinetFront(front_type="hinged_door", width=300, height=700, visible=False),
    ]


@pytest.fixture
def compartments() -> list[Compartment]:
    return [
        Compartment(
            width=500,
            height=300,
            depth=500,
            items=(CompartmentItem("shelf", quantity=4), CompartmentItem("vertical_divider")),
        ),
        Compartment(width=500, height=300, depth=500, items=(CompartmentItem("shelf"),)),
    ]


class TestCoefficientLabor:
    """Coefficient-based labor is plain arithmetic over counts."""

    def test_minutes_and_cost(
        self,
        estimator: LaborEstimator,
        panels: list[ParametricPanel],
        fronts: list[CabinetFront],
        compartments: list[Compartment],
    ) -> None:
        config = LaborConfig(
            hourly_rate=45,
            base_minutes=60,
            per_panel_minutes=5,
            per_front_minutes=10,
            per_compartment_item_minutes=5,
        )
        labor = estimator.estimate(panels, fronts, compartments, config)

        # 60 + 4*5 + (1+2)*10 + 3*5
        assert labor.minutes == 125
        assert labor.cost == pytest.approx(93.75)

    def test_empty_model_costs_base_only(self, estimator: LaborEstimator) -> None:
        config = LaborConfig(hourly_rate=60, base_minutes=30, per_panel_minutes=5)
        labor = estimator.estimate([], [], [], config)

        assert labor.minutes == 30
        assert labor.cost == pytest.approx(30)


class TestLaborLines:
    """Formula lines evaluated against counts and areas."""

    def test_line_variables(
        self,
        estimator: LaborEstimator,
        panels: list[ParametricPanel],
        fronts: list[CabinetFront],
        compartments: list[Compartment],
    ) -> None:
        areas = MaterialAreas(body=1.0, door=0.5, shelf=0.25)
        variables = estimator.line_variables(
            panels, fronts, compartments, VARIABLES, areas, hardware_count=6
        )

        assert variables["panels"] == 4
        assert variables["total_panels"] == 5
        assert variables["fronts"] == 3
        assert variables["compartment_items"] == 3
        assert variables["hardware_count"] == 6
        assert variables["total_area"] == pytest.approx(1.75)
        assert variables["door_area"] == pytest.approx(0.5)
        # 0.21 + 0.06 * 2
        assert variables["front_area"] == pytest.approx(0.33)
        assert variables["volume"] == pytest.approx(0.241920)
        # 4 panels * 0.4 m + 2.0 m + 2 * 1.0 m
        assert variables["total_edges"] == pytest.approx(5.6)

    def test_line_variable_names_are_reserved(self, estimator: LaborEstimator) -> None:
        variables = estimator.line_variables([], [], [], VARIABLES, MaterialAreas())
        assert set(variables) - set(VARIABLES) == LABOR_LINE_VARIABLES

    def test_overflowing_front_area_is_zero(self, estimator: LaborEstimator) -> None:
        log = DiagnosticLog()
        fronts = [CabinetFront(front_type="hinged_door", width="1e200", height="1e200")]
        variables = estimator.line_variables(
            [], fronts, [], VARIABLES, MaterialAreas(), diagnostics=log
        )

        assert variables["front_area"] == 0
        assert [d.location for d in log] == ["labor.front_area"]

    def test_minutes_and_direct_cost(self, estimator: LaborEstimator) -> None:
        config = LaborConfig(
            hourly_rate=60,
            lines=(
                LaborLine(name="Base", formula="30"),
                LaborLine(name="Panels", formula="panels * 5"),
                LaborLine(name="Packaging", formula="12.5", unit=LaborUnit.EUROS),
            ),
        )
        labor = estimator.estimate_lines(config, {"panels": 4})

        assert labor.minutes == 50
        assert labor.cost == pytest.approx(50 + 12.5)

    def test_failed_and_negative_lines_contribute_zero(
        self, estimator: LaborEstimator
    ) -> None:
        log = DiagnosticLog()
        config = LaborConfig(
            hourly_rate=60,
            lines=(
                LaborLine(name="Broken", formula="panels +* 5"),
                LaborLine(name="Credit", formula="0 - 10"),
                LaborLine(name="Base", formula="30"),
            ),
        )
        labor = estimator.estimate_lines(config, {"panels": 4}, log)

        assert labor.minutes == 30
        assert len(log) == 2
