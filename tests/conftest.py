"""Pytest configuration and shared fixtures for cabinet costing tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from cabinet_costing.domain import (
    CabinetConfiguration,
    CabinetFront,
    Compartment,
    CompartmentItem,
    LaborConfig,
    Material,
    MaterialConfig,
    ModelHardware,
    ModelParameters,
    ParametricPanel,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "requests"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising the CLI or REST surface end to end"
    )


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def base_configuration() -> CabinetConfiguration:
    """A 600 x 720 x 560 mm base cabinet with all three materials selected."""
    return CabinetConfiguration(
        name="Base 600",
        width=600,
        height=720,
        depth=560,
        material_config=MaterialConfig(
            body_material="mel-white",
            door_material="mdf-painted",
            shelf_material="mel-white",
        ),
    )


@pytest.fixture
def materials() -> dict[str, Material]:
    """Material catalog keyed by id."""
    return {
        "mel-white": Material(id="mel-white", cost_per_unit=20.0, category="board"),
        "mdf-painted": Material(id="mdf-painted", cost_per_unit=50.0, category="board"),
    }


@pytest.fixture
def base_model() -> ModelParameters:
    """A carcass with two sides, top, bottom, one door and one shelf."""
    return ModelParameters(
        panels=(
            ParametricPanel(name="Left side", length="height", width="depth"),
            ParametricPanel(name="Right side", length="height", width="depth"),
            ParametricPanel(
                name="Bottom", length="width - 2 * body_thickness", width="depth"
            ),
            ParametricPanel(
                name="Top", length="width - 2 * body_thickness", width="depth"
            ),
        ),
        fronts=(
            CabinetFront(
                name="Door",
                front_type="hinged_door",
                width="width - 4",
                height="height - 4",
            ),
        ),
        compartments=(
            Compartment(
                name="Interior",
                width="width - 2 * body_thickness",
                height="height - 2 * body_thickness",
                depth="depth - 20",
                items=(CompartmentItem(item_type="shelf"),),
            ),
        ),
        hardware=(
            ModelHardware(
                product_name="Hinge", quantity="door_count * 2", unit_price=3.5
            ),
        ),
        labor_config=LaborConfig(
            hourly_rate=45,
            base_minutes=60,
            per_panel_minutes=5,
            per_front_minutes=10,
            per_compartment_item_minutes=5,
        ),
    )


# =============================================================================
# Request fixtures
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def base_request_data() -> dict[str, Any]:
    """The contents of the base cabinet request fixture."""
    return json.loads((FIXTURES_PATH / "base_cabinet.json").read_text(encoding="utf-8"))
