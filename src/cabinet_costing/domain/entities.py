"""Input records describing a cabinet model and a concrete configuration.

A ``Formula`` is either a plain number or an arithmetic string over the
variable vocabulary built by :func:`build_variables`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .value_objects import LaborUnit

Formula = Union[int, float, str]


@dataclass(frozen=True)
class MaterialConfig:
    """Material identifiers per role, with optional thickness overrides in mm."""

    body_material: str | None = None
    door_material: str | None = None
    shelf_material: str | None = None
    body_thickness: float | None = None
    door_thickness: float | None = None
    shelf_thickness: float | None = None


@dataclass(frozen=True)
class CabinetConfiguration:
    """A model configured with concrete dimensions in millimeters."""

    width: float
    height: float
    depth: float
    material_config: MaterialConfig = field(default_factory=MaterialConfig)
    name: str = ""


@dataclass(frozen=True)
class ParametricPanel:
    """A flat panel sized by length and width formulas."""

    name: str
    length: Formula
    width: Formula
    material_type: str = "body"
    visible: bool = True


@dataclass(frozen=True)
class FrontHardware:
    """Hardware attached to a front, priced through a product lookup."""

    product_id: str
    quantity: Formula = 1
    hardware_type: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class CabinetFront:
    """A door or drawer face. Always priced against the door bucket."""

    front_type: str
    width: Formula
    height: Formula
    name: str = ""
    thickness: Formula = "door_thickness"
    quantity: int = 1
    material_type: str = "door"
    visible: bool = True
    hardware: tuple[FrontHardware, ...] = ()


@dataclass(frozen=True)
class CompartmentItem:
    """A shelf or divider inside a compartment."""

    item_type: str
    quantity: int = 1


@dataclass(frozen=True)
class Compartment:
    """An interior subdivision holding shelves and dividers."""

    width: Formula
    height: Formula
    depth: Formula
    name: str = ""
    items: tuple[CompartmentItem, ...] = ()


@dataclass(frozen=True)
class ModelHardware:
    """Model-level hardware with a quantity formula and a fixed unit price."""

    quantity: Formula
    unit_price: float
    product_id: str | None = None
    product_name: str = ""
    product_code: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class LaborLine:
    """A named labor formula yielding minutes or a direct cost."""

    name: str
    formula: Formula
    unit: LaborUnit = LaborUnit.MINUTES


@dataclass(frozen=True)
class LaborConfig:
    """Labor coefficients, optionally replaced by formula lines."""

    hourly_rate: float
    base_minutes: float = 0.0
    per_panel_minutes: float = 0.0
    per_front_minutes: float = 0.0
    per_compartment_item_minutes: float = 0.0
    lines: tuple[LaborLine, ...] | None = None


@dataclass(frozen=True)
class ModelParameters:
    """Declarative template of a reusable cabinet model."""

    panels: tuple[ParametricPanel, ...] = ()
    fronts: tuple[CabinetFront, ...] = ()
    compartments: tuple[Compartment, ...] = ()
    hardware: tuple[ModelHardware, ...] = ()
    front_hardware: tuple[FrontHardware, ...] = ()
    labor_config: LaborConfig | None = None
