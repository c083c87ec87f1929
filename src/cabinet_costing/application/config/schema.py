"""Pydantic models for cost calculation requests.

A request document bundles everything one computation needs: the configured
cabinet, the model parameters, and the already-resolved material catalog and
product prices.

Example request:
    {
        "configuration": {
            "width": 600, "height": 720, "depth": 560,
            "material_config": {"body_material": "mel-white"}
        },
        "model": {
            "panels": [
                {"name": "Side", "length": "height", "width": "depth"}
            ],
            "hardware": [
                {"product_name": "Hinge", "quantity": "door_count * 2",
                 "unit_price": 3.5}
            ]
        },
        "materials": {"mel-white": {"cost_per_unit": 18.5}}
    }
"""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field, Strict, StrictInt

from cabinet_costing.domain.value_objects import LaborUnit

FiniteFloat = Annotated[float, Strict(), AllowInfNan(False)]
FormulaValue = Union[StrictInt, FiniteFloat, str]


class _StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)


class MaterialConfigSchema(_StrictModel):
    """Material selection per role with optional thickness overrides."""

    body_material: str | None = Field(default=None, description="Body material id")
    door_material: str | None = Field(default=None, description="Door material id")
    shelf_material: str | None = Field(default=None, description="Shelf material id")
    body_thickness: float | None = Field(
        default=None, ge=0, description="Body thickness in mm (default 18)"
    )
    door_thickness: float | None = Field(
        default=None, ge=0, description="Door thickness in mm (default 18)"
    )
    shelf_thickness: float | None = Field(
        default=None, ge=0, description="Shelf thickness in mm (default 18)"
    )


class CabinetConfigurationSchema(_StrictModel):
    """Concrete cabinet dimensions in millimeters."""

    name: str = Field(default="", description="Configuration label")
    width: float = Field(..., ge=0, allow_inf_nan=False, description="Width in mm")
    height: float = Field(..., ge=0, allow_inf_nan=False, description="Height in mm")
    depth: float = Field(..., ge=0, allow_inf_nan=False, description="Depth in mm")
    material_config: MaterialConfigSchema = Field(
        default_factory=MaterialConfigSchema, description="Material selection"
    )


class PanelSchema(_StrictModel):
    """Parametric panel definition."""

    name: str = Field(default="", description="Panel name")
    length: FormulaValue = Field(..., description="Length formula or number (mm)")
    width: FormulaValue = Field(..., description="Width formula or number (mm)")
    material_type: str = Field(default="body", description="body, door or shelf")
    visible: bool = Field(default=True, description="Whether the panel is built")


class FrontHardwareSchema(_StrictModel):
    """Hardware line attached to a front."""

    product_id: str = Field(..., description="Product identifier")
    quantity: FormulaValue = Field(default=1, description="Quantity formula or number")
    hardware_type: str | None = Field(
        default=None, description="hinge, damper, runner, handle or other"
    )
    notes: str | None = Field(default=None, description="Free-form notes")


class FrontSchema(_StrictModel):
    """Door or drawer front."""

    name: str = Field(default="", description="Front name")
    front_type: str = Field(..., description="hinged_door, drawer_front, ...")
    width: FormulaValue = Field(..., description="Width formula or number (mm)")
    height: FormulaValue = Field(..., description="Height formula or number (mm)")
    thickness: FormulaValue = Field(
        default="door_thickness", description="Thickness formula or number (mm)"
    )
    quantity: int = Field(default=1, ge=1, description="Number of identical fronts")
    material_type: str = Field(default="door", description="Declared material type")
    visible: bool = Field(default=True, description="Whether the front is built")
    hardware: list[FrontHardwareSchema] = Field(
        default_factory=list, description="Attached hardware"
    )


class CompartmentItemSchema(_StrictModel):
    """Shelf or divider inside a compartment."""

    item_type: str = Field(
        ..., description="shelf, horizontal_divider or vertical_divider"
    )
    quantity: int = Field(default=1, ge=1, description="Number of items")


class CompartmentSchema(_StrictModel):
    """Interior compartment with its own size formulas."""

    name: str = Field(default="", description="Compartment name")
    width: FormulaValue = Field(..., description="Width formula or number (mm)")
    height: FormulaValue = Field(..., description="Height formula or number (mm)")
    depth: FormulaValue = Field(..., description="Depth formula or number (mm)")
    items: list[CompartmentItemSchema] = Field(
        default_factory=list, description="Shelves and dividers"
    )


class ModelHardwareSchema(_StrictModel):
    """Model-level hardware line."""

    product_id: str | None = Field(default=None, description="Product identifier")
    product_name: str = Field(default="", description="Display name")
    product_code: str | None = Field(default=None, description="Supplier code")
    quantity: FormulaValue = Field(..., description="Quantity formula or number")
    unit_price: float = Field(default=0.0, ge=0, description="Price per piece")
    notes: str | None = Field(default=None, description="Free-form notes")


class LaborLineSchema(_StrictModel):
    """Formula-based labor line."""

    name: str = Field(default="", description="Line name")
    formula: FormulaValue = Field(..., description="Formula yielding the line value")
    unit: LaborUnit = Field(default=LaborUnit.MINUTES, description="minutes or euros")


class LaborConfigSchema(_StrictModel):
    """Labor coefficients or formula lines."""

    hourly_rate: float = Field(default=45.0, ge=0, description="Currency per hour")
    base_minutes: float = Field(default=0.0, ge=0, description="Fixed minutes")
    per_panel_minutes: float = Field(default=0.0, ge=0, description="Per visible panel")
    per_front_minutes: float = Field(default=0.0, ge=0, description="Per visible front")
    per_compartment_item_minutes: float = Field(
        default=0.0, ge=0, description="Per compartment item"
    )
    lines: list[LaborLineSchema] | None = Field(
        default=None, description="Formula lines replacing the coefficients"
    )


class ModelParametersSchema(_StrictModel):
    """Declarative cabinet model.

    ``laborConfig`` and ``frontHardware`` are accepted under their stored
    spellings. ``parametric_compartments`` wins over ``compartments`` when
    both are present.
    """

    model_config = ConfigDict(
        extra="forbid", allow_inf_nan=False, populate_by_name=True
    )

    panels: list[PanelSchema] = Field(default_factory=list)
    fronts: list[FrontSchema] = Field(default_factory=list)
    compartments: list[CompartmentSchema] = Field(default_factory=list)
    parametric_compartments: list[CompartmentSchema] | None = Field(default=None)
    hardware: list[ModelHardwareSchema] = Field(default_factory=list)
    front_hardware: list[FrontHardwareSchema] = Field(
        default_factory=list, alias="frontHardware"
    )
    labor_config: LaborConfigSchema | None = Field(default=None, alias="laborConfig")

    def effective_compartments(self) -> list[CompartmentSchema]:
        if self.parametric_compartments is not None:
            return self.parametric_compartments
        return self.compartments


class MaterialSchema(_StrictModel):
    """Catalog material priced per square meter."""

    name: str = Field(default="", description="Material name")
    category: str = Field(default="", description="Material category")
    cost_per_unit: float = Field(..., ge=0, description="Currency per m²")
    waste_factor: float | None = Field(
        default=None, ge=1, description="Waste multiplier override"
    )


class ProductPriceSchema(_StrictModel):
    """Hardware product price."""

    name: str = Field(default="", description="Product name")
    unit_price: float = Field(..., ge=0, description="Price per piece")


class SettingsSchema(_StrictModel):
    """Overrides for the engine's constants."""

    default_waste_factor: float = Field(default=1.10, ge=1)
    honor_material_waste_factor: bool = Field(default=True)
    edge_banding_meters_per_m2: float = Field(default=4.0, ge=0)
    edge_banding_cost_per_meter: float = Field(default=2.0, ge=0)
    default_thickness: float = Field(default=18.0, gt=0)
    overhead_percentage: float = Field(default=15.0, ge=0)
    default_labor: LaborConfigSchema | None = Field(default=None)


class CostRequestSchema(_StrictModel):
    """Root document for one cost computation."""

    configuration: CabinetConfigurationSchema = Field(
        ..., description="Configured cabinet"
    )
    model: ModelParametersSchema = Field(
        default_factory=ModelParametersSchema, description="Model parameters"
    )
    materials: dict[str, MaterialSchema] = Field(
        default_factory=dict, description="Material catalog keyed by id"
    )
    products: dict[str, ProductPriceSchema] = Field(
        default_factory=dict, description="Product prices keyed by id"
    )
    settings: SettingsSchema = Field(
        default_factory=SettingsSchema, description="Engine settings"
    )
    variables: dict[str, float] = Field(
        default_factory=dict, description="Additional formula variables"
    )
