"""Conversion of validated request schemas into domain objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cabinet_costing.domain.entities import (
    CabinetConfiguration,
    CabinetFront,
    Compartment,
    CompartmentItem,
    FrontHardware,
    LaborConfig,
    LaborLine,
    MaterialConfig,
    ModelHardware,
    ModelParameters,
    ParametricPanel,
)
from cabinet_costing.domain.value_objects import EngineSettings, Material, ProductPrice

if TYPE_CHECKING:
    from cabinet_costing.application.config.schema import (
        CabinetConfigurationSchema,
        CostRequestSchema,
        FrontHardwareSchema,
        LaborConfigSchema,
        ModelParametersSchema,
        SettingsSchema,
    )


def config_to_configuration(schema: CabinetConfigurationSchema) -> CabinetConfiguration:
    """Convert the configured cabinet."""
    return CabinetConfiguration(
        name=schema.name,
        width=schema.width,
        height=schema.height,
        depth=schema.depth,
        material_config=MaterialConfig(**schema.material_config.model_dump()),
    )


def _front_hardware(schema: FrontHardwareSchema) -> FrontHardware:
    return FrontHardware(
        product_id=schema.product_id,
        quantity=schema.quantity,
        hardware_type=schema.hardware_type,
        notes=schema.notes,
    )


def config_to_labor(schema: LaborConfigSchema | None) -> LaborConfig | None:
    """Convert a labor configuration, keeping ``None`` for absent configs."""
    if schema is None:
        return None
    lines = None
    if schema.lines is not None:
        lines = tuple(
            LaborLine(name=line.name, formula=line.formula, unit=line.unit)
            for line in schema.lines
        )
    return LaborConfig(
        hourly_rate=schema.hourly_rate,
        base_minutes=schema.base_minutes,
        per_panel_minutes=schema.per_panel_minutes,
        per_front_minutes=schema.per_front_minutes,
        per_compartment_item_minutes=schema.per_compartment_item_minutes,
        lines=lines,
    )


def config_to_model(schema: ModelParametersSchema) -> ModelParameters:
    """Convert model parameters."""
    return ModelParameters(
        panels=tuple(
            ParametricPanel(
                name=p.name,
                length=p.length,
                width=p.width,
                material_type=p.material_type,
                visible=p.visible,
            )
            for p in schema.panels
        ),
        fronts=tuple(
            CabinetFront(
                name=f.name,
                front_type=f.front_type,
                width=f.width,
                height=f.height,
                thickness=f.thickness,
                quantity=f.quantity,
                material_type=f.material_type,
                visible=f.visible,
                hardware=tuple(_front_hardware(h) for h in f.hardware),
            )
            for f in schema.fronts
        ),
        compartments=tuple(
            Compartment(
                name=c.name,
                width=c.width,
                height=c.height,
                depth=c.depth,
                items=tuple(
                    CompartmentItem(item_type=i.item_type, quantity=i.quantity)
                    for i in c.items
                ),
            )
            for c in schema.effective_compartments()
        ),
        hardware=tuple(
            ModelHardware(
                product_id=h.product_id,
                product_name=h.product_name,
                product_code=h.product_code,
                quantity=h.quantity,
                unit_price=h.unit_price,
                notes=h.notes,
            )
            for h in schema.hardware
        ),
        front_hardware=tuple(_front_hardware(h) for h in schema.front_hardware),
        labor_config=config_to_labor(schema.labor_config),
    )


def config_to_materials(schema: CostRequestSchema) -> dict[str, Material]:
    """Build the material catalog keyed by id."""
    return {
        material_id: Material(id=material_id, **material.model_dump())
        for material_id, material in schema.materials.items()
    }


def config_to_prices(schema: CostRequestSchema) -> dict[str, ProductPrice]:
    """Build the product price lookup keyed by id."""
    return {
        product_id: ProductPrice(name=product.name, unit_price=product.unit_price)
        for product_id, product in schema.products.items()
    }


def config_to_settings(schema: SettingsSchema) -> EngineSettings:
    """Convert engine settings."""
    return EngineSettings(
        default_waste_factor=schema.default_waste_factor,
        honor_material_waste_factor=schema.honor_material_waste_factor,
        edge_banding_meters_per_m2=schema.edge_banding_meters_per_m2,
        edge_banding_cost_per_meter=schema.edge_banding_cost_per_meter,
        default_thickness=schema.default_thickness,
        overhead_percentage=schema.overhead_percentage,
        default_labor=config_to_labor(schema.default_labor),
    )
