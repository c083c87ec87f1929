"""Domain layer: cabinet model records, value objects and costing services."""

from .entities import (
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
from .services import (
    CostEngine,
    FormulaError,
    build_variables,
    evaluate,
    rollup,
)
from .value_objects import (
    CostBreakdown,
    CostingInputError,
    CostResult,
    Diagnostic,
    EngineSettings,
    HardwareLine,
    LaborEstimate,
    LaborUnit,
    Material,
    MaterialAreas,
    MaterialRole,
    PartArea,
    ProductPrice,
)

__all__ = [
    # Entities
    "CabinetConfiguration",
    "CabinetFront",
    "Compartment",
    "CompartmentItem",
    "FrontHardware",
    "LaborConfig",
    "LaborLine",
    "MaterialConfig",
    "ModelHardware",
    "ModelParameters",
    "ParametricPanel",
    # Services
    "CostEngine",
    "FormulaError",
    "build_variables",
    "evaluate",
    "rollup",
    # Value objects
    "CostBreakdown",
    "CostResult",
    "CostingInputError",
    "Diagnostic",
    "EngineSettings",
    "HardwareLine",
    "LaborEstimate",
    "LaborUnit",
    "Material",
    "MaterialAreas",
    "MaterialRole",
    "PartArea",
    "ProductPrice",
]
