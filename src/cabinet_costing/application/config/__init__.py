"""Request schema and loading for cost calculations.

Public API:
    - CostRequestSchema: Root request model
    - load_request: Load a request from a JSON file
    - load_request_from_dict: Load a request from a dictionary
    - ConfigError: Exception for loading and validation errors
    - config_to_*: Convert validated schemas to domain objects

Example:
    >>> from pathlib import Path
    >>> from cabinet_costing.application.config import load_request, ConfigError
    >>>
    >>> try:
    ...     request = load_request(Path("base-cabinet.json"))
    ...     print(request.configuration.width)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cabinet_costing.application.config.adapter import (
    config_to_configuration,
    config_to_labor,
    config_to_materials,
    config_to_model,
    config_to_prices,
    config_to_settings,
)
from cabinet_costing.application.config.loader import (
    ConfigError,
    load_request,
    load_request_from_dict,
)
from cabinet_costing.application.config.schema import (
    CabinetConfigurationSchema,
    CompartmentItemSchema,
    CompartmentSchema,
    CostRequestSchema,
    FrontHardwareSchema,
    FrontSchema,
    LaborConfigSchema,
    LaborLineSchema,
    MaterialConfigSchema,
    MaterialSchema,
    ModelHardwareSchema,
    ModelParametersSchema,
    PanelSchema,
    ProductPriceSchema,
    SettingsSchema,
)

__all__ = [
    # Loader
    "ConfigError",
    "load_request",
    "load_request_from_dict",
    # Adapters
    "config_to_configuration",
    "config_to_labor",
    "config_to_materials",
    "config_to_model",
    "config_to_prices",
    "config_to_settings",
    # Schemas
    "CabinetConfigurationSchema",
    "CompartmentItemSchema",
    "CompartmentSchema",
    "CostRequestSchema",
    "FrontHardwareSchema",
    "FrontSchema",
    "LaborConfigSchema",
    "LaborLineSchema",
    "MaterialConfigSchema",
    "MaterialSchema",
    "ModelHardwareSchema",
    "ModelParametersSchema",
    "PanelSchema",
    "ProductPriceSchema",
    "SettingsSchema",
]
