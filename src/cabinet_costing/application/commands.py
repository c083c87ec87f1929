"""Application commands (use cases) for cabinet cost calculation."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from cabinet_costing.application.config import (
    CostRequestSchema,
    config_to_configuration,
    config_to_materials,
    config_to_model,
    config_to_prices,
    config_to_settings,
    load_request_from_dict,
)
from cabinet_costing.domain import CostEngine, CostResult


class CalculateCostCommand:
    """Command to price one configured cabinet from a request document.

    Settings carried in the request configure a fresh engine for each call,
    so concurrent executions share nothing.
    """

    def __init__(self, engine_factory: type[CostEngine] = CostEngine) -> None:
        self.engine_factory = engine_factory

    def execute(
        self,
        request: CostRequestSchema | dict[str, Any],
        overhead_percentage: float | None = None,
    ) -> CostResult:
        """Execute the cost calculation.

        Args:
            request: A validated request, or a raw dictionary to validate.
            overhead_percentage: Optional override of the request's overhead.

        Returns:
            CostResult with the breakdown and diagnostics.

        Raises:
            ConfigError: If a raw dictionary fails validation.
            CostingInputError: If the configuration cannot be priced.
        """
        if not isinstance(request, CostRequestSchema):
            request = load_request_from_dict(request)

        settings = config_to_settings(request.settings)
        if overhead_percentage is not None:
            settings = replace(settings, overhead_percentage=overhead_percentage)

        engine = self.engine_factory(settings)
        return engine.calculate(
            config_to_configuration(request.configuration),
            config_to_model(request.model),
            materials=config_to_materials(request),
            prices=config_to_prices(request),
            extra_variables=request.variables or None,
        )
