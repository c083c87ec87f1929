"""Single-pass cost computation for one configured cabinet model."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Mapping

from ..entities import ModelParameters
from ..value_objects import CostingInputError, CostResult, EngineSettings
from .areas import MaterialAreaAggregator
from .diagnostics import DiagnosticLog
from .hardware import HardwareResolver
from .labor import LaborEstimator
from .material_cost import MaterialCostCalculator
from .rollup import rollup
from .variables import build_variables

if TYPE_CHECKING:
    from ...contracts.protocols import (
        MaterialCatalogProtocol,
        ProductPriceLookupProtocol,
    )
    from ..entities import CabinetConfiguration
    from ..value_objects import Material

__all__ = ["CostEngine"]

logger = logging.getLogger(__name__)


def _require_finite(**amounts: float) -> None:
    for name, amount in amounts.items():
        if not math.isfinite(amount):
            raise CostingInputError(
                f"The {name} amount is not a finite number", field=name
            )


class CostEngine:
    """Computes a CostBreakdown from a configuration and model parameters.

    The engine is stateless between calls and performs no I/O: materials and
    product prices are handed in already resolved. Configuration, model
    parameters, catalog -> variables -> areas -> costs -> rollup.

    Example:
        >>> engine = CostEngine()
        >>> result = engine.calculate(config, model, materials={"mdf": mdf})
        >>> result.breakdown.total_cost
    """

    def __init__(
        self,
        settings: EngineSettings | None = None,
        area_aggregator: MaterialAreaAggregator | None = None,
        material_calculator: MaterialCostCalculator | None = None,
        hardware_resolver: HardwareResolver | None = None,
        labor_estimator: LaborEstimator | None = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self.area_aggregator = area_aggregator or MaterialAreaAggregator()
        self.material_calculator = material_calculator or MaterialCostCalculator(
            self.settings
        )
        self.hardware_resolver = hardware_resolver or HardwareResolver()
        self.labor_estimator = labor_estimator or LaborEstimator()

    def calculate(
        self,
        config: CabinetConfiguration,
        model: ModelParameters | None = None,
        materials: MaterialCatalogProtocol | None = None,
        prices: ProductPriceLookupProtocol | None = None,
        extra_variables: Mapping[str, float] | None = None,
        overhead_percentage: float | None = None,
    ) -> CostResult:
        """Compute the full breakdown.

        Args:
            config: Concrete dimensions and material selection.
            model: Declarative model parameters. An empty model prices only
                labor base time.
            materials: Material catalog keyed by material id.
            prices: Product prices for front hardware keyed by product id.
            extra_variables: Additional formula variables.
            overhead_percentage: Overrides the settings' overhead percentage.

        Returns:
            CostResult with the breakdown and any diagnostics.

        Raises:
            CostingInputError: If the configuration lacks usable dimensions,
                extra variables are invalid, or a cost stream sums to a
                non-finite amount.
        """
        model = model or ModelParameters()
        diagnostics = DiagnosticLog()

        variables = build_variables(
            config, model.fronts, extra=extra_variables, settings=self.settings
        )

        parts = self.area_aggregator.collect_parts(
            model.panels, model.fronts, model.compartments, variables, diagnostics
        )
        areas = self.area_aggregator.summarize(parts)

        material_config = config.material_config
        materials_cost = self.material_calculator.price(
            areas,
            self._material(materials, material_config.body_material),
            self._material(materials, material_config.door_material),
            self._material(materials, material_config.shelf_material),
            diagnostics,
        )

        hardware = self.hardware_resolver.resolve(
            model.hardware,
            self.hardware_resolver.front_lines(model.fronts, model.front_hardware),
            variables,
            prices,
            diagnostics,
        )

        labor_config = model.labor_config or self.settings.labor_fallback()
        if labor_config.lines:
            labor_variables = self.labor_estimator.line_variables(
                model.panels,
                model.fronts,
                model.compartments,
                variables,
                areas,
                hardware_count=self.hardware_resolver.count(model.hardware, variables),
                diagnostics=diagnostics,
            )
            labor = self.labor_estimator.estimate_lines(
                labor_config, labor_variables, diagnostics
            )
        else:
            labor = self.labor_estimator.estimate(
                model.panels, model.fronts, model.compartments, labor_config
            )

        if overhead_percentage is None:
            overhead_percentage = self.settings.overhead_percentage

        _require_finite(
            materials=materials_cost,
            hardware=hardware.total,
            labor=labor.cost,
            overhead=overhead_percentage,
        )
        breakdown = rollup(
            materials_cost,
            hardware.total,
            labor.cost,
            overhead_percentage,
            labor_minutes=labor.minutes,
            areas=areas,
            hardware_items=hardware.items,
            parts=parts,
        )
        _require_finite(total=breakdown.total_cost)
        logger.debug(
            "Priced %s: total %.2f, %d diagnostics",
            config.name or "configuration",
            breakdown.total_cost,
            len(diagnostics),
        )
        return CostResult(breakdown=breakdown, diagnostics=diagnostics.freeze())

    @staticmethod
    def _material(
        catalog: MaterialCatalogProtocol | None, material_id: str | None
    ) -> Material | None:
        if catalog is None or not material_id:
            return None
        return catalog.get(material_id)
