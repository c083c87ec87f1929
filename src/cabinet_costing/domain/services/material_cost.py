"""Material pricing from aggregated areas."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..value_objects import EngineSettings, MaterialAreas, MaterialRole

if TYPE_CHECKING:
    from ..value_objects import Material
    from .diagnostics import DiagnosticLog

__all__ = ["MaterialCostCalculator"]

logger = logging.getLogger(__name__)


class MaterialCostCalculator:
    """Prices body, door and shelf areas plus an edge-banding estimate."""

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or EngineSettings()

    def waste_factor_for(self, material: Material) -> float:
        """Waste multiplier for a material (1.10 unless it carries its own)."""
        if self.settings.honor_material_waste_factor and material.waste_factor:
            return material.waste_factor
        return self.settings.default_waste_factor

    def edge_banding_cost(self, areas: MaterialAreas) -> float:
        """Banding estimate over all panel perimeters at a fixed ratio."""
        return (
            areas.total
            * self.settings.edge_banding_meters_per_m2
            * self.settings.edge_banding_cost_per_meter
        )

    def price(
        self,
        areas: MaterialAreas,
        body_material: Material | None = None,
        door_material: Material | None = None,
        shelf_material: Material | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> float:
        """Return the total material cost for the three area buckets.

        A missing material contributes nothing for its bucket. Edge banding
        is always added.
        """
        cost = 0.0
        resolved = {
            MaterialRole.BODY: body_material,
            MaterialRole.DOOR: door_material,
            MaterialRole.SHELF: shelf_material,
        }
        for role, material in resolved.items():
            area = areas.get(role)
            if material is None:
                if area > 0:
                    logger.debug("No %s material resolved, %.3f m² unpriced", role.value, area)
                    if diagnostics is not None:
                        diagnostics.add(
                            f"materials.{role.value}",
                            f"no material resolved, {area:.3f} m² priced at 0",
                        )
                continue
            cost += area * self.waste_factor_for(material) * material.cost_per_unit

        return cost + self.edge_banding_cost(areas)
