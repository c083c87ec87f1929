"""Labor time and cost estimation."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Mapping, Sequence

from ..value_objects import LaborEstimate, LaborUnit, MaterialAreas, MaterialRole
from .areas import MM2_PER_M2
from .formula import resolve

if TYPE_CHECKING:
    from ..entities import (
        CabinetFront,
        Compartment,
        LaborConfig,
        ParametricPanel,
    )
    from .diagnostics import DiagnosticLog

__all__ = ["LaborEstimator", "MINUTES_PER_HOUR"]

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60


def _count_fronts(fronts: Sequence[CabinetFront]) -> int:
    return sum(f.quantity or 1 for f in fronts if f.visible)


def _count_items(compartments: Sequence[Compartment]) -> int:
    return sum(len(c.items) for c in compartments)


def _finite(name: str, value: float, diagnostics: DiagnosticLog | None) -> float:
    if math.isfinite(value):
        return value
    logger.debug("Labor variable %s is not a finite number, counted as 0", name)
    if diagnostics is not None:
        diagnostics.add(f"labor.{name}", "not a finite number, counted as 0")
    return 0.0


class LaborEstimator:
    """Converts part counts into labor minutes and cost.

    With plain coefficients the estimate is pure arithmetic::

        minutes = base + panels * per_panel + fronts * per_front
                  + items * per_compartment_item
        cost = minutes / 60 * hourly_rate

    where ``panels`` counts visible panels, ``fronts`` sums the quantities of
    visible fronts and ``items`` counts compartment items. A labor config that
    carries formula ``lines`` is evaluated line by line instead (see
    :meth:`estimate_lines`).
    """

    def estimate(
        self,
        panels: Sequence[ParametricPanel],
        fronts: Sequence[CabinetFront],
        compartments: Sequence[Compartment],
        labor_config: LaborConfig,
    ) -> LaborEstimate:
        """Estimate labor from the configured per-item coefficients."""
        panel_minutes = sum(1 for p in panels if p.visible) * labor_config.per_panel_minutes
        front_minutes = _count_fronts(fronts) * labor_config.per_front_minutes
        item_minutes = _count_items(compartments) * labor_config.per_compartment_item_minutes

        minutes = labor_config.base_minutes + panel_minutes + front_minutes + item_minutes
        return LaborEstimate(
            minutes=minutes,
            cost=minutes / MINUTES_PER_HOUR * labor_config.hourly_rate,
        )

    def line_variables(
        self,
        panels: Sequence[ParametricPanel],
        fronts: Sequence[CabinetFront],
        compartments: Sequence[Compartment],
        variables: Mapping[str, float],
        areas: MaterialAreas,
        hardware_count: int = 0,
        diagnostics: DiagnosticLog | None = None,
    ) -> dict[str, float]:
        """Extend the base variables with counts and areas for labor lines."""
        visible_panels = [p for p in panels if p.visible]
        visible_fronts = [f for f in fronts if f.visible]

        total_edges = 0.0
        for panel in visible_panels:
            length = float(resolve(panel.length, variables))
            width = float(resolve(panel.width, variables))
            total_edges += 2 * (length + width) / 1000

        front_area = 0.0
        for front in visible_fronts:
            width = float(resolve(front.width, variables))
            height = float(resolve(front.height, variables))
            quantity = front.quantity or 1
            front_area += width * height * quantity / MM2_PER_M2
            total_edges += 2 * (width + height) * quantity / 1000

        interior_panels = sum(
            1
            for p in panels
            if p.material_type == MaterialRole.SHELF.value or "shelf" in p.name.lower()
        )

        return {
            **variables,
            "body": areas.body,
            "door": areas.door,
            "shelf": areas.shelf,
            "total_area": areas.total,
            "panels": len(visible_panels),
            "total_panels": len(panels),
            "interior_panels": interior_panels,
            "fronts": _count_fronts(fronts),
            "compartment_items": _count_items(compartments),
            "hardware_count": hardware_count,
            "body_area": areas.body,
            "door_area": areas.door,
            "shelf_area": areas.shelf,
            "front_area": _finite("front_area", front_area, diagnostics),
            "volume": _finite(
                "volume",
                variables["width"] * variables["height"] * variables["depth"] / 1e9,
                diagnostics,
            ),
            "total_edges": _finite("total_edges", total_edges, diagnostics),
        }

    def estimate_lines(
        self,
        labor_config: LaborConfig,
        variables: Mapping[str, float],
        diagnostics: DiagnosticLog | None = None,
    ) -> LaborEstimate:
        """Estimate labor from formula lines.

        ``minutes`` lines add to labor time; ``euros`` lines add directly to
        labor cost. A line evaluating below zero contributes nothing.
        """
        minutes = 0.0
        direct_cost = 0.0
        for index, line in enumerate(labor_config.lines or ()):
            location = f"labor.lines[{index}]({line.name})"
            value = resolve(line.formula, variables, diagnostics, location)
            if value < 0:
                logger.debug("Labor line %s evaluated to %s, counted as 0", location, value)
                if diagnostics is not None:
                    diagnostics.add(location, f"negative value {value} counted as 0")
                continue
            if line.unit == LaborUnit.MINUTES:
                minutes += value
            else:
                direct_cost += value

        return LaborEstimate(
            minutes=minutes,
            cost=minutes / MINUTES_PER_HOUR * labor_config.hourly_rate + direct_cost,
        )
