"""Final cost rollup into a CostBreakdown."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from ..value_objects import CostBreakdown, HardwareLine, MaterialAreas, PartArea

__all__ = ["rollup"]


def _money(value: float) -> float:
    return round(value, 2)


def rollup(
    materials_cost: float,
    hardware_cost: float,
    labor_cost: float,
    overhead_percentage: float,
    *,
    labor_minutes: float = 0.0,
    areas: MaterialAreas | None = None,
    hardware_items: Iterable[HardwareLine] = (),
    parts: Iterable[PartArea] = (),
) -> CostBreakdown:
    """Combine the three cost streams into a breakdown.

    Sums are taken at full precision; currency is rounded to 2 decimals and
    areas to 3 decimals only as they are placed into the breakdown. Margin
    and tax stay zero.
    """
    subtotal = materials_cost + hardware_cost + labor_cost
    overhead_cost = subtotal * overhead_percentage / 100
    total_cost = subtotal + overhead_cost

    return CostBreakdown(
        materials_cost=_money(materials_cost),
        hardware_cost=_money(hardware_cost),
        labor_minutes=round(labor_minutes, 2),
        labor_cost=_money(labor_cost),
        subtotal=_money(subtotal),
        overhead_cost=_money(overhead_cost),
        overhead_percentage=overhead_percentage,
        total_cost=_money(total_cost),
        material_areas=(areas or MaterialAreas()).rounded(),
        hardware_items=tuple(
            replace(
                item,
                unit_price=_money(item.unit_price),
                total_price=_money(item.total_price),
            )
            for item in hardware_items
        ),
        parts=tuple(replace(part, area=round(part.area, 3)) for part in parts),
    )
