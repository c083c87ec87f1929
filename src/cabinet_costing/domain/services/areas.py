"""Material area aggregation over panels, fronts and compartment items."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Iterable, Iterator, Mapping

from ..value_objects import CompartmentItemType, MaterialAreas, MaterialRole, PartArea
from .formula import resolve

if TYPE_CHECKING:
    from ..entities import CabinetFront, Compartment, ParametricPanel
    from .diagnostics import DiagnosticLog

__all__ = ["MM2_PER_M2", "MaterialAreaAggregator"]

logger = logging.getLogger(__name__)

MM2_PER_M2 = 1_000_000

_SHELF_ITEMS = {
    CompartmentItemType.SHELF.value,
    CompartmentItemType.HORIZONTAL_DIVIDER.value,
}


class MaterialAreaAggregator:
    """Accumulates area in square meters per material role.

    Visible panels go to the bucket named by their material type (unknown
    types count as body). Visible fronts always go to the door bucket.
    Compartment shelves and horizontal dividers go to the shelf bucket,
    vertical dividers to the body bucket.
    """

    def aggregate(
        self,
        panels: Iterable[ParametricPanel],
        fronts: Iterable[CabinetFront],
        compartments: Iterable[Compartment],
        variables: Mapping[str, float],
        diagnostics: DiagnosticLog | None = None,
    ) -> MaterialAreas:
        """Sum part areas into body, door and shelf buckets."""
        return self.summarize(
            self.collect_parts(panels, fronts, compartments, variables, diagnostics)
        )

    @staticmethod
    def summarize(parts: Iterable[PartArea]) -> MaterialAreas:
        totals = {role: 0.0 for role in MaterialRole}
        for part in parts:
            totals[part.role] += part.area
        return MaterialAreas(
            body=totals[MaterialRole.BODY],
            door=totals[MaterialRole.DOOR],
            shelf=totals[MaterialRole.SHELF],
        )

    def collect_parts(
        self,
        panels: Iterable[ParametricPanel],
        fronts: Iterable[CabinetFront],
        compartments: Iterable[Compartment],
        variables: Mapping[str, float],
        diagnostics: DiagnosticLog | None = None,
    ) -> list[PartArea]:
        """Evaluate every contributing part and return its area in m²."""
        parts: list[PartArea] = []
        parts.extend(self._panel_parts(panels, variables, diagnostics))
        parts.extend(self._front_parts(fronts, variables, diagnostics))
        parts.extend(self._compartment_parts(compartments, variables, diagnostics))
        return parts

    def _panel_parts(
        self,
        panels: Iterable[ParametricPanel],
        variables: Mapping[str, float],
        diagnostics: DiagnosticLog | None,
    ) -> Iterator[PartArea]:
        for index, panel in enumerate(panels):
            if not panel.visible:
                continue
            location = f"panels[{index}]({panel.name})"
            length = resolve(panel.length, variables, diagnostics, f"{location}.length")
            width = resolve(panel.width, variables, diagnostics, f"{location}.width")
            yield self._part(
                panel.name,
                MaterialRole.from_value(panel.material_type),
                length,
                width,
                1,
                location,
                diagnostics,
            )

    def _front_parts(
        self,
        fronts: Iterable[CabinetFront],
        variables: Mapping[str, float],
        diagnostics: DiagnosticLog | None,
    ) -> Iterator[PartArea]:
        for index, front in enumerate(fronts):
            if not front.visible:
                continue
            name = front.name or front.front_type
            location = f"fronts[{index}]({name})"
            width = resolve(front.width, variables, diagnostics, f"{location}.width")
            height = resolve(front.height, variables, diagnostics, f"{location}.height")
            # Fronts consume front material whatever their declared type
            yield self._part(
                name,
                MaterialRole.DOOR,
                width,
                height,
                front.quantity or 1,
                location,
                diagnostics,
            )

    def _compartment_parts(
        self,
        compartments: Iterable[Compartment],
        variables: Mapping[str, float],
        diagnostics: DiagnosticLog | None,
    ) -> Iterator[PartArea]:
        for index, compartment in enumerate(compartments):
            location = f"compartments[{index}]"
            if compartment.name:
                location = f"{location}({compartment.name})"
            width = resolve(compartment.width, variables, diagnostics, f"{location}.width")
            depth = resolve(compartment.depth, variables, diagnostics, f"{location}.depth")
            height = resolve(compartment.height, variables, diagnostics, f"{location}.height")

            for item_index, item in enumerate(compartment.items):
                item_location = f"{location}.items[{item_index}]"
                quantity = item.quantity or 1
                if item.item_type in _SHELF_ITEMS:
                    yield self._part(
                        item.item_type,
                        MaterialRole.SHELF,
                        width,
                        depth,
                        quantity,
                        item_location,
                        diagnostics,
                    )
                elif item.item_type == CompartmentItemType.VERTICAL_DIVIDER.value:
                    # One divider per item regardless of quantity
                    if quantity != 1 and diagnostics is not None:
                        diagnostics.add(
                            item_location,
                            f"vertical divider quantity {quantity} ignored, counted once",
                        )
                    yield self._part(
                        item.item_type,
                        MaterialRole.BODY,
                        height,
                        depth,
                        1,
                        item_location,
                        diagnostics,
                    )
                elif diagnostics is not None:
                    diagnostics.add(
                        item_location, f"unknown item type {item.item_type!r} ignored"
                    )

    @staticmethod
    def _part(
        name: str,
        role: MaterialRole,
        length: float,
        width: float,
        quantity: int,
        location: str,
        diagnostics: DiagnosticLog | None,
    ) -> PartArea:
        try:
            area = length * width * quantity / MM2_PER_M2
        except OverflowError:
            area = math.inf
        if not math.isfinite(area):
            logger.debug("Non-finite area at %s counted as 0", location)
            if diagnostics is not None:
                diagnostics.add(location, "area is not a finite number, counted as 0")
            area = 0.0
        elif area < 0:
            logger.debug("Negative area %s m² at %s clamped to 0", area, location)
            if diagnostics is not None:
                diagnostics.add(location, f"negative area {area:.6f} m² counted as 0")
            area = 0.0
        return PartArea(
            name=name,
            role=role,
            length=length,
            width=width,
            quantity=quantity,
            area=area,
        )
