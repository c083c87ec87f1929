"""Hardware quantity resolution and pricing."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Mapping

from ..value_objects import HardwareLine
from .formula import resolve

if TYPE_CHECKING:
    from ...contracts.protocols import ProductPriceLookupProtocol
    from ..entities import CabinetFront, FrontHardware, ModelHardware
    from .diagnostics import DiagnosticLog

__all__ = ["HardwareResolver", "HardwareResult", "UNKNOWN_HARDWARE"]

logger = logging.getLogger(__name__)

UNKNOWN_HARDWARE = "Unknown hardware"


@dataclass(frozen=True)
class HardwareResult:
    """Total hardware cost and itemized lines in encounter order."""

    total: float
    items: tuple[HardwareLine, ...]


def _quantity(value: float) -> int:
    """Ceiling-round an evaluated quantity, never below zero."""
    return max(0, math.ceil(value))


def _line(
    name: str,
    quantity: int,
    unit_price: float,
    location: str,
    diagnostics: DiagnosticLog | None,
) -> HardwareLine:
    total = quantity * unit_price
    if not math.isfinite(total):
        logger.debug("Non-finite hardware total at %s counted as 0", location)
        if diagnostics is not None:
            diagnostics.add(location, "line total is not a finite number, counted as 0")
        quantity, total = 0, 0.0
    return HardwareLine(
        name=name, quantity=quantity, unit_price=unit_price, total_price=total
    )


class HardwareResolver:
    """Resolves model-level and front-level hardware lines.

    Model-level quantities are formulas priced at the line's own unit price.
    Front-level lines look up their unit price by product id; a line whose
    product has no positive price is skipped.
    """

    def resolve(
        self,
        model_hardware: Iterable[ModelHardware],
        front_hardware: Iterable[tuple[str, FrontHardware]],
        variables: Mapping[str, float],
        prices: ProductPriceLookupProtocol | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> HardwareResult:
        """Price all hardware.

        Args:
            model_hardware: Hardware declared on the model.
            front_hardware: ``(location, line)`` pairs of front hardware, as
                produced by :meth:`front_lines`.
            variables: Variable table for quantity formulas.
            prices: Product price lookup for front hardware.
            diagnostics: Optional log for fail-soft events.

        Returns:
            HardwareResult with model-level lines first, then front lines.
        """
        items: list[HardwareLine] = []
        items.extend(self._model_lines(model_hardware, variables, diagnostics))
        items.extend(self._front_lines(front_hardware, variables, prices, diagnostics))
        return HardwareResult(
            total=sum(item.total_price for item in items),
            items=tuple(items),
        )

    @staticmethod
    def front_lines(
        fronts: Iterable[CabinetFront],
        loose: Iterable[FrontHardware] = (),
    ) -> list[tuple[str, FrontHardware]]:
        """Gather hardware of visible fronts, then model-level front hardware."""
        lines: list[tuple[str, FrontHardware]] = []
        for index, front in enumerate(fronts):
            if not front.visible:
                continue
            for line_index, line in enumerate(front.hardware):
                lines.append((f"fronts[{index}].hardware[{line_index}]", line))
        for index, line in enumerate(loose):
            lines.append((f"front_hardware[{index}]", line))
        return lines

    def count(
        self, model_hardware: Iterable[ModelHardware], variables: Mapping[str, float]
    ) -> int:
        """Total number of model-level hardware pieces."""
        return sum(_quantity(resolve(h.quantity, variables)) for h in model_hardware)

    def _model_lines(
        self,
        model_hardware: Iterable[ModelHardware],
        variables: Mapping[str, float],
        diagnostics: DiagnosticLog | None,
    ) -> Iterator[HardwareLine]:
        for index, hardware in enumerate(model_hardware):
            name = hardware.product_name or UNKNOWN_HARDWARE
            location = f"hardware[{index}]({name})"
            quantity = _quantity(
                resolve(hardware.quantity, variables, diagnostics, f"{location}.quantity")
            )
            yield _line(name, quantity, hardware.unit_price, location, diagnostics)

    def _front_lines(
        self,
        front_hardware: Iterable[tuple[str, FrontHardware]],
        variables: Mapping[str, float],
        prices: ProductPriceLookupProtocol | None,
        diagnostics: DiagnosticLog | None,
    ) -> Iterator[HardwareLine]:
        for location, line in front_hardware:
            product = prices.get(line.product_id) if prices is not None else None
            if product is None or not product.unit_price > 0:
                logger.debug("No price for product %s at %s, skipped", line.product_id, location)
                if diagnostics is not None:
                    diagnostics.add(location, f"no price for product {line.product_id!r}, skipped")
                continue
            quantity = _quantity(
                resolve(line.quantity, variables, diagnostics, f"{location}.quantity")
            )
            yield _line(
                product.name or UNKNOWN_HARDWARE,
                quantity,
                product.unit_price,
                location,
                diagnostics,
            )
