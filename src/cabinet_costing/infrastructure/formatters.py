"""Output formatters for cost results."""

from __future__ import annotations

import json
from typing import Any

from cabinet_costing.domain import CostBreakdown, CostResult, Diagnostic


class CostReportFormatter:
    """Formats a cost breakdown as a plain-text report."""

    def __init__(self, currency: str = "EUR", include_parts: bool = False) -> None:
        self._currency = currency
        self._include_parts = include_parts

    def format(self, breakdown: CostBreakdown) -> str:
        """Format the breakdown as a report."""
        areas = breakdown.material_areas
        lines = [
            "COST BREAKDOWN",
            "=" * 60,
            "",
            "Material areas (m²)",
            f"  Body:   {areas['body']:.3f}",
            f"  Door:   {areas['door']:.3f}",
            f"  Shelf:  {areas['shelf']:.3f}",
            f"  Total:  {areas['total']:.3f}",
            "",
        ]

        if self._include_parts and breakdown.parts:
            lines.append("Parts")
            for part in breakdown.parts:
                lines.append(
                    f"  {part.name or part.role.value:<24} {part.length:>8.1f} x {part.width:>8.1f}"
                    f"  x{part.quantity:<3} {part.area:>7.3f} m²  ({part.role.value})"
                )
            lines.append("")

        if breakdown.hardware_items:
            lines.append("Hardware")
            for item in breakdown.hardware_items:
                lines.append(
                    f"  {item.name:<30} {item.quantity:>4} x {item.unit_price:>8.2f}"
                    f" = {item.total_price:>9.2f}"
                )
            lines.append("")

        lines.extend(
            [
                "-" * 60,
                self._money_line("Materials", breakdown.materials_cost),
                self._money_line("Hardware", breakdown.hardware_cost),
                self._money_line(
                    f"Labor ({breakdown.labor_minutes:g} min)", breakdown.labor_cost
                ),
                self._money_line("Subtotal", breakdown.subtotal),
                self._money_line(
                    f"Overhead ({breakdown.overhead_percentage:g}%)",
                    breakdown.overhead_cost,
                ),
                "-" * 60,
                self._money_line("TOTAL", breakdown.total_cost),
            ]
        )
        return "\n".join(lines)

    def _money_line(self, label: str, amount: float) -> str:
        return f"{label:<36} {amount:>14.2f} {self._currency}"


class DiagnosticsFormatter:
    """Formats diagnostics as an indented list."""

    def format(self, diagnostics: tuple[Diagnostic, ...]) -> str:
        if not diagnostics:
            return "No diagnostics."
        lines = ["Diagnostics:"]
        lines.extend(f"  {d}" for d in diagnostics)
        return "\n".join(lines)


class JsonExporter:
    """Exports a cost result as JSON."""

    def to_dict(self, result: CostResult) -> dict[str, Any]:
        return {
            "breakdown": result.breakdown.to_dict(),
            "diagnostics": [
                {"location": d.location, "reason": d.reason} for d in result.diagnostics
            ],
        }

    def export(self, result: CostResult) -> str:
        """Export the result as a JSON string."""
        return json.dumps(self.to_dict(result), indent=2, allow_nan=False)
