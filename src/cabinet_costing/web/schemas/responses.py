"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from cabinet_costing.domain import CostResult


class HardwareItemSchema(BaseModel):
    """Priced hardware line."""

    name: str = Field(..., description="Hardware name")
    quantity: int = Field(..., description="Number of pieces")
    unit_price: float = Field(..., description="Price per piece")
    total_price: float = Field(..., description="Line total")


class PartSchema(BaseModel):
    """Part that contributed area."""

    name: str = Field(..., description="Part name")
    role: str = Field(..., description="Material bucket: body, door or shelf")
    length: float = Field(..., description="Length in mm")
    width: float = Field(..., description="Width in mm")
    quantity: int = Field(..., description="Number of pieces")
    area: float = Field(..., description="Area in m²")


class MaterialAreasSchema(BaseModel):
    """Area per material bucket in m²."""

    body: float
    door: float
    shelf: float
    total: float


class CostBreakdownSchema(BaseModel):
    """Full cost breakdown."""

    materials_cost: float
    hardware_cost: float
    labor_minutes: float
    labor_cost: float
    subtotal: float
    overhead_cost: float
    overhead_percentage: float
    margin_amount: float
    margin_percentage: float
    tax_amount: float
    tax_percentage: float
    total_cost: float
    material_areas: MaterialAreasSchema
    hardware_items: list[HardwareItemSchema] = Field(default_factory=list)
    parts: list[PartSchema] = Field(default_factory=list)


class DiagnosticSchema(BaseModel):
    """Fail-soft event recorded during computation."""

    location: str = Field(..., description="Where the value fell back")
    reason: str = Field(..., description="Why it fell back")


class CostResultSchema(BaseModel):
    """Response for a cost calculation."""

    breakdown: CostBreakdownSchema
    diagnostics: list[DiagnosticSchema] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: CostResult) -> "CostResultSchema":
        return cls.model_validate(
            {
                "breakdown": result.breakdown.to_dict(),
                "diagnostics": [
                    {"location": d.location, "reason": d.reason}
                    for d in result.diagnostics
                ],
            }
        )


class FormulaResultSchema(BaseModel):
    """Response for formula evaluation."""

    value: float = Field(..., description="Evaluated value (0 on failure)")
    error: str | None = Field(default=None, description="Failure reason, if any")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: list[dict[str, Any]] | None = Field(
        default=None, description="Additional error details"
    )
