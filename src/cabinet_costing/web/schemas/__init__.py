"""Pydantic schemas for the REST API."""

from cabinet_costing.web.schemas.requests import (
    CostRequestSchema,
    FormulaEvaluateRequest,
)
from cabinet_costing.web.schemas.responses import (
    CostBreakdownSchema,
    CostResultSchema,
    DiagnosticSchema,
    ErrorResponseSchema,
    FormulaResultSchema,
    HardwareItemSchema,
    MaterialAreasSchema,
    PartSchema,
)

__all__ = [
    # Requests
    "CostRequestSchema",
    "FormulaEvaluateRequest",
    # Responses
    "CostBreakdownSchema",
    "CostResultSchema",
    "DiagnosticSchema",
    "ErrorResponseSchema",
    "FormulaResultSchema",
    "HardwareItemSchema",
    "MaterialAreasSchema",
    "PartSchema",
]
