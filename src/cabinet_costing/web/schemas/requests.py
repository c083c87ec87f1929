"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, ConfigDict, Field

from cabinet_costing.application.config.schema import CostRequestSchema


class FormulaEvaluateRequest(BaseModel):
    """Request for evaluating a single formula."""

    model_config = ConfigDict(allow_inf_nan=False)

    expression: str | float = Field(..., description="Formula or number")
    variables: dict[str, float] = Field(
        default_factory=dict, description="Variable table"
    )


__all__ = ["CostRequestSchema", "FormulaEvaluateRequest"]
