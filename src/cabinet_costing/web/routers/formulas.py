"""Formula evaluation endpoints."""

from fastapi import APIRouter

from cabinet_costing.domain import FormulaError
from cabinet_costing.domain.services.formula import evaluate_formula
from cabinet_costing.web.schemas.requests import FormulaEvaluateRequest
from cabinet_costing.web.schemas.responses import FormulaResultSchema

router = APIRouter(prefix="/formulas", tags=["formulas"])


@router.post("/evaluate", response_model=FormulaResultSchema)
async def evaluate_expression(request: FormulaEvaluateRequest) -> FormulaResultSchema:
    """Evaluate a formula against a variable table.

    A failing formula returns ``value`` 0 with the reason in ``error``, the
    same value the engine would use.
    """
    try:
        value = evaluate_formula(request.expression, request.variables)
    except FormulaError as e:
        return FormulaResultSchema(value=0.0, error=str(e))
    return FormulaResultSchema(value=value)
