"""Cost calculation endpoints."""

from fastapi import APIRouter

from cabinet_costing.web.dependencies import CalculateCommandDep
from cabinet_costing.web.schemas.requests import CostRequestSchema
from cabinet_costing.web.schemas.responses import (
    CostResultSchema,
    ErrorResponseSchema,
)

router = APIRouter(prefix="/costs", tags=["costs"])


@router.post(
    "",
    response_model=CostResultSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
def calculate_cost(
    request: CostRequestSchema,
    command: CalculateCommandDep,
) -> CostResultSchema:
    """Compute the cost breakdown for a configured cabinet model.

    Args:
        request: Configuration, model parameters, catalog and prices.
        command: Injected calculation command.

    Returns:
        Breakdown with diagnostics for every value that fell back to zero.

    Raises:
        CostingInputError: Handled as 422 when the configuration
            cannot be priced.
    """
    result = command.execute(request)
    return CostResultSchema.from_result(result)
