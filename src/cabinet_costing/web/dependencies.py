"""FastAPI dependency injection for costing services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cabinet_costing.application.commands import CalculateCostCommand


@lru_cache(maxsize=1)
def get_calculate_command() -> CalculateCostCommand:
    """Get cached CalculateCostCommand instance."""
    return CalculateCostCommand()


CalculateCommandDep = Annotated[CalculateCostCommand, Depends(get_calculate_command)]
