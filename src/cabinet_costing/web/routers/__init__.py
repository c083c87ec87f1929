"""API routers for the REST API."""

from cabinet_costing.web.routers.costs import router as costs_router
from cabinet_costing.web.routers.formulas import router as formulas_router

__all__ = ["costs_router", "formulas_router"]
