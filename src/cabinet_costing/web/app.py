"""FastAPI application factory.

Run with ``uvicorn cabinet_costing.web.app:app``.
"""

from fastapi import FastAPI

from cabinet_costing.web.exceptions import register_exception_handlers
from cabinet_costing.web.routers import costs_router, formulas_router

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Build the costing API: cost breakdowns, formula checks and health."""
    app = FastAPI(
        title="Cabinet Costing API",
        description="Prices parametric cabinet models for concrete dimensions",
        version="0.1.0",
    )
    register_exception_handlers(app)
    app.include_router(costs_router, prefix=API_PREFIX)
    app.include_router(formulas_router, prefix=API_PREFIX)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
