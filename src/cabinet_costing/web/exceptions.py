"""Exception handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cabinet_costing.application.config import ConfigError
from cabinet_costing.domain import CostingInputError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(CostingInputError)
    async def costing_input_error_handler(
        request: Request, exc: CostingInputError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Unable to price this configuration",
                "error_type": "invalid_input",
                "details": [{"field": exc.field, "message": str(exc)}],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )
