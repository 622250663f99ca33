"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from remit_reporting.api.middleware import RequestIDMiddleware, MetricsMiddleware
from remit_reporting.api.v1 import admin, reports, stored
from remit_reporting.domain.exceptions import (
    AlreadyInitializedError,
    ArithmeticOverflowError,
    CollaboratorError,
    ConfigurationMissingError,
    UnauthorizedError,
)
from remit_reporting.infrastructure.observability.logging import setup_logging
from remit_reporting.infrastructure.observability.metrics import collaborator_failures_counter
from remit_reporting.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain failures to HTTP responses; the unit of work has already rolled back"""

    @app.exception_handler(ConfigurationMissingError)
    async def configuration_missing(request: Request, exc: ConfigurationMissingError):
        logging.warning(f"Configuration missing: {exc}", extra={"request_id": _request_id(request)})
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(AlreadyInitializedError)
    async def already_initialized(request: Request, exc: AlreadyInitializedError):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(UnauthorizedError)
    async def unauthorized(request: Request, exc: UnauthorizedError):
        logging.warning(f"Unauthorized: {exc}", extra={"request_id": _request_id(request)})
        return JSONResponse(status_code=403, content={"detail": str(exc)})

    @app.exception_handler(CollaboratorError)
    async def collaborator_failure(request: Request, exc: CollaboratorError):
        collaborator_failures_counter.labels(collaborator=exc.collaborator).inc()
        logging.error(f"Collaborator error: {exc}", extra={"request_id": _request_id(request)})
        return JSONResponse(status_code=502, content={"detail": f"{exc.collaborator} service unavailable"})

    @app.exception_handler(ArithmeticOverflowError)
    async def arithmetic_overflow(request: Request, exc: ArithmeticOverflowError):
        logging.error(f"Arithmetic overflow: {exc}", extra={"request_id": _request_id(request)})
        return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Remittance Reporting",
        description="Financial health reports aggregated from remittance, savings, bill and insurance services",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(admin.router, prefix="/v1", tags=["admin"])
    app.include_router(reports.router, prefix="/v1", tags=["reports"])
    app.include_router(stored.router, prefix="/v1", tags=["stored-reports"])

    return app


app = create_app()
