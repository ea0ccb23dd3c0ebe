"""FastAPI application factory"""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from payment_manager.api.middleware import ErrorEnvelopeMiddleware, RequestIDMiddleware, MetricsMiddleware
from payment_manager.api.dependencies import get_request_id
from payment_manager.api.v1 import cheques, cash
from payment_manager.api.v1.responses import error_response
from payment_manager.infrastructure.database.session import init_db
from payment_manager.infrastructure.observability.logging import setup_logging
from payment_manager.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Payment Manager API",
        description="Cheque and cash payment record keeping",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(ErrorEnvelopeMiddleware)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request_handler(request: Request, exc: RequestValidationError):
        logging.warning(f"Malformed request: {exc.errors()}", extra={"request_id": get_request_id(request)})
        return error_response(400, "Request body must be a JSON object")

    # Liveness probe
    @app.get("/")
    def root():
        return {"message": "Payment Manager API is running!"}

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(cheques.router, prefix="/api", tags=["cheques"])
    app.include_router(cash.router, prefix="/api", tags=["cash"])

    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn"""
    if settings.auto_create_tables:
        init_db()
    logging.info(f"API endpoints available at http://{settings.host}:{settings.port}/api")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
