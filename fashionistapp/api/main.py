"""FastAPI entrypoint and HTTP routes."""

import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from fashionistapp.api import catalog, checkout, generate
from fashionistapp.api.errors import internal_error_response
from fashionistapp.config.settings import get_settings
from fashionistapp.metrics.prometheus_exporter import render_latest
from fashionistapp.monitoring.logging import configure_logging

logger = logging.getLogger(__name__)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return the JSON error envelope for failures outside route handlers."""

    logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return internal_error_response()


def create_app() -> FastAPI:
    """Initialise the FastAPI application."""

    settings = get_settings()
    configure_logging(settings)
    app = FastAPI(
        title="FashionistAPP API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.get("/metrics", tags=["system"])
    async def metrics() -> Response:
        payload, content_type = render_latest()
        return Response(content=payload, media_type=content_type)

    app.include_router(catalog.router)
    app.include_router(generate.router)
    app.include_router(checkout.router)
    return app


app = create_app()
