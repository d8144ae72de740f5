"""FastAPI application entrypoint."""
from __future__ import annotations

from fastapi import FastAPI

from approval.api.errors import register_exception_handlers
from approval.api.routes import register_routes
from approval.core.config import Settings, get_settings
from approval.core.logging import configure_logging
from approval.obs import (
    AuditMiddleware,
    PrometheusMiddleware,
    initialise_tracing,
    instrument_fastapi_app,
    metrics_router,
)


def create_application(settings: Settings | None = None) -> FastAPI:
    """Application factory used by ASGI servers and tests."""
    settings = settings or get_settings()
    configure_logging(settings.logging_config_path)

    if settings.enable_tracing:
        initialise_tracing(service_name=settings.app_name, endpoint=settings.otel_exporter_endpoint)

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        docs_url=settings.docs_url,
        redoc_url=settings.redoc_url,
        openapi_url=settings.openapi_url,
    )

    if settings.enable_audit_log:
        application.add_middleware(AuditMiddleware)
    if settings.enable_metrics:
        application.add_middleware(PrometheusMiddleware)
        application.include_router(metrics_router)
    register_routes(application)
    register_exception_handlers(application)

    if settings.enable_tracing:
        instrument_fastapi_app(application)

    return application


app = create_application()
