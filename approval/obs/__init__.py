"""Observability utilities."""

from .audit import AuditLogRecord, AuditMiddleware
from .metrics import (
    REQUEST_COUNTER,
    REQUEST_ERROR_COUNTER,
    REQUEST_LATENCY_SECONDS,
    TABULATION_COUNTER,
    VOTES_SUBMITTED_COUNTER,
    PrometheusMiddleware,
    metrics_router,
    record_tabulation,
    record_vote,
)
from .tracing import (
    initialise_tracing,
    instrument_fastapi_app,
    instrument_sqlalchemy_engine,
    traced_span,
)

__all__ = [
    "AuditLogRecord",
    "AuditMiddleware",
    "PrometheusMiddleware",
    "REQUEST_COUNTER",
    "REQUEST_ERROR_COUNTER",
    "REQUEST_LATENCY_SECONDS",
    "TABULATION_COUNTER",
    "VOTES_SUBMITTED_COUNTER",
    "metrics_router",
    "record_tabulation",
    "record_vote",
    "initialise_tracing",
    "instrument_fastapi_app",
    "instrument_sqlalchemy_engine",
    "traced_span",
]
