"""Prometheus metrics for the HTTP layer and the voting core."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_LATENCY_SECONDS = Histogram(
    "http_request_latency_seconds",
    "Latency of HTTP requests in seconds.",
    labelnames=("method", "path"),
)
REQUEST_COUNTER = Counter(
    "http_requests_total",
    "Total number of HTTP requests processed.",
    labelnames=("method", "path", "status"),
)
REQUEST_ERROR_COUNTER = Counter(
    "http_request_errors_total",
    "Total number of HTTP requests that resulted in server errors.",
    labelnames=("method", "path", "status"),
)
VOTES_SUBMITTED_COUNTER = Counter(
    "approval_votes_submitted_total",
    "Number of individual votes applied to voters.",
    labelnames=("vote",),
)
TABULATION_COUNTER = Counter(
    "approval_tabulations_total",
    "Number of voting outcome recalculations.",
    labelnames=("meeting_type", "outcome"),
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware that records request metrics for Prometheus scraping."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:  # type: ignore[override]
        method = request.method
        route = request.scope.get("route")
        path = getattr(route, "path", request.url.path)
        start_time = time.perf_counter()
        status = "500"

        try:
            response = await call_next(request)
            route = request.scope.get("route")
            path = getattr(route, "path", path)
            status = str(response.status_code)
            if response.status_code >= 500:
                REQUEST_ERROR_COUNTER.labels(method=method, path=path, status=status).inc()
            return response
        except Exception:
            REQUEST_ERROR_COUNTER.labels(method=method, path=path, status="500").inc()
            raise
        finally:
            latency = time.perf_counter() - start_time
            REQUEST_LATENCY_SECONDS.labels(method=method, path=path).observe(latency)
            REQUEST_COUNTER.labels(method=method, path=path, status=status).inc()


metrics_router = APIRouter(tags=["observability"])


@metrics_router.get("/metrics", include_in_schema=False)
def metrics_endpoint() -> Response:
    """Expose Prometheus metrics for scraping."""
    payload = generate_latest()
    return Response(content=payload, media_type=CONTENT_TYPE_LATEST)


def record_vote(vote: str) -> None:
    """Count a vote applied to a voter, labelled by vote type name."""
    VOTES_SUBMITTED_COUNTER.labels(vote=vote).inc()


def record_tabulation(meeting_type: str, accepted: bool) -> None:
    """Count a tabulation outcome for the given meeting type."""
    outcome = "accepted" if accepted else "rejected"
    TABULATION_COUNTER.labels(meeting_type=meeting_type, outcome=outcome).inc()


__all__ = [
    "PrometheusMiddleware",
    "REQUEST_COUNTER",
    "REQUEST_ERROR_COUNTER",
    "REQUEST_LATENCY_SECONDS",
    "TABULATION_COUNTER",
    "VOTES_SUBMITTED_COUNTER",
    "metrics_endpoint",
    "metrics_router",
    "record_tabulation",
    "record_vote",
]
