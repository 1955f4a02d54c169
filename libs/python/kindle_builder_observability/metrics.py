"""Prometheus metrics helpers and middleware."""

from __future__ import annotations

from time import perf_counter

from fastapi import FastAPI, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


_HTTP_REQUEST_COUNT = Counter(
    "kindle_builder_http_requests_total",
    "Total HTTP requests processed by service",
    labelnames=("service", "method", "route", "status"),
)

_HTTP_REQUEST_LATENCY = Histogram(
    "kindle_builder_http_request_duration_seconds",
    "Latency of HTTP requests",
    labelnames=("service", "method", "route"),
)

_STAGE_DURATION = Histogram(
    "kindle_builder_stage_duration_seconds",
    "Duration of manuscript pipeline stages",
    labelnames=("service", "stage"),
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25),
)

_STAGE_COUNTER = Counter(
    "kindle_builder_stage_runs_total",
    "Count of stage executions by outcome",
    labelnames=("service", "stage", "status"),
)

_MANUSCRIPT_COUNTER = Counter(
    "kindle_builder_manuscripts_total",
    "Manuscripts assembled, by outcome",
    labelnames=("service", "status"),
)

_MANUSCRIPT_PAGES = Histogram(
    "kindle_builder_manuscript_pages",
    "Target page counts of assembled manuscripts",
    labelnames=("service",),
    buckets=(10, 15, 20, 25, 30),
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Collect request metrics for FastAPI services."""

    def __init__(self, app: FastAPI, service_name: str) -> None:
        super().__init__(app)
        self.service_name = service_name

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        start = perf_counter()
        response = await call_next(request)
        elapsed = perf_counter() - start

        route_template = request.url.path
        route = request.scope.get("route")
        if route and getattr(route, "path", None):
            route_template = route.path  # type: ignore[assignment]

        status = getattr(response, "status_code", 500)
        _HTTP_REQUEST_COUNT.labels(self.service_name, request.method, route_template, str(status)).inc()
        _HTTP_REQUEST_LATENCY.labels(self.service_name, request.method, route_template).observe(elapsed)
        return response

def setup_fastapi_metrics(app: FastAPI, service_name: str, endpoint: str = "/metrics") -> None:
    """Register Prometheus middleware and metrics endpoint for a FastAPI app."""

    if getattr(app.state, "metrics_configured", False):
        return

    app.add_middleware(PrometheusMiddleware, service_name=service_name)

    @app.get(endpoint, include_in_schema=False)
    async def _metrics_endpoint() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.state.metrics_configured = True


def observe_stage_duration(
    stage: str,
    duration_seconds: float,
    *,
    service_name: str,
    status: str = "success",
) -> None:
    """Record metrics for stage execution duration and outcome."""

    _STAGE_DURATION.labels(service_name, stage).observe(max(duration_seconds, 0.0))
    _STAGE_COUNTER.labels(service_name, stage, status).inc()

def observe_manuscript(
    *,
    service_name: str,
    target_pages: int | None,
    status: str = "success",
) -> None:
    """Count an assembly attempt and, on success, its page volume."""

    _MANUSCRIPT_COUNTER.labels(service_name, status).inc()
    if status == "success" and target_pages is not None:
        _MANUSCRIPT_PAGES.labels(service_name).observe(target_pages)
