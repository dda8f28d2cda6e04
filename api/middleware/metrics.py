"""
Prometheus metrics middleware for the lead qualification engine API.

Exposes /metrics endpoint with request counters, latency histograms,
and lead / tax business metrics.
"""

import time

from fastapi import Request, Response
from prometheus_client import (
    Counter, Histogram, Gauge,
    generate_latest, CONTENT_TYPE_LATEST,
)
from starlette.middleware.base import BaseHTTPMiddleware

# Request metrics
REQUEST_COUNT = Counter(
    "leadengine_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)
REQUEST_LATENCY = Histogram(
    "leadengine_http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)
ACTIVE_REQUESTS = Gauge(
    "leadengine_http_active_requests",
    "Currently active HTTP requests",
)

# Business metrics
LEADS_SCORED = Counter(
    "leadengine_leads_scored_total",
    "Lead extractions by priority",
    ["priority"],
)
LEAD_SCORE_HIST = Histogram(
    "leadengine_lead_score",
    "Lead score distribution",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)
TAX_CALCULATIONS = Counter(
    "leadengine_tax_calculations_total",
    "Tax calculations by calculator",
    ["calculator"],
)


def record_lead_score(score: int, priority: str):
    """Record a scored lead."""
    LEADS_SCORED.labels(priority=priority).inc()
    LEAD_SCORE_HIST.observe(score)


def record_tax_calculation(calculator: str):
    """Record a tax calculation."""
    TAX_CALCULATIONS.labels(calculator=calculator).inc()


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware that records HTTP request metrics."""

    async def dispatch(self, request: Request, call_next):
        ACTIVE_REQUESTS.inc()
        start = time.time()

        try:
            response = await call_next(request)
        finally:
            ACTIVE_REQUESTS.dec()

        duration = time.time() - start
        endpoint = request.url.path

        REQUEST_COUNT.labels(
            method=request.method,
            endpoint=endpoint,
            status_code=response.status_code,
        ).inc()
        REQUEST_LATENCY.labels(
            method=request.method,
            endpoint=endpoint,
        ).observe(duration)

        return response


async def metrics_endpoint(request: Request) -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
