"""Monitoring and observability middleware"""
import time
from typing import Callable

from fastapi import Request, Response
from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware

from sihs_cms.utils.logger import logger


# ===== Prometheus Metrics =====

http_requests_total = Counter(
    "sihs_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"]
)

http_request_duration_seconds = Histogram(
    "sihs_http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"]
)

http_errors_total = Counter(
    "sihs_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "status"]
)

authentication_failures_total = Counter(
    "sihs_authentication_failures_total",
    "Total authentication failures",
    ["reason"]  # invalid_credentials, locked, invalid_token, token_expired, unauthenticated
)

account_lockouts_total = Counter(
    "sihs_account_lockouts_total",
    "Total account lockouts applied after repeated failed logins"
)


class MonitoringMiddleware(BaseHTTPMiddleware):
    """Middleware for request metrics and request-id tagging"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        method = request.method
        endpoint = request.url.path

        request_id = request.headers.get("x-request-id", f"req_{int(time.time() * 1000)}")
        request.state.request_id = request_id

        try:
            response = await call_next(request)
            status = response.status_code

            duration = time.time() - start_time
            http_requests_total.labels(method=method, endpoint=endpoint, status=status).inc()
            http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)

            if duration > 1.0:
                logger.warning(
                    f"Slow request detected: {method} {endpoint}",
                    extra={"request_id": request_id, "method": method, "path": endpoint},
                )

            if status >= 400:
                http_errors_total.labels(method=method, endpoint=endpoint, status=status).inc()

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration:.3f}s"

            return response

        except Exception:
            http_errors_total.labels(method=method, endpoint=endpoint, status=500).inc()
            logger.error(
                f"Request failed: {method} {endpoint}",
                extra={"request_id": request_id, "method": method, "path": endpoint},
                exc_info=True
            )
            raise


def record_auth_failure(reason: str):
    """Record an authentication failure"""
    authentication_failures_total.labels(reason=reason).inc()


def record_lockout():
    """Record a lockout being applied to an account"""
    account_lockouts_total.inc()
