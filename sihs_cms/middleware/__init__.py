"""Middleware modules: metrics and rate limiting"""
from sihs_cms.middleware.monitoring import MonitoringMiddleware, record_auth_failure, record_lockout
from sihs_cms.middleware.rate_limit import get_rate_limit, limiter

__all__ = [
    "MonitoringMiddleware",
    "record_auth_failure",
    "record_lockout",
    "limiter",
    "get_rate_limit",
]
