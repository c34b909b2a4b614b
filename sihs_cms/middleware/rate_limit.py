"""Rate limiting for API protection"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from sihs_cms.config import settings

# Login attempts are limited per client address, ahead of the account lockout
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=settings.RATE_LIMIT_DEFAULT,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)


RATE_LIMITS = {
    "login": settings.LOGIN_RATE_LIMIT,
    "register": "20/hour",
    "admin_write": "50/hour",
}


def get_rate_limit(endpoint: str) -> str:
    """Get rate limit for specific endpoint"""
    return RATE_LIMITS.get(endpoint, settings.RATE_LIMIT_DEFAULT[0])
