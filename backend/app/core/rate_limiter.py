"""
Rate Limiting for LeadTrack API
===============================
slowapi limiter keyed on client address. Only the unauthenticated auth
endpoints are limited:
- /auth/login: LOGIN_RATE_LIMIT (brute force protection)
- /auth/register: REGISTER_RATE_LIMIT
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.logging_config import logger


limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    enabled=settings.RATE_LIMIT_ENABLED,
    strategy="fixed-window",
)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Too many requests, with a Retry-After hint"""
    logger.warning(
        f"[RateLimit] Exceeded for {get_remote_address(request)} on {request.url.path}: {exc.detail}",
        extra={"event_type": "rate_limit", "http_path": request.url.path}
    )

    return JSONResponse(
        status_code=429,
        content={
            "detail": "Too many requests. Please slow down.",
            "error": {
                "code": "RATE_LIMIT_EXCEEDED",
                "message": str(exc.detail),
                "details": {},
            },
        },
        headers={"Retry-After": "60"},
    )


def auth_rate_limit():
    """Rate limit for login"""
    return limiter.limit(settings.LOGIN_RATE_LIMIT)


def register_rate_limit():
    """Rate limit for registration"""
    return limiter.limit(settings.REGISTER_RATE_LIMIT)
