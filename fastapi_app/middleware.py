"""Middleware for rate limiting and security headers"""

import logging
import time
from collections import deque
from typing import Deque, Dict

from fastapi import Request, status
from fastapi.responses import JSONResponse

from .config import service_config

logger = logging.getLogger(__name__)

EXEMPT_PATHS = {"/healthz"}


class RateLimiter:
    """Simple in-memory sliding-window rate limiter"""

    def __init__(self, sweep_interval: float = 60.0):
        self.requests: Dict[str, Deque[float]] = {}
        self.sweep_interval = sweep_interval
        self._last_sweep = time.time()

    def is_allowed(self, key: str, max_requests: int, window_seconds: int = 60) -> bool:
        """Check if request is allowed within rate limit"""
        now = time.time()
        if now - self._last_sweep >= self.sweep_interval:
            self._sweep(now, window_seconds)

        requests = self.requests.setdefault(key, deque(maxlen=1000))

        # Remove old requests outside the window
        while requests and requests[0] < now - window_seconds:
            requests.popleft()

        if len(requests) < max_requests:
            requests.append(now)
            return True

        if not requests:
            del self.requests[key]
        return False

    def _sweep(self, now: float, window_seconds: int):
        """Forget clients with no request inside the window"""
        cutoff = now - window_seconds
        idle = [key for key, requests in self.requests.items() if not requests or requests[-1] < cutoff]
        for key in idle:
            del self.requests[key]
        self._last_sweep = now

    def reset(self):
        self.requests.clear()
        self._last_sweep = time.time()


# Global rate limiter instance
rate_limiter = RateLimiter()


async def rate_limit_middleware(request: Request, call_next):
    """Rate limiting middleware"""
    if request.url.path in EXEMPT_PATHS:
        return await call_next(request)

    client_ip = request.client.host if request.client else "unknown"

    if service_config.get("security.rate_limiting.enabled", True):
        api_limit = service_config.get(
            "security.rate_limiting.api_requests_per_minute", 120
        )
        if not rate_limiter.is_allowed(client_ip, api_limit, 60):
            logger.warning(f"[api] Rate limit exceeded for {client_ip}")
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"detail": "Rate limit exceeded. Please try again later."},
                headers={"Retry-After": "60"},
            )

    return await call_next(request)


async def security_headers_middleware(request: Request, call_next):
    """Add security headers to responses"""
    response = await call_next(request)

    if service_config.get("security.security_headers.enabled", True):
        response.headers["X-Content-Type-Options"] = service_config.get(
            "security.security_headers.x_content_type_options", "nosniff"
        )
        response.headers["X-Frame-Options"] = service_config.get(
            "security.security_headers.x_frame_options", "DENY"
        )
        response.headers["Content-Security-Policy"] = service_config.get(
            "security.security_headers.content_security_policy", "default-src 'none'"
        )

        # Remove server information
        if "server" in response.headers:
            del response.headers["server"]

    return response
