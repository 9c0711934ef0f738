"""
Security headers and rate limiting
"""

import math
import time
from typing import Dict, Tuple

from app.core.config import settings

WINDOW_SECONDS = 60

# Fixed-window counters: client ip -> (window start, request count)
rate_limiter: Dict[str, Tuple[float, int]] = {}

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
    "Content-Security-Policy": (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline' 'unsafe-eval'; "
        "style-src 'self' 'unsafe-inline'; "
        "img-src 'self' data: https:; "
        "font-src 'self'; "
        "connect-src 'self'; "
        "frame-ancestors 'none'; "
        "base-uri 'self'; "
        "form-action 'self'"
    ),
}

HSTS_HEADER = "max-age=31536000; includeSubDomains; preload"

def rate_limit_check(client_ip: str, limit: int = None, now: float = None) -> Tuple[bool, int]:
    """Fixed-window rate limiting by IP address.

    Returns ``(allowed, retry_after_seconds)``.
    """
    if limit is None:
        limit = settings.RATE_LIMIT_PER_MINUTE
    if now is None:
        now = time.time()

    # Elapsed windows are dropped, so a missing entry starts a new one
    _evict_expired(now)
    window_start, count = rate_limiter.get(client_ip, (now, 0))

    if count >= limit:
        retry_after = max(1, math.ceil(window_start + WINDOW_SECONDS - now))
        return False, retry_after

    rate_limiter[client_ip] = (window_start, count + 1)
    return True, 0

def _evict_expired(now: float) -> None:
    expired = [ip for ip, (start, _) in rate_limiter.items() if now - start >= WINDOW_SECONDS]
    for ip in expired:
        del rate_limiter[ip]

def reset_rate_limiter() -> None:
    rate_limiter.clear()

def apply_security_headers(response) -> None:
    for name, value in SECURITY_HEADERS.items():
        response.headers[name] = value
    if settings.ENABLE_HSTS:
        response.headers["Strict-Transport-Security"] = HSTS_HEADER
    for name in ("Server", "X-Powered-By"):
        if name in response.headers:
            del response.headers[name]

def get_client_ip(request) -> str:
    """Extract client IP from request"""
    if not settings.TRUST_FORWARDED_HEADERS:
        return request.client.host if request.client else "unknown"

    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    # Check for real IP header
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    # Fall back to direct client IP
    return request.client.host if request.client else "unknown"
