# core/rate_limiter.py

from typing import Dict, Tuple, Optional
from threading import Lock
from collections import defaultdict
import time

from fastapi import HTTPException, Request

from core.logging_config import logger


# In-memory sliding window; lives as long as the process, like the entity store
_rate_limit_store: Dict[str, list] = defaultdict(list)
_rate_limit_lock = Lock()


def check_rate_limit(
    identifier: str,
    max_requests: int = 10,
    window_seconds: int = 60,
) -> Tuple[bool, int]:
    """
    Check if a request should be rate limited.

    Args:
        identifier: Unique identifier (IP address, email, etc.)
        max_requests: Maximum number of requests allowed
        window_seconds: Time window in seconds

    Returns:
        Tuple of (allowed: bool, remaining: int)
    """
    now = time.time()
    window_start = now - window_seconds

    with _rate_limit_lock:
        requests = [ts for ts in _rate_limit_store[identifier] if ts > window_start]

        if len(requests) >= max_requests:
            _rate_limit_store[identifier] = requests
            return False, 0

        requests.append(now)
        _rate_limit_store[identifier] = requests

    return True, max_requests - len(requests)


def reset_rate_limits():
    """Forget every recorded request (used by tests and on app creation)."""
    with _rate_limit_lock:
        _rate_limit_store.clear()


def get_rate_limit_identifier(request: Request, email: Optional[str] = None) -> str:
    """
    Prefer the email being acted on; fall back to the client IP.
    """
    if email:
        return f"email:{email.strip().lower()}"

    client_ip = request.client.host if request.client else "unknown"

    # Behind a proxy the original client comes first
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()

    return f"ip:{client_ip}"


def require_rate_limit(
    request: Request,
    identifier: Optional[str] = None,
    max_requests: int = 10,
    window_seconds: int = 60
):
    """
    Enforce the limit for this request.

    Raises:
        HTTPException: 429 Too Many Requests if limit exceeded
    """
    if identifier is None:
        identifier = get_rate_limit_identifier(request)

    allowed, remaining = check_rate_limit(identifier, max_requests, window_seconds)

    if not allowed:
        logger.warning(f"Rate limit hit for {identifier}")
        raise HTTPException(
            status_code=429,
            detail=f"Rate limit exceeded. Maximum {max_requests} requests per {window_seconds} seconds.",
            headers={
                "X-RateLimit-Limit": str(max_requests),
                "X-RateLimit-Window": str(window_seconds),
                "Retry-After": str(window_seconds),
            }
        )

    return remaining
