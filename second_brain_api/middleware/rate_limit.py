# File: /second_brain_api/middleware/rate_limit.py | Version: 2.0 | Title: In-memory rate limiting for auth endpoints (envelope 429)
import os
import time
from collections import deque
from typing import Deque, Dict, Tuple

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from second_brain_api.core.config import settings
from second_brain_api.core.error_handlers import error_body


def _boolenv(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "y", "on"}


class MemoryRateLimiter(BaseHTTPMiddleware):
    """
    Sliding-window limiter keyed by (client ip, path).

    Only paths under RATE_LIMIT_PATH_PREFIXES (comma separated, default
    "/auth") are counted. Off unless RATE_LIMIT_ENABLED=true. Environment
    variables win over settings so tests can toggle it per app instance.
    """

    def __init__(self, app):
        super().__init__(app)
        self.enabled = _boolenv("RATE_LIMIT_ENABLED", settings.RATE_LIMIT_ENABLED)
        self.window = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", settings.RATE_LIMIT_WINDOW_SECONDS))
        self.max_req = int(os.getenv("RATE_LIMIT_MAX_REQUESTS", settings.RATE_LIMIT_MAX_REQUESTS))
        raw = os.getenv("RATE_LIMIT_PATH_PREFIXES", settings.RATE_LIMIT_PATH_PREFIXES)
        self.prefixes = tuple(p.strip() for p in raw.split(",") if p.strip())
        self._buckets: Dict[Tuple[str, str], Deque[float]] = {}

    def _limited(self, path: str) -> bool:
        return any(path.startswith(p) for p in self.prefixes)

    async def dispatch(self, request: Request, call_next):
        if not self.enabled or not self._limited(request.url.path):
            return await call_next(request)

        client_ip = request.headers.get("x-forwarded-for") or (
            request.client.host if request.client else "unknown"
        )
        key = (client_ip, request.url.path)
        now = time.time()
        window_start = now - self.window

        bucket = self._buckets.setdefault(key, deque())
        # purge old
        while bucket and bucket[0] < window_start:
            bucket.popleft()

        if len(bucket) >= self.max_req:
            retry_after = max(1, int(bucket[0] + self.window - now))
            return JSONResponse(
                error_body(429, "Too many requests, please try again later", "RATE_LIMITED"),
                status_code=429,
                headers={"Retry-After": str(retry_after)},
            )

        bucket.append(now)
        return await call_next(request)
