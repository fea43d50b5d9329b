"""
Middleware for the HTTP API.

- error_middleware: turns unhandled exceptions into JSON 500s
- request_logging_middleware: one log line per request
- ThrottlingMiddleware: per-IP rate limiting for the game art proxy
"""

import logging
import time
from collections import defaultdict
from typing import Callable, Dict, List

from aiohttp import web

from config.features import features
from core.domain.constants import (
    RATE_LIMIT_PROXY,
    RATE_LIMIT_PROXY_SEARCH,
    RATE_LIMIT_INTERVAL_SECONDS,
    RATE_LIMIT_SWEEP_EVERY,
)

logger = logging.getLogger(__name__)


@web.middleware
async def error_middleware(request: web.Request, handler):
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.path}")
        return web.json_response({"error": "Internal server error"}, status=500)


@web.middleware
async def request_logging_middleware(request: web.Request, handler):
    start = time.perf_counter()
    status = 500
    try:
        response = await handler(request)
        status = response.status
        return response
    except web.HTTPException as e:
        status = e.status
        raise
    finally:
        if features.LOG_REQUESTS:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(f"{request.method} {request.path} -> {status} ({elapsed_ms:.1f}ms)")


def client_ip(request: web.Request, trust_forwarded: bool = False) -> str:
    """
    Peer address of the request. X-Forwarded-For is only read when the app
    sits behind a proxy that overwrites it; otherwise any client can spoof it.
    """
    if trust_forwarded:
        forwarded = request.headers.get("X-Forwarded-For", "")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return request.remote or "unknown"


class ThrottlingMiddleware:
    """
    Simple rate limiter: tracks request timestamps per client IP.
    Rejects requests that exceed the limit within the interval with 429.
    Only paths under `prefix` are throttled.
    """

    def __init__(
        self,
        prefix: str = "/api/steamgriddb/",
        default_limit: int = RATE_LIMIT_PROXY,
        interval: int = RATE_LIMIT_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        trust_forwarded_for: bool = False,
        sweep_every: int = RATE_LIMIT_SWEEP_EVERY,
    ):
        self.prefix = prefix
        self.default_limit = default_limit
        self.interval = interval
        self.clock = clock
        self.trust_forwarded_for = trust_forwarded_for
        self.sweep_every = sweep_every
        self._seen = 0
        # {ip: [timestamp, timestamp, ...]}
        self._requests: Dict[str, List[float]] = defaultdict(list)
        # Paths with stricter limits
        self._strict_paths = {
            "/api/steamgriddb/search": RATE_LIMIT_PROXY_SEARCH,
        }

    def _get_limit(self, path: str) -> int:
        return self._strict_paths.get(path, self.default_limit)

    def _cleanup(self, key: str, now: float):
        """Remove expired timestamps."""
        cutoff = now - self.interval
        self._requests[key] = [ts for ts in self._requests[key] if ts > cutoff]
        if not self._requests[key]:
            del self._requests[key]

    def _sweep(self, now: float):
        """Drop every key whose timestamps have all expired."""
        for key in list(self._requests):
            self._cleanup(key, now)

    @web.middleware
    async def middleware(self, request: web.Request, handler):
        if not request.path.startswith(self.prefix):
            return await handler(request)

        now = self.clock()
        self._seen += 1
        if self._seen % self.sweep_every == 0:
            self._sweep(now)

        # Strict paths are counted in their own bucket, apart from lookups
        ip = client_ip(request, self.trust_forwarded_for)
        key = f"{ip}:{request.path}" if request.path in self._strict_paths else ip
        self._cleanup(key, now)

        limit = self._get_limit(request.path)
        if len(self._requests[key]) >= limit:
            logger.warning(f"Rate limit hit: {ip} on {request.path} ({limit}/{self.interval}s)")
            return web.json_response(
                {"error": "Too many requests"},
                status=429,
                headers={"Retry-After": str(self.interval)},
            )

        self._requests[key].append(now)
        return await handler(request)
