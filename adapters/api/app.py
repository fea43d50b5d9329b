"""
aiohttp application factory.
"""

import logging
from typing import Optional

from aiohttp import web

from adapters.api.loader import SERVICES, Services
from adapters.api.middleware import (
    ThrottlingMiddleware,
    error_middleware,
    request_logging_middleware,
)
from adapters.api.routes import routes
from config.features import features

logger = logging.getLogger(__name__)


async def health(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})


async def _close_game_art(app: web.Application):
    close = getattr(app[SERVICES].game_art, "close", None)
    if close:
        await close()
        logger.info("Game art client closed.")


def create_app(services: Services, throttle: Optional[ThrottlingMiddleware] = None) -> web.Application:
    """Create the API app around already-built services."""
    middlewares = [error_middleware, request_logging_middleware]
    if throttle is None and features.PROXY_THROTTLE_ENABLED:
        throttle = ThrottlingMiddleware()
    if throttle is not None:
        middlewares.append(throttle.middleware)

    app = web.Application(middlewares=middlewares)
    app[SERVICES] = services

    app.router.add_get("/health", health)
    for table in routes:
        app.router.add_routes(table)

    app.on_cleanup.append(_close_game_art)
    return app
