"""
Apoxer API - Main entry point.

Serves the SteamGridDB proxy, SEO endpoints and read-only data routes
for the Apoxer web client.
"""

import asyncio
import logging
import sys
from aiohttp import web
from adapters.api import build_services, create_app
from adapters.api.middleware import ThrottlingMiddleware
from config.features import features
from config.settings import settings
from core.domain.errors import ConfigurationError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("api.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if features.DEBUG_MODE:
    for name in ['adapters', 'core', 'infrastructure', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
    # Silence noisy HTTP debug logs
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('hpack').setLevel(logging.WARNING)


async def main():
    """Main function - builds services and serves the API until cancelled."""

    logger.info("=== Apoxer API Starting ===")
    logger.info("Feature Flags:")
    for key, value in features.to_dict().items():
        logger.info(f"  {key}: {value}")

    try:
        services = build_services(settings)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    if not services.game_art.is_configured:
        logger.warning("STEAMGRIDDB_API_KEY is not set - game art lookups will return nothing")

    throttle = None
    if features.PROXY_THROTTLE_ENABLED:
        throttle = ThrottlingMiddleware(trust_forwarded_for=settings.trust_forwarded_for)
        if settings.trust_forwarded_for:
            logger.info("Throttling keys on X-Forwarded-For (trusted proxy)")

    app = create_app(services, throttle=throttle)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.host, settings.port)
    await site.start()
    logger.info(f"Apoxer API running on {settings.host}:{settings.port} (env={settings.env})")

    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()
        logger.info("API server stopped.")


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("API stopped by user (Ctrl+C)")


if __name__ == "__main__":
    run()
