"""
Supabase client initialization.
Single point of database connection: built once at startup and handed to
the repositories, which never create their own.
"""

from supabase import create_client, Client
from supabase.lib.client_options import ClientOptions
import asyncio
import concurrent.futures
import logging
from functools import wraps

from config.settings import Settings
from core.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


def create_supabase(settings: Settings) -> Client:
    """
    Build the Supabase client from settings.
    Prefers the service key (server side) and falls back to the anon key.
    """
    url = settings.supabase_url
    key = settings.supabase_service_key or settings.supabase_key

    if not url or not key:
        logger.error(
            "Supabase credentials not configured! "
            f"SUPABASE_URL: {'set' if url else 'MISSING'}, "
            f"SUPABASE_KEY: {'set' if key else 'MISSING'}"
        )
        raise ConfigurationError(
            "Required env vars: SUPABASE_URL, SUPABASE_SERVICE_KEY (or SUPABASE_KEY)"
        )

    # Schema isolation: staging may use its own schema, production uses public
    if settings.db_schema != "public":
        return create_client(url, key, options=ClientOptions(schema=settings.db_schema))
    return create_client(url, key)


# Dedicated bounded thread pool for DB operations, separate from the default executor.
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="supabase-db",
)


def run_sync(func):
    """
    Decorator to run synchronous Supabase operations in async context.
    Supabase Python SDK is synchronous, so we need this wrapper.
    Uses a dedicated bounded thread pool instead of the default executor.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_db_executor, lambda: func(*args, **kwargs))
    return wrapper
