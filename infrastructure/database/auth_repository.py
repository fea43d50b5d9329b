"""
Supabase Auth lookup - resolves the account behind a session JWT.
"""

import logging
from typing import Optional
from uuid import UUID

from supabase import Client

from core.interfaces.repositories import IAuthRepository
from infrastructure.database.supabase_client import run_sync

logger = logging.getLogger(__name__)


class SupabaseAuthRepository(IAuthRepository):
    """Supabase implementation of session lookup"""

    def __init__(self, client: Client):
        self.client = client

    @run_sync
    def _get_user_sync(self, access_token: str):
        return self.client.auth.get_user(access_token)

    async def get_user_id(self, access_token: Optional[str]) -> Optional[UUID]:
        if not access_token:
            return None

        try:
            response = await self._get_user_sync(access_token)
        except Exception as e:
            # Expired or forged tokens surface as auth API errors
            logger.warning(f"Session lookup failed: {e}")
            return None

        user = getattr(response, "user", None)
        if not user:
            return None
        return UUID(str(user.id))
