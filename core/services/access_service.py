"""
Access service - profile tier checks for restricted pages.
"""

import logging
from typing import Optional
from uuid import UUID

from core.domain.constants import LOGIN_PATH, HOME_PATH
from core.domain.models import ProfileTier
from core.interfaces.repositories import IPlayerRepository

logger = logging.getLogger(__name__)


class AccessService:
    """Service for founder-only areas"""

    def __init__(self, player_repo: IPlayerRepository):
        self.player_repo = player_repo

    async def is_founder(self, user_id: UUID) -> bool:
        profile = await self.player_repo.get_profile(user_id)
        return bool(profile) and profile.plan_tier == ProfileTier.FOUNDER

    async def founder_redirect(self, user_id: Optional[UUID]) -> Optional[str]:
        """
        Where to send a visitor of a founder-only page.
        Returns None when the page may render.
        """
        if not user_id:
            return LOGIN_PATH

        if not await self.is_founder(user_id):
            logger.info(f"[ACCESS] user {user_id} is not a founder, redirecting home")
            return HOME_PATH

        return None

    async def check_founder(self, user_id: Optional[UUID]) -> Optional[int]:
        """
        API variant of founder_redirect.
        Returns an HTTP status to reject with (401/403), or None when allowed.
        """
        if not user_id:
            return 401
        if not await self.is_founder(user_id):
            return 403
        return None
