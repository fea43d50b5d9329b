"""
Supabase implementation of Player repository (profiles table).
"""

import re
from typing import Optional, List
from uuid import UUID

from supabase import Client

from core.domain.constants import SITEMAP_PLAYER_PRIORITY
from core.domain.models import PlayerData, Profile, ProfileSummary, SitemapEntry
from core.interfaces.repositories import IPlayerRepository
from core.utils.premium import is_pro
from infrastructure.database.mappers import player_is_public
from infrastructure.database.supabase_client import run_sync

PLAYER_COLUMNS = "username, display_name, is_private, updated_at"

_CANONICAL_UUID = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)


def _parse_uuid(value: str) -> Optional[UUID]:
    """
    Return a UUID for the canonical hyphenated form only - profile URLs accept
    both IDs and usernames, and a 32-hex username must stay a username.
    """
    if not isinstance(value, str) or not _CANONICAL_UUID.fullmatch(value):
        return None
    return UUID(value)


class SupabasePlayerRepository(IPlayerRepository):
    """Supabase implementation of player repository"""

    def __init__(self, client: Client):
        self.client = client

    def _to_model(self, data: dict) -> PlayerData:
        """Convert database row to PlayerData model"""
        return PlayerData(
            username=data["username"],
            display_name=data.get("display_name"),
            is_public=player_is_public(data.get("is_private")),
            updated_at=data.get("updated_at"),
        )

    def _to_profile(self, data: dict) -> Profile:
        return Profile(
            id=data["id"],
            plan_tier=data.get("plan_tier") or "free",
            plan_expires_at=data.get("plan_expires_at"),
        )

    @run_sync
    def _get_by_field_sync(self, field: str, value: str) -> Optional[dict]:
        response = self.client.table("profiles").select(PLAYER_COLUMNS).eq(field, value).execute()
        return response.data[0] if response.data else None

    async def get_by_username(self, username: str) -> Optional[PlayerData]:
        data = await self._get_by_field_sync("username", username)
        return self._to_model(data) if data else None

    async def get_by_id_or_username(self, id_or_username: str) -> Optional[PlayerData]:
        profile_id = _parse_uuid(id_or_username)
        if not profile_id:
            return await self.get_by_username(id_or_username)

        data = await self._get_by_field_sync("id", str(profile_id))
        return self._to_model(data) if data else None

    @run_sync
    def _get_profile_sync(self, user_id: UUID) -> Optional[dict]:
        response = self.client.table("profiles").select("id, plan_tier, plan_expires_at")\
            .eq("id", str(user_id))\
            .execute()
        return response.data[0] if response.data else None

    async def get_profile(self, user_id: UUID) -> Optional[Profile]:
        data = await self._get_profile_sync(user_id)
        return self._to_profile(data) if data else None

    @run_sync
    def _list_public_sync(self) -> List[dict]:
        response = self.client.table("profiles").select("username, updated_at")\
            .eq("is_private", False)\
            .execute()
        return response.data or []

    async def list_for_sitemap(self) -> List[SitemapEntry]:
        rows = await self._list_public_sync()
        return [
            SitemapEntry(
                url=f"/u/{row['username']}",
                last_modified=row.get("updated_at"),
                change_frequency="weekly",
                priority=SITEMAP_PLAYER_PRIORITY,
            )
            for row in rows
            if row.get("username")
        ]

    @run_sync
    def _list_recent_sync(self) -> List[dict]:
        response = self.client.table("profiles").select("id, username, display_name, created_at, plan_tier, plan_expires_at")\
            .order("created_at", desc=True)\
            .execute()
        return response.data or []

    async def list_recent_profiles(self) -> List[ProfileSummary]:
        rows = await self._list_recent_sync()
        return [
            ProfileSummary(
                id=row["id"],
                username=row["username"],
                display_name=row.get("display_name"),
                created_at=row.get("created_at"),
                is_pro=is_pro(self._to_profile(row)),
            )
            for row in rows
        ]
