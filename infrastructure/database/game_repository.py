"""
Supabase implementation of Game repository.
Catalog rows for game pages and the sitemap.
"""

import logging
from typing import Optional, List

from supabase import Client

from core.domain.constants import SITEMAP_GAME_PRIORITY
from core.domain.models import GameData, SitemapEntry
from core.interfaces.repositories import IGameRepository
from core.utils.validation import is_numeric_id
from infrastructure.database.supabase_client import run_sync

logger = logging.getLogger(__name__)

GAME_COLUMNS = "name, slug, cover_url, updated_at"


class SupabaseGameRepository(IGameRepository):
    """Supabase implementation of game repository"""

    def __init__(self, client: Client):
        self.client = client

    def _to_model(self, data: dict) -> GameData:
        return GameData(
            name=data["name"],
            slug=data["slug"],
            cover_url=data.get("cover_url"),
            updated_at=data.get("updated_at"),
        )

    @run_sync
    def _get_by_id_sync(self, game_id: int) -> Optional[dict]:
        response = self.client.table("games").select(GAME_COLUMNS).eq("id", game_id).execute()
        return response.data[0] if response.data else None

    @run_sync
    def _get_by_slug_sync(self, slug: str) -> Optional[dict]:
        response = self.client.table("games").select(GAME_COLUMNS).eq("slug", slug).execute()
        return response.data[0] if response.data else None

    async def get_by_slug(self, slug_or_id: str) -> Optional[GameData]:
        # Numeric values are tried as an ID first; a game may also have a numeric slug
        if is_numeric_id(slug_or_id):
            data = await self._get_by_id_sync(int(slug_or_id))
            if data:
                return self._to_model(data)

        data = await self._get_by_slug_sync(slug_or_id)
        return self._to_model(data) if data else None

    @run_sync
    def _list_active_sync(self) -> List[dict]:
        response = self.client.table("games").select("slug, updated_at")\
            .eq("is_active", True)\
            .execute()
        return response.data or []

    async def list_for_sitemap(self) -> List[SitemapEntry]:
        rows = await self._list_active_sync()
        logger.debug(f"Sitemap: {len(rows)} active games")
        return [
            SitemapEntry(
                url=f"/games/{row['slug']}",
                last_modified=row.get("updated_at"),
                change_frequency="daily",
                priority=SITEMAP_GAME_PRIORITY,
            )
            for row in rows
            if row.get("slug")
        ]
