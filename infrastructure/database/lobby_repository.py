"""
Supabase implementation of Lobby repository.
"""

from typing import Optional, List

from supabase import Client

from core.domain.constants import OPEN_LOBBY_STATUS, PUBLIC_VISIBILITY, SITEMAP_LOBBY_PRIORITY
from core.domain.models import LobbyData, SitemapEntry
from core.interfaces.repositories import ILobbyRepository
from infrastructure.database.mappers import lobby_is_public
from infrastructure.database.supabase_client import run_sync


class SupabaseLobbyRepository(ILobbyRepository):
    """Supabase implementation of lobby repository"""

    def __init__(self, client: Client):
        self.client = client

    def _to_model(self, data: dict) -> LobbyData:
        return LobbyData(
            id=str(data["id"]),
            game_name=data.get("game_name"),
            is_public=lobby_is_public(data.get("visibility")),
            updated_at=data.get("updated_at"),
        )

    @run_sync
    def _get_by_id_sync(self, lobby_id: str) -> Optional[dict]:
        response = self.client.table("lobbies").select("id, game_name, visibility, updated_at")\
            .eq("id", lobby_id)\
            .execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, lobby_id: str) -> Optional[LobbyData]:
        data = await self._get_by_id_sync(lobby_id)
        return self._to_model(data) if data else None

    @run_sync
    def _list_open_public_sync(self) -> List[dict]:
        response = self.client.table("lobbies").select("id, updated_at")\
            .eq("status", OPEN_LOBBY_STATUS)\
            .or_(f"visibility.is.null,visibility.eq.{PUBLIC_VISIBILITY}")\
            .execute()
        return response.data or []

    async def list_for_sitemap(self) -> List[SitemapEntry]:
        rows = await self._list_open_public_sync()
        return [
            SitemapEntry(
                url=f"/lobbies/{row['id']}",
                last_modified=row.get("updated_at"),
                change_frequency="hourly",
                priority=SITEMAP_LOBBY_PRIORITY,
            )
            for row in rows
        ]
