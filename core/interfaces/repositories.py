"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> PostgreSQL -> MongoDB, etc.)
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from uuid import UUID
from core.domain.models import (
    GameData,
    LobbyData,
    PlayerData,
    Profile,
    ProfileSummary,
    SitemapEntry,
)


class IGameRepository(ABC):
    """Interface for game data access"""

    @abstractmethod
    async def get_by_slug(self, slug_or_id: str) -> Optional[GameData]:
        """Get game by slug, or by numeric ID when the value is all digits"""
        pass

    @abstractmethod
    async def list_for_sitemap(self) -> List[SitemapEntry]:
        """Active games as sitemap entries"""
        pass


class ILobbyRepository(ABC):
    """Interface for lobby data access"""

    @abstractmethod
    async def get_by_id(self, lobby_id: str) -> Optional[LobbyData]:
        """Get lobby by ID"""
        pass

    @abstractmethod
    async def list_for_sitemap(self) -> List[SitemapEntry]:
        """Open public lobbies as sitemap entries"""
        pass


class IPlayerRepository(ABC):
    """Interface for player profile data access"""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[PlayerData]:
        """Get player by username"""
        pass

    @abstractmethod
    async def get_by_id_or_username(self, id_or_username: str) -> Optional[PlayerData]:
        """Get player by profile UUID, falling back to username lookup"""
        pass

    @abstractmethod
    async def get_profile(self, user_id: UUID) -> Optional[Profile]:
        """Get plan info for an account"""
        pass

    @abstractmethod
    async def list_for_sitemap(self) -> List[SitemapEntry]:
        """Public player profiles as sitemap entries"""
        pass

    @abstractmethod
    async def list_recent_profiles(self) -> List[ProfileSummary]:
        """All profiles, newest first"""
        pass


class IAuthRepository(ABC):
    """Interface for resolving the signed-in account from a session token"""

    @abstractmethod
    async def get_user_id(self, access_token: Optional[str]) -> Optional[UUID]:
        """Return the account ID for a valid token, None otherwise"""
        pass
