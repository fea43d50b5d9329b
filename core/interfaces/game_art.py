"""
Game art service interface - cover/hero lookups for games.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from core.domain.models import GameSearchResult, GameDetails, HeroImage, CoverImage


class IGameArtService(ABC):
    """Interface for a game art provider (SteamGridDB today)"""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials for the provider are present"""
        pass

    @abstractmethod
    async def search_games(self, query: str) -> List[GameSearchResult]:
        """Search games by name, each with a portrait cover if one exists"""
        pass

    @abstractmethod
    async def get_game_by_id(self, game_id: int) -> Optional[GameDetails]:
        """Get game details with cover"""
        pass

    @abstractmethod
    async def get_vertical_cover(self, game_id: int) -> Optional[CoverImage]:
        """Best portrait-oriented grid for a game"""
        pass

    @abstractmethod
    async def get_heroes(self, game_id: int) -> List[HeroImage]:
        """Hero banners for a game, without NSFW or epilepsy-flagged images"""
        pass
