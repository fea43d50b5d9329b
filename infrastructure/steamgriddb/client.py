"""
SteamGridDB API client - SERVER ONLY.
Game search, portrait covers and hero banners.
"""

import asyncio
import logging
from typing import Any, List, Optional, Type
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from core.domain.constants import (
    MAX_SEARCH_RESULTS,
    MIN_SEARCH_QUERY_LENGTH,
    PORTRAIT_GRID_DIMENSIONS,
)
from core.domain.errors import GameArtServiceError
from core.domain.models import CoverImage, GameDetails, GameSearchResult, GridImage, HeroImage
from core.interfaces.game_art import IGameArtService

logger = logging.getLogger(__name__)


def _parse_images(items: Any, model: Type[GridImage] = GridImage) -> List[GridImage]:
    images = []
    for item in items or []:
        try:
            images.append(model.model_validate(item))
        except ValidationError as e:
            logger.debug(f"Skipping malformed SteamGridDB image: {e}")
    return images


class SteamGridDBService(IGameArtService):
    """SteamGridDB-backed game art service"""

    def __init__(
        self,
        api_key: str,
        api_base: str = "https://www.steamgriddb.com/api/v2",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.client = client or httpx.AsyncClient(base_url=api_base, timeout=timeout)

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def close(self):
        await self.client.aclose()

    async def _fetch(self, endpoint: str, params: Optional[dict] = None) -> Optional[Any]:
        """
        GET an endpoint and return the payload's `data` member.

        Returns None when the key is missing or SteamGridDB answers with an
        error status (treated as "nothing found"). Raises GameArtServiceError
        when the service can't be reached or the body isn't JSON.
        """
        if not self.api_key:
            logger.error("SteamGridDB API key not configured")
            return None

        try:
            response = await self.client.get(
                endpoint,
                params=params,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
        except httpx.HTTPError as e:
            logger.error(f"SteamGridDB fetch error for {endpoint}: {e}")
            raise GameArtServiceError(f"SteamGridDB request failed: {endpoint}") from e

        if not response.is_success:
            logger.error(f"SteamGridDB API error: {response.status_code} for {endpoint}")
            return None

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"SteamGridDB returned invalid JSON for {endpoint}: {e}")
            raise GameArtServiceError(f"Invalid response from SteamGridDB: {endpoint}") from e

        if not isinstance(payload, dict):
            return None
        return payload.get("data")

    async def search_games(self, query: str) -> List[GameSearchResult]:
        if not query or len(query) < MIN_SEARCH_QUERY_LENGTH:
            return []

        games = await self._fetch(f"/search/autocomplete/{quote(query, safe='')}")
        if not games:
            return []

        # Every hit costs a cover lookup, so cap the fan-out
        limited = games[:MAX_SEARCH_RESULTS]
        covers = await asyncio.gather(*(self._safe_cover(game["id"]) for game in limited))

        return [
            GameSearchResult(
                id=game["id"],
                name=game["name"],
                verified=game.get("verified", False),
                cover_url=(cover.thumb or cover.url or None) if cover else None,
            )
            for game, cover in zip(limited, covers)
        ]

    async def _safe_cover(self, game_id: int) -> Optional[CoverImage]:
        # A missing cover shouldn't sink the whole search
        try:
            return await self.get_vertical_cover(game_id)
        except GameArtServiceError as e:
            logger.warning(f"Cover lookup failed for game {game_id}: {e}")
            return None

    async def get_vertical_cover(self, game_id: int) -> Optional[CoverImage]:
        """
        Prefer grids with height > width (portrait orientation).
        600x900 is the common portrait size on SteamGridDB.
        """
        grids = _parse_images(await self._fetch(
            f"/grids/game/{game_id}",
            params={"dimensions": PORTRAIT_GRID_DIMENSIONS},
        ))
        if grids:
            portrait = next((g for g in grids if g.height > g.width), grids[0])
            return CoverImage(url=portrait.url, thumb=portrait.thumb)

        # Fallback: any grid, most portrait first
        any_grids = _parse_images(await self._fetch(f"/grids/game/{game_id}"))
        if any_grids:
            best = max(any_grids, key=lambda g: g.height / g.width if g.width else 0)
            return CoverImage(url=best.url, thumb=best.thumb)

        return None

    async def get_game_by_id(self, game_id: int) -> Optional[GameDetails]:
        # /games/id can return either an object or a one-element list
        response = await self._fetch(f"/games/id/{game_id}")
        if not response:
            return None

        game = response[0] if isinstance(response, list) else response
        if not isinstance(game, dict) or not game.get("id"):
            return None

        cover = await self._safe_cover(game_id)

        return GameDetails(
            id=game["id"],
            name=game["name"],
            cover_url=cover.url if cover else None,
            cover_thumb=cover.thumb if cover else None,
        )

    async def get_heroes(self, game_id: int) -> List[HeroImage]:
        heroes = _parse_images(await self._fetch(f"/heroes/game/{game_id}"), HeroImage)
        return [hero for hero in heroes if not hero.nsfw and not hero.epilepsy]
