"""
Page metadata service - per-page titles and descriptions.

Static pages have fixed copy. Game, lobby and player pages look their
subject up first and fall back to generic copy when it can't be found.
"""

import logging
from typing import Optional

from core.domain.models import GameDetails, PageMetadata
from core.interfaces.game_art import IGameArtService
from core.interfaces.repositories import ILobbyRepository, IPlayerRepository
from core.services.seo_service import SeoService
from core.utils.slug import slug_to_name, slug_matches_game_name
from core.utils.validation import is_numeric_id
from locales import t, has_key

logger = logging.getLogger(__name__)

# page name -> path
STATIC_PAGES = {
    "home": "/",
    "about": "/about",
    "games": "/games",
    "events": "/events",
    "features": "/features",
    "invites": "/invites",
    "marketing": "/marketing",
    "search": "/search",
    "social": "/social",
    "tournaments": "/tournaments",
}


class PageMetadataService:
    """Service for page-level metadata"""

    def __init__(
        self,
        seo: SeoService,
        game_art: IGameArtService,
        lobby_repo: ILobbyRepository,
        player_repo: IPlayerRepository,
    ):
        self.seo = seo
        self.game_art = game_art
        self.lobby_repo = lobby_repo
        self.player_repo = player_repo

    def static_page(self, name: str) -> PageMetadata:
        """Metadata for a fixed page. Raises KeyError for unknown pages."""
        path = STATIC_PAGES[name]
        title_key = f"page_{name}_title"
        if not has_key(title_key):
            raise KeyError(name)

        metadata = self.seo.create_metadata(
            title=t(title_key),
            description=t(f"page_{name}_description"),
            path=path,
            robots=self.seo.default_robots(),
        )
        if name == "home":
            metadata.json_ld = self.seo.website_jsonld()
        elif name == "about":
            metadata.json_ld = self.seo.organization_jsonld()
        return metadata

    # === GAMES ===

    async def resolve_game(self, game_id_or_slug: str) -> Optional[GameDetails]:
        """
        Find the game behind a /games/<id-or-slug> URL.
        Numeric values are SteamGridDB IDs; anything else is treated as a slug
        and matched against search results, falling back to the first hit.
        """
        if is_numeric_id(game_id_or_slug):
            try:
                return await self.game_art.get_game_by_id(int(game_id_or_slug))
            except Exception as e:
                logger.error(f"Error fetching game by ID {game_id_or_slug}: {e}")
                return None

        try:
            results = await self.game_art.search_games(slug_to_name(game_id_or_slug))
            exact = next(
                (g for g in results if slug_matches_game_name(game_id_or_slug, g.name)),
                None,
            )
            if exact:
                return await self.game_art.get_game_by_id(exact.id)
            if results:
                return await self.game_art.get_game_by_id(results[0].id)
        except Exception as e:
            logger.error(f"Error fetching game by slug {game_id_or_slug}: {e}")
        return None

    async def game_page(self, game_id_or_slug: str) -> PageMetadata:
        path = f"/games/{game_id_or_slug}"
        game = await self.resolve_game(game_id_or_slug)

        if not game or not game.name:
            return self.seo.create_metadata(
                title=t("game_fallback_title"),
                description=t("game_fallback_description"),
                path=path,
            )

        # Only pass through absolute http(s) cover URLs
        images = [game.cover_url] if game.cover_url and game.cover_url.startswith("http") else None

        metadata = self.seo.create_metadata(
            title=game.name,
            description=t("game_description", name=game.name),
            path=path,
            images=images,
        )
        metadata.json_ld = self.seo.video_game_jsonld(
            game.name,
            self.seo.absolute_url(path),
            images[0] if images else None,
        )
        return metadata

    # === LOBBIES ===

    async def lobby_page(self, lobby_id: str) -> PageMetadata:
        path = f"/lobbies/{lobby_id}"
        lobby = await self.lobby_repo.get_by_id(lobby_id)

        if not lobby:
            return self.seo.create_metadata(
                title=t("lobby_fallback_title", lobby_id=lobby_id),
                description=t("lobby_description"),
                path=path,
            )

        game_name = lobby.game_name or t("lobby_default_game")
        return self.seo.create_metadata(
            title=t("lobby_title", game_name=game_name),
            description=t("lobby_description"),
            path=path,
            no_index=not lobby.is_public,
        )

    # === PLAYERS ===

    async def player_page(self, id_or_username: str) -> PageMetadata:
        player = await self.player_repo.get_by_id_or_username(id_or_username)

        if not player:
            return self.seo.create_metadata(
                title=t("player_fallback_title"),
                description=t("player_fallback_description"),
                path=f"/u/{id_or_username}",
            )

        display_name = player.display_name or player.username
        path = f"/u/{player.username}"
        metadata = self.seo.create_metadata(
            title=display_name,
            description=t("player_description", name=display_name),
            path=path,
            no_index=not player.is_public,
        )
        if player.is_public:
            metadata.json_ld = self.seo.person_jsonld(
                display_name, self.seo.absolute_url(path), player.username,
            )
        return metadata
