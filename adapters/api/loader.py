"""
API loader - wires repositories and services together.
"""

from dataclasses import dataclass

from aiohttp import web

from config.features import features
from config.settings import Settings

# Infrastructure
from infrastructure.database import (
    SupabaseGameRepository,
    SupabaseLobbyRepository,
    SupabasePlayerRepository,
    SupabaseAuthRepository,
)
from infrastructure.database.supabase_client import create_supabase
from infrastructure.steamgriddb import SteamGridDBService

# Core
from core.interfaces import (
    IAuthRepository,
    IGameArtService,
    IGameRepository,
    ILobbyRepository,
    IPlayerRepository,
)
from core.services import SeoService, PageMetadataService, AccessService


@dataclass
class Services:
    game_repo: IGameRepository
    lobby_repo: ILobbyRepository
    player_repo: IPlayerRepository
    auth_repo: IAuthRepository
    game_art: IGameArtService
    seo: SeoService
    pages: PageMetadataService
    access: AccessService


SERVICES = web.AppKey("services", Services)


def build_services(settings: Settings) -> Services:
    """Build every service once; the Supabase client is shared by all repositories."""

    # === REPOSITORIES ===
    supabase = create_supabase(settings)
    game_repo = SupabaseGameRepository(supabase)
    lobby_repo = SupabaseLobbyRepository(supabase)
    player_repo = SupabasePlayerRepository(supabase)
    auth_repo = SupabaseAuthRepository(supabase)

    # === GAME ART ===
    game_art = SteamGridDBService(
        api_key=settings.steamgriddb_api_key,
        api_base=settings.steamgriddb_api_base,
        timeout=settings.steamgriddb_timeout,
    )

    # === BUSINESS SERVICES ===
    seo = SeoService(
        site_url=settings.site_url,
        site_name=settings.site_name,
        indexing_enabled=features.INDEXING_ENABLED,
        twitter_handle=settings.twitter_handle,
        game_repo=game_repo,
        player_repo=player_repo,
        lobby_repo=lobby_repo,
    )
    pages = PageMetadataService(
        seo=seo,
        game_art=game_art,
        lobby_repo=lobby_repo,
        player_repo=player_repo,
    )
    access = AccessService(player_repo=player_repo)

    return Services(
        game_repo=game_repo,
        lobby_repo=lobby_repo,
        player_repo=player_repo,
        auth_repo=auth_repo,
        game_art=game_art,
        seo=seo,
        pages=pages,
        access=access,
    )
