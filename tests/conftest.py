"""
Pytest fixtures for tests.

FakeSupabase stands in for the supabase-py client: it records every query
chain and answers from in-memory rows, applying only `eq` filters.
"""

from typing import Dict, List, Optional
from uuid import UUID

import pytest

from adapters.api.loader import Services
from core.domain.models import CoverImage, GameDetails, GameSearchResult, HeroImage
from core.interfaces.game_art import IGameArtService
from core.services import AccessService, PageMetadataService, SeoService
from infrastructure.database import (
    SupabaseAuthRepository,
    SupabaseGameRepository,
    SupabaseLobbyRepository,
    SupabasePlayerRepository,
)


# =============================================================================
# CENTRALIZED CONSTANTS
# =============================================================================

SITE_URL = "https://apoxer.test"
SITE_NAME = "Apoxer.com"

FOUNDER_ID = UUID("11111111-1111-1111-1111-111111111111")
MEMBER_ID = UUID("22222222-2222-2222-2222-222222222222")


# =============================================================================
# FAKE SUPABASE
# =============================================================================

class FakeResponse:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    def __init__(self, client: "FakeSupabase", table: str):
        self.client = client
        self.table = table
        self.columns: Optional[str] = None
        self.filters: List[tuple] = []
        self.or_filters: List[str] = []
        self.ordering: List[tuple] = []

    def select(self, columns: str = "*", **kwargs):
        self.columns = columns
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def or_(self, expression: str):
        self.or_filters.append(expression)
        return self

    def order(self, column: str, desc: bool = False):
        self.ordering.append((column, desc))
        return self

    def execute(self):
        self.client.queries.append(self)
        if self.table in self.client.failing_tables:
            raise RuntimeError(f"connection to {self.table} lost")
        rows = [
            row for row in self.client.rows.get(self.table, [])
            if all(row.get(col) == val for col, val in self.filters)
        ]
        for column, desc in reversed(self.ordering):
            rows = sorted(rows, key=lambda r: r.get(column) or "", reverse=desc)
        return FakeResponse([dict(r) for r in rows])


class FakeUser:
    def __init__(self, user_id):
        self.id = user_id


class FakeUserResponse:
    def __init__(self, user):
        self.user = user


class FakeAuth:
    def __init__(self, tokens: Dict[str, UUID]):
        self.tokens = tokens

    def get_user(self, jwt: str):
        if jwt not in self.tokens:
            raise RuntimeError("invalid JWT")
        return FakeUserResponse(FakeUser(str(self.tokens[jwt])))


class FakeSupabase:
    def __init__(self, rows: Optional[Dict[str, List[dict]]] = None, tokens: Optional[Dict[str, UUID]] = None):
        self.rows = rows or {}
        self.queries: List[FakeQuery] = []
        self.failing_tables: set = set()
        self.auth = FakeAuth(tokens or {})

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


# =============================================================================
# FAKE GAME ART
# =============================================================================

class FakeGameArt(IGameArtService):
    """In-memory game art service; `fail` makes every call raise"""

    def __init__(self, games: Optional[Dict[int, str]] = None, configured: bool = True):
        self.games = games or {}
        self.configured = configured
        self.fail = False
        self.search_calls: List[str] = []
        self.lookup_calls: List[int] = []
        self.heroes: List[HeroImage] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    def _check(self):
        if self.fail:
            raise RuntimeError("upstream exploded")

    async def search_games(self, query: str) -> List[GameSearchResult]:
        self.search_calls.append(query)
        self._check()
        needle = query.lower()
        return [
            GameSearchResult(id=game_id, name=name, verified=True, cover_url=f"https://cdn.test/{game_id}_thumb.png")
            for game_id, name in self.games.items()
            if needle.split()[0] in name.lower()
        ]

    async def get_game_by_id(self, game_id: int) -> Optional[GameDetails]:
        self.lookup_calls.append(game_id)
        self._check()
        if game_id not in self.games:
            return None
        return GameDetails(
            id=game_id,
            name=self.games[game_id],
            cover_url=f"https://cdn.test/{game_id}.png",
            cover_thumb=f"https://cdn.test/{game_id}_thumb.png",
        )

    async def get_vertical_cover(self, game_id: int) -> Optional[CoverImage]:
        self._check()
        return CoverImage(url=f"https://cdn.test/{game_id}.png", thumb=f"https://cdn.test/{game_id}_thumb.png")

    async def get_heroes(self, game_id: int) -> List[HeroImage]:
        self._check()
        return list(self.heroes)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def sample_rows():
    return {
        "games": [
            {"id": 7, "name": "Elden Ring", "slug": "elden-ring", "cover_url": "https://cdn.test/er.png",
             "updated_at": "2024-05-01T10:00:00+00:00", "is_active": True},
            {"id": 8, "name": "1942", "slug": "1942", "cover_url": None, "updated_at": None, "is_active": True},
            {"id": 9, "name": "Old Game", "slug": "old-game", "is_active": False},
        ],
        "lobbies": [
            {"id": "lobby-public", "game_name": "Elden Ring", "visibility": "public",
             "status": "open", "updated_at": "2024-05-02T10:00:00+00:00"},
            {"id": "lobby-null", "game_name": None, "visibility": None, "status": "open"},
            {"id": "lobby-private", "game_name": "Dota 2", "visibility": "friends", "status": "open"},
        ],
        "profiles": [
            {"id": str(FOUNDER_ID), "username": "founder", "display_name": "The Founder",
             "is_private": False, "plan_tier": "founder", "plan_expires_at": None,
             "created_at": "2024-01-01T00:00:00+00:00", "updated_at": "2024-06-01T00:00:00+00:00"},
            {"id": str(MEMBER_ID), "username": "shadow", "display_name": None,
             "is_private": True, "plan_tier": "free", "plan_expires_at": None,
             "created_at": "2024-03-01T00:00:00+00:00"},
        ],
    }


@pytest.fixture
def fake_supabase(sample_rows):
    return FakeSupabase(sample_rows, tokens={"founder-token": FOUNDER_ID, "member-token": MEMBER_ID})


@pytest.fixture
def game_art():
    return FakeGameArt({1234: "Elden Ring", 5678: "Counter-Strike 2"})


@pytest.fixture
def services(fake_supabase, game_art) -> Services:
    game_repo = SupabaseGameRepository(fake_supabase)
    lobby_repo = SupabaseLobbyRepository(fake_supabase)
    player_repo = SupabasePlayerRepository(fake_supabase)
    seo = SeoService(
        site_url=SITE_URL,
        site_name=SITE_NAME,
        indexing_enabled=True,
        game_repo=game_repo,
        player_repo=player_repo,
        lobby_repo=lobby_repo,
    )
    return Services(
        game_repo=game_repo,
        lobby_repo=lobby_repo,
        player_repo=player_repo,
        auth_repo=SupabaseAuthRepository(fake_supabase),
        game_art=game_art,
        seo=seo,
        pages=PageMetadataService(seo=seo, game_art=game_art, lobby_repo=lobby_repo, player_repo=player_repo),
        access=AccessService(player_repo=player_repo),
    )
