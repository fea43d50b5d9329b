"""
Domain models - the core of business logic.
These models are transport-agnostic; the HTTP layer serialises them with
camelCase aliases so the web client sees the same shapes it always has.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List, Literal, Dict, Any
from datetime import datetime
from uuid import UUID
from enum import Enum


class ApiModel(BaseModel):
    """Base for models that travel over the API as camelCase JSON"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# === ENUMS ===

class AwardType(str, Enum):
    GOOD_TEAMMATE = "good_teammate"
    STRATEGIC = "strategic"
    FRIENDLY = "friendly"
    CHILL = "chill"


class ProfileTier(str, Enum):
    FREE = "free"
    PRO = "pro"
    FOUNDER = "founder"


ChangeFrequency = Literal["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"]


# === VIEW MODELS (rows from Supabase) ===

class GameData(ApiModel):
    name: str
    slug: str
    cover_url: Optional[str] = None
    updated_at: Optional[datetime] = None


class LobbyData(ApiModel):
    id: str
    game_name: Optional[str] = None
    is_public: bool = True
    updated_at: Optional[datetime] = None


class PlayerData(ApiModel):
    username: str
    display_name: Optional[str] = None
    is_public: bool = True
    updated_at: Optional[datetime] = None


class Profile(ApiModel):
    """Account plan info used for access checks"""
    id: UUID
    plan_tier: ProfileTier = ProfileTier.FREE
    plan_expires_at: Optional[datetime] = None


class ProfileSummary(ApiModel):
    """Row in the founder admin user list"""
    id: UUID
    username: str
    display_name: Optional[str] = None
    created_at: Optional[datetime] = None
    is_pro: bool = False


# === AWARDS ===

class AwardConfig(ApiModel):
    model_config = ConfigDict(frozen=True)

    type: AwardType
    label: str
    short_label: str
    emoji: str
    description: str


# === GAME ART (SteamGridDB) ===

class GameSearchResult(ApiModel):
    id: int
    name: str
    verified: bool = False
    cover_url: Optional[str] = None

    def to_json(self) -> dict:
        # coverUrl is part of the contract even when there is no cover
        return self.model_dump(mode="json", by_alias=True)


class GameDetails(ApiModel):
    id: int
    name: str
    cover_url: Optional[str] = None
    cover_thumb: Optional[str] = None

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class ImageAuthor(BaseModel):
    name: Optional[str] = None
    steam64: Optional[str] = None
    avatar: Optional[str] = None


class GridImage(BaseModel):
    """Grid or hero image as returned by SteamGridDB (snake_case upstream)"""
    model_config = ConfigDict(extra="ignore")

    id: int
    score: int = 0
    style: Optional[str] = None
    width: int = 0
    height: int = 0
    nsfw: bool = False
    humor: bool = False
    notes: Optional[str] = None
    mime: Optional[str] = None
    language: Optional[str] = None
    url: str
    thumb: str
    lock: bool = False
    epilepsy: bool = False
    upvotes: int = 0
    downvotes: int = 0
    author: Optional[ImageAuthor] = None


class HeroImage(GridImage):
    """Wide banner image from /heroes; same record shape as a grid"""


class CoverImage(BaseModel):
    url: str
    thumb: str


# === SEO ===

class OpenGraphImage(ApiModel):
    url: str


class OpenGraph(ApiModel):
    type: str = "website"
    site_name: str
    url: str
    title: str
    description: str
    images: List[OpenGraphImage] = Field(default_factory=list)


class TwitterCard(ApiModel):
    card: str = "summary_large_image"
    title: str
    description: str
    images: str
    site: Optional[str] = None


class GoogleBotDirective(ApiModel):
    index: bool
    follow: bool


class RobotsDirective(ApiModel):
    index: bool
    follow: bool
    google_bot: Optional[GoogleBotDirective] = None


class PageMetadata(ApiModel):
    title: str
    description: str
    canonical: str
    open_graph: OpenGraph
    twitter: TwitterCard
    robots: Optional[RobotsDirective] = None
    json_ld: Optional[Dict[str, Any]] = None


class RobotsPolicy(ApiModel):
    user_agent: str = "*"
    allow: Optional[str] = None
    disallow: Optional[str] = None
    sitemap: str


class SitemapEntry(ApiModel):
    url: str
    last_modified: Optional[datetime] = None
    change_frequency: Optional[ChangeFrequency] = None
    priority: Optional[float] = None
