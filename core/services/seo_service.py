"""
SEO service - shared metadata builder, robots policy, sitemap and JSON-LD.

Every page goes through create_metadata() so titles, canonical URLs and
social cards stay consistent across the site.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any
from xml.sax.saxutils import escape

from core.domain.constants import (
    DEFAULT_OG_IMAGE_PATH,
    ORGANIZATION_LOGO_PATH,
    STATIC_SITEMAP_ROUTES,
)
from core.domain.models import (
    GoogleBotDirective,
    OpenGraph,
    OpenGraphImage,
    PageMetadata,
    RobotsDirective,
    RobotsPolicy,
    SitemapEntry,
    TwitterCard,
)
from core.interfaces.repositories import IGameRepository, ILobbyRepository, IPlayerRepository
from core.utils.sanitize import sanitize_for_meta
from locales import t

logger = logging.getLogger(__name__)


class SeoService:
    """Service for page metadata and crawler-facing output"""

    def __init__(
        self,
        site_url: str,
        site_name: str,
        indexing_enabled: bool = True,
        twitter_handle: str = "",
        game_repo: Optional[IGameRepository] = None,
        player_repo: Optional[IPlayerRepository] = None,
        lobby_repo: Optional[ILobbyRepository] = None,
    ):
        self.site_url = site_url.rstrip("/")
        self.site_name = site_name
        self.indexing_enabled = indexing_enabled
        self.twitter_handle = twitter_handle
        self.game_repo = game_repo
        self.player_repo = player_repo
        self.lobby_repo = lobby_repo

    # === URLS & TITLES ===

    def absolute_url(self, path: str) -> str:
        clean_path = path if path.startswith("/") else f"/{path}"
        return f"{self.site_url}{clean_path}"

    def _image_url(self, image: str) -> str:
        return image if image.startswith("http") else self.absolute_url(image)

    def build_title(self, title: str, include_site_name: bool = True) -> str:
        if not include_site_name:
            return title
        return f"{title} | {self.site_name}"

    def build_canonical(self, path: str) -> str:
        return self.absolute_url(path)

    # === SOCIAL CARDS ===

    def default_open_graph(
        self,
        title: str,
        description: str,
        url: Optional[str] = None,
        images: Optional[List[str]] = None,
    ) -> OpenGraph:
        if images:
            og_images = [OpenGraphImage(url=self._image_url(img)) for img in images]
        else:
            og_images = [OpenGraphImage(url=self.absolute_url(DEFAULT_OG_IMAGE_PATH))]

        return OpenGraph(
            site_name=self.site_name,
            url=self.absolute_url(url) if url else self.site_url,
            title=title,
            description=description,
            images=og_images,
        )

    def default_twitter_card(
        self,
        title: str,
        description: str,
        images: Optional[List[str]] = None,
    ) -> TwitterCard:
        image = self._image_url(images[0]) if images else self.absolute_url(DEFAULT_OG_IMAGE_PATH)
        return TwitterCard(
            title=title,
            description=description,
            images=image,
            site=self.twitter_handle or None,
        )

    # === ROBOTS ===

    def default_robots(self) -> RobotsDirective:
        allowed = self.indexing_enabled
        return RobotsDirective(
            index=allowed,
            follow=allowed,
            google_bot=GoogleBotDirective(index=allowed, follow=allowed),
        )

    def create_metadata(
        self,
        title: str,
        description: str,
        path: str,
        images: Optional[List[str]] = None,
        robots: Optional[RobotsDirective] = None,
        no_index: bool = False,
    ) -> PageMetadata:
        """
        Build the full metadata set for a page.

        The site name is appended here, so callers pass the bare page title.
        no_index wins over any explicit robots directive.
        """
        clean_title = sanitize_for_meta(title)
        clean_description = sanitize_for_meta(description)
        full_title = self.build_title(clean_title)

        return PageMetadata(
            title=full_title,
            description=clean_description,
            canonical=self.build_canonical(path),
            open_graph=self.default_open_graph(full_title, clean_description, path, images),
            twitter=self.default_twitter_card(full_title, clean_description, images),
            robots=RobotsDirective(index=False, follow=False) if no_index else robots,
        )

    def robots_policy(self) -> RobotsPolicy:
        sitemap_url = f"{self.site_url}/sitemap.xml"
        if not self.indexing_enabled:
            return RobotsPolicy(disallow="/", sitemap=sitemap_url)
        return RobotsPolicy(allow="/", sitemap=sitemap_url)

    def render_robots_txt(self) -> str:
        policy = self.robots_policy()
        lines = [f"User-Agent: {policy.user_agent}"]
        if policy.allow is not None:
            lines.append(f"Allow: {policy.allow}")
        if policy.disallow is not None:
            lines.append(f"Disallow: {policy.disallow}")
        lines.append("")
        lines.append(f"Sitemap: {policy.sitemap}")
        return "\n".join(lines) + "\n"

    # === SITEMAP ===

    async def _dynamic_entries(self) -> List[SitemapEntry]:
        sources = [repo for repo in (self.game_repo, self.player_repo, self.lobby_repo) if repo]
        results = await asyncio.gather(
            *(repo.list_for_sitemap() for repo in sources),
            return_exceptions=True,
        )

        entries: List[SitemapEntry] = []
        for repo, result in zip(sources, results):
            if isinstance(result, Exception):
                # A broken source drops its URLs, the rest of the sitemap still ships
                logger.error(f"Sitemap source {type(repo).__name__} failed: {result}")
                continue
            entries.extend(result)
        return entries

    async def build_sitemap(self, now: Optional[datetime] = None) -> List[SitemapEntry]:
        now = now or datetime.now(timezone.utc)

        static_entries = [
            SitemapEntry(
                url=f"{self.site_url}{path}",
                last_modified=now,
                change_frequency=frequency,
                priority=priority,
            )
            for path, frequency, priority in STATIC_SITEMAP_ROUTES
        ]

        dynamic_entries = [
            entry.model_copy(update={"url": f"{self.site_url}{entry.url}"})
            for entry in await self._dynamic_entries()
        ]

        return static_entries + dynamic_entries

    async def render_sitemap_xml(self) -> str:
        entries = await self.build_sitemap()

        url_blocks = []
        for entry in entries:
            parts = [f"<loc>{escape(entry.url)}</loc>"]
            if entry.last_modified:
                parts.append(f"<lastmod>{entry.last_modified.isoformat()}</lastmod>")
            if entry.change_frequency:
                parts.append(f"<changefreq>{entry.change_frequency}</changefreq>")
            if entry.priority is not None:
                parts.append(f"<priority>{entry.priority}</priority>")
            url_blocks.append(f"<url>{''.join(parts)}</url>")

        body = "\n".join(url_blocks)
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
            f"{body}\n"
            "</urlset>\n"
        )

    # === JSON-LD ===

    def website_jsonld(self) -> Dict[str, Any]:
        return {
            "@context": "https://schema.org",
            "@type": "WebSite",
            "name": self.site_name,
            "url": self.site_url,
            "description": t("site_description"),
        }

    def organization_jsonld(self) -> Dict[str, Any]:
        return {
            "@context": "https://schema.org",
            "@type": "Organization",
            "name": self.site_name,
            "url": self.site_url,
            "logo": self.absolute_url(ORGANIZATION_LOGO_PATH),
        }

    def video_game_jsonld(self, name: str, url: str, image: Optional[str] = None) -> Dict[str, Any]:
        data = {
            "@context": "https://schema.org",
            "@type": "VideoGame",
            "name": name,
            "url": url,
        }
        if image:
            data["image"] = image
        return data

    def person_jsonld(self, name: str, url: str, username: Optional[str] = None) -> Dict[str, Any]:
        data = {
            "@context": "https://schema.org",
            "@type": "Person",
            "name": name,
            "url": url,
        }
        if username:
            data["identifier"] = username
        return data
