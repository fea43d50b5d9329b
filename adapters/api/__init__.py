"""
REST API adapter - aiohttp app serving the web client.

Provides:
- SteamGridDB proxy (search, game lookup, batch lookup, heroes)
- robots.txt, sitemap.xml and per-page SEO metadata
- Read-only game/lobby/player data and the award registry
- Founder-only admin listing
"""

from adapters.api.app import create_app
from adapters.api.loader import Services, SERVICES, build_services

__all__ = [
    "create_app",
    "build_services",
    "Services",
    "SERVICES",
]
