"""
URL slugs for game pages.

Slugs are lossy: slug_to_name can't restore casing, punctuation or words
that were merged, so treat it as a best guess for search queries only.
"""

import re

_NON_SLUG_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATOR_RUNS = re.compile(r"[\s_-]+")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")


def generate_slug(text: str) -> str:
    """
    Generate a URL-friendly slug from a string.

    >>> generate_slug("  Counter-Strike: Global Offensive ")
    'counter-strike-global-offensive'
    """
    slug = text.lower().strip()
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _SEPARATOR_RUNS.sub("-", slug)
    return _EDGE_HYPHENS.sub("", slug)


def slug_to_name(slug: str) -> str:
    """Approximate display name for a slug: 'elden-ring' -> 'Elden Ring'"""
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def slug_matches_game_name(slug: str, game_name: str) -> bool:
    return generate_slug(game_name) == slug.lower()


def sanitize_url_segment(segment: str) -> str:
    segment = re.sub(r"[^a-z0-9-]", "-", segment.lower())
    segment = re.sub(r"-+", "-", segment)
    return re.sub(r"^-|-$", "", segment)
