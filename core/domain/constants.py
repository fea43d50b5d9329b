"""
Domain constants - limits, static routes and other fixed data.
Centralized here for easy modification.
"""

# === Game art search ===
MIN_SEARCH_QUERY_LENGTH = 2
MAX_SEARCH_RESULTS = 10          # covers are fetched per hit, keep this small
MAX_BATCH_GAME_IDS = 50
PORTRAIT_GRID_DIMENSIONS = "600x900,342x482,660x930"

# === SEO ===
MAX_TITLE_LENGTH = 60
MAX_DESCRIPTION_LENGTH = 160
DEFAULT_OG_IMAGE_PATH = "/og/default.png"
ORGANIZATION_LOGO_PATH = "/og-image.png"

# (path, change_frequency, priority)
STATIC_SITEMAP_ROUTES = [
    ("", "daily", 1.0),
    ("/games", "daily", 0.9),
    ("/events", "weekly", 0.8),
    ("/tournaments", "daily", 0.8),
    ("/invites", "hourly", 0.7),
]

SITEMAP_GAME_PRIORITY = 0.8
SITEMAP_PLAYER_PRIORITY = 0.6
SITEMAP_LOBBY_PRIORITY = 0.7

# === Access ===
LOGIN_PATH = "/auth/login"
HOME_PATH = "/"

# === Premium ===
PRO_FEATURES = [
    "collections",
    "create_events",
    "featured_events",
    "auto_invite",
    "lobby_boost",
    "profile_banner",
    "custom_tags",
    "library_insights",
    "advanced_filters",
]

# === Lobbies ===
PUBLIC_VISIBILITY = "public"
OPEN_LOBBY_STATUS = "open"

# === Rate Limiting (requests per interval, per client IP) ===
RATE_LIMIT_PROXY = 60
RATE_LIMIT_PROXY_SEARCH = 30     # each search fans out to one cover lookup per hit
RATE_LIMIT_INTERVAL_SECONDS = 60
RATE_LIMIT_SWEEP_EVERY = 500     # throttled requests between full sweeps of idle clients
