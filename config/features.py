"""
Feature Flags - Easy on/off toggle for features.
Change values here to enable/disable functionality.
"""

import os


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === SEO ===
    # Anything other than "false" keeps search engines indexing the site
    INDEXING_ENABLED: bool = os.getenv("ROBOTS_INDEX", "true").lower() != "false"

    # === GAME ART PROXY ===
    PROXY_THROTTLE_ENABLED: bool = os.getenv("PROXY_THROTTLE_ENABLED", "true").lower() == "true"

    # === DEBUG ===
    DEBUG_MODE: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_REQUESTS: bool = os.getenv("LOG_REQUESTS", "true").lower() == "true"

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "indexing_enabled": cls.INDEXING_ENABLED,
            "proxy_throttle_enabled": cls.PROXY_THROTTLE_ENABLED,
            "debug_mode": cls.DEBUG_MODE,
            "log_requests": cls.LOG_REQUESTS,
        }


# Shortcut
features = Features()
