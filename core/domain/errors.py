"""
Domain errors. Missing rows are not errors here - lookups return None.
"""


class ApoxerError(Exception):
    """Base class for application errors"""


class ConfigurationError(ApoxerError):
    """Required setting is missing or invalid"""


class GameArtServiceError(ApoxerError):
    """SteamGridDB could not be reached or sent something unreadable"""
