from infrastructure.steamgriddb.client import SteamGridDBService

__all__ = [
    "SteamGridDBService",
]
