from core.interfaces.repositories import (
    IGameRepository,
    ILobbyRepository,
    IPlayerRepository,
    IAuthRepository,
)
from core.interfaces.game_art import IGameArtService

__all__ = [
    # Repositories
    "IGameRepository",
    "ILobbyRepository",
    "IPlayerRepository",
    "IAuthRepository",
    # Game art
    "IGameArtService",
]
