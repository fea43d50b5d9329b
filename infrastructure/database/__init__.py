from infrastructure.database.game_repository import SupabaseGameRepository
from infrastructure.database.lobby_repository import SupabaseLobbyRepository
from infrastructure.database.player_repository import SupabasePlayerRepository
from infrastructure.database.auth_repository import SupabaseAuthRepository

__all__ = [
    "SupabaseGameRepository",
    "SupabaseLobbyRepository",
    "SupabasePlayerRepository",
    "SupabaseAuthRepository",
]
