"""
Row -> view model policy shared by the repositories.

Both rules default toward visibility when the column is empty. Keep it that
way unless product confirms otherwise: changing it silently hides (or
exposes) existing lobbies and profiles.
"""

from typing import Optional

from core.domain.constants import PUBLIC_VISIBILITY


def lobby_is_public(visibility: Optional[str]) -> bool:
    """NULL or 'public' -> public, any other value -> private"""
    return visibility is None or visibility == PUBLIC_VISIBILITY


def player_is_public(is_private: Optional[bool]) -> bool:
    """Inverse of the profile's is_private flag; NULL counts as public"""
    return not is_private
