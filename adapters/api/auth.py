"""
Session helpers for route handlers.
"""

from typing import Optional
from uuid import UUID

from aiohttp import web

from core.interfaces.repositories import IAuthRepository


def bearer_token(request: web.Request) -> Optional[str]:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def current_user_id(request: web.Request, auth_repo: IAuthRepository) -> Optional[UUID]:
    return await auth_repo.get_user_id(bearer_token(request))
