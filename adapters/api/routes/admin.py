"""
Founder-only admin routes.
"""

from aiohttp import web

from adapters.api.auth import current_user_id
from adapters.api.loader import SERVICES

routes = web.RouteTableDef()

_REJECTIONS = {
    401: "Unauthorized",
    403: "Forbidden: Founder access required",
}


async def _profiles_payload(request: web.Request) -> dict:
    profiles = await request.app[SERVICES].player_repo.list_recent_profiles()
    return {"users": [p.to_json() for p in profiles], "total": len(profiles)}


@routes.get("/api/seed/users")
async def seed_users_page(request: web.Request) -> web.Response:
    """Page-style guard: anonymous -> login, non-founder -> home"""
    services = request.app[SERVICES]
    user_id = await current_user_id(request, services.auth_repo)

    redirect_to = await services.access.founder_redirect(user_id)
    if redirect_to:
        raise web.HTTPFound(redirect_to)

    return web.json_response(await _profiles_payload(request))


@routes.get("/api/seed/users/list")
async def seed_users_list(request: web.Request) -> web.Response:
    services = request.app[SERVICES]
    user_id = await current_user_id(request, services.auth_repo)

    status = await services.access.check_founder(user_id)
    if status:
        return web.json_response({"error": _REJECTIONS[status]}, status=status)

    return web.json_response(await _profiles_payload(request))
