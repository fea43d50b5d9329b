"""
Read-only data routes: games, lobbies, players and the award registry.
"""

from aiohttp import web

from adapters.api.loader import SERVICES
from core.domain.endorsements import get_all_award_types, get_award_config

routes = web.RouteTableDef()


@routes.get("/api/games/{slug_or_id}")
async def get_game(request: web.Request) -> web.Response:
    game = await request.app[SERVICES].game_repo.get_by_slug(request.match_info["slug_or_id"])
    if not game:
        return web.json_response({"error": "Game not found"}, status=404)
    return web.json_response(game.to_json())


@routes.get("/api/lobbies/{lobby_id}")
async def get_lobby(request: web.Request) -> web.Response:
    lobby = await request.app[SERVICES].lobby_repo.get_by_id(request.match_info["lobby_id"])
    if not lobby:
        return web.json_response({"error": "Lobby not found"}, status=404)
    return web.json_response(lobby.to_json())


@routes.get("/api/players/{username}")
async def get_player(request: web.Request) -> web.Response:
    player = await request.app[SERVICES].player_repo.get_by_username(request.match_info["username"])
    if not player:
        return web.json_response({"error": "Player not found"}, status=404)
    return web.json_response(player.to_json())


@routes.get("/api/awards")
async def list_awards(request: web.Request) -> web.Response:
    return web.json_response({
        "awards": [get_award_config(award_type).to_json() for award_type in get_all_award_types()]
    })


@routes.get("/api/awards/{award_type}")
async def get_award(request: web.Request) -> web.Response:
    try:
        config = get_award_config(request.match_info["award_type"])
    except ValueError:
        return web.json_response({"error": "Unknown award type"}, status=404)
    return web.json_response(config.to_json())
