"""
SteamGridDB proxy routes - keeps the API key on the server.
"""

import asyncio
import logging
from json import JSONDecodeError

from aiohttp import web

from adapters.api.loader import SERVICES
from core.domain.constants import MAX_BATCH_GAME_IDS, MIN_SEARCH_QUERY_LENGTH
from core.utils.validation import parse_numeric_id

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


@routes.get("/api/steamgriddb/game")
async def get_game(request: web.Request) -> web.Response:
    game_art = request.app[SERVICES].game_art
    raw_id = request.query.get("id")

    if not raw_id:
        return web.json_response({"error": "Game ID required"}, status=400)

    game_id = parse_numeric_id(raw_id)
    if game_id is None:
        return web.json_response({"error": "Invalid game ID"}, status=400)

    try:
        game = await game_art.get_game_by_id(game_id)
    except Exception as e:
        logger.error(f"Game fetch error for {game_id}: {e}")
        return web.json_response({"error": "Failed to fetch game"}, status=500)

    if not game:
        return web.json_response({"error": "Game not found"}, status=404)

    return web.json_response({"game": game.to_json()})


@routes.get("/api/steamgriddb/search")
async def search(request: web.Request) -> web.Response:
    game_art = request.app[SERVICES].game_art
    query = request.query.get("query", "")

    if len(query) < MIN_SEARCH_QUERY_LENGTH:
        return web.json_response({"results": []})

    try:
        results = await game_art.search_games(query)
    except Exception as e:
        logger.error(f"Search error for '{query}': {e}")
        return web.json_response({"results": [], "error": "Search failed"}, status=500)

    return web.json_response({"results": [r.to_json() for r in results]})


@routes.post("/api/steamgriddb/games")
async def get_games_batch(request: web.Request) -> web.Response:
    game_art = request.app[SERVICES].game_art

    try:
        body = await request.json()
    except (JSONDecodeError, ValueError):
        return web.json_response({"error": "Invalid JSON body"}, status=400)

    game_ids = body.get("gameIds") if isinstance(body, dict) else None
    if not isinstance(game_ids, list) or not game_ids:
        return web.json_response({"error": "gameIds must be a non-empty array"}, status=400)

    async def fetch_one(raw_id) -> dict:
        game_id = parse_numeric_id(raw_id)
        if game_id is None:
            return {"gameId": str(raw_id), "game": None, "error": "Invalid game ID"}
        try:
            game = await game_art.get_game_by_id(game_id)
        except Exception as e:
            logger.error(f"Error fetching game {raw_id}: {e}")
            return {"gameId": str(raw_id), "game": None, "error": "Failed to fetch"}
        return {"gameId": str(raw_id), "game": game.to_json() if game else None}

    # Cap the batch so one request can't fan out unbounded
    games = await asyncio.gather(*(fetch_one(raw_id) for raw_id in game_ids[:MAX_BATCH_GAME_IDS]))
    return web.json_response({"games": list(games)})


@routes.get("/api/steamgriddb/heroes")
async def get_heroes(request: web.Request) -> web.Response:
    game_art = request.app[SERVICES].game_art
    raw_id = request.query.get("gameId")

    if not raw_id:
        return web.json_response({"error": "gameId is required"}, status=400)

    game_id = parse_numeric_id(raw_id)
    if game_id is None:
        return web.json_response({"error": "Invalid gameId"}, status=400)

    if not game_art.is_configured:
        return web.json_response({"error": "SteamGridDB API key not configured"}, status=500)

    try:
        heroes = await game_art.get_heroes(game_id)
    except Exception as e:
        logger.error(f"Heroes fetch error for {game_id}: {e}")
        return web.json_response({"heroes": []}, status=500)

    return web.json_response({"heroes": [hero.model_dump(mode="json") for hero in heroes]})
