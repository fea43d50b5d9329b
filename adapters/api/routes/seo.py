"""
Crawler-facing output and per-page metadata.
"""

from aiohttp import web

from adapters.api.loader import SERVICES

routes = web.RouteTableDef()


@routes.get("/robots.txt")
async def robots_txt(request: web.Request) -> web.Response:
    seo = request.app[SERVICES].seo
    return web.Response(text=seo.render_robots_txt(), content_type="text/plain")


@routes.get("/sitemap.xml")
async def sitemap_xml(request: web.Request) -> web.Response:
    seo = request.app[SERVICES].seo
    return web.Response(text=await seo.render_sitemap_xml(), content_type="application/xml")


@routes.get("/api/metadata/pages/{name}")
async def page_metadata(request: web.Request) -> web.Response:
    pages = request.app[SERVICES].pages
    name = request.match_info["name"]
    try:
        metadata = pages.static_page(name)
    except KeyError:
        return web.json_response({"error": "Page not found"}, status=404)
    return web.json_response(metadata.to_json())


@routes.get("/api/metadata/games/{game_id}")
async def game_metadata(request: web.Request) -> web.Response:
    pages = request.app[SERVICES].pages
    metadata = await pages.game_page(request.match_info["game_id"])
    return web.json_response(metadata.to_json())


@routes.get("/api/metadata/lobbies/{lobby_id}")
async def lobby_metadata(request: web.Request) -> web.Response:
    pages = request.app[SERVICES].pages
    metadata = await pages.lobby_page(request.match_info["lobby_id"])
    return web.json_response(metadata.to_json())


@routes.get("/api/metadata/players/{player_id}")
async def player_metadata(request: web.Request) -> web.Response:
    pages = request.app[SERVICES].pages
    metadata = await pages.player_page(request.match_info["player_id"])
    return web.json_response(metadata.to_json())
