"""Route enumeration endpoint.

Lists every parameter set of a route family, for static generation.
"""

from aiohttp import web

from justnotes.app_keys import index_key
from justnotes.core.enumerator import enumerate_params, enumerate_paths
from justnotes.core.types import RouteFamily


def create_routes_routes() -> list[web.RouteDef]:
    return [web.get("/api/routes/{family}", get_routes)]


async def get_routes(request: web.Request) -> web.Response:
    name = request.match_info["family"]
    try:
        family = RouteFamily(name)
    except ValueError:
        return web.json_response(
            {"error": "Unknown route family", "family": name},
            status=404,
        )

    index = request.app[index_key]
    dense = request.query.get("sparse") is None
    return web.json_response(
        {
            "family": family.value,
            "params": enumerate_params(index, family, dense=dense),
            "paths": enumerate_paths(index, family, dense=dense),
        }
    )
