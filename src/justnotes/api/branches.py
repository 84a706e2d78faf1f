"""Branch endpoints for the flat (current scheme) index shape."""

from aiohttp import web

from justnotes.api.pages import page_response
from justnotes.core.types import RouteFamily


def create_branches_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/branches/{branch}", get_branch),
        web.get("/api/branches/{branch}/{sem}", get_semester),
        web.get("/api/branches/{branch}/{sem}/{type}", get_resource_type),
    ]


async def get_branch(request: web.Request) -> web.Response:
    return page_response(request, RouteFamily.BRANCH)


async def get_semester(request: web.Request) -> web.Response:
    return page_response(request, RouteFamily.SEMESTER)


async def get_resource_type(request: web.Request) -> web.Response:
    return page_response(request, RouteFamily.RESOURCE_TYPE)
