"""Scheme endpoints for the scheme-indexed shape."""

from aiohttp import web

from justnotes.api.pages import page_response
from justnotes.core.types import RouteFamily


def create_schemes_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/schemes/{scheme}", get_scheme),
        web.get("/api/schemes/{scheme}/{branch}", get_scheme_branch),
        web.get("/api/schemes/{scheme}/{branch}/{sem}", get_scheme_semester),
        web.get("/api/schemes/{scheme}/{branch}/{sem}/{code}", get_subject),
    ]


async def get_scheme(request: web.Request) -> web.Response:
    return page_response(request, RouteFamily.SCHEME)


async def get_scheme_branch(request: web.Request) -> web.Response:
    return page_response(request, RouteFamily.SCHEME_BRANCH)


async def get_scheme_semester(request: web.Request) -> web.Response:
    return page_response(request, RouteFamily.SCHEME_SEMESTER)


async def get_subject(request: web.Request) -> web.Response:
    return page_response(request, RouteFamily.SUBJECT)
