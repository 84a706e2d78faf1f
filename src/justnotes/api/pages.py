"""Page facts endpoints.

Resolves route segments, projects the node into display facts and returns
them as JSON. Every route family shares the same response handling.
"""

import json
import logging
from hashlib import md5

from aiohttp import web

from justnotes.app_keys import index_key, verbose_key
from justnotes.core.projector import project
from justnotes.core.resolver import NotFoundError, resolve
from justnotes.core.types import ROUTE_SEGMENTS, RouteFamily, build_path

logger = logging.getLogger(__name__)


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/home", get_home),
    ]


async def get_home(request: web.Request) -> web.Response:
    return page_response(request, RouteFamily.HOME)


def page_response(request: web.Request, family: RouteFamily) -> web.Response:
    """Build the JSON response for a page of the given route family.

    Segment values are read from the request's match info using the
    family's segment names.
    """
    segments = [request.match_info[name] for name in ROUTE_SEGMENTS[family]]
    index = request.app[index_key]

    try:
        node = resolve(index, family, segments)
    except NotFoundError:
        path = build_path(*segments)
        if request.app[verbose_key]:
            logger.info(f"Not found: {family} {path}")
        return web.json_response(
            {"error": "Content not found", "path": path},
            status=404,
        )

    body = json.dumps(project(node).to_dict())
    etag = _compute_etag(body)

    if request.headers.get("If-None-Match") == etag:
        return web.Response(status=304)

    return web.Response(
        text=body,
        content_type="application/json",
        headers={
            "ETag": etag,
            "Cache-Control": "public, max-age=300",
        },
    )


def _compute_etag(content: str) -> str:
    # First 16 hex chars (64 bits) are enough to tell index revisions apart
    content_hash = md5(content.encode("utf-8"), usedforsecurity=False).hexdigest()[:16]
    return f'"{content_hash}"'
