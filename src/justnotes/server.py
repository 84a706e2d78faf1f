"""aiohttp server for JustNotes.

Application factory and route registration for standalone server mode.
"""

import logging

from aiohttp import web

from justnotes.api.branches import create_branches_routes
from justnotes.api.pages import create_pages_routes
from justnotes.api.routes import create_routes_routes
from justnotes.api.schemes import create_schemes_routes
from justnotes.app_keys import index_key, verbose_key
from justnotes.config import Config
from justnotes.core.index import ContentIndex

logger = logging.getLogger(__name__)


def create_app(config: Config, *, verbose: bool = False) -> web.Application:
    """Create aiohttp application.

    The content index is loaded once here and shared read-only by every
    request for the lifetime of the application.

    Args:
        config: Application configuration
        verbose: Enable verbose output (log not-found requests)

    Returns:
        Configured aiohttp application

    Raises:
        FileNotFoundError: If the content index file doesn't exist
        ValueError: If the content index is not a JSON object
    """
    app = web.Application()

    index = ContentIndex.from_file(config.content.index_path)
    logger.info(
        f"Loaded content index from {config.content.index_path}: "
        f"{len(index.branches)} branches, {len(index.schemes)} schemes"
    )

    app[index_key] = index
    app[verbose_key] = verbose

    app.router.add_routes(create_pages_routes())
    app.router.add_routes(create_branches_routes())
    app.router.add_routes(create_schemes_routes())
    app.router.add_routes(create_routes_routes())

    return app


def run_server(config: Config, *, verbose: bool = False) -> None:
    """Run the server.

    Args:
        config: Application configuration
        verbose: Enable verbose output (log not-found requests)
    """
    app = create_app(config, verbose=verbose)
    web.run_app(app, host=config.server.host, port=config.server.port)
