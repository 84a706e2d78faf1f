"""CLI interface for JustNotes.

Command-line tool for serving the content directory and inspecting its routes.
"""

import json
import logging
import sys
from pathlib import Path

import click

from justnotes.config import Config
from justnotes.core.enumerator import enumerate_params, enumerate_paths
from justnotes.core.index import ContentIndex
from justnotes.core.projector import project
from justnotes.core.resolver import NotFoundError, resolve
from justnotes.core.types import ROUTE_SEGMENTS, RouteFamily

FAMILY_CHOICE = click.Choice([family.value for family in RouteFamily])

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover justnotes.toml)",
)
index_option = click.option(
    "--index",
    "-i",
    "index_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Content index JSON file (overrides config)",
)


@click.group()
def cli() -> None:
    """JustNotes - free VTU notes, PYQs and study materials."""


@cli.command()
@config_option
@index_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging, log not-found requests)",
)
def serve(
    config_path: Path | None,
    index_path: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the content API server."""
    from justnotes.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        index_path=index_path,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Content index: {config.content.index_path}")

    try:
        run_server(config, verbose=verbose)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@cli.command()
@click.argument("family", type=FAMILY_CHOICE)
@config_option
@index_option
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print parameter sets as JSON instead of site paths",
)
@click.option(
    "--sparse",
    is_flag=True,
    help="Only enumerate semesters a branch defines (default: 1-8)",
)
def routes(
    family: str,
    config_path: Path | None,
    index_path: Path | None,
    as_json: bool,
    sparse: bool,
) -> None:
    """List every route of a FAMILY."""
    index = _load_index(config_path, index_path)

    if as_json:
        params = enumerate_params(index, family, dense=not sparse)
        click.echo(json.dumps(params, indent=2))
        return

    for path in enumerate_paths(index, family, dense=not sparse):
        click.echo(path)


@cli.command()
@config_option
@index_option
@click.option(
    "--sparse",
    is_flag=True,
    help="Only enumerate semesters a branch defines (default: 1-8)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with an error if any enumerated route is not found",
)
def check(
    config_path: Path | None,
    index_path: Path | None,
    sparse: bool,
    strict: bool,
) -> None:
    """Resolve every enumerated route and report what is not found."""
    index = _load_index(config_path, index_path)

    total_missing = 0
    for family in RouteFamily:
        resolved = 0
        missing: list[str] = []
        for params in enumerate_params(index, family, dense=not sparse):
            segments = [params[name] for name in ROUTE_SEGMENTS[family]]
            try:
                resolve(index, family, segments)
            except NotFoundError as e:
                missing.append(str(e))
            else:
                resolved += 1

        click.echo(f"{family.value}: {resolved} resolved, {len(missing)} not found")
        if strict:
            for message in missing:
                click.echo(f"  {message}")
        total_missing += len(missing)

    if strict and total_missing:
        click.echo(
            click.style(f"Error: {total_missing} routes not found", fg="red"),
            err=True,
        )
        sys.exit(1)


@cli.command()
@click.argument("family", type=FAMILY_CHOICE)
@click.argument("segments", nargs=-1)
@config_option
@index_option
def show(
    family: str,
    segments: tuple[str, ...],
    config_path: Path | None,
    index_path: Path | None,
) -> None:
    """Print the display facts of one page as JSON.

    SEGMENTS are the route values in order, e.g. "show subject 2022 cse 3 BCS301".
    """
    index = _load_index(config_path, index_path)

    try:
        node = resolve(index, family, segments)
    except NotFoundError as e:
        click.echo(click.style(str(e), fg="red"), err=True)
        sys.exit(1)

    click.echo(json.dumps(project(node).to_dict(), indent=2, ensure_ascii=False))


def _load_config(config_path: Path | None) -> Config:
    """Load configuration or exit with error.

    Raises:
        SystemExit: If the configuration is missing or invalid
    """
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


def _load_index(config_path: Path | None, index_path: Path | None) -> ContentIndex:
    """Load the content index named by the CLI or config, or exit with error.

    Raises:
        SystemExit: If the index file is missing or not a JSON object
    """
    config = _load_config(config_path).with_overrides(index_path=index_path)
    try:
        return ContentIndex.from_file(config.content.index_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)
