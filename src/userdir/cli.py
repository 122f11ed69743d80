#!/usr/bin/env python3
"""
Main CLI entry point for the user directory server.
"""

import os
import sys

import click
import uvicorn

from userdir import __version__
from userdir.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="userdir")
def cli() -> None:
    """User directory CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: USERDIR_API_HOST or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: PORT, USERDIR_API_PORT or 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option(
    "--token",
    default=None,
    help="Require this exact Authorization header on every request",
)
def serve(
    host: str | None,
    port: int | None,
    reload: bool,
    log_level: str,
    token: str | None,
) -> None:
    """Start the user directory API server."""
    from userdir.config import Settings

    configure_logging(debug=(log_level == "debug"), level=log_level)

    # Exported so reloaded processes import the app with the same settings
    if log_level == "debug":
        os.environ["USERDIR_DEBUG"] = "true"
    else:
        os.environ.setdefault("USERDIR_DEBUG", "false")
    os.environ["USERDIR_LOG_LEVEL"] = log_level
    if token:
        os.environ["USERDIR_AUTH_TOKEN"] = token

    app_settings = Settings()
    host = host if host is not None else app_settings.api_host
    port = port if port is not None else app_settings.api_port

    logger.info(
        "Starting user directory API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        auth_enabled=app_settings.auth_enabled,
    )

    try:
        if reload:
            uvicorn.run(
                "userdir.api.app:create_app",
                factory=True,
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from userdir.api.app import create_app

            uvicorn.run(
                create_app(app_settings),
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from strawberry.printer import print_schema

    from userdir.graphql.schema import schema as graphql_schema

    click.echo(print_schema(graphql_schema))


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
