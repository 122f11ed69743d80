"""
Main FastAPI application for the user directory service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..auth import StaticTokenMiddleware
from ..config import Settings, settings
from ..directory import UserDirectory, create_seeded_directory
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting user directory API...",
        users=len(app.state.directory),
        auth_enabled=app.state.settings.auth_enabled,
        environment=app.state.settings.environment,
    )
    yield
    logger.info("Shutting down user directory API...")


def create_app(
    app_settings: Settings | None = None,
    directory: UserDirectory | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use; defaults to the environment-loaded ones.
        directory: Directory served by the GraphQL endpoint; defaults to a
            freshly seeded one.
    """
    app_settings = app_settings or settings
    configure_logging(debug=app_settings.debug, level=app_settings.log_level)

    if directory is None:
        directory = create_seeded_directory()

    app = FastAPI(
        title="User Directory API",
        description="GraphQL endpoint over an in-memory user directory",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.directory = directory

    # Token check runs innermost so CORS preflight and logging see every request
    if app_settings.auth_enabled:
        app.add_middleware(
            StaticTokenMiddleware,
            token=app_settings.auth_token,
            rejection_status=app_settings.auth_rejection_status,
        )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "environment": app_settings.environment,
        }

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    graphql_router = create_graphql_router(
        directory,
        graphiql=app_settings.graphiql,
        include_error_stack=app_settings.include_error_stack,
    )
    app.include_router(graphql_router, prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "userdir.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
