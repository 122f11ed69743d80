"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import ExecutionResult, get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.http import GraphQLHTTPResponse, process_result

from ..directory import UserDirectory
from ..logging import get_logger
from .errors import SchemaValidationError, format_error
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Runs graphql-core schema validation and an introspection query so that
    unresolvable types fail app creation instead of surfacing per request.

    Raises:
        SchemaValidationError: If the schema is invalid
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        error_messages = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=error_messages)
        raise SchemaValidationError(f"GraphQL schema validation failed: {error_messages}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        error_messages = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=error_messages)
        raise SchemaValidationError(f"GraphQL introspection failed: {error_messages}")

    logger.info("GraphQL schema validation successful")


class UserDirectoryGraphQLRouter(GraphQLRouter[dict[str, Any], None]):
    """GraphQL router that formats errors with locations, stack and path."""

    def __init__(self, *args: Any, include_error_stack: bool = True, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.include_error_stack = include_error_stack

    async def process_result(
        self, request: Request, result: ExecutionResult
    ) -> GraphQLHTTPResponse:
        data = process_result(result)
        if result.errors:
            data["errors"] = [
                format_error(error, include_stack=self.include_error_stack)
                for error in result.errors
            ]
        return data


def create_graphql_router(
    directory: UserDirectory,
    graphiql: bool = True,
    include_error_stack: bool = True,
) -> UserDirectoryGraphQLRouter:
    """Create a GraphQL router for FastAPI bound to ``directory``."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "directory": directory,
        }

    return UserDirectoryGraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
        include_error_stack=include_error_stack,
    )
