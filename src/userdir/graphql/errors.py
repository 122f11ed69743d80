"""
GraphQL error types and response formatting
"""

from __future__ import annotations

import traceback
from typing import Any

from graphql import GraphQLError


class UserNotFoundError(Exception):
    """Raised by a resolver when a mutation references an unknown user id."""

    def __init__(self, user_id: int, message: str | None = None):
        self.user_id = user_id
        super().__init__(message or f"user with the id {user_id} not found!")


class SchemaValidationError(Exception):
    """Raised at startup when the GraphQL schema is invalid."""


def format_error(error: GraphQLError, include_stack: bool = True) -> dict[str, Any]:
    """
    Format a GraphQL error as message, locations, stack and path.

    ``stack`` is the traceback of the underlying exception split into lines,
    or an empty list when there is none.
    """
    formatted: dict[str, Any] = {
        "message": error.message,
        "locations": [
            {"line": location.line, "column": location.column}
            for location in error.locations or []
        ],
    }

    if include_stack:
        formatted["stack"] = _stack_lines(error)

    formatted["path"] = error.path
    return formatted


def _stack_lines(error: GraphQLError) -> list[str]:
    original = error.original_error
    if original is None or original.__traceback__ is None:
        return []

    lines = traceback.format_exception(type(original), original, original.__traceback__)
    return "".join(lines).splitlines()
