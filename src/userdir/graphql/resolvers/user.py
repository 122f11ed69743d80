from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...directory import UserDirectory, UserNotFound
from ...logging import get_logger
from ..errors import UserNotFoundError

if TYPE_CHECKING:
    from ..mutations.root import UserInput
    from ..types.user import User

logger = get_logger(__name__)


def get_directory_from_info(info: strawberry.Info) -> UserDirectory:
    """
    Extract the user directory from the GraphQL info object.

    The router's context getter injects it; a missing directory is a wiring
    error, not a client error.
    """
    directory = info.context.get("directory")
    if directory is None:
        logger.error("User directory not found in GraphQL context")
        raise RuntimeError("User directory is not configured")
    return directory


# Query resolvers
async def resolve_users(info: strawberry.Info) -> list[User]:
    from ..types.user import User as UserType

    directory = get_directory_from_info(info)
    return [UserType.from_record(record) for record in directory.list_users()]


async def resolve_user_by_id(info: strawberry.Info, id: int) -> User | None:
    """Resolve a user by id; an unknown id resolves to null, not an error."""
    from ..types.user import User as UserType

    directory = get_directory_from_info(info)
    record = directory.get_by_id(id)
    if record is None:
        logger.debug("User not found", user_id=id)
        return None
    return UserType.from_record(record)


# Mutation resolvers
async def add_user(info: strawberry.Info, user: UserInput) -> User:
    from ..types.user import User as UserType

    directory = get_directory_from_info(info)
    record = directory.create(user.to_fields())
    return UserType.from_record(record)


async def edit_user(info: strawberry.Info, id: int, user: UserInput) -> User:
    """
    Replace the fields of an existing user.

    Unlike ``userById``, an unknown id is reported as a GraphQL error.
    """
    from ..types.user import User as UserType

    directory = get_directory_from_info(info)
    outcome = directory.update(id, user.to_fields())
    if isinstance(outcome, UserNotFound):
        raise UserNotFoundError(outcome.user_id, outcome.message)
    return UserType.from_record(outcome)
