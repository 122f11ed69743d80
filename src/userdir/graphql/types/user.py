"""
User GraphQL type definitions
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...directory import User as UserRecord


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: int
    login: str
    firstname: str | None
    lastname: str | None
    email: str | None

    @classmethod
    def from_record(cls, record: UserRecord) -> User:
        return cls(
            id=record.id,
            login=record.login,
            firstname=record.firstname,
            lastname=record.lastname,
            email=record.email,
        )
