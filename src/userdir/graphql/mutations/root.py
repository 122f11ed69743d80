"""
Root GraphQL mutation definitions
"""

import strawberry

from ...directory import UserFields
from ..types.user import User


# Input types for mutations
@strawberry.input
class UserInput:
    """Input for creating a user or replacing its fields."""

    login: str
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None

    def to_fields(self) -> UserFields:
        return UserFields(
            login=self.login,
            firstname=self.firstname,
            lastname=self.lastname,
            email=self.email,
        )


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addUser")
    async def add_user(self, info: strawberry.Info, user: UserInput) -> User | None:
        """Append a new user to the directory."""
        from ..resolvers.user import add_user

        return await add_user(info, user)

    @strawberry.mutation(name="editUser")
    async def edit_user(self, info: strawberry.Info, id: int, user: UserInput) -> User | None:
        """Replace the fields of an existing user."""
        from ..resolvers.user import edit_user

        return await edit_user(info, id, user)
