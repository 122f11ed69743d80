"""Records held by the in-memory user directory."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """A user record.

    ``id`` is assigned by the directory and never changes after creation;
    every other field is overwritten wholesale by an update.
    """

    id: int
    login: str
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class UserFields:
    """Caller-supplied fields for creating or replacing a user."""

    login: str
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class UserNotFound:
    """Outcome of an update that referenced an unknown id."""

    user_id: int

    @property
    def message(self) -> str:
        return f"user with the id {self.user_id} not found!"


UpdateResult = User | UserNotFound
