"""In-memory user directory."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from ..logging import get_logger
from .models import UpdateResult, User, UserFields, UserNotFound

logger = get_logger(__name__)


class UserDirectory:
    """
    Ordered, process-local collection of users.

    Insertion order is preserved and records are mutated in place. New ids
    follow the sequential policy: one plus the current number of records,
    not one plus the highest id. A directory constructed with gaps in its
    ids will therefore hand out ids that collide with existing records.
    """

    def __init__(self, users: Iterable[User] | None = None):
        self._users: list[User] = list(users or [])
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._users)

    def list_users(self) -> list[User]:
        """Return every user in current order."""
        with self._lock:
            return list(self._users)

    def get_by_id(self, user_id: int) -> User | None:
        """Return the user with ``user_id``, or None when there is none."""
        with self._lock:
            return self._find(user_id)

    def create(self, fields: UserFields) -> User:
        """Append a new user built from ``fields`` and return it."""
        with self._lock:
            user = User(
                id=len(self._users) + 1,
                login=fields.login,
                firstname=fields.firstname,
                lastname=fields.lastname,
                email=fields.email,
            )
            self._users.append(user)

        logger.info("User created", user_id=user.id, login=user.login)
        return user

    def update(self, user_id: int, fields: UserFields) -> UpdateResult:
        """
        Replace every editable field of the user with ``user_id``.

        Fields missing from ``fields`` become None on the record. Returns the
        updated user, or a UserNotFound outcome when the id is unknown.
        """
        with self._lock:
            user = self._find(user_id)
            if user is None:
                outcome = UserNotFound(user_id=user_id)
            else:
                user.login = fields.login
                user.firstname = fields.firstname
                user.lastname = fields.lastname
                user.email = fields.email
                outcome = user

        if isinstance(outcome, UserNotFound):
            logger.info("User not found for update", user_id=user_id)
        else:
            logger.info("User updated", user_id=user_id, login=fields.login)
        return outcome

    def _find(self, user_id: int) -> User | None:
        return next((user for user in self._users if user.id == user_id), None)
