"""
In-memory user directory
"""

from .models import UpdateResult, User, UserFields, UserNotFound
from .seed_data import SEED_USERS, create_seeded_directory, seed_users
from .store import UserDirectory

__all__ = [
    "SEED_USERS",
    "UpdateResult",
    "User",
    "UserDirectory",
    "UserFields",
    "UserNotFound",
    "create_seeded_directory",
    "seed_users",
]
