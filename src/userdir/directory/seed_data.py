"""
Seed records loaded into every new directory.
"""

from __future__ import annotations

from .models import User
from .store import UserDirectory

SEED_USERS: tuple[tuple[str, str, str, str], ...] = (
    ("bleponge", "Bob", "Leponge", "bob.leponge@corp.com"),
    ("ctentatcule", "Carlo", "Tentacule", "carlo.tentacule@corp.com"),
    ("splankton", "Sheldon", "Plankton", "sheldon.plankton@corp.com"),
    ("secureuil", "Sandy", "Ecureuil", "sandy.ecureuil@corp.com"),
)


def seed_users() -> list[User]:
    """Build fresh seed records, numbered from 1 in seed order."""
    return [
        User(id=index, login=login, firstname=firstname, lastname=lastname, email=email)
        for index, (login, firstname, lastname, email) in enumerate(SEED_USERS, start=1)
    ]


def create_seeded_directory() -> UserDirectory:
    """Create a directory initialized with the four seed users."""
    return UserDirectory(seed_users())
