"""
Authentication for the user directory service
"""

from .token import (
    INVALID_TOKEN_MESSAGE,
    AuthenticationError,
    StaticTokenMiddleware,
    verify_static_token,
)

__all__ = [
    "INVALID_TOKEN_MESSAGE",
    "AuthenticationError",
    "StaticTokenMiddleware",
    "verify_static_token",
]
