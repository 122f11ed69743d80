"""
User Directory
GraphQL endpoint over an in-memory user directory
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
