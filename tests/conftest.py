"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry
from fastapi.testclient import TestClient

from userdir.config import Settings
from userdir.directory import UserDirectory, create_seeded_directory

VALID_TOKEN = "valid_token"


@pytest.fixture
def directory() -> UserDirectory:
    """A fresh directory holding the four seed users."""
    return create_seeded_directory()


@pytest.fixture
def app_settings() -> Settings:
    """Settings with the token check disabled."""
    return Settings(auth_token=None, debug=False, include_error_stack=True)


@pytest.fixture
def client(app_settings: Settings, directory: UserDirectory) -> Generator[TestClient, None, None]:
    """HTTP client for an app serving ``directory``."""
    from userdir.api.app import create_app

    with TestClient(create_app(app_settings, directory)) as test_client:
        yield test_client


@pytest.fixture
def token_client(directory: UserDirectory) -> Generator[TestClient, None, None]:
    """HTTP client for an app requiring the static token."""
    from userdir.api.app import create_app

    token_settings = Settings(auth_token=VALID_TOKEN, debug=False)
    with TestClient(create_app(token_settings, directory)) as test_client:
        yield test_client


@pytest.fixture
def mock_info(directory: UserDirectory) -> Any:
    """Create a mock GraphQL info object carrying the directory."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "directory": directory}
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
