"""
Shared pytest fixtures for user-directory tests.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from user_directory.di.container import DIContainer
from user_directory.infrastructure.db.in_memory_user_repository import InMemoryUserRepository


VALID_PASSWORD = "Secr3t!99"


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    # Lowest bcrypt cost keeps hashing fast in tests
    mock.bcrypt_rounds = 4

    with patch("user_directory.core.config.get_settings", return_value=mock), patch(
        "user_directory.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


@pytest.fixture
def memory_repo():
    """Empty in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def fresh_container(monkeypatch):
    """Replace the global DI container with an empty one for the test."""
    container = DIContainer()
    monkeypatch.setattr("user_directory.di.container._container", container)
    return container


@pytest.fixture
def registration_payload():
    """Factory for a valid registration body; keyword overrides replace fields."""
    def _build(**overrides):
        payload = {
            "fullName": "Ada Lovelace",
            "email": "ada@example.com",
            "password": VALID_PASSWORD,
            "bio": "Analytical engines",
            "dob": "1990-01-01",
        }
        payload.update(overrides)
        return payload

    return _build
