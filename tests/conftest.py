"""
Shared pytest fixtures for classifieds backend tests.
"""
import os
from datetime import date
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from classifieds.domain.models.user import User
from classifieds.domain.models.role import Role
from classifieds.application.dto.user_dto import UserResponse


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_classifieds_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "IMAGE_STORAGE_DIR": "test_media",
        "IMAGE_UPLOAD_MAX_MB": "1",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings(tmp_path):
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.image_storage_dir = str(tmp_path / "media")
    mock.image_upload_max_mb = 1
    mock.cors_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("classifieds.core.config.get_settings", return_value=mock), patch(
        "classifieds.core.security.get_settings", return_value=mock
    ), patch(
        "classifieds.infrastructure.storage.local_image_storage.get_settings", return_value=mock
    ), patch("classifieds.api.v1.image_upload.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


@pytest.fixture
def mock_image_storage():
    """Mock ImageStorage (synchronous methods)."""
    storage = MagicMock()
    storage.save_image.return_value = "media/avatars/1-abc.png"
    storage.delete_image.return_value = True
    storage.read_image.return_value = b"\x89PNG\r\n\x1a\nimage"
    return storage


@pytest.fixture
def fake_encoder():
    """Deterministic stand-in for PasswordEncoder."""
    encoder = MagicMock()
    encoder.encode.side_effect = lambda raw: f"encoded:{raw}"
    encoder.matches.side_effect = lambda raw, encoded: encoded == f"encoded:{raw}"
    return encoder


@pytest.fixture
def make_user():
    """Factory for User entities with sensible defaults."""

    def _make_user(
        user_id=1,
        username="ivan@example.com",
        role=Role.USER,
        avatar_path=None,
        hashed_password="encoded:oldpassword",
    ) -> User:
        return User(
            id=user_id,
            username=username,
            first_name="Ivan",
            last_name="Petrov",
            phone="+7(912)345-67-89",
            hashed_password=hashed_password,
            role=role,
            avatar_path=avatar_path,
            register_date=date(2024, 1, 15),
        )

    return _make_user


@pytest.fixture
def make_user_response():
    """Factory for the authenticated-user DTO passed into use cases."""

    def _make_user_response(user_id=1, role=Role.USER, email="ivan@example.com") -> UserResponse:
        return UserResponse(
            id=user_id,
            email=email,
            first_name="Ivan",
            last_name="Petrov",
            phone="+7(912)345-67-89",
            role=role,
        )

    return _make_user_response
