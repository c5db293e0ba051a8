"""
Unit tests for the dependency injection container.
"""
from unittest.mock import MagicMock, patch

import pytest

from classifieds.di.base_container import BaseContainer
from classifieds.di.container import DIContainer
from classifieds.application.use_cases.auth.register_user import RegisterUserUseCase
from classifieds.application.use_cases.ad import DeleteAdUseCase
from classifieds.domain.repositories.user_repository import UserRepository
from classifieds.domain.storage.image_storage import ImageStorage
from classifieds.infrastructure.storage.local_image_storage import LocalImageStorage


class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_singleton_returned_as_registered(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance
        assert container.has("thing")

    def test_factory_builds_new_instance_per_get(self):
        container = BaseContainer()
        container.register_factory(list, lambda: [])
        assert container.get(list) is not container.get(list)

    def test_missing_key_raises(self):
        container = BaseContainer()
        assert container.has(dict) is False
        with pytest.raises(KeyError, match="dict"):
            container.get(dict)


def _register_fake_collections(container):
    for name in ("database", "user_collection", "ad_collection", "comment_collection", "counter_collection"):
        container.register_singleton(name, MagicMock(name=name))


class TestDIContainer:
    """Tests for DIContainer wiring"""

    def test_resolves_use_cases(self, mock_settings):
        with patch(
            "classifieds.di.container.DatabaseProvider.register",
            side_effect=_register_fake_collections,
        ):
            container = DIContainer()

        register_use_case = container.get(RegisterUserUseCase)
        assert isinstance(register_use_case, RegisterUserUseCase)
        assert register_use_case.user_repository is container.get(UserRepository)

        delete_use_case = container.get(DeleteAdUseCase)
        assert isinstance(delete_use_case.image_storage, LocalImageStorage)
        assert delete_use_case.image_storage is container.get(ImageStorage)
