"""
Unit tests for user profile, password and avatar use cases.
"""
from unittest.mock import MagicMock, call

import pytest

from classifieds.application.dto.user_dto import UpdatePasswordRequest, UpdateUserRequest
from classifieds.application.use_cases.user import (
    DownloadAvatarUseCase,
    GetUserProfileUseCase,
    UpdatePasswordUseCase,
    UpdateUserAvatarUseCase,
    UpdateUserUseCase,
)
from classifieds.core.security import PasswordEncoder
from classifieds.domain.constants.media_constants import AVATAR_SUBDIR
from classifieds.domain.exceptions import InvalidArgumentError, RecordNotFoundError


def _return_saved(user):
    return user


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase"""

    @pytest.mark.asyncio
    async def test_returns_profile(self, mock_user_repo, make_user):
        mock_user_repo.find_by_username.return_value = make_user(avatar_path="media/avatars/1-a.png")

        result = await GetUserProfileUseCase(mock_user_repo).execute("ivan@example.com")
        assert result.email == "ivan@example.com"
        assert result.first_name == "Ivan"
        assert result.image == "/api/v1/users/1/image"

    @pytest.mark.asyncio
    async def test_missing_user_raises(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = None
        with pytest.raises(RecordNotFoundError):
            await GetUserProfileUseCase(mock_user_repo).execute("nobody@example.com")


class TestUpdatePasswordUseCase:
    """Tests for UpdatePasswordUseCase"""

    @pytest.mark.asyncio
    async def test_valid_new_password_saved(self, mock_user_repo, fake_encoder, make_user):
        user = make_user()
        mock_user_repo.find_by_username.return_value = user

        use_case = UpdatePasswordUseCase(mock_user_repo, fake_encoder)
        result = await use_case.execute(
            UpdatePasswordRequest(current_password="oldpassword", new_password="newpassword1"),
            "ivan@example.com",
        )

        assert result is True
        mock_user_repo.save.assert_called_once_with(user)
        assert user.hashed_password == "encoded:newpassword1"

    @pytest.mark.asyncio
    async def test_short_password_rejected(self, mock_user_repo, fake_encoder, make_user):
        mock_user_repo.find_by_username.return_value = make_user()

        use_case = UpdatePasswordUseCase(mock_user_repo, fake_encoder)
        result = await use_case.execute(UpdatePasswordRequest(new_password="short"), "ivan@example.com")

        assert result is False
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_password_rejected(self, mock_user_repo, fake_encoder, make_user):
        mock_user_repo.find_by_username.return_value = make_user()

        use_case = UpdatePasswordUseCase(mock_user_repo, fake_encoder)
        result = await use_case.execute(UpdatePasswordRequest(new_password="         "), "ivan@example.com")

        assert result is False
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_compared_against_encoded_stored_value(self, mock_user_repo, fake_encoder, make_user):
        mock_user_repo.find_by_username.return_value = make_user(hashed_password="encoded:oldpassword")
        use_case = UpdatePasswordUseCase(mock_user_repo, fake_encoder)

        # Re-using the plain old password is not detected
        assert await use_case.execute(
            UpdatePasswordRequest(new_password="oldpassword"), "ivan@example.com"
        ) is True

        # Only the encoded form of the stored hash counts as "unchanged"
        mock_user_repo.save.reset_mock()
        mock_user_repo.find_by_username.return_value = make_user(hashed_password="encoded:oldpassword")
        assert await use_case.execute(
            UpdatePasswordRequest(new_password="encoded:encoded:oldpassword"), "ivan@example.com"
        ) is False
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_password_longer_than_bcrypt_limit_saved(self, mock_user_repo, make_user):
        user = make_user()
        mock_user_repo.find_by_username.return_value = user
        encoder = PasswordEncoder()

        result = await UpdatePasswordUseCase(mock_user_repo, encoder).execute(
            UpdatePasswordRequest(new_password="b" * 80), "ivan@example.com"
        )

        assert result is True
        mock_user_repo.save.assert_called_once_with(user)
        assert encoder.matches("b" * 80, user.hashed_password) is True

    @pytest.mark.asyncio
    async def test_missing_user_raises(self, mock_user_repo, fake_encoder):
        mock_user_repo.find_by_username.return_value = None
        use_case = UpdatePasswordUseCase(mock_user_repo, fake_encoder)
        with pytest.raises(RecordNotFoundError):
            await use_case.execute(UpdatePasswordRequest(new_password="newpassword1"), "x@y.z")


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase"""

    @pytest.mark.asyncio
    async def test_profile_fields_merged(self, mock_user_repo, make_user):
        user = make_user()
        mock_user_repo.find_by_username.return_value = user
        mock_user_repo.save.side_effect = _return_saved

        result = await UpdateUserUseCase(mock_user_repo).execute(
            "ivan@example.com",
            UpdateUserRequest(first_name="Pyotr", last_name="Ivanov", phone="+7(900)111-22-33"),
        )

        assert result.first_name == "Pyotr"
        assert result.last_name == "Ivanov"
        assert result.phone == "+7(900)111-22-33"
        assert result.email == "ivan@example.com"
        mock_user_repo.save.assert_called_once_with(user)

    @pytest.mark.asyncio
    async def test_invalid_phone_never_saved(self, mock_user_repo, make_user):
        user = make_user()
        mock_user_repo.find_by_username.return_value = user

        with pytest.raises(InvalidArgumentError):
            await UpdateUserUseCase(mock_user_repo).execute(
                "ivan@example.com",
                UpdateUserRequest(first_name="Pyotr", last_name="Ivanov", phone="89001112233"),
            )

        mock_user_repo.save.assert_not_called()
        assert user.first_name == "Ivan"

    @pytest.mark.asyncio
    async def test_missing_user_raises(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = None
        with pytest.raises(RecordNotFoundError):
            await UpdateUserUseCase(mock_user_repo).execute(
                "x@y.z",
                UpdateUserRequest(first_name="A", last_name="B", phone="+7(900)111-22-33"),
            )


class TestUpdateUserAvatarUseCase:
    """Tests for UpdateUserAvatarUseCase"""

    @pytest.mark.asyncio
    async def test_old_avatar_deleted_before_new_saved(self, mock_user_repo, mock_image_storage, make_user):
        user = make_user(avatar_path="media/avatars/1-old.png")
        mock_user_repo.find_by_username.return_value = user
        mock_user_repo.save.side_effect = _return_saved

        # Record storage calls in order
        manager = MagicMock()
        manager.attach_mock(mock_image_storage.delete_image, "delete_image")
        manager.attach_mock(mock_image_storage.save_image, "save_image")

        result = await UpdateUserAvatarUseCase(mock_user_repo, mock_image_storage).execute(
            "ivan@example.com", b"data", "me.png"
        )

        assert manager.mock_calls == [
            call.delete_image("media/avatars/1-old.png"),
            call.save_image(b"data", "me.png", 1, AVATAR_SUBDIR),
        ]
        assert user.avatar_path == "media/avatars/1-abc.png"
        assert result.image == "/api/v1/users/1/image"

    @pytest.mark.asyncio
    async def test_delete_called_even_without_previous_avatar(self, mock_user_repo, mock_image_storage, make_user):
        mock_user_repo.find_by_username.return_value = make_user(avatar_path=None)
        mock_user_repo.save.side_effect = _return_saved

        await UpdateUserAvatarUseCase(mock_user_repo, mock_image_storage).execute(
            "ivan@example.com", b"data", "me.png"
        )

        mock_image_storage.delete_image.assert_called_once_with(None)
        mock_user_repo.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_storage_failure_propagates(self, mock_user_repo, mock_image_storage, make_user):
        mock_user_repo.find_by_username.return_value = make_user()
        mock_image_storage.save_image.side_effect = OSError("disk full")

        with pytest.raises(OSError):
            await UpdateUserAvatarUseCase(mock_user_repo, mock_image_storage).execute(
                "ivan@example.com", b"data", "me.png"
            )
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_user_raises(self, mock_user_repo, mock_image_storage):
        mock_user_repo.find_by_username.return_value = None
        with pytest.raises(RecordNotFoundError):
            await UpdateUserAvatarUseCase(mock_user_repo, mock_image_storage).execute(
                "x@y.z", b"data", "me.png"
            )
        mock_image_storage.delete_image.assert_not_called()


class TestDownloadAvatarUseCase:
    """Tests for DownloadAvatarUseCase"""

    @pytest.mark.asyncio
    async def test_returns_bytes(self, mock_user_repo, mock_image_storage, make_user):
        mock_user_repo.find_by_id.return_value = make_user(avatar_path="media/avatars/1-a.png")

        content = await DownloadAvatarUseCase(mock_user_repo, mock_image_storage).execute(1)

        assert content == mock_image_storage.read_image.return_value
        mock_image_storage.read_image.assert_called_once_with("media/avatars/1-a.png")

    @pytest.mark.asyncio
    async def test_missing_user_raises(self, mock_user_repo, mock_image_storage):
        mock_user_repo.find_by_id.return_value = None
        with pytest.raises(RecordNotFoundError, match="User not found"):
            await DownloadAvatarUseCase(mock_user_repo, mock_image_storage).execute(1)

    @pytest.mark.asyncio
    async def test_user_without_avatar_raises(self, mock_user_repo, mock_image_storage, make_user):
        mock_user_repo.find_by_id.return_value = make_user(avatar_path=None)
        with pytest.raises(RecordNotFoundError, match="no avatar"):
            await DownloadAvatarUseCase(mock_user_repo, mock_image_storage).execute(1)
        mock_image_storage.read_image.assert_not_called()

    @pytest.mark.asyncio
    async def test_read_error_propagates(self, mock_user_repo, mock_image_storage, make_user):
        mock_user_repo.find_by_id.return_value = make_user(avatar_path="media/avatars/1-a.png")
        mock_image_storage.read_image.side_effect = FileNotFoundError("gone")
        with pytest.raises(FileNotFoundError):
            await DownloadAvatarUseCase(mock_user_repo, mock_image_storage).execute(1)
