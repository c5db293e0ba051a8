"""
Unit tests for upload helpers shared by the image endpoints.
"""
import io

import pytest
from fastapi import HTTPException, UploadFile

from classifieds.api.v1.image_upload import guess_image_media_type, read_image_upload


def _upload(content: bytes, filename: str) -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=filename)


class TestReadImageUpload:
    """Tests for read_image_upload"""

    @pytest.mark.asyncio
    async def test_valid_upload(self, mock_settings):
        content, filename = await read_image_upload(_upload(b"\x89PNG\r\n\x1a\nxx", "me.png"))
        assert content == b"\x89PNG\r\n\x1a\nxx"
        assert filename == "me.png"

    @pytest.mark.asyncio
    async def test_bad_extension(self, mock_settings):
        with pytest.raises(HTTPException) as exc_info:
            await read_image_upload(_upload(b"data", "me.exe"))
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_empty_file(self, mock_settings):
        with pytest.raises(HTTPException) as exc_info:
            await read_image_upload(_upload(b"", "me.jpg"))
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_too_large(self, mock_settings):
        too_big = b"x" * (mock_settings.image_upload_max_mb * 1024 * 1024 + 1)
        with pytest.raises(HTTPException) as exc_info:
            await read_image_upload(_upload(too_big, "big.jpg"))
        assert exc_info.value.status_code == 413


class TestGuessImageMediaType:
    """Tests for guess_image_media_type"""

    @pytest.mark.parametrize(
        "content, expected",
        [
            (b"\x89PNG\r\n\x1a\n...", "image/png"),
            (b"\xff\xd8\xff\xe0...", "image/jpeg"),
            (b"GIF89a...", "image/gif"),
            (b"RIFF\x00\x00\x00\x00WEBPVP8 ", "image/webp"),
            (b"plain text", "application/octet-stream"),
        ],
    )
    def test_detects_signature(self, content, expected):
        assert guess_image_media_type(content) == expected
