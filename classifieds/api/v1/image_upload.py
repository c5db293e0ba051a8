"""
Helpers shared by the avatar and ad image endpoints.
"""

from pathlib import Path
from typing import Tuple

from fastapi import HTTPException, UploadFile, status
from fastapi.responses import Response

from ...core.config import get_settings
from ...domain.constants.media_constants import ALLOWED_IMAGE_EXTENSIONS

# (signature, media type) pairs checked against the first bytes of a file
_IMAGE_SIGNATURES = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
)


async def read_image_upload(file: UploadFile) -> Tuple[bytes, str]:
    """
    Read an uploaded image, enforcing extension and size limits.

    Returns:
        (content, original filename)
    """
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing file name.",
        )

    ext = Path(file.filename).suffix.lower()
    if ext not in ALLOWED_IMAGE_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid image file. Use: jpg, jpeg, png, gif, webp",
        )

    settings = get_settings()
    max_bytes = settings.image_upload_max_mb * 1024 * 1024

    chunks = []
    size = 0
    while True:
        chunk = await file.read(1024 * 1024)
        if not chunk:
            break
        size += len(chunk)
        if size > max_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Max {settings.image_upload_max_mb} MB.",
            )
        chunks.append(chunk)

    if size == 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Empty image file.",
        )

    return b"".join(chunks), file.filename


def guess_image_media_type(content: bytes) -> str:
    for signature, media_type in _IMAGE_SIGNATURES:
        if content.startswith(signature):
            return media_type
    if content[:4] == b"RIFF" and content[8:12] == b"WEBP":
        return "image/webp"
    return "application/octet-stream"


def image_response(content: bytes) -> Response:
    return Response(content=content, media_type=guess_image_media_type(content))
