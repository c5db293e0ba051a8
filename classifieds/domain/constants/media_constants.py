"""
Shared constants for image uploads (user avatars and ad images).

Used by API controllers and the local image storage.
"""

# -----------------------------------------------------------------------------
# Image uploads
# -----------------------------------------------------------------------------
ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})

# Subfolder names under the configured image_storage_dir (see core.config)
AVATAR_SUBDIR = "avatars"
AD_IMAGE_SUBDIR = "ads"
