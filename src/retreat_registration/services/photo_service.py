"""Photo naming and persistence for registrations"""

import logging
import mimetypes
import re
import secrets
import time
from typing import Optional

from retreat_registration.backends.storage_client import (
    PhotoStorageError,
    StorageClient,
)
from retreat_registration.models.registration import PhotoAttachment

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_UNSAFE_KEY_CHARS = re.compile(r"[/\\]")


def generate_photo_name(
    full_name: str,
    photo: PhotoAttachment,
    timestamp_ms: Optional[int] = None,
    token: Optional[str] = None,
) -> str:
    """
    Build a unique object name for a registrant's photo.

    Format: ``<epoch millis>_<name with whitespace as "_">_<random token>.<ext>``.
    The random token keeps names distinct when two registrants with the same
    name submit within the same millisecond.
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    if token is None:
        token = secrets.token_hex(4)

    safe_name = _UNSAFE_KEY_CHARS.sub("", _WHITESPACE.sub("_", full_name.strip()))
    extension = photo.extension
    if not extension:
        guessed = mimetypes.guess_extension(photo.content_type or "")
        extension = guessed.lstrip(".") if guessed else "bin"

    return f"{timestamp_ms}_{safe_name}_{token}.{extension}"


class PhotoService:
    """Service for persisting registration photos to object storage"""

    def __init__(self, storage_client: StorageClient, config: dict):
        self.storage_client = storage_client
        self.prefix = (config.get("storage_prefix") or "").strip("/")
        self.max_photo_bytes = config.get("max_photo_bytes")

    def _object_key(self, name: str) -> str:
        return f"{self.prefix}/{name}" if self.prefix else name

    async def store_photo(self, full_name: str, photo: PhotoAttachment) -> str:
        """
        Write a registrant's photo to storage.

        Args:
            full_name: Registrant's name, used in the object name
            photo: The uploaded photo

        Returns:
            Public URL of the stored photo

        Raises:
            PhotoStorageError: If the photo is too large or the upload fails
        """
        if self.max_photo_bytes and photo.size > self.max_photo_bytes:
            raise PhotoStorageError(
                f"Photo is {photo.size} bytes, limit is {self.max_photo_bytes}"
            )

        key = self._object_key(generate_photo_name(full_name, photo))
        logger.info(f"Uploading photo for {full_name} as {key}")
        return await self.storage_client.upload(key, photo.content, photo.content_type)
