"""S3-compatible object storage client for registration photos"""

import asyncio
import logging
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)


class PhotoStorageError(RuntimeError):
    """Raised when a photo could not be written to object storage"""


class StorageClient:
    def __init__(self, config: dict, s3_client=None):
        self.bucket = config["storage_bucket"]
        self.region = config.get("storage_region") or "us-east-1"
        self.public_base_url = config.get("storage_public_base_url")

        self.s3 = s3_client or boto3.client(
            "s3",
            endpoint_url=config.get("storage_endpoint_url"),
            region_name=self.region,
            aws_access_key_id=config.get("storage_access_key_id"),
            aws_secret_access_key=config.get("storage_secret_access_key"),
            config=Config(signature_version="s3v4"),
        )

    def public_url(self, key: str) -> str:
        if self.public_base_url:
            return f"{self.public_base_url.rstrip('/')}/{key}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    async def upload(
        self, key: str, content: bytes, content_type: Optional[str] = None
    ) -> str:
        """
        Write an object once and return its public URL.

        Existing objects are never overwritten: the write is conditional on
        the key not existing yet.

        Args:
            key: Object key inside the bucket
            content: Raw bytes to store
            content_type: Media type recorded on the object

        Returns:
            Publicly resolvable URL of the stored object

        Raises:
            PhotoStorageError: If the upload fails or the key already exists
        """
        params = {
            "Bucket": self.bucket,
            "Key": key,
            "Body": content,
            "IfNoneMatch": "*",
        }
        if content_type:
            params["ContentType"] = content_type

        try:
            await asyncio.to_thread(self.s3.put_object, **params)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to upload {key} to bucket {self.bucket}: {e}")
            raise PhotoStorageError(f"Photo upload failed: {e}") from e

        url = self.public_url(key)
        logger.info(f"Uploaded {key} ({len(content)} bytes) to {url}")
        return url
