"""S3-compatible object store adapter."""

from __future__ import annotations

import logging
from typing import Any, BinaryIO, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config import StorageSettings
from .storage_errors import SigningError, StorageUploadError

logger = logging.getLogger(__name__)


class ObjectStore(Protocol):
    """Minimal object store surface used by the upload and signing services."""

    def put_object(self, *, bucket: str, key: str, body: BinaryIO, content_type: str) -> None: ...

    def presign_get(self, *, bucket: str, key: str, expires_in: int) -> str: ...


class S3ObjectStore:
    """:class:`ObjectStore` over a boto3 S3 client."""

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: StorageSettings) -> "S3ObjectStore":
        client = boto3.client(
            "s3",
            region_name=settings.region,
            endpoint_url=settings.endpoint_url,
            config=Config(signature_version="s3v4"),
        )
        return cls(client)

    @property
    def client(self) -> Any:
        return self._client

    def put_object(self, *, bucket: str, key: str, body: BinaryIO, content_type: str) -> None:
        try:
            self._client.put_object(Bucket=bucket, Key=key, Body=body, ContentType=content_type)
        except (ClientError, BotoCoreError) as exc:
            logger.error(
                "storage.put_object.failed",
                extra={"bucket": bucket, "key": key, "error": str(exc)},
            )
            raise StorageUploadError(f"upload of {key!r} to {bucket!r} failed: {exc}") from exc
        logger.info("storage.put_object.done", extra={"bucket": bucket, "key": key})

    def presign_get(self, *, bucket: str, key: str, expires_in: int) -> str:
        if not bucket or not key:
            raise SigningError(f"bucket or key is empty: bucket={bucket!r}, key={key!r}")
        try:
            url = self._client.generate_presigned_url(
                ClientMethod="get_object",
                Params={"Bucket": bucket, "Key": key},
                ExpiresIn=expires_in,
            )
        except (ClientError, BotoCoreError) as exc:
            logger.error(
                "storage.presign.failed",
                extra={"bucket": bucket, "key": key, "error": str(exc)},
            )
            raise SigningError(f"failed to presign {key!r}: {exc}") from exc
        if not url:
            raise SigningError("generated presigned URL is empty")
        return url
