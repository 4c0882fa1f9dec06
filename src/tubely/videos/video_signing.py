"""Read-time conversion of stored references into signed URLs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from ..config import SIGNED_URL_TTL_SECONDS
from ..repositories.video_repository import VideoRecord
from ..storage.object_store import ObjectStore
from ..storage.storage_errors import SigningError
from ..storage.storage_refs import StorageObjectRef

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class VideoSigningService:
    """Produce a fresh presigned GET URL per read; nothing is cached."""

    object_store: ObjectStore
    expires_in_seconds: int = SIGNED_URL_TTL_SECONDS

    def sign_reference(self, reference: str) -> str:
        ref = StorageObjectRef.parse(reference)
        logger.debug("video.sign.start", extra={"bucket": ref.bucket, "key": ref.key})

        url = self.object_store.presign_get(
            bucket=ref.bucket, key=ref.key, expires_in=self.expires_in_seconds
        )
        if not url:
            raise SigningError("generated presigned URL is empty")
        return url

    def sign_video(self, video: VideoRecord) -> VideoRecord:
        """Return a copy of ``video`` whose ``video_url`` is a signed URL."""
        if video.video_url is None:
            return video
        return replace(video, video_url=self.sign_reference(video.video_url))
