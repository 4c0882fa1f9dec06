"""Domain service for the video upload pipeline."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from uuid import UUID

from fastapi import UploadFile

from ..exceptions import NotFoundError, RepositoryError
from ..media.media_classifier import classify_aspect_ratio
from ..media.media_probe import Prober
from ..media.media_transcode import Transcoder
from ..repositories.video_repository import VideoRecord, VideoRepository
from ..storage.object_store import ObjectStore
from ..storage.storage_keys import build_storage_key
from ..storage.storage_refs import StorageObjectRef
from .video_errors import (
    ForbiddenError,
    RecordUpdateError,
    StagingError,
    VideoNotFoundError,
)
from .video_models import UploadContext
from .video_staging import TempVideoStore
from .video_validation import UploadValidator

logger = logging.getLogger(__name__)

VIDEO_CONTENT_TYPE = "video/mp4"


def load_owned_video(repo: VideoRepository, video_id: UUID, user_id: UUID) -> VideoRecord:
    """Fetch ``video_id`` and ensure ``user_id`` owns it."""
    try:
        video = repo.get_video(video_id)
    except NotFoundError as exc:
        raise VideoNotFoundError(f"video {video_id} not found") from exc
    if video.user_id != user_id:
        logger.warning(
            "video.access.forbidden",
            extra={"video_id": str(video_id), "user_id": str(user_id)},
        )
        raise ForbiddenError(f"user {user_id} does not own video {video_id}")
    return video


@dataclass(slots=True)
class VideoUploadService:
    """Coordinates stage -> fast-start -> probe -> upload -> persist."""

    repo: VideoRepository
    validator: UploadValidator
    temp_store: TempVideoStore
    transcoder: Transcoder
    prober: Prober
    object_store: ObjectStore
    bucket: str
    log: logging.Logger = field(default_factory=lambda: logger)

    async def upload_video(
        self, video_id: UUID, user_id: UUID, upload: UploadFile
    ) -> VideoRecord:
        """Run the whole pipeline for one request and return the updated record."""
        load_owned_video(self.repo, video_id, user_id)
        context = UploadContext(video_id=video_id, user_id=user_id)
        context.upload = self.validator.validate(upload)

        with self.temp_store.staging_area() as area:
            context.staged = await self.temp_store.stage_upload(area, upload)

            context.transcoded_path = await asyncio.to_thread(
                self.transcoder.fast_start, context.staged.path
            )
            context.dimensions = await asyncio.to_thread(
                self.prober.probe, context.transcoded_path
            )
            context.orientation = classify_aspect_ratio(
                context.dimensions.width, context.dimensions.height
            )
            context.object_ref = StorageObjectRef(
                bucket=self.bucket, key=build_storage_key(context.orientation)
            )
            self.log.info("video.upload.classified", extra=context.log_fields())

            await asyncio.to_thread(
                self._put_file, context.transcoded_path, context.object_ref
            )
            self.log.info("video.upload.stored", extra=context.log_fields())

        return self._persist_reference(context)

    def _put_file(self, path: Path, ref: StorageObjectRef) -> None:
        try:
            body = path.open("rb")
        except OSError as exc:
            raise StagingError(f"could not open processed video: {exc}") from exc
        with body:
            body.seek(0)
            self.object_store.put_object(
                bucket=ref.bucket,
                key=ref.key,
                body=body,
                content_type=VIDEO_CONTENT_TYPE,
            )

    def _persist_reference(self, context: UploadContext) -> VideoRecord:
        assert context.object_ref is not None
        try:
            saved = self.repo.set_video_reference(
                context.video_id, context.object_ref.to_reference()
            )
        except RepositoryError as exc:
            # the object now exists in the bucket with no record pointing at it
            self.log.error(
                "video.upload.orphaned",
                extra={**context.log_fields(), "error": str(exc)},
            )
            raise RecordUpdateError(
                f"object {context.object_ref.to_reference()!r} stored but record update failed"
            ) from exc

        self.log.info("video.upload.completed", extra=context.log_fields())
        return saved
