"""Upload validation utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import UploadFile

from ..config import UploadLimits
from .video_errors import PayloadTooLargeError, UnsupportedMediaTypeError
from .video_models import UploadDescriptor

logger = logging.getLogger(__name__)


def parse_media_type(content_type: str | None) -> str:
    """Return the bare ``type/subtype`` of a Content-Type header, lower-cased."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


@dataclass(slots=True)
class UploadValidator:
    """Check declared size and content type before anything touches disk."""

    limits: UploadLimits

    def validate(self, upload: UploadFile) -> UploadDescriptor:
        declared_size = upload.size
        if declared_size is not None and declared_size > self.limits.max_upload_bytes:
            logger.warning(
                "video.upload.payload_too_large",
                extra={"size_bytes": declared_size, "limit_bytes": self.limits.max_upload_bytes},
            )
            raise PayloadTooLargeError(
                f"upload of {declared_size} bytes exceeds {self.limits.max_upload_bytes}"
            )

        media_type = parse_media_type(upload.content_type)
        if media_type not in self.limits.allowed_content_types:
            logger.warning(
                "video.upload.unsupported_media",
                extra={"content_type": upload.content_type},
            )
            raise UnsupportedMediaTypeError(f"unsupported media type: {upload.content_type!r}")

        return UploadDescriptor(
            content_type=media_type,
            filename=upload.filename or "upload.mp4",
            declared_size_bytes=declared_size,
        )
