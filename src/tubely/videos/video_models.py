"""Data structures for the video upload pipeline."""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from uuid import UUID

from ..media.media_classifier import Orientation
from ..media.media_probe import VideoDimensions
from ..storage.storage_refs import StorageObjectRef


class FailureReason(StrEnum):
    """Failure reasons returned in structured error bodies."""

    INVALID_REQUEST = "invalid_request"
    INVALID_IDENTIFIER = "invalid_identifier"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    VIDEO_NOT_FOUND = "video_not_found"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    STAGING_FAILED = "staging_failed"
    TRANSCODE_FAILED = "transcode_failed"
    PROBE_FAILED = "probe_failed"
    INVALID_DIMENSIONS = "invalid_dimensions"
    STORAGE_UPLOAD_FAILED = "storage_upload_failed"
    RECORD_UPDATE_FAILED = "record_update_failed"
    INVALID_REFERENCE_FORMAT = "invalid_reference_format"
    SIGNING_FAILED = "signing_failed"
    INTERNAL_ERROR = "internal_error"


@dataclass(slots=True)
class UploadDescriptor:
    """Outcome of validating the declared upload metadata."""

    content_type: str
    filename: str
    declared_size_bytes: int | None


@dataclass(slots=True)
class StagedFile:
    path: Path
    size_bytes: int


@dataclass(slots=True)
class UploadContext:
    """State accumulated across one pipeline run (used for logging)."""

    video_id: UUID
    user_id: UUID
    upload: UploadDescriptor | None = None
    staged: StagedFile | None = None
    transcoded_path: Path | None = None
    dimensions: VideoDimensions | None = None
    orientation: Orientation | None = None
    object_ref: StorageObjectRef | None = None

    def log_fields(self) -> dict[str, object]:
        fields: dict[str, object] = {
            "video_id": str(self.video_id),
            "user_id": str(self.user_id),
        }
        if self.orientation is not None:
            fields["orientation"] = self.orientation.value
        if self.object_ref is not None:
            fields["bucket"] = self.object_ref.bucket
            fields["key"] = self.object_ref.key
        return fields
