"""Domain-specific exceptions for the video upload pipeline.

Media and storage failures are defined next to their adapters and
re-exported here so callers can import the whole taxonomy from one place.
"""

from ..auth.auth_service import UnauthenticatedError
from ..exceptions import AppError
from ..media.media_errors import InvalidDimensionsError, ProbeError, TranscodeError
from ..storage.storage_errors import (
    InvalidReferenceFormatError,
    SigningError,
    StorageUploadError,
)


class VideoError(AppError):
    """Base class for video request failures raised by this package."""


class InvalidIdentifierError(VideoError):
    """Raised when the path-carried video id is not a UUID."""


class VideoNotFoundError(VideoError):
    """Raised when no record exists for the requested id."""


class ForbiddenError(VideoError):
    """Raised when the caller does not own the video record."""


class PayloadTooLargeError(VideoError):
    """Raised when uploaded bytes exceed the configured cap."""


class UnsupportedMediaTypeError(VideoError):
    """Raised when the declared content type is not video/mp4."""


class StagingError(VideoError):
    """Raised when the upload cannot be copied to or read from local staging."""


class RecordUpdateError(VideoError):
    """Raised when the object was stored but the record could not be updated."""


__all__ = [
    "ForbiddenError",
    "InvalidDimensionsError",
    "InvalidIdentifierError",
    "InvalidReferenceFormatError",
    "PayloadTooLargeError",
    "ProbeError",
    "RecordUpdateError",
    "SigningError",
    "StagingError",
    "StorageUploadError",
    "TranscodeError",
    "UnauthenticatedError",
    "UnsupportedMediaTypeError",
    "VideoError",
    "VideoNotFoundError",
]
