"""Errors raised by the object store layer."""

from ..exceptions import AppError


class StorageError(AppError):
    """Base class for object store failures."""


class StorageUploadError(StorageError):
    """Raised when an object PUT is rejected or fails in transit."""


class SigningError(StorageError):
    """Raised when a presigned URL cannot be produced."""


class InvalidReferenceFormatError(StorageError):
    """Raised when a persisted ``bucket,key`` reference is malformed."""
