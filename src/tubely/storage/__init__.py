"""Object storage adapters and helpers."""

from .object_store import ObjectStore, S3ObjectStore
from .storage_errors import (
    InvalidReferenceFormatError,
    SigningError,
    StorageError,
    StorageUploadError,
)
from .storage_keys import build_storage_key
from .storage_refs import StorageObjectRef

__all__ = [
    "InvalidReferenceFormatError",
    "ObjectStore",
    "S3ObjectStore",
    "SigningError",
    "StorageError",
    "StorageObjectRef",
    "StorageUploadError",
    "build_storage_key",
]
