"""The ``bucket,key`` reference stored in a video record."""

from __future__ import annotations

from dataclasses import dataclass

from .storage_errors import InvalidReferenceFormatError

REFERENCE_DELIMITER = ","


@dataclass(frozen=True, slots=True)
class StorageObjectRef:
    bucket: str
    key: str

    def to_reference(self) -> str:
        """Serialize as ``<bucket>,<key>`` with no surrounding whitespace."""
        return f"{self.bucket.strip()}{REFERENCE_DELIMITER}{self.key.strip()}"

    @classmethod
    def parse(cls, reference: str) -> "StorageObjectRef":
        """Parse a stored reference, trimming incidental whitespace around each part."""
        parts = reference.split(REFERENCE_DELIMITER)
        if len(parts) != 2:
            raise InvalidReferenceFormatError(f"invalid video reference format: {reference!r}")

        bucket, key = (part.strip() for part in parts)
        if not bucket or not key:
            raise InvalidReferenceFormatError(
                f"empty bucket or key in video reference: bucket={bucket!r}, key={key!r}"
            )
        return cls(bucket=bucket, key=key)
