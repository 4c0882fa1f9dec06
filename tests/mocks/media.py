"""In-memory stand-ins for the ffmpeg, ffprobe and S3 adapters."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from src.tubely.media.media_errors import ProbeError, TranscodeError
from src.tubely.media.media_probe import VideoDimensions
from src.tubely.media.media_transcode import fast_start_output_path
from src.tubely.storage.storage_errors import SigningError, StorageUploadError

FAKE_MP4_BYTES = b"\x00\x00\x00\x18ftypmp42" + b"\x00" * 64


@dataclass
class FakeTranscoder:
    """Copies the source next to itself, as the real remux does."""

    fail: bool = False
    calls: list[Path] = field(default_factory=list)

    def fast_start(self, path: Path) -> Path:
        self.calls.append(path)
        if self.fail:
            raise TranscodeError("ffmpeg exited with 1: moov atom not found")
        output = fast_start_output_path(path)
        shutil.copyfile(path, output)
        return output


@dataclass
class FakeProber:
    width: float = 1920
    height: float = 1080
    fail: bool = False
    calls: list[Path] = field(default_factory=list)

    def probe(self, path: Path) -> VideoDimensions:
        self.calls.append(path)
        if self.fail:
            raise ProbeError("no streams found in video")
        return VideoDimensions(width=self.width, height=self.height)


@dataclass
class StoredObject:
    body: bytes
    content_type: str


@dataclass
class InMemoryObjectStore:
    """Records puts and presign requests; URLs mimic an S3 presigned GET."""

    fail_put: bool = False
    presigned_url: str | None = None
    fail_presign: bool = False
    objects: dict[tuple[str, str], StoredObject] = field(default_factory=dict)
    put_calls: list[tuple[str, str]] = field(default_factory=list)
    presign_calls: list[tuple[str, str, int]] = field(default_factory=list)

    def put_object(self, *, bucket: str, key: str, body: BinaryIO, content_type: str) -> None:
        self.put_calls.append((bucket, key))
        if self.fail_put:
            raise StorageUploadError(f"upload of {key!r} to {bucket!r} failed: AccessDenied")
        self.objects[(bucket, key)] = StoredObject(body=body.read(), content_type=content_type)

    def presign_get(self, *, bucket: str, key: str, expires_in: int) -> str:
        self.presign_calls.append((bucket, key, expires_in))
        if self.fail_presign:
            raise SigningError("failed to presign: AccessDenied")
        if self.presigned_url is not None:
            return self.presigned_url
        return f"https://{bucket}.s3.test/{key}?X-Amz-Expires={expires_in}"
