"""Temporary local storage for uploads being processed."""

from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from fastapi import UploadFile

from .video_errors import PayloadTooLargeError, StagingError
from .video_models import StagedFile

STAGED_FILENAME = "upload.mp4"


@dataclass(slots=True)
class StagingArea:
    """Per-request directory; every temp file of one pipeline run lives here."""

    directory: Path

    @property
    def staged_path(self) -> Path:
        return self.directory / STAGED_FILENAME


@dataclass(slots=True)
class TempVideoStore:
    """Manages lifecycle of staged and transcoded upload files."""

    root: Path
    chunk_size_bytes: int
    max_upload_bytes: int
    log: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    @contextmanager
    def staging_area(self) -> Iterator[StagingArea]:
        """Yield a fresh directory that is removed on every exit path."""
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            directory = Path(tempfile.mkdtemp(prefix="tubely-upload-", dir=self.root))
        except OSError as exc:
            raise StagingError(f"could not create staging directory: {exc}") from exc
        try:
            yield StagingArea(directory=directory)
        finally:
            shutil.rmtree(directory, ignore_errors=True)
            self.log.debug("video.staging.removed", extra={"directory": str(directory)})

    async def stage_upload(self, area: StagingArea, upload: UploadFile) -> StagedFile:
        """Copy upload contents to ``area`` enforcing the byte cap while streaming."""
        target = area.staged_path
        size = 0
        try:
            with target.open("wb") as sink:
                while True:
                    chunk = await upload.read(self.chunk_size_bytes)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_upload_bytes:
                        raise PayloadTooLargeError(
                            f"upload exceeds {self.max_upload_bytes} bytes"
                        )
                    sink.write(chunk)
        except PayloadTooLargeError:
            target.unlink(missing_ok=True)
            self.log.warning(
                "video.upload.payload_too_large",
                extra={"size_bytes": size, "limit_bytes": self.max_upload_bytes},
            )
            raise
        except OSError as exc:
            target.unlink(missing_ok=True)
            self.log.error("video.staging.copy_failed", extra={"error": str(exc)})
            raise StagingError(f"could not stage upload: {exc}") from exc

        self.log.info(
            "video.staging.persisted",
            extra={"path": str(target), "size_bytes": size},
        )
        return StagedFile(path=target, size_bytes=size)
