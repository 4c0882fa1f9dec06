"""Fast-start remux through ffmpeg."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .media_errors import TranscodeError
from .media_tools import MediaToolError, run_tool, stderr_excerpt

logger = logging.getLogger(__name__)


class Transcoder(Protocol):
    """Rewrites a local file so its container metadata sits at the front."""

    def fast_start(self, path: Path) -> Path: ...


def fast_start_output_path(path: Path) -> Path:
    """``clip.mp4`` -> ``clip.faststart.mp4`` in the same directory."""
    return path.with_name(f"{path.stem}.faststart.mp4")


@dataclass(slots=True)
class FFmpegFastStartTranscoder:
    """:class:`Transcoder` that copies all streams with ``-movflags faststart``."""

    binary: str = "ffmpeg"
    timeout_seconds: float | None = None

    def command(self, source: Path, output: Path) -> list[str]:
        return [
            self.binary,
            "-i", str(source),
            "-c", "copy",
            "-movflags", "faststart",
            str(output),
        ]

    def fast_start(self, path: Path) -> Path:
        output = fast_start_output_path(path)
        try:
            completed = run_tool(self.command(path, output), timeout=self.timeout_seconds)
        except MediaToolError as exc:
            raise TranscodeError(str(exc)) from exc
        if completed.returncode != 0:
            raise TranscodeError(
                f"ffmpeg exited with {completed.returncode}: {stderr_excerpt(completed)}"
            )

        logger.info("media.transcode.done", extra={"source": path.name, "output": output.name})
        return output
