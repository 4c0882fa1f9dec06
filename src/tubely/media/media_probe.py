"""Stream geometry probing through ffprobe."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from .media_errors import ProbeError
from .media_tools import MediaToolError, run_tool, stderr_excerpt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VideoDimensions:
    width: float
    height: float


class Prober(Protocol):
    """Reads the first stream's width and height from a local media file."""

    def probe(self, path: Path) -> VideoDimensions: ...


def _numeric(stream: dict[str, Any], field: str) -> float:
    value = stream.get(field)
    # bool is an int subclass but never a valid dimension
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProbeError(f"stream {field} missing or not numeric: {value!r}")
    return float(value)


def parse_probe_output(raw: str) -> VideoDimensions:
    """Extract ``streams[0].width/height`` from ffprobe JSON output."""
    try:
        data = json.loads(raw or "")
    except json.JSONDecodeError as exc:
        raise ProbeError("ffprobe output is not valid JSON") from exc
    if not isinstance(data, dict):
        raise ProbeError("ffprobe output is not a JSON object")

    streams = data.get("streams")
    if not isinstance(streams, list) or not streams:
        raise ProbeError("no streams found in video")

    stream = streams[0]
    if not isinstance(stream, dict):
        raise ProbeError("invalid stream data")

    return VideoDimensions(width=_numeric(stream, "width"), height=_numeric(stream, "height"))


@dataclass(slots=True)
class FFprobeProber:
    """:class:`Prober` backed by the ``ffprobe`` executable."""

    binary: str = "ffprobe"
    timeout_seconds: float | None = None

    def command(self, path: Path) -> list[str]:
        return [
            self.binary,
            "-v", "error",
            "-print_format", "json",
            "-show_streams",
            str(path),
        ]

    def probe(self, path: Path) -> VideoDimensions:
        try:
            completed = run_tool(self.command(path), timeout=self.timeout_seconds)
        except MediaToolError as exc:
            raise ProbeError(str(exc)) from exc
        if completed.returncode != 0:
            raise ProbeError(
                f"ffprobe exited with {completed.returncode}: {stderr_excerpt(completed)}"
            )

        dimensions = parse_probe_output(completed.stdout)
        logger.info(
            "media.probe.done",
            extra={"path": path.name, "width": dimensions.width, "height": dimensions.height},
        )
        return dimensions
