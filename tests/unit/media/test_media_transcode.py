import subprocess
from pathlib import Path

import pytest

from src.tubely.media import media_tools
from src.tubely.media.media_errors import TranscodeError
from src.tubely.media.media_transcode import FFmpegFastStartTranscoder, fast_start_output_path


def test_output_path_stays_in_source_directory(tmp_path: Path) -> None:
    source = tmp_path / "upload.mp4"

    assert fast_start_output_path(source) == tmp_path / "upload.faststart.mp4"


def test_command_copies_streams_with_faststart(tmp_path: Path) -> None:
    source = tmp_path / "upload.mp4"
    output = fast_start_output_path(source)

    assert FFmpegFastStartTranscoder().command(source, output) == [
        "ffmpeg",
        "-i",
        str(source),
        "-c",
        "copy",
        "-movflags",
        "faststart",
        str(output),
    ]


def test_fast_start_returns_derived_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen: list[list[str]] = []

    def fake_run(args, **kwargs):
        seen.append(args)
        assert kwargs["stdin"] is subprocess.DEVNULL
        return subprocess.CompletedProcess(args=args, returncode=0, stdout="", stderr="")

    monkeypatch.setattr(media_tools.subprocess, "run", fake_run)
    source = tmp_path / "upload.mp4"

    result = FFmpegFastStartTranscoder(binary="ffmpeg").fast_start(source)

    assert result == tmp_path / "upload.faststart.mp4"
    assert seen[0][-1] == str(result)


def test_fast_start_non_zero_exit_raises(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(
        media_tools.subprocess,
        "run",
        lambda args, **kwargs: subprocess.CompletedProcess(
            args=args, returncode=1, stdout="", stderr="moov atom not found"
        ),
    )

    with pytest.raises(TranscodeError, match="moov atom not found"):
        FFmpegFastStartTranscoder().fast_start(tmp_path / "upload.mp4")


def test_fast_start_timeout_raises(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def fake_run(args, **kwargs):
        raise subprocess.TimeoutExpired(cmd=args, timeout=kwargs["timeout"])

    monkeypatch.setattr(media_tools.subprocess, "run", fake_run)

    with pytest.raises(TranscodeError, match="timed out"):
        FFmpegFastStartTranscoder(timeout_seconds=1.0).fast_start(tmp_path / "upload.mp4")
