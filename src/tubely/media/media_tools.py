"""Subprocess helper shared by the ffmpeg and ffprobe adapters."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

logger = logging.getLogger(__name__)

STDERR_LOG_LIMIT = 400


class MediaToolError(RuntimeError):
    """Raised when a media tool cannot be executed or does not finish."""


def run_tool(cmd: Sequence[str], *, timeout: float | None = None) -> subprocess.CompletedProcess[str]:
    """Run ``cmd`` capturing stdout/stderr as text.

    Non-zero exit codes are returned to the caller; only spawn failures and
    timeouts raise :class:`MediaToolError`.
    """
    args = [str(part) for part in cmd]
    logger.debug("media.tool.exec", extra={"cmd": args, "timeout": timeout})
    try:
        completed = subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        logger.warning("media.tool.timeout", extra={"tool": args[0], "timeout": timeout})
        raise MediaToolError(f"{args[0]} timed out after {timeout}s") from exc
    except OSError as exc:
        logger.error("media.tool.spawn_failed", extra={"tool": args[0], "error": str(exc)})
        raise MediaToolError(f"could not run {args[0]}: {exc}") from exc

    if completed.returncode != 0:
        logger.warning(
            "media.tool.failed",
            extra={
                "tool": args[0],
                "returncode": completed.returncode,
                "stderr": (completed.stderr or "")[:STDERR_LOG_LIMIT],
            },
        )
    return completed


def stderr_excerpt(completed: subprocess.CompletedProcess[str], limit: int = 200) -> str:
    return (completed.stderr or "").strip()[:limit]
