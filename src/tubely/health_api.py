"""Liveness endpoint reporting media tool availability."""

from __future__ import annotations

import shutil

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request) -> dict[str, object]:
    tools = request.app.state.config.media_tools  # type: ignore[attr-defined]
    ffmpeg_found = shutil.which(tools.ffmpeg_binary) is not None
    ffprobe_found = shutil.which(tools.ffprobe_binary) is not None
    return {
        "status": "ok" if ffmpeg_found and ffprobe_found else "degraded",
        "ffmpeg_found": ffmpeg_found,
        "ffprobe_found": ffprobe_found,
    }
