"""Object key construction."""

from __future__ import annotations

import uuid

from ..media.media_classifier import Orientation

VIDEO_EXTENSION = "mp4"


def build_storage_key(orientation: Orientation) -> str:
    """Return ``<orientation>/<random uuid4 hex>.mp4``; uniqueness comes from uuid4 alone."""
    return f"{Orientation(orientation).value}/{uuid.uuid4().hex}.{VIDEO_EXTENSION}"
