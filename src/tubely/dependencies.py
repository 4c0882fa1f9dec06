"""Dependency wiring helpers."""

from fastapi import FastAPI

from .auth.auth_service import AuthService
from .config import AppConfig
from .health_api import router as health_router
from .media.media_probe import FFprobeProber, Prober
from .media.media_transcode import FFmpegFastStartTranscoder, Transcoder
from .repositories.video_repository import VideoRepository
from .storage.object_store import ObjectStore, S3ObjectStore
from .videos.video_api import router as videos_router
from .videos.video_service import VideoUploadService
from .videos.video_signing import VideoSigningService
from .videos.video_staging import TempVideoStore
from .videos.video_validation import UploadValidator


def include_routers(
    app: FastAPI,
    config: AppConfig,
    *,
    object_store: ObjectStore | None = None,
    transcoder: Transcoder | None = None,
    prober: Prober | None = None,
) -> None:
    """Mount module routers and attach services.

    Adapters default to boto3 and the ffmpeg/ffprobe binaries; tests pass
    in-memory replacements.
    """
    video_repo = VideoRepository(config.session_factory)
    store = object_store or S3ObjectStore.from_settings(config.storage)
    temp_store = TempVideoStore(
        root=config.temp_root,
        chunk_size_bytes=config.upload_limits.chunk_size_bytes,
        max_upload_bytes=config.upload_limits.max_upload_bytes,
    )
    tools = config.media_tools

    upload_service = VideoUploadService(
        repo=video_repo,
        validator=UploadValidator(config.upload_limits),
        temp_store=temp_store,
        transcoder=transcoder
        or FFmpegFastStartTranscoder(
            binary=tools.ffmpeg_binary, timeout_seconds=tools.timeout_seconds
        ),
        prober=prober
        or FFprobeProber(binary=tools.ffprobe_binary, timeout_seconds=tools.timeout_seconds),
        object_store=store,
        bucket=config.storage.bucket,
    )
    signing_service = VideoSigningService(
        object_store=store,
        expires_in_seconds=config.storage.signed_url_ttl_seconds,
    )

    app.state.config = config
    app.state.video_repo = video_repo
    app.state.temp_store = temp_store
    app.state.object_store = store
    app.state.video_upload_service = upload_service
    app.state.video_signing_service = signing_service
    app.state.auth_service = AuthService(signing_key=config.jwt_secret)

    app.include_router(health_router)
    app.include_router(videos_router)
