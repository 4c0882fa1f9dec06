"""Application configuration builder."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .db.db_init import init_db

SIGNED_URL_TTL_SECONDS = 15 * 60
MAX_UPLOAD_BYTES = 1 << 30


class Settings(BaseSettings):
    """Environment-backed settings (``TUBELY_`` prefix, optional ``.env``)."""

    model_config = SettingsConfigDict(
        env_prefix="TUBELY_", env_file=".env", extra="ignore"
    )

    database_url: str = Field(default="sqlite:///tubely.db")
    jwt_secret: str = Field(default="change-me", min_length=1)
    log_level: str = Field(default="INFO")

    s3_bucket: str = Field(default="tubely-videos", min_length=1)
    s3_region: str = Field(default="us-east-1")
    s3_endpoint_url: str | None = Field(
        default=None,
        description="Custom endpoint for S3-compatible stores (MinIO, LocalStack).",
    )
    signed_url_ttl_seconds: int = Field(default=SIGNED_URL_TTL_SECONDS, ge=1)

    max_upload_bytes: int = Field(default=MAX_UPLOAD_BYTES, ge=1)
    upload_chunk_size_bytes: int = Field(default=1024 * 1024, ge=1)
    temp_root: Path = Field(default_factory=lambda: Path(tempfile.gettempdir()))

    ffmpeg_binary: str = Field(default="ffmpeg")
    ffprobe_binary: str = Field(default="ffprobe")
    media_tool_timeout_seconds: float | None = Field(
        default=600.0,
        description="Upper bound for a single ffmpeg/ffprobe run; None waits forever.",
    )


@dataclass(slots=True)
class UploadLimits:
    allowed_content_types: Sequence[str]
    max_upload_bytes: int
    chunk_size_bytes: int


@dataclass(slots=True)
class StorageSettings:
    bucket: str
    region: str
    endpoint_url: str | None
    signed_url_ttl_seconds: int


@dataclass(slots=True)
class MediaToolSettings:
    ffmpeg_binary: str
    ffprobe_binary: str
    timeout_seconds: float | None


@dataclass(slots=True)
class AppConfig:
    upload_limits: UploadLimits
    storage: StorageSettings
    media_tools: MediaToolSettings
    temp_root: Path
    jwt_secret: str
    log_level: str
    database_url: str
    engine: Engine
    session_factory: sessionmaker[Session]


def load_config(settings: Settings | None = None) -> AppConfig:
    """Build :class:`AppConfig` from environment and initialise the database."""
    settings = settings or Settings()

    temp_root = Path(settings.temp_root)
    temp_root.mkdir(parents=True, exist_ok=True)

    engine = create_engine(settings.database_url, future=True)
    session_factory: sessionmaker[Session] = sessionmaker(bind=engine, expire_on_commit=False)
    init_db(engine)

    return AppConfig(
        upload_limits=UploadLimits(
            allowed_content_types=("video/mp4",),
            max_upload_bytes=settings.max_upload_bytes,
            chunk_size_bytes=settings.upload_chunk_size_bytes,
        ),
        storage=StorageSettings(
            bucket=settings.s3_bucket,
            region=settings.s3_region,
            endpoint_url=settings.s3_endpoint_url,
            signed_url_ttl_seconds=settings.signed_url_ttl_seconds,
        ),
        media_tools=MediaToolSettings(
            ffmpeg_binary=settings.ffmpeg_binary,
            ffprobe_binary=settings.ffprobe_binary,
            timeout_seconds=settings.media_tool_timeout_seconds,
        ),
        temp_root=temp_root,
        jwt_secret=settings.jwt_secret,
        log_level=settings.log_level,
        database_url=settings.database_url,
        engine=engine,
        session_factory=session_factory,
    )
