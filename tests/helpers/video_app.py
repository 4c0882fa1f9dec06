"""Shared builders for tests that need a configured database and services."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from uuid import UUID, uuid4

from fastapi import UploadFile
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.datastructures import Headers

from src.tubely.config import AppConfig, MediaToolSettings, StorageSettings, UploadLimits
from src.tubely.db.db_init import init_db
from src.tubely.repositories.video_repository import VideoRecord, VideoRepository

TEST_BUCKET = "tubely-test"
TEST_JWT_SECRET = "test-signing-key"


def build_test_config(tmp_path: Path, *, max_upload_bytes: int = 10 * 1024 * 1024) -> AppConfig:
    # StaticPool keeps one in-memory database visible to the TestClient thread
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    init_db(engine)
    return AppConfig(
        upload_limits=UploadLimits(
            allowed_content_types=("video/mp4",),
            max_upload_bytes=max_upload_bytes,
            chunk_size_bytes=16,
        ),
        storage=StorageSettings(
            bucket=TEST_BUCKET,
            region="us-east-1",
            endpoint_url=None,
            signed_url_ttl_seconds=900,
        ),
        media_tools=MediaToolSettings(
            ffmpeg_binary="ffmpeg",
            ffprobe_binary="ffprobe",
            timeout_seconds=5.0,
        ),
        temp_root=tmp_path / "staging",
        jwt_secret=TEST_JWT_SECRET,
        log_level="DEBUG",
        database_url="sqlite://",
        engine=engine,
        session_factory=sessionmaker(bind=engine, expire_on_commit=False),
    )


def seed_video(repo: VideoRepository, *, user_id: UUID | None = None) -> VideoRecord:
    owner = user_id or uuid4()
    repo.create_user(user_id=owner, email=f"{owner.hex}@example.test")
    return repo.create_video(video_id=uuid4(), user_id=owner, title="Boots demo")


def make_upload(
    data: bytes,
    *,
    content_type: str = "video/mp4",
    filename: str = "clip.mp4",
    size: int | None = None,
) -> UploadFile:
    headers = Headers({"content-type": content_type})
    return UploadFile(filename=filename, file=BytesIO(data), size=size, headers=headers)


def staging_leftovers(config: AppConfig) -> list[Path]:
    root = config.temp_root
    if not root.exists():
        return []
    return sorted(root.iterdir())
