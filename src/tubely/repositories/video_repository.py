"""Persistence layer for video records."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db.db_models import UserModel, VideoModel
from ..exceptions import ensure_found, handle_sqlalchemy_errors


@dataclass(slots=True)
class VideoRecord:
    """Snapshot of a video row; ``video_url`` holds the storage reference."""

    id: UUID
    user_id: UUID
    title: str
    description: str
    thumbnail_url: str | None
    video_url: str | None
    created_at: datetime
    updated_at: datetime


class VideoRepository:
    """Read and update ``videos`` rows."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def create_user(self, *, user_id: UUID, email: str) -> None:
        with handle_sqlalchemy_errors(entity="user"), self._session_factory() as session:
            session.add(UserModel(id=str(user_id), email=email))
            session.commit()

    def create_video(
        self,
        *,
        video_id: UUID,
        user_id: UUID,
        title: str,
        description: str = "",
    ) -> VideoRecord:
        now = datetime.utcnow()
        with handle_sqlalchemy_errors(entity="video"), self._session_factory() as session:
            model = VideoModel(
                id=str(video_id),
                user_id=str(user_id),
                title=title,
                description=description,
                created_at=now,
                updated_at=now,
            )
            session.add(model)
            session.commit()
            return self._to_record(model)

    def get_video(self, video_id: UUID) -> VideoRecord:
        """Return the record or raise :class:`~..exceptions.NotFoundError`."""
        with handle_sqlalchemy_errors(entity="video"), self._session_factory() as session:
            model = ensure_found(
                session.get(VideoModel, str(video_id)), entity="video", identifier=str(video_id)
            )
            return self._to_record(model)

    def list_videos_for_user(self, user_id: UUID) -> list[VideoRecord]:
        with handle_sqlalchemy_errors(entity="video"), self._session_factory() as session:
            rows = session.scalars(
                select(VideoModel)
                .where(VideoModel.user_id == str(user_id))
                .order_by(VideoModel.created_at.desc())
            ).all()
            return [self._to_record(row) for row in rows]

    def set_video_reference(self, video_id: UUID, reference: str) -> VideoRecord:
        """Write only ``video_url``; other columns keep their current values."""
        with handle_sqlalchemy_errors(entity="video"), self._session_factory() as session:
            model = ensure_found(
                session.get(VideoModel, str(video_id)), entity="video", identifier=str(video_id)
            )
            model.video_url = reference
            model.updated_at = datetime.utcnow()
            session.commit()
            return self._to_record(model)

    def update_video(self, record: VideoRecord) -> VideoRecord:
        """Persist mutable fields of ``record`` and commit."""
        with handle_sqlalchemy_errors(entity="video"), self._session_factory() as session:
            model = ensure_found(
                session.get(VideoModel, str(record.id)), entity="video", identifier=str(record.id)
            )
            model.title = record.title
            model.description = record.description
            model.thumbnail_url = record.thumbnail_url
            model.video_url = record.video_url
            model.updated_at = datetime.utcnow()
            session.commit()
            return self._to_record(model)

    @staticmethod
    def _to_record(model: VideoModel) -> VideoRecord:
        return VideoRecord(
            id=UUID(model.id),
            user_id=UUID(model.user_id),
            title=model.title,
            description=model.description,
            thumbnail_url=model.thumbnail_url,
            video_url=model.video_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
