"""Pydantic schemas for video responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class VideoSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    title: str
    description: str
    thumbnail_url: str | None = None
    video_url: str | None = None
    created_at: datetime
    updated_at: datetime


class VideoErrorSchema(BaseModel):
    status: str
    failure_reason: str
    details: str | None = None
