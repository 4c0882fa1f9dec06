"""Database models and utilities for the video record store."""

from .db_init import init_db
from .db_models import Base, UserModel, VideoModel

__all__ = [
    "Base",
    "UserModel",
    "VideoModel",
    "init_db",
]
