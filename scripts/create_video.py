"""Seed a user and an empty video record, then print a bearer token for it."""

from __future__ import annotations

import argparse
import sys
import uuid
from dataclasses import dataclass
from uuid import UUID

from src.tubely.auth.auth_service import AuthService
from src.tubely.config import AppConfig, load_config
from src.tubely.exceptions import AppError
from src.tubely.repositories.video_repository import VideoRepository


@dataclass(slots=True)
class SeedSummary:
    user_id: UUID
    video_id: UUID
    token: str


def seed_video(
    *,
    email: str,
    title: str,
    user_id: UUID | None = None,
    config: AppConfig | None = None,
) -> SeedSummary:
    """Create (or reuse) the user, create a video owned by it and issue a token."""
    config = config or load_config()
    repo = VideoRepository(config.session_factory)
    if user_id is None:
        user_id = uuid.uuid4()
        repo.create_user(user_id=user_id, email=email)

    video = repo.create_video(video_id=uuid.uuid4(), user_id=user_id, title=title)
    token = AuthService(signing_key=config.jwt_secret).issue_token(user_id)
    return SeedSummary(user_id=user_id, video_id=video.id, token=token)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a video record for local uploads.")
    parser.add_argument("--email", default="dev@tubely.local", help="Email for a new user.")
    parser.add_argument("--title", default="Untitled", help="Video title.")
    parser.add_argument("--user-id", type=UUID, help="Reuse an existing user instead of creating one.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv or [])
    try:
        summary = seed_video(email=args.email, title=args.title, user_id=args.user_id)
    except AppError as exc:
        print(f"seed failed: {exc}", file=sys.stderr)
        return 2

    print(f"user_id={summary.user_id}")
    print(f"video_id={summary.video_id}")
    print(f"token={summary.token}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
