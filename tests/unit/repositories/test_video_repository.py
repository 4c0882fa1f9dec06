from dataclasses import replace
from pathlib import Path
from uuid import uuid4

import pytest

from src.tubely.exceptions import IntegrityConstraintViolation, NotFoundError
from src.tubely.repositories.video_repository import VideoRepository
from tests.helpers.video_app import build_test_config, seed_video


@pytest.fixture()
def repo(tmp_path: Path) -> VideoRepository:
    return VideoRepository(build_test_config(tmp_path).session_factory)


def test_create_and_get_video(repo: VideoRepository) -> None:
    video = seed_video(repo)

    loaded = repo.get_video(video.id)

    assert loaded.id == video.id
    assert loaded.user_id == video.user_id
    assert loaded.title == "Boots demo"
    assert loaded.video_url is None


def test_get_missing_video_raises(repo: VideoRepository) -> None:
    with pytest.raises(NotFoundError):
        repo.get_video(uuid4())


def test_update_video_persists_reference(repo: VideoRepository) -> None:
    video = seed_video(repo)

    updated = repo.update_video(replace(video, video_url="tubely-test,landscape/a.mp4"))

    assert updated.video_url == "tubely-test,landscape/a.mp4"
    assert updated.updated_at >= video.updated_at
    assert repo.get_video(video.id).video_url == "tubely-test,landscape/a.mp4"


def test_update_missing_video_raises(repo: VideoRepository) -> None:
    video = seed_video(repo)

    with pytest.raises(NotFoundError):
        repo.update_video(replace(video, id=uuid4()))


def test_list_videos_for_user_only_returns_owned(repo: VideoRepository) -> None:
    first = seed_video(repo)
    second = repo.create_video(video_id=uuid4(), user_id=first.user_id, title="Second")
    seed_video(repo)

    listed = repo.list_videos_for_user(first.user_id)

    assert {video.id for video in listed} == {first.id, second.id}


def test_duplicate_email_is_integrity_error(repo: VideoRepository) -> None:
    repo.create_user(user_id=uuid4(), email="same@example.test")

    with pytest.raises(IntegrityConstraintViolation):
        repo.create_user(user_id=uuid4(), email="same@example.test")


def test_set_video_reference_leaves_other_fields(repo: VideoRepository) -> None:
    video = seed_video(repo)
    repo.update_video(replace(video, title="Edited title", thumbnail_url="https://img.test/t.png"))

    updated = repo.set_video_reference(video.id, "tubely-test,portrait/b.mp4")

    assert updated.video_url == "tubely-test,portrait/b.mp4"
    assert updated.title == "Edited title"
    assert updated.thumbnail_url == "https://img.test/t.png"


def test_set_video_reference_for_missing_video_raises(repo: VideoRepository) -> None:
    with pytest.raises(NotFoundError):
        repo.set_video_reference(uuid4(), "tubely-test,other/c.mp4")
