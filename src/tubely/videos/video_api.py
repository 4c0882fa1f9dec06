"""HTTP routes for video upload and retrieval."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import (
    APIRouter,
    Depends,
    File,
    HTTPException,
    Request,
    UploadFile,
    status,
)

from ..auth.auth_dependencies import require_user
from ..exceptions import AppError, RepositoryError
from ..repositories.video_repository import VideoRepository
from .video_errors import (
    ForbiddenError,
    InvalidDimensionsError,
    InvalidReferenceFormatError,
    PayloadTooLargeError,
    ProbeError,
    RecordUpdateError,
    SigningError,
    StagingError,
    StorageUploadError,
    TranscodeError,
    UnsupportedMediaTypeError,
    VideoNotFoundError,
)
from .video_models import FailureReason
from .video_schemas import VideoErrorSchema, VideoSchema
from .video_service import VideoUploadService, load_owned_video
from .video_signing import VideoSigningService

router = APIRouter(prefix="/api", tags=["videos"])
logger = logging.getLogger(__name__)

_ERROR_RESPONSES: tuple[tuple[type[AppError], int, FailureReason], ...] = (
    (VideoNotFoundError, status.HTTP_404_NOT_FOUND, FailureReason.VIDEO_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN, FailureReason.FORBIDDEN),
    (PayloadTooLargeError, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, FailureReason.PAYLOAD_TOO_LARGE),
    (UnsupportedMediaTypeError, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, FailureReason.UNSUPPORTED_MEDIA_TYPE),
    (InvalidDimensionsError, status.HTTP_422_UNPROCESSABLE_ENTITY, FailureReason.INVALID_DIMENSIONS),
    (StagingError, status.HTTP_500_INTERNAL_SERVER_ERROR, FailureReason.STAGING_FAILED),
    (TranscodeError, status.HTTP_500_INTERNAL_SERVER_ERROR, FailureReason.TRANSCODE_FAILED),
    (ProbeError, status.HTTP_500_INTERNAL_SERVER_ERROR, FailureReason.PROBE_FAILED),
    (RecordUpdateError, status.HTTP_500_INTERNAL_SERVER_ERROR, FailureReason.RECORD_UPDATE_FAILED),
    (InvalidReferenceFormatError, status.HTTP_500_INTERNAL_SERVER_ERROR, FailureReason.INVALID_REFERENCE_FORMAT),
    (StorageUploadError, status.HTTP_502_BAD_GATEWAY, FailureReason.STORAGE_UPLOAD_FAILED),
    (SigningError, status.HTTP_502_BAD_GATEWAY, FailureReason.SIGNING_FAILED),
)

_ERROR_MODEL = {"model": VideoErrorSchema}


def _error(status_code: int, reason: FailureReason, details: str | None = None) -> HTTPException:
    detail: dict[str, str] = {"status": "error", "failure_reason": reason.value}
    if details:
        detail["details"] = details
    return HTTPException(status_code=status_code, detail=detail)


def error_response(exc: AppError) -> HTTPException:
    """Translate a domain error into the structured HTTP error body."""
    for error_type, status_code, reason in _ERROR_RESPONSES:
        if isinstance(exc, error_type):
            return _error(status_code, reason, str(exc) or None)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, FailureReason.INTERNAL_ERROR)


def get_video_upload_service(request: Request) -> VideoUploadService:
    """Fetch upload service from application state."""
    try:
        return request.app.state.video_upload_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("VideoUploadService is not configured") from exc


def get_video_signing_service(request: Request) -> VideoSigningService:
    try:
        return request.app.state.video_signing_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("VideoSigningService is not configured") from exc


def get_video_repository(request: Request) -> VideoRepository:
    try:
        return request.app.state.video_repo  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("VideoRepository is not configured") from exc


def parse_video_id(video_id: str) -> UUID:
    """Parse the path id; malformed ids are rejected before authentication."""
    try:
        return UUID(video_id)
    except ValueError:
        logger.warning("video.invalid_identifier", extra={"video_id": video_id})
        raise _error(
            status.HTTP_400_BAD_REQUEST,
            FailureReason.INVALID_IDENTIFIER,
            "video id must be a UUID",
        ) from None


@router.post(
    "/video_upload/{video_id}",
    response_model=VideoSchema,
    responses={code: _ERROR_MODEL for code in (400, 401, 403, 404, 413, 415, 422, 500, 502)},
)
async def upload_video(
    video_id: UUID = Depends(parse_video_id),
    user_id: UUID = Depends(require_user),
    video: UploadFile | None = File(None),
    service: VideoUploadService = Depends(get_video_upload_service),
) -> VideoSchema:
    """Stage, fast-start, classify and store an MP4, then record its reference."""
    if video is None:
        logger.warning("video.upload.missing_file", extra={"video_id": str(video_id)})
        raise _error(
            status.HTTP_400_BAD_REQUEST,
            FailureReason.INVALID_REQUEST,
            "multipart field 'video' is required",
        )

    try:
        record = await service.upload_video(video_id, user_id, video)
    except AppError as exc:
        logger.warning(
            "video.upload.failed",
            extra={
                "video_id": str(video_id),
                "user_id": str(user_id),
                "error_type": type(exc).__name__,
                "error": str(exc),
            },
        )
        raise error_response(exc) from exc
    finally:
        await video.close()

    return VideoSchema.model_validate(record)


@router.get(
    "/videos/{video_id}",
    response_model=VideoSchema,
    responses={code: _ERROR_MODEL for code in (400, 401, 403, 404, 500, 502)},
)
def get_video(
    video_id: UUID = Depends(parse_video_id),
    user_id: UUID = Depends(require_user),
    repo: VideoRepository = Depends(get_video_repository),
    signer: VideoSigningService = Depends(get_video_signing_service),
) -> VideoSchema:
    """Return the caller's video with a freshly signed playback URL."""
    try:
        record = signer.sign_video(load_owned_video(repo, video_id, user_id))
    except RepositoryError as exc:
        logger.exception("video.read.repository_error", extra={"video_id": str(video_id)})
        raise error_response(exc) from exc
    except AppError as exc:
        raise error_response(exc) from exc
    return VideoSchema.model_validate(record)


@router.get(
    "/videos",
    response_model=list[VideoSchema],
    responses={code: _ERROR_MODEL for code in (401, 500, 502)},
)
def list_videos(
    user_id: UUID = Depends(require_user),
    repo: VideoRepository = Depends(get_video_repository),
    signer: VideoSigningService = Depends(get_video_signing_service),
) -> list[VideoSchema]:
    """List the caller's videos, newest first, each with a signed URL."""
    try:
        records = [signer.sign_video(video) for video in repo.list_videos_for_user(user_id)]
    except AppError as exc:
        raise error_response(exc) from exc
    return [VideoSchema.model_validate(record) for record in records]
