"""Common authentication dependencies for FastAPI routers."""

from __future__ import annotations

from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..videos.video_models import FailureReason
from .auth_service import AuthService, TokenExpiredError, UnauthenticatedError

security = HTTPBearer(auto_error=False)


def get_auth_service(request: Request) -> AuthService:
    try:
        return request.app.state.auth_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("AuthService is not configured") from exc


def _unauthenticated(details: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={
            "status": "error",
            "failure_reason": FailureReason.UNAUTHENTICATED.value,
            "details": details,
        },
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    service: AuthService = Depends(get_auth_service),
) -> UUID:
    """Resolve the calling user's id from the bearer token."""
    if credentials is None:
        raise _unauthenticated("missing bearer token")

    try:
        return service.validate_token(credentials.credentials)
    except TokenExpiredError as exc:
        raise _unauthenticated("token expired") from exc
    except UnauthenticatedError as exc:
        raise _unauthenticated("invalid token") from exc


__all__ = ["get_auth_service", "require_user"]
