"""Bearer token issuance and validation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import jwt
import structlog
from jwt import ExpiredSignatureError
from jwt import InvalidTokenError as PyJWTInvalidTokenError

from ..exceptions import AppError

logger = structlog.get_logger(__name__)

TOKEN_ISSUER = "tubely-access"


def _utcnow() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(tz=timezone.utc)


class UnauthenticatedError(AppError):
    """Raised when the caller identity cannot be established."""


class InvalidTokenError(UnauthenticatedError):
    """Raised when token cannot be decoded."""


class TokenExpiredError(UnauthenticatedError):
    """Raised when token is expired."""


@dataclass(slots=True)
class AuthService:
    """Issue and validate HS256 access tokens whose subject is a user id."""

    signing_key: str
    token_ttl: timedelta = timedelta(hours=1)

    def __post_init__(self) -> None:
        if not self.signing_key:
            raise RuntimeError("JWT signing key is not configured")

    def issue_token(self, user_id: UUID, *, issued_at: datetime | None = None) -> str:
        now = issued_at or _utcnow()
        payload: dict[str, Any] = {
            "iss": TOKEN_ISSUER,
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int((now + self.token_ttl).timestamp()),
        }
        return jwt.encode(payload, self.signing_key, algorithm="HS256")

    def validate_token(self, token: str) -> UUID:
        """Decode ``token`` and return the user id carried in ``sub``."""
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self.signing_key,
                algorithms=["HS256"],
                issuer=TOKEN_ISSUER,
                options={"require": ["exp", "iat", "sub", "iss"]},
            )
        except ExpiredSignatureError as exc:
            logger.info("auth.token.expired")
            raise TokenExpiredError("Token expired") from exc
        except PyJWTInvalidTokenError as exc:
            logger.warning("auth.token.invalid", error=str(exc))
            raise InvalidTokenError("Invalid token") from exc

        try:
            return UUID(str(payload["sub"]))
        except ValueError as exc:
            logger.warning("auth.token.invalid_subject", subject=payload.get("sub"))
            raise InvalidTokenError("Token subject is not a user id") from exc


__all__ = [
    "AuthService",
    "InvalidTokenError",
    "TokenExpiredError",
    "UnauthenticatedError",
]
