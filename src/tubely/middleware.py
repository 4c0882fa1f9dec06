"""HTTP middleware."""

from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from .videos.video_models import FailureReason

logger = logging.getLogger(__name__)


class UploadLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared Content-Length exceeds ``max_bytes``.

    The body is never read here; requests without a usable header fall
    through to the streaming check during staging.
    """

    def __init__(self, app: ASGIApp, *, max_bytes: int) -> None:
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        declared = request.headers.get("content-length")
        if declared and declared.isdigit() and int(declared) > self.max_bytes:
            logger.warning(
                "video.upload.payload_too_large",
                extra={
                    "path": request.url.path,
                    "size_bytes": int(declared),
                    "limit_bytes": self.max_bytes,
                },
            )
            return JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={
                    "detail": {
                        "status": "error",
                        "failure_reason": FailureReason.PAYLOAD_TOO_LARGE.value,
                        "details": f"upload exceeds {self.max_bytes} bytes",
                    }
                },
            )
        return await call_next(request)
