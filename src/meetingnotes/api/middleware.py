"""Request body size limit enforced before the body is parsed."""

import logging

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from meetingnotes.config import get_settings

logger = logging.getLogger(__name__)

BODY_METHODS = {"POST", "PUT", "PATCH"}


class RequestSizeLimitMiddleware:
    """Reject oversize request bodies at ingress.

    A declared Content-Length over the limit is answered with 413 without
    reading the body. Otherwise bytes are counted as they arrive, and the
    request fails as soon as the running total passes the limit, so an
    oversize multipart upload is never fully received or spooled to disk.

    Written as a plain ASGI middleware because BaseHTTPMiddleware cannot
    wrap the receive channel.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int | None = None) -> None:
        """Initialize middleware.

        Args:
            app: Wrapped ASGI application
            max_body_bytes: Fixed limit; defaults to Settings.max_request_bytes
        """
        self.app = app
        self.max_body_bytes = max_body_bytes

    def _limit(self) -> tuple[int, str]:
        settings = get_settings()
        limit = self.max_body_bytes or settings.max_request_bytes
        message = f"File too large. Maximum size is {settings.max_upload_bytes} bytes."
        return limit, message

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] not in BODY_METHODS:
            await self.app(scope, receive, send)
            return

        limit, message = self._limit()
        path = scope.get("path", "")

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > limit:
            logger.info(f"Rejected {path}: declared body of {content_length} bytes")
            response = JSONResponse(
                {"message": message}, status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
            )
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            msg = await receive()
            if msg["type"] == "http.request":
                received += len(msg.get("body", b""))
                if received > limit:
                    logger.info(f"Rejected {path}: body exceeded {limit} bytes while streaming")
                    raise HTTPException(
                        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=message
                    )
            return msg

        await self.app(scope, limited_receive, send)
