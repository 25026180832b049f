"""
Per-request logging context and X-Request-ID propagation.
"""

import re
import time
from typing import Optional
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from carousel.infra.config.logging_config import bind_context, clear_context, get_logger

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

logger = get_logger("http")


def resolve_request_id(supplied: Optional[str]) -> str:
    """Reuse the caller's id when it is a short token, otherwise mint one."""
    if supplied and _REQUEST_ID.match(supplied):
        return supplied
    return uuid4().hex


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds request id and the configured providers to every log event.

    Context is reset when a request starts and stays bound afterwards for
    the unhandled-error handler further out.
    """

    def __init__(
        self,
        app: ASGIApp,
        text_provider: str,
        image_provider: Optional[str] = None,
    ) -> None:
        super().__init__(app)
        self.text_provider = text_provider
        self.image_provider = image_provider

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        clear_context()
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        bind_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            text_provider=self.text_provider,
            image_provider=self.image_provider,
        )

        started = time.perf_counter()
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "request.completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return response
